"""Post-packaging artifact assembly.

This package gathers per-platform artifacts into one output directory,
expands loader manifest templates, and cleans module build outputs.
"""
