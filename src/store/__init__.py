"""Persistence and SDK layer.

This package syncs resolved values into the flat property store that
packaging phases read, and exposes the client used by the CLI.
"""
