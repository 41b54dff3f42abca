"""Public SDK surface for modmatrix.

This module provides a stable import path for build scripts.
It re-exports the primary client, typed models, and pure helpers.
"""

from __future__ import annotations

from assemble.artifact_assembler import artifact_file_name, gather_artifacts
from assemble.manifest_expansion import expand_manifest
from core.config import ModMatrixConfig
from core.types import (
    ArtifactNaming,
    BuildResolution,
    ModulePlan,
    PlatformSelection,
    ResolvedConfig,
    SyncResult,
)
from core.versioning import compare_versions, is_before, parse_version
from plan.inclusion_planner import plan_modules
from resolve.matrix_store import load_matrix, lookup, parse_matrix
from resolve.platform_selector import select_platforms
from store.client import ModMatrixClient
from store.property_store import read_properties, sync_properties

__all__ = [
    "ArtifactNaming",
    "BuildResolution",
    "ModMatrixClient",
    "ModMatrixConfig",
    "ModulePlan",
    "PlatformSelection",
    "ResolvedConfig",
    "SyncResult",
    "artifact_file_name",
    "compare_versions",
    "expand_manifest",
    "gather_artifacts",
    "is_before",
    "load_matrix",
    "lookup",
    "parse_matrix",
    "parse_version",
    "plan_modules",
    "read_properties",
    "select_platforms",
    "sync_properties",
]
