"""Build resolution pipeline.

This module runs the whole resolution once per invocation: pick the
target version, look it up in the matrix, select platforms, persist the
resolved bundle, and plan build modules. Every configuration error is
raised before the property store is touched.
"""

from __future__ import annotations

from core.config import ModMatrixConfig
from core.constants import TARGET_VERSION_PROPERTY
from core.logging_config import get_logger
from core.types import BuildResolution, ResolvedConfig, ordered_platforms
from plan.inclusion_planner import plan_modules
from resolve.matrix_store import load_matrix, lookup
from resolve.platform_selector import select_platforms
from resolve.target_version import resolve_target_version
from store.property_store import read_properties, sync_properties

_LOGGER = get_logger(__name__)


def resolve_build(
    config: ModMatrixConfig,
    version_override: str | None = None,
    write_properties: bool = True,
) -> BuildResolution:
    """Resolve version, platforms, and parameters for one invocation.

    Args:
        config: Runtime configuration.
        version_override: Invocation-time target version.
        write_properties: Sync the property store when True.

    Returns:
        Resolved config, module plan, and sync outcome.

    Raises:
        MatrixNotFoundError: If the matrix file is missing.
        MatrixParseError: If the matrix is malformed.
        UnknownVersionError: If the version has no matrix section.
        VersionFormatError: If the version is not dotted numeric.
        PropertyStoreError: If the property store cannot be read or written.
    """
    persisted = read_properties(config.properties_path)
    choice = resolve_target_version(
        invocation_override=version_override,
        project_override=config.target_version_override,
        persisted_value=persisted.get(TARGET_VERSION_PROPERTY),
    )
    _LOGGER.info("target_version_resolved", version=choice.version, source=choice.source)
    matrix = load_matrix(config.matrix_path)
    entry = lookup(matrix, choice.version, source_name=config.matrix_path.name)
    selection = select_platforms(choice.version)
    resolved = ResolvedConfig(
        target_version=choice.version,
        platforms=selection.platforms,
        legacy=selection.legacy,
        entry=entry,
    )
    _LOGGER.info(
        "platforms_selected",
        version=resolved.target_version,
        platforms=list(ordered_platforms(resolved.platforms)),
        legacy=resolved.legacy,
        jvm_version=resolved.jvm_version,
    )
    module_plan = plan_modules(resolved.platforms)
    sync = None
    if write_properties:
        sync = sync_properties(config.properties_path, resolved.property_updates())
    return BuildResolution(
        resolved=resolved,
        module_plan=module_plan,
        sync=sync,
        version_source=choice.source,
    )
