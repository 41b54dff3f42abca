"""Module build output cleanup.

Removes each planned module's ``build`` directory. The gathered output
directory is never removed, even when it sits inside a build directory.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from core.constants import BUILD_DIR_NAME
from core.errors import ModMatrixArtifactError
from core.logging_config import get_logger
from core.types import ModulePlan

_LOGGER = get_logger(__name__)


def clean_build_outputs(
    project_root: Path,
    module_plan: ModulePlan,
    output_dir: Path,
) -> tuple[Path, ...]:
    """Delete module build directories, sparing the output directory.

    Args:
        project_root: Project root directory.
        module_plan: Modules whose build directories are removed.
        output_dir: Gathered artifact directory to protect.

    Returns:
        Removed directories.

    Raises:
        ModMatrixArtifactError: If a directory cannot be removed.
    """
    protected_dir = output_dir.resolve()
    removed_dirs = []
    for module in module_plan.modules:
        build_dir = (project_root / module.project_dir / BUILD_DIR_NAME).resolve()
        if not build_dir.is_dir():
            continue
        if protected_dir == build_dir or build_dir in protected_dir.parents:
            _LOGGER.warning("cleanup_skipped_protected", path=str(build_dir))
            continue
        try:
            shutil.rmtree(build_dir)
        except OSError as error:
            raise ModMatrixArtifactError(
                f"Failed to remove build directory {build_dir}: {error}."
            ) from error
        _LOGGER.info("build_dir_removed", module=module.module_id, path=str(build_dir))
        removed_dirs.append(build_dir)
    return tuple(removed_dirs)
