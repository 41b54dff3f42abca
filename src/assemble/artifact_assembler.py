"""Per-platform artifact gathering.

This module copies each platform's packaged artifact into the shared
output directory. A platform without an artifact contributes nothing;
it may simply not have been built in this run.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Iterable

from core.constants import BUILD_DIR_NAME, BUILD_LIBS_DIR_NAME
from core.errors import ModMatrixArtifactError
from core.logging_config import get_logger
from core.types import SUPPORTED_PLATFORMS, ArtifactNaming, PlatformId
from plan.platform_profiles import get_platform_profile

_LOGGER = get_logger(__name__)

ArtifactLocator = Callable[[PlatformId], Path | None]


def artifact_file_name(naming: ArtifactNaming, platform: PlatformId) -> str:
    """Build the deterministic artifact file name for a platform.

    Returns:
        ``<basename>-<modVersion>-<Platform>-<targetVersion>.<ext>``.
    """
    display_name = get_platform_profile(platform).display_name
    return (
        f"{naming.basename}-{naming.mod_version}-{display_name}-"
        f"{naming.target_version}.{naming.extension}"
    )


def build_artifact_locator(project_root: Path, naming: ArtifactNaming) -> ArtifactLocator:
    """Create a locator reading ``<module>/build/libs/<artifact>``.

    Args:
        project_root: Project root directory.
        naming: Artifact naming inputs.

    Returns:
        Callable returning the expected artifact path for a platform.
    """

    def locate(platform: PlatformId) -> Path:
        profile = get_platform_profile(platform)
        return (
            project_root
            / profile.project_dir
            / BUILD_DIR_NAME
            / BUILD_LIBS_DIR_NAME
            / artifact_file_name(naming, platform)
        )

    return locate


def gather_artifacts(
    platforms: Iterable[PlatformId],
    locate_artifact: ArtifactLocator,
    output_dir: Path,
) -> tuple[Path, ...]:
    """Copy located platform artifacts into the output directory.

    Args:
        platforms: Platforms included in this invocation.
        locate_artifact: Returns the artifact path for a platform, or None.
        output_dir: Destination directory, created when missing.

    Returns:
        Destination paths of copied artifacts in canonical platform order.

    Raises:
        ModMatrixArtifactError: If an existing artifact cannot be copied.
    """
    selected = set(platforms)
    output_dir.mkdir(parents=True, exist_ok=True)
    copied_paths = []
    for platform in SUPPORTED_PLATFORMS:
        if platform not in selected:
            continue
        artifact_path = locate_artifact(platform)
        if artifact_path is None or not artifact_path.is_file():
            _LOGGER.info(
                "artifact_missing",
                platform=platform,
                path=str(artifact_path) if artifact_path else None,
            )
            continue
        destination = output_dir / artifact_path.name
        try:
            shutil.copy2(artifact_path, destination)
        except OSError as error:
            raise ModMatrixArtifactError(
                f"Failed to copy {platform} artifact {artifact_path} to {output_dir}: {error}."
            ) from error
        _LOGGER.info("artifact_copied", platform=platform, path=str(destination))
        copied_paths.append(destination)
    return tuple(copied_paths)
