"""Python SDK for multi-loader build resolution.

This module exposes high-level APIs for resolving a target version,
gathering packaged artifacts, expanding manifests, and cleanup.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from assemble.artifact_assembler import (
    ArtifactLocator,
    build_artifact_locator,
    gather_artifacts,
)
from assemble.build_cleanup import clean_build_outputs
from assemble.manifest_expansion import expand_manifest_file, manifest_values
from core.config import ModMatrixConfig
from core.constants import ARCHIVES_BASE_NAME_PROPERTY, BUILD_DIR_NAME, MOD_VERSION_PROPERTY
from core.errors import ModMatrixConfigError
from core.logging_config import get_logger
from core.types import ArtifactNaming, BuildResolution, ordered_platforms
from plan.platform_profiles import get_platform_profile
from resolve.resolution import resolve_build
from store.property_store import read_properties

_LOGGER = get_logger(__name__)
_EXPANDED_RESOURCES_DIR = "resources/main"


class ModMatrixClient:
    """Primary SDK entry point for resolution and assembly workflows."""

    def __init__(self, config: ModMatrixConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or ModMatrixConfig.from_env()

    @property
    def config(self) -> ModMatrixConfig:
        """Runtime configuration used by this client."""
        return self._config

    def resolve(
        self,
        version_override: str | None = None,
        dry_run: bool = False,
    ) -> BuildResolution:
        """Resolve the target version and sync the property store.

        Args:
            version_override: Invocation-time target version.
            dry_run: Skip the property store sync.

        Returns:
            Resolution result.
        """
        return resolve_build(self._config, version_override, write_properties=not dry_run)

    def artifact_naming(self, resolution: BuildResolution) -> ArtifactNaming:
        """Build artifact naming inputs from the property store.

        Raises:
            ModMatrixConfigError: If the store lacks the base name or mod version.
        """
        properties = read_properties(self._config.properties_path)
        return ArtifactNaming(
            basename=_required_property(properties, ARCHIVES_BASE_NAME_PROPERTY, self._config),
            mod_version=_required_property(properties, MOD_VERSION_PROPERTY, self._config),
            target_version=resolution.resolved.target_version,
        )

    def gather(
        self,
        resolution: BuildResolution,
        locate_artifact: ArtifactLocator | None = None,
    ) -> tuple[Path, ...]:
        """Copy packaged platform artifacts into the output directory.

        Args:
            resolution: Resolution for this invocation.
            locate_artifact: Optional locator, defaults to module build/libs dirs.

        Returns:
            Copied artifact paths.
        """
        if locate_artifact is None:
            locate_artifact = build_artifact_locator(
                self._config.project_root,
                self.artifact_naming(resolution),
            )
        return gather_artifacts(
            ordered_platforms(resolution.resolved.platforms),
            locate_artifact,
            self._config.output_path,
        )

    def expand_manifests(self, resolution: BuildResolution) -> tuple[Path, ...]:
        """Expand each selected platform's manifest template.

        Templates live under ``<module>/src/main/resources``; expanded files
        go to ``<module>/build/resources/main``. Platforms without a
        template are skipped.

        Returns:
            Paths written in this call.
        """
        values = manifest_values(
            resolution.resolved,
            read_properties(self._config.properties_path),
        )
        written_paths = []
        for platform in ordered_platforms(resolution.resolved.platforms):
            profile = get_platform_profile(platform)
            module_dir = self._config.project_root / profile.project_dir
            template_path = module_dir / profile.manifest_resource_path
            if not template_path.is_file():
                _LOGGER.debug(
                    "manifest_template_absent", platform=platform, path=str(template_path)
                )
                continue
            destination_path = (
                module_dir / BUILD_DIR_NAME / _EXPANDED_RESOURCES_DIR / profile.manifest_path
            )
            if expand_manifest_file(template_path, destination_path, values):
                written_paths.append(destination_path)
        return tuple(written_paths)

    def clean(self, resolution: BuildResolution) -> tuple[Path, ...]:
        """Remove planned module build directories, keeping the output dir."""
        return clean_build_outputs(
            self._config.project_root,
            resolution.module_plan,
            self._config.output_path,
        )

    def with_project_root(self, project_root: str) -> "ModMatrixClient":
        """Clone the client with a different project root.

        Args:
            project_root: New project root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(project_root).expanduser().resolve()
        return ModMatrixClient(replace(self._config, project_root=resolved_root))


def _required_property(
    properties: dict[str, str],
    key: str,
    config: ModMatrixConfig,
) -> str:
    value = properties.get(key, "")
    if not value:
        raise ModMatrixConfigError(
            f"Property '{key}' is missing from {config.properties_path}. "
            "Add it before gathering artifacts."
        )
    return value
