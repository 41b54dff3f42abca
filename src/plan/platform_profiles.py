"""Per-platform naming and layout facts.

Each loader module has a display label used in artifact names, the
matrix parameter pinning its loader version, and a manifest template
under its resources directory.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import ModMatrixPlanError
from core.types import SUPPORTED_PLATFORMS, PlatformId

RESOURCES_DIR = "src/main/resources"


@dataclass(frozen=True)
class PlatformProfile:
    """Static description of one loader platform.

    Attributes:
        platform_id: Platform identifier.
        display_name: Label embedded in artifact file names.
        module_id: Build module holding the platform entry point.
        loader_version_key: Matrix parameter pinning the loader version.
        manifest_path: Manifest template path relative to the resources dir.
    """

    platform_id: PlatformId
    display_name: str
    module_id: str
    loader_version_key: str
    manifest_path: str

    @property
    def project_dir(self) -> str:
        """Module directory relative to the project root."""
        return self.module_id.lstrip(":")

    @property
    def manifest_resource_path(self) -> str:
        """Manifest template path relative to the module directory."""
        return f"{RESOURCES_DIR}/{self.manifest_path}"


_PROFILES: dict[str, PlatformProfile] = {
    "fabric": PlatformProfile(
        platform_id="fabric",
        display_name="Fabric",
        module_id=":fabric",
        loader_version_key="fabric_loader_version",
        manifest_path="fabric.mod.json",
    ),
    "forge": PlatformProfile(
        platform_id="forge",
        display_name="Forge",
        module_id=":forge",
        loader_version_key="forge_version",
        manifest_path="META-INF/mods.toml",
    ),
    "neoforge": PlatformProfile(
        platform_id="neoforge",
        display_name="NeoForge",
        module_id=":neoforge",
        loader_version_key="neoforge_version",
        manifest_path="META-INF/neoforge.mods.toml",
    ),
}


def get_platform_profile(platform_id: str) -> PlatformProfile:
    """Return the profile for a platform id.

    Raises:
        ModMatrixPlanError: If the platform is not supported.
    """
    profile = _PROFILES.get(platform_id)
    if profile is None:
        supported_rows = ", ".join(SUPPORTED_PLATFORMS)
        raise ModMatrixPlanError(
            f"Unsupported platform '{platform_id}'. Use one of: {supported_rows}."
        )
    return profile
