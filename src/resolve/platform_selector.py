"""Platform selection by target version.

Versions before the NeoForge threshold build for fabric and forge;
the threshold version and later build for fabric and neoforge.
The decision depends only on the version string, never on matrix contents.
"""

from __future__ import annotations

from core.constants import NEOFORGE_THRESHOLD_VERSION
from core.types import PlatformId, PlatformSelection
from core.versioning import is_before

LEGACY_PLATFORMS: frozenset[PlatformId] = frozenset(("fabric", "forge"))
MODERN_PLATFORMS: frozenset[PlatformId] = frozenset(("fabric", "neoforge"))


def select_platforms(version: str) -> PlatformSelection:
    """Select the loader pair for a target version.

    Args:
        version: Dotted target runtime version.

    Returns:
        Platform set and legacy flag.

    Raises:
        VersionFormatError: If the version is not dotted numeric.
    """
    if is_before(version, NEOFORGE_THRESHOLD_VERSION):
        return PlatformSelection(platforms=LEGACY_PLATFORMS, legacy=True)
    return PlatformSelection(platforms=MODERN_PLATFORMS, legacy=False)
