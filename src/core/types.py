"""Shared typed models.

This module defines immutable data models passed between resolution,
property sync, planning, and assembly so each phase receives one
explicit value instead of re-reading shared files.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping

from core.constants import (
    DEFAULT_ARTIFACT_EXTENSION,
    DEFAULT_JVM_VERSION,
    ENABLED_PLATFORMS_PROPERTY,
    JVM_VERSION_PARAMETER,
    TARGET_VERSION_PROPERTY,
)

PlatformId = Literal["fabric", "forge", "neoforge"]
SUPPORTED_PLATFORMS: tuple[PlatformId, ...] = ("fabric", "forge", "neoforge")

VersionEntry = Mapping[str, str]
Matrix = Mapping[str, VersionEntry]


def ordered_platforms(platforms: frozenset[PlatformId]) -> tuple[PlatformId, ...]:
    """Return platforms in canonical fabric, forge, neoforge order."""
    return tuple(platform for platform in SUPPORTED_PLATFORMS if platform in platforms)


@dataclass(frozen=True)
class PlatformSelection:
    """Platform set chosen for one target version.

    Attributes:
        platforms: Loaders to build.
        legacy: True when the version predates the NeoForge threshold.
    """

    platforms: frozenset[PlatformId]
    legacy: bool


@dataclass(frozen=True)
class ResolvedConfig:
    """Authoritative resolution output for one invocation.

    Attributes:
        target_version: Runtime version being built.
        platforms: Loaders selected for the version.
        legacy: Whether the forge era applies.
        entry: Matrix parameters for the version.
    """

    target_version: str
    platforms: frozenset[PlatformId]
    legacy: bool
    entry: VersionEntry

    @property
    def enabled_platforms(self) -> str:
        """Comma-joined platform ids in canonical order."""
        return ",".join(ordered_platforms(self.platforms))

    @property
    def jvm_version(self) -> str:
        """JVM release for compilation, defaulting when the matrix is silent."""
        return self.entry.get(JVM_VERSION_PARAMETER) or DEFAULT_JVM_VERSION

    def parameter(self, name: str) -> str:
        """Return a matrix parameter, empty when not applicable."""
        return self.entry.get(name, "")

    def property_updates(self) -> dict[str, str]:
        """Build the ordered key/value bundle persisted to the property store."""
        updates = {
            TARGET_VERSION_PROPERTY: self.target_version,
            ENABLED_PLATFORMS_PROPERTY: self.enabled_platforms,
        }
        for key, value in self.entry.items():
            updates.setdefault(key, value)
        return updates


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one property store sync.

    Attributes:
        store_path: Property store location.
        store_present: False when the store did not exist yet.
        changed_keys: Keys whose lines were rewritten.
        written: Whether the file was rewritten.
    """

    store_path: Path
    store_present: bool
    changed_keys: tuple[str, ...]
    written: bool


@dataclass(frozen=True)
class ModuleInclusion:
    """One build module activated for the invocation."""

    module_id: str
    project_dir: str


@dataclass(frozen=True)
class ModulePlan:
    """Ordered build modules to activate."""

    modules: tuple[ModuleInclusion, ...]

    @property
    def module_ids(self) -> tuple[str, ...]:
        """Module ids in inclusion order."""
        return tuple(module.module_id for module in self.modules)


@dataclass(frozen=True)
class ArtifactNaming:
    """Inputs to the deterministic per-platform artifact file name.

    Attributes:
        basename: Archive base name shared by all platforms.
        mod_version: Mod release version.
        target_version: Runtime version the artifact was built for.
        extension: Archive file extension without the dot.
    """

    basename: str
    mod_version: str
    target_version: str
    extension: str = DEFAULT_ARTIFACT_EXTENSION


@dataclass(frozen=True)
class BuildResolution:
    """Complete result of the resolution pipeline.

    Attributes:
        resolved: Resolved version, platforms, and parameters.
        module_plan: Build modules to activate.
        sync: Property store sync outcome, None on dry runs.
        version_source: Which input supplied the target version.
    """

    resolved: ResolvedConfig
    module_plan: ModulePlan
    sync: SyncResult | None
    version_source: str
