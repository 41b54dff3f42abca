"""Target version input resolution.

The requested version comes from the first non-blank source in order:
invocation override, project-level override, persisted property store
value, then the built-in default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from core.constants import DEFAULT_TARGET_VERSION

VersionSource = Literal["invocation", "project", "property_store", "default"]


@dataclass(frozen=True)
class TargetVersionChoice:
    """Chosen target version and the input that supplied it."""

    version: str
    source: VersionSource


def resolve_target_version(
    invocation_override: str | None,
    project_override: str | None,
    persisted_value: str | None,
) -> TargetVersionChoice:
    """Pick the target version by input priority.

    Args:
        invocation_override: Value passed for this invocation only.
        project_override: Project-level configured value.
        persisted_value: Value previously written to the property store.

    Returns:
        Trimmed version with its source.
    """
    candidates: tuple[tuple[str | None, VersionSource], ...] = (
        (invocation_override, "invocation"),
        (project_override, "project"),
        (persisted_value, "property_store"),
    )
    for raw_value, source in candidates:
        if raw_value is not None and raw_value.strip():
            return TargetVersionChoice(version=raw_value.strip(), source=source)
    return TargetVersionChoice(version=DEFAULT_TARGET_VERSION, source="default")
