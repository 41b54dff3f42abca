"""Dotted version parsing and comparison.

This module orders runtime version strings such as ``1.20.4``.
Segments are compared numerically by position, and a shorter version
that agrees on every shared position sorts first (``1.19 < 1.19.1``).
"""

from __future__ import annotations

from core.errors import VersionFormatError


def parse_version(version: str) -> tuple[int, ...]:
    """Parse a dotted numeric version into integer segments.

    Args:
        version: Version string, surrounding whitespace ignored.

    Returns:
        Ordered integer segments.

    Raises:
        VersionFormatError: If any segment is empty or non-numeric.
    """
    normalized = version.strip()
    if not normalized:
        raise VersionFormatError("Version string is empty. Use a dotted version like 1.20.4.")
    segments = []
    for segment in normalized.split("."):
        if not (segment.isascii() and segment.isdigit()):
            raise VersionFormatError(
                f"Invalid version '{version}': segment '{segment}' is not numeric. "
                "Use a dotted numeric version like 1.20.4."
            )
        segments.append(int(segment))
    return tuple(segments)


def compare_versions(left: str, right: str) -> int:
    """Compare two dotted versions.

    Returns:
        -1 when left sorts first, 1 when right sorts first, else 0.
    """
    left_parts = parse_version(left)
    right_parts = parse_version(right)
    for left_part, right_part in zip(left_parts, right_parts):
        if left_part != right_part:
            return -1 if left_part < right_part else 1
    if len(left_parts) == len(right_parts):
        return 0
    return -1 if len(left_parts) < len(right_parts) else 1


def is_before(version: str, threshold: str) -> bool:
    """Return whether version sorts strictly before threshold."""
    return compare_versions(version, threshold) < 0
