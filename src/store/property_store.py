"""Flat property store persistence.

The property store is a line-oriented ``key=value`` file read as plain
configuration by the packaging phases. Syncing rewrites only the lines
that assign resolved keys and skips the write entirely when nothing
changed, so incremental build caches keyed on the file stay valid.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping

from core.errors import PropertyStoreError
from core.logging_config import get_logger
from core.types import SyncResult

_LOGGER = get_logger(__name__)
_COMMENT_PREFIXES = ("#", "!")


def read_properties(store_path: Path) -> dict[str, str]:
    """Read key/value pairs from the property store.

    Args:
        store_path: Property store file path.

    Returns:
        Parsed properties, empty when the store does not exist.
        The first assignment of a key wins.

    Raises:
        PropertyStoreError: If the file exists but cannot be read.
    """
    if not store_path.exists():
        return {}
    properties: dict[str, str] = {}
    for line in _read_store_text(store_path).splitlines():
        stripped_line = line.strip()
        if not stripped_line or stripped_line.startswith(_COMMENT_PREFIXES):
            continue
        key, value = _split_assignment(stripped_line)
        if key and key not in properties:
            properties[key] = value
    return properties


def sync_properties(store_path: Path, resolved_values: Mapping[str, str]) -> SyncResult:
    """Merge resolved values into the property store.

    Each non-empty value replaces the whole line assigning its key with
    ``key=value``. Keys with empty values, keys missing from the store,
    and all unrelated lines are left byte-identical.

    Args:
        store_path: Property store file path.
        resolved_values: Values to persist, in update order.

    Returns:
        Sync outcome. A missing store is a no-op, not an error.

    Raises:
        PropertyStoreError: If the store cannot be read or written, or a
            value spans multiple lines.
    """
    if not store_path.exists():
        _LOGGER.info("property_store_absent", path=str(store_path))
        return SyncResult(
            store_path=store_path,
            store_present=False,
            changed_keys=(),
            written=False,
        )
    original_content = _read_store_text(store_path)
    content = original_content
    changed_keys = []
    for key, value in resolved_values.items():
        if not value:
            continue
        _validate_single_line(key, value)
        pattern = _assignment_pattern(key)
        if pattern.search(content) is None:
            _LOGGER.debug("property_key_absent", path=str(store_path), key=key)
            continue
        replacement = f"{key}={value}"
        updated_content = pattern.sub(lambda _match: replacement, content)
        if updated_content != content:
            changed_keys.append(key)
            content = updated_content
    if content == original_content:
        _LOGGER.debug("property_store_unchanged", path=str(store_path))
        return SyncResult(
            store_path=store_path,
            store_present=True,
            changed_keys=(),
            written=False,
        )
    _write_store_text(store_path, content)
    _LOGGER.info("property_store_synced", path=str(store_path), changed_keys=changed_keys)
    return SyncResult(
        store_path=store_path,
        store_present=True,
        changed_keys=tuple(changed_keys),
        written=True,
    )


def _assignment_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^[ \t]*{re.escape(key)}[ \t]*=[^\r\n]*", re.MULTILINE)


def _split_assignment(line: str) -> tuple[str, str]:
    separator_positions = [
        position for position in (line.find("="), line.find(":")) if position >= 0
    ]
    if not separator_positions:
        return line, ""
    separator = min(separator_positions)
    return line[:separator].strip(), line[separator + 1 :].strip()


def _validate_single_line(key: str, value: str) -> None:
    if "\n" in value or "\r" in value:
        raise PropertyStoreError(
            f"Cannot persist property '{key}': value spans multiple lines. "
            "Fix the value in the version matrix."
        )


def _read_store_text(store_path: Path) -> str:
    """Read the store without newline translation so line endings survive."""
    try:
        return store_path.read_bytes().decode("utf-8")
    except OSError as error:
        raise PropertyStoreError(
            f"Failed to read property store at {store_path}: {error}. "
            "Check file permissions and retry."
        ) from error
    except UnicodeDecodeError as error:
        raise PropertyStoreError(
            f"Failed to decode property store at {store_path}: {error.reason}. "
            "Save the file as UTF-8."
        ) from error


def _write_store_text(store_path: Path, content: str) -> None:
    try:
        store_path.write_bytes(content.encode("utf-8"))
    except OSError as error:
        raise PropertyStoreError(
            f"Failed to write property store at {store_path}: {error}. "
            "Later build phases depend on it; fix permissions and rerun."
        ) from error
