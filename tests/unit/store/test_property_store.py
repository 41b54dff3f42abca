"""Unit tests for property store reading and syncing."""

from __future__ import annotations

import shutil

import pytest

from core.errors import PropertyStoreError
from store.property_store import read_properties, sync_properties
from tests.fixture_paths import fixture_path


def _store(tmp_path):
    store_path = tmp_path / "gradle.properties"
    shutil.copy(fixture_path("properties/gradle.properties"), store_path)
    return store_path


def test_read_properties_parses_assignments(tmp_path) -> None:
    """Reader should skip comments and keep first assignments."""
    store_path = tmp_path / "gradle.properties"
    store_path.write_text(
        "# comment\n! bang comment\nalpha=1\nbeta : two\nalpha=3\nempty=\n",
        encoding="utf-8",
    )

    properties = read_properties(store_path)

    assert properties == {"alpha": "1", "beta": "two", "empty": ""}


def test_read_properties_missing_store_is_empty(tmp_path) -> None:
    """Missing store should read as no properties."""
    assert read_properties(tmp_path / "gradle.properties") == {}


def test_sync_rewrites_only_resolved_lines(tmp_path) -> None:
    """Sync should replace resolved lines and keep every other line intact."""
    store_path = _store(tmp_path)
    original_lines = store_path.read_text(encoding="utf-8").splitlines()

    result = sync_properties(
        store_path,
        {
            "minecraft_version": "1.21.1",
            "enabled_platforms": "fabric,neoforge",
            "neoforge_version": "21.1.77",
            "forge_version": "",
        },
    )
    updated_lines = store_path.read_text(encoding="utf-8").splitlines()

    changed = {
        old: new for old, new in zip(original_lines, updated_lines) if old != new
    }
    assert (
        result.written
        and result.changed_keys == ("minecraft_version", "enabled_platforms", "neoforge_version")
        and changed
        == {
            "minecraft_version=1.20.1": "minecraft_version=1.21.1",
            "enabled_platforms=fabric,forge": "enabled_platforms=fabric,neoforge",
            "neoforge_version=": "neoforge_version=21.1.77",
        }
    )


def test_sync_does_not_touch_suffix_matching_keys(tmp_path) -> None:
    """Updating forge_version must not rewrite the neoforge_version line."""
    store_path = tmp_path / "gradle.properties"
    store_path.write_text("neoforge_version=20.4.237\nforge_version=old\n", encoding="utf-8")

    sync_properties(store_path, {"forge_version": "47.2.0"})

    assert store_path.read_text(encoding="utf-8") == (
        "neoforge_version=20.4.237\nforge_version=47.2.0\n"
    )


def test_sync_replaces_whole_line_and_preserves_crlf(tmp_path) -> None:
    """Trailing content on a resolved line is discarded, line endings are kept."""
    store_path = tmp_path / "gradle.properties"
    store_path.write_bytes(b"mod_id=demo\r\n  forge_version = 1 # pinned\r\nlast=1")

    sync_properties(store_path, {"forge_version": "2"})

    assert store_path.read_bytes() == b"mod_id=demo\r\nforge_version=2\r\nlast=1"


def test_sync_is_idempotent(tmp_path) -> None:
    """A second sync with the same values should not write again."""
    store_path = _store(tmp_path)
    values = {"minecraft_version": "1.19.2", "forge_version": "1.19.2-43.3.0"}
    sync_properties(store_path, values)
    first_content = store_path.read_bytes()

    second = sync_properties(store_path, values)

    assert not second.written and store_path.read_bytes() == first_content


def test_sync_skips_write_when_unchanged(tmp_path) -> None:
    """Sync should not rewrite the file when values already match."""
    store_path = _store(tmp_path)
    before_mtime = store_path.stat().st_mtime_ns

    result = sync_properties(store_path, {"minecraft_version": "1.20.1"})

    assert (
        result.store_present
        and not result.written
        and result.changed_keys == ()
        and store_path.stat().st_mtime_ns == before_mtime
    )


def test_sync_does_not_append_missing_keys(tmp_path) -> None:
    """Keys absent from the store should not be added."""
    store_path = _store(tmp_path)
    original_content = store_path.read_bytes()

    result = sync_properties(store_path, {"jvm_version": "21"})

    assert not result.written and store_path.read_bytes() == original_content


def test_sync_missing_store_is_noop(tmp_path) -> None:
    """Sync should do nothing when the store does not exist yet."""
    store_path = tmp_path / "gradle.properties"

    result = sync_properties(store_path, {"minecraft_version": "1.21.1"})

    assert not result.store_present and not result.written and not store_path.exists()


def test_sync_rejects_multiline_values(tmp_path) -> None:
    """Values spanning lines would corrupt the store and are rejected."""
    store_path = _store(tmp_path)
    original_content = store_path.read_bytes()

    with pytest.raises(PropertyStoreError):
        sync_properties(store_path, {"forge_version": "1\ninjected=1"})

    assert store_path.read_bytes() == original_content


def test_sync_write_failure_is_fatal(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Write errors should surface as property store errors."""
    store_path = _store(tmp_path)

    def _fail_write(self, data: bytes) -> int:
        raise PermissionError("read-only file system")

    monkeypatch.setattr(type(store_path), "write_bytes", _fail_write)

    with pytest.raises(PropertyStoreError, match="Failed to write property store"):
        sync_properties(store_path, {"minecraft_version": "1.21.1"})

    assert True
