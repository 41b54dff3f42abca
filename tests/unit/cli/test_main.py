"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import main
from tests.fixture_paths import make_project


def test_cli_resolve_prints_and_syncs(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Resolve should print resolved rows and rewrite the property store."""
    config = make_project(tmp_path)

    exit_code = main(
        ["--project-root", str(tmp_path), "resolve", "--minecraft-version", "1.21.1"]
    )
    output = capsys.readouterr().out.strip().splitlines()

    assert (
        exit_code == 0
        and output[:3]
        == [
            "minecraft_version=1.21.1",
            "enabled_platforms=fabric,neoforge",
            "forge_version=",
        ]
        and "jvm_version=21" in output
        and "legacy=false" in output
        and output[-1] == "property_store_written=true"
        and "minecraft_version=1.21.1" in config.properties_path.read_text(encoding="utf-8")
    )


def test_cli_resolve_dry_run_leaves_store(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Dry-run resolve should not write the property store."""
    config = make_project(tmp_path)
    original_content = config.properties_path.read_bytes()

    exit_code = main(
        ["--project-root", str(tmp_path), "resolve", "--minecraft-version", "1.19.2", "--dry-run"]
    )
    output = capsys.readouterr().out

    assert (
        exit_code == 0
        and "enabled_platforms=fabric,forge" in output
        and "property_store_written" not in output
        and config.properties_path.read_bytes() == original_content
    )


def test_cli_unknown_version_exits_nonzero(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown versions should exit 1 with a message naming the version."""
    config = make_project(tmp_path)
    original_content = config.properties_path.read_bytes()

    exit_code = main(["--project-root", str(tmp_path), "resolve", "--minecraft-version", "9.9.9"])
    captured = capsys.readouterr()

    assert (
        exit_code == 1
        and "'9.9.9' not found in versions-matrix.yaml" in captured.err
        and captured.out == ""
        and config.properties_path.read_bytes() == original_content
    )


def test_cli_missing_matrix_exits_nonzero(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Missing matrix file should exit 1 naming the file."""
    exit_code = main(["--project-root", str(tmp_path), "plan"])
    captured = capsys.readouterr()

    assert exit_code == 1 and "versions-matrix.yaml" in captured.err


def test_cli_non_utf8_matrix_exits_nonzero(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """An undecodable matrix should exit 1 with a readable message."""
    config = make_project(tmp_path)
    config.matrix_path.write_bytes(b"1.20.1:\n  forge_version: \xff\xfe\n")

    exit_code = main(["--project-root", str(tmp_path), "resolve", "--minecraft-version", "1.20.1"])
    captured = capsys.readouterr()

    assert (
        exit_code == 1
        and "modmatrix: versions-matrix.yaml" in captured.err
        and "Save the file as UTF-8" in captured.err
        and captured.out == ""
    )


def test_cli_resolve_prints_default_jvm_for_empty_value(
    tmp_path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """An empty matrix jvm_version should print the default runtime version."""
    config = make_project(tmp_path)
    config.matrix_path.write_text(
        '1.20.1:\n  forge_version: "1.20.1-47.2.0"\n  jvm_version: ""\n',
        encoding="utf-8",
    )

    exit_code = main(
        ["--project-root", str(tmp_path), "resolve", "--minecraft-version", "1.20.1", "--dry-run"]
    )
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and "jvm_version=17" in output and "jvm_version=" not in output


def test_cli_plan_uses_persisted_version(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Plan should fall back to the stored minecraft_version."""
    make_project(tmp_path)

    exit_code = main(["--project-root", str(tmp_path), "plan", "--format", "gradle"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and 'include(":forge")' in output and 'include(":neoforge")' not in output


def test_cli_plan_honors_project_override(
    tmp_path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Environment override should beat the stored version."""
    make_project(tmp_path)
    monkeypatch.setenv("MODMATRIX_MINECRAFT_VERSION", "1.20.4")

    exit_code = main(["--project-root", str(tmp_path), "plan"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output[2] == ":neoforge\tneoforge"


def test_cli_gather_prints_copied_paths(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Gather should copy the built fabric artifact and skip the missing forge one."""
    make_project(tmp_path)
    libs_dir = tmp_path / "fabric" / "build" / "libs"
    libs_dir.mkdir(parents=True)
    (libs_dir / "ExampleMod-1.2.0-Fabric-1.20.1.jar").write_bytes(b"jar")

    exit_code = main(["--project-root", str(tmp_path), "gather"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == [
        str(tmp_path.resolve() / "outputs" / "ExampleMod-1.2.0-Fabric-1.20.1.jar")
    ]


def test_cli_expand_manifests_writes_forge_manifest(
    tmp_path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Expand-manifests should render the selected loader's template."""
    make_project(tmp_path)
    template_path = tmp_path / "forge" / "src" / "main" / "resources" / "META-INF" / "mods.toml"
    template_path.parent.mkdir(parents=True)
    template_path.write_text('version = "${version}"\nmc = "${minecraft_version}"\n')

    exit_code = main(["--project-root", str(tmp_path), "expand-manifests"])
    output = capsys.readouterr().out.strip().splitlines()
    expanded_path = tmp_path.resolve() / "forge" / "build" / "resources" / "main"
    expanded_path = expanded_path / "META-INF" / "mods.toml"

    assert (
        exit_code == 0
        and output == [str(expanded_path)]
        and expanded_path.read_text() == 'version = "1.2.0"\nmc = "1.20.1"\n'
    )


def test_cli_clean_keeps_outputs(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Clean should remove module build dirs and keep the output dir."""
    make_project(tmp_path)
    (tmp_path / "forge" / "build").mkdir(parents=True)
    (tmp_path / "outputs").mkdir()

    exit_code = main(["--project-root", str(tmp_path), "clean"])
    output = capsys.readouterr().out.strip().splitlines()

    assert (
        exit_code == 0
        and output == [str(tmp_path.resolve() / "forge" / "build")]
        and (tmp_path / "outputs").is_dir()
    )
