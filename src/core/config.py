"""Runtime configuration model for modmatrix.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_MATRIX_FILE_NAME,
    DEFAULT_OUTPUT_DIR_NAME,
    DEFAULT_PROJECT_ROOT,
    DEFAULT_PROPERTIES_FILE_NAME,
)
from core.errors import ModMatrixConfigError


@dataclass(frozen=True)
class ModMatrixConfig:
    """Validated runtime configuration.

    Attributes:
        project_root: Root directory of the multi-loader project.
        matrix_file: Version matrix file, relative paths resolve against the root.
        properties_file: Flat property store shared with packaging phases.
        output_dir: Directory receiving gathered platform artifacts.
        target_version_override: Project-level target version override.
    """

    project_root: Path
    matrix_file: Path
    properties_file: Path
    output_dir: Path
    target_version_override: str | None = None

    @classmethod
    def from_env(cls) -> "ModMatrixConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ModMatrixConfigError: If environment values are invalid.
        """
        project_root = _parse_project_root(
            os.getenv("MODMATRIX_PROJECT_ROOT", str(DEFAULT_PROJECT_ROOT))
        )
        return cls(
            project_root=project_root,
            matrix_file=Path(
                _optional_env("MODMATRIX_MATRIX_FILE") or DEFAULT_MATRIX_FILE_NAME
            ),
            properties_file=Path(
                _optional_env("MODMATRIX_PROPERTIES_FILE") or DEFAULT_PROPERTIES_FILE_NAME
            ),
            output_dir=Path(_optional_env("MODMATRIX_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR_NAME),
            target_version_override=_optional_env("MODMATRIX_MINECRAFT_VERSION"),
        )

    @property
    def matrix_path(self) -> Path:
        """Absolute version matrix path."""
        return self._under_root(self.matrix_file)

    @property
    def properties_path(self) -> Path:
        """Absolute property store path."""
        return self._under_root(self.properties_file)

    @property
    def output_path(self) -> Path:
        """Absolute artifact output directory."""
        return self._under_root(self.output_dir)

    def _under_root(self, path: Path) -> Path:
        expanded = path.expanduser()
        if expanded.is_absolute():
            return expanded
        return self.project_root / expanded


def _parse_project_root(raw_value: str) -> Path:
    """Resolve the project root environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Absolute project root path.

    Raises:
        ModMatrixConfigError: If value is blank or not a directory.
    """
    if not raw_value.strip():
        raise ModMatrixConfigError(
            "Invalid MODMATRIX_PROJECT_ROOT value: expected a directory path, got ''. "
            "Unset it or point it at the project root."
        )
    project_root = Path(raw_value).expanduser().resolve()
    if project_root.exists() and not project_root.is_dir():
        raise ModMatrixConfigError(
            f"Invalid MODMATRIX_PROJECT_ROOT value: {project_root} is not a directory."
        )
    return project_root


def _optional_env(name: str) -> str | None:
    raw_value = os.getenv(name)
    if raw_value is None:
        return None
    normalized_value = raw_value.strip()
    return normalized_value if normalized_value else None
