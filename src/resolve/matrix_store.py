"""Version matrix parsing and lookup.

This module loads the version-indexed parameter table that pins loader
and library versions per runtime version. The table is a YAML subset:
top-level version sections holding flat ``key: value`` parameters.
Every scalar stays a string, so ``1.20`` is never read as a float.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from core.constants import DEFAULT_MATRIX_FILE_NAME
from core.errors import (
    MatrixNotFoundError,
    MatrixParseError,
    ModMatrixConfigError,
    UnknownVersionError,
)
from core.logging_config import get_logger
from core.types import Matrix, VersionEntry

_LOGGER = get_logger(__name__)


def load_matrix(matrix_path: Path) -> Matrix:
    """Load and validate the version matrix from disk.

    Args:
        matrix_path: Matrix file path.

    Returns:
        Immutable matrix in declaration order.

    Raises:
        MatrixNotFoundError: If the file does not exist.
        MatrixParseError: If the file is structurally invalid.
    """
    if not matrix_path.is_file():
        raise MatrixNotFoundError(
            f"Version matrix file '{matrix_path.name}' not found at {matrix_path}. "
            "Create it or set MODMATRIX_MATRIX_FILE."
        )
    try:
        source_text = matrix_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise MatrixParseError(
            f"{matrix_path.name}: version matrix at {matrix_path} is not valid UTF-8 "
            f"({error.reason} at byte {error.start}). Save the file as UTF-8."
        ) from error
    except OSError as error:
        raise ModMatrixConfigError(
            f"Failed to read version matrix at {matrix_path}: {error}. "
            "Check file permissions and retry."
        ) from error
    matrix = parse_matrix(source_text, source_name=matrix_path.name)
    _LOGGER.debug("matrix_loaded", path=str(matrix_path), versions=len(matrix))
    return matrix


def parse_matrix(source_text: str, source_name: str = "<matrix>") -> Matrix:
    """Parse matrix text into version entries.

    Args:
        source_text: Raw matrix text.
        source_name: Name used in error messages.

    Returns:
        Immutable mapping from version key to parameters.

    Raises:
        MatrixParseError: For YAML syntax errors, parameters outside a
            version section, duplicate keys, or nested values.
    """
    try:
        root_node = yaml.compose(source_text, Loader=yaml.BaseLoader)
    except yaml.MarkedYAMLError as error:
        mark = error.problem_mark or error.context_mark
        raise MatrixParseError(
            f"{source_name}{_position(mark)}: invalid matrix syntax: {error.problem}."
        ) from error
    except yaml.YAMLError as error:
        raise MatrixParseError(f"{source_name}: invalid matrix syntax: {error}.") from error
    if root_node is None:
        return MappingProxyType({})
    if not isinstance(root_node, yaml.MappingNode):
        raise MatrixParseError(
            f"{source_name}{_position(root_node.start_mark)}: expected version sections "
            "such as '1.20.4:' at the top level."
        )
    matrix: dict[str, VersionEntry] = {}
    previous_version: str | None = None
    for key_node, value_node in root_node.value:
        version = _scalar_text(key_node, source_name, "version key")
        if version in matrix:
            raise MatrixParseError(
                f"{source_name}{_position(key_node.start_mark)}: duplicate version "
                f"section '{version}'."
            )
        matrix[version] = _parse_section(
            version, key_node, value_node, source_name, previous_version
        )
        previous_version = version
    return MappingProxyType(matrix)


def lookup(
    matrix: Matrix,
    version: str,
    source_name: str = DEFAULT_MATRIX_FILE_NAME,
) -> VersionEntry:
    """Return the parameters pinned for a version.

    Raises:
        UnknownVersionError: If the matrix has no section for the version.
    """
    try:
        return matrix[version]
    except KeyError as error:
        known_versions = ", ".join(matrix) or "none"
        raise UnknownVersionError(
            f"Minecraft version '{version}' not found in {source_name}. "
            f"Known versions: {known_versions}."
        ) from error


def _parse_section(
    version: str,
    key_node: Any,
    value_node: Any,
    source_name: str,
    previous_version: str | None,
) -> VersionEntry:
    if isinstance(value_node, yaml.ScalarNode):
        if value_node.value == "" and value_node.style is None:
            return MappingProxyType({})
        location = f"{source_name}{_position(key_node.start_mark)}"
        if previous_version is None:
            raise MatrixParseError(
                f"{location}: parameter '{version}' appears outside a version section. "
                "Add a 'X.Y.Z:' header above it."
            )
        raise MatrixParseError(
            f"{location}: parameter '{version}' must be indented under section "
            f"'{previous_version}'."
        )
    if not isinstance(value_node, yaml.MappingNode):
        raise MatrixParseError(
            f"{source_name}{_position(value_node.start_mark)}: version section "
            f"'{version}' must contain 'key: value' parameters."
        )
    entry: dict[str, str] = {}
    for param_key_node, param_value_node in value_node.value:
        name = _scalar_text(param_key_node, source_name, "parameter name")
        if name in entry:
            raise MatrixParseError(
                f"{source_name}{_position(param_key_node.start_mark)}: duplicate parameter "
                f"'{name}' in section '{version}'."
            )
        if not isinstance(param_value_node, yaml.ScalarNode):
            raise MatrixParseError(
                f"{source_name}{_position(param_value_node.start_mark)}: parameter "
                f"'{name}' in section '{version}' must be a plain string value."
            )
        entry[name] = param_value_node.value.strip()
    return MappingProxyType(entry)


def _scalar_text(node: Any, source_name: str, context: str) -> str:
    if isinstance(node, yaml.ScalarNode) and node.value.strip():
        return node.value.strip()
    raise MatrixParseError(f"{source_name}{_position(node.start_mark)}: invalid {context}.")


def _position(mark: Any) -> str:
    if mark is None:
        return ""
    return f":{mark.line + 1}:{mark.column + 1}"
