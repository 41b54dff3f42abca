"""Loader manifest template expansion.

Manifest templates (``fabric.mod.json``, ``META-INF/mods.toml``,
``META-INF/neoforge.mods.toml``) carry ``${name}`` placeholders that are
filled from resolved parameters. Schemas are not validated.
"""

from __future__ import annotations

from pathlib import Path
from string import Template
from typing import Mapping

from core.constants import MAVEN_GROUP_PROPERTY, MOD_VERSION_PROPERTY
from core.errors import ModMatrixManifestError
from core.logging_config import get_logger
from core.types import ResolvedConfig

_LOGGER = get_logger(__name__)


def manifest_values(resolved: ResolvedConfig, properties: Mapping[str, str]) -> dict[str, str]:
    """Build the placeholder values for manifest expansion.

    Store properties are overlaid with resolved values, and the
    ``group`` and ``version`` aliases are added when available.
    """
    values = dict(properties)
    for key, value in resolved.property_updates().items():
        if value or key not in values:
            values[key] = value
    if MAVEN_GROUP_PROPERTY in values:
        values.setdefault("group", values[MAVEN_GROUP_PROPERTY])
    if MOD_VERSION_PROPERTY in values:
        values.setdefault("version", values[MOD_VERSION_PROPERTY])
    return values


def expand_manifest(template_text: str, values: Mapping[str, str]) -> str:
    """Substitute ``${name}`` and ``$name`` placeholders.

    Raises:
        ModMatrixManifestError: If a placeholder has no value or is malformed.
    """
    try:
        return Template(template_text).substitute(values)
    except KeyError as error:
        raise ModMatrixManifestError(
            f"Manifest placeholder '{error.args[0]}' has no resolved value. "
            "Add it to the property store or the version matrix."
        ) from error
    except ValueError as error:
        raise ModMatrixManifestError(
            f"Malformed manifest placeholder: {error}. Escape literal dollars as '$$'."
        ) from error


def expand_manifest_file(
    template_path: Path,
    destination_path: Path,
    values: Mapping[str, str],
) -> bool:
    """Expand a manifest template to a destination file.

    Returns:
        True when the destination was written, False when already current.

    Raises:
        ModMatrixManifestError: If the template is missing or unreadable.
    """
    if not template_path.is_file():
        raise ModMatrixManifestError(f"Manifest template not found at {template_path}.")
    try:
        expanded_text = expand_manifest(template_path.read_text(encoding="utf-8"), values)
        if destination_path.exists():
            if destination_path.read_text(encoding="utf-8") == expanded_text:
                return False
        destination_path.parent.mkdir(parents=True, exist_ok=True)
        destination_path.write_text(expanded_text, encoding="utf-8")
    except OSError as error:
        raise ModMatrixManifestError(
            f"Failed to expand manifest {template_path} to {destination_path}: {error}."
        ) from error
    except UnicodeDecodeError as error:
        raise ModMatrixManifestError(
            f"Failed to decode manifest {template_path} or {destination_path}: "
            f"{error.reason} at byte {error.start}. Save the file as UTF-8."
        ) from error
    _LOGGER.info("manifest_expanded", template=str(template_path), path=str(destination_path))
    return True
