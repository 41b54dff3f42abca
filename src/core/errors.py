"""modmatrix exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class ModMatrixError(Exception):
    """Base exception for all modmatrix failures."""


class ModMatrixConfigError(ModMatrixError):
    """Raised for invalid runtime configuration."""


class MatrixNotFoundError(ModMatrixConfigError):
    """Raised when the version matrix file does not exist."""


class UnknownVersionError(ModMatrixConfigError):
    """Raised when a target version has no section in the matrix."""


class MatrixParseError(ModMatrixError):
    """Raised for structural or syntax errors in the version matrix."""


class VersionFormatError(ModMatrixError):
    """Raised when a version string is not dotted numeric."""


class PropertyStoreError(ModMatrixError):
    """Raised when the property store cannot be read or written."""


class ModMatrixPlanError(ModMatrixError):
    """Raised when a platform set cannot be mapped onto build modules."""


class ModMatrixArtifactError(ModMatrixError):
    """Raised for artifact gathering and cleanup failures."""


class ModMatrixManifestError(ModMatrixError):
    """Raised when a loader manifest template cannot be expanded."""
