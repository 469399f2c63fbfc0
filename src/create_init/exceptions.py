"""Custom exception hierarchy for create-init.

All create-init exceptions inherit from :class:`CreateInitError`, so callers can
catch any library error with a single ``except`` clause while still handling
specific failure modes. User cancellation is not an exception: the prompt flow
reports it through :class:`create_init.models.Cancelled`.
"""

from __future__ import annotations

from pathlib import Path


class CreateInitError(Exception):
    """Base exception for all create-init errors."""


class ConfigError(CreateInitError):
    """Raised when a settings file cannot be read or fails validation."""


class ManifestError(CreateInitError):
    """Base class for ``package.json`` failures."""


class ManifestReadError(ManifestError):
    """Raised when a manifest is missing, unreadable, or malformed.

    Attributes:
        path: Location of the manifest that could not be read.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read manifest {path}: {reason}")


class ScaffoldError(CreateInitError):
    """Raised when a template tree cannot be materialized."""
