"""Error kinds raised by the catalog builder and orphan resolver."""

from pathlib import Path
from typing import Optional


class PhotoToolError(Exception):
    """Base error for a run that cannot continue."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        cause: Optional[OSError] = None,
    ):
        """
        Initialize the error.

        Args:
            message: Human readable description
            path: Path the failing operation was working on
            cause: Underlying OS error, if any
        """
        self.path = path
        self.errno: Optional[int] = cause.errno if cause is not None else None
        self.strerror: Optional[str] = cause.strerror if cause is not None else None

        detail = message
        if path is not None:
            detail = f"{detail}: {path}"
        if self.strerror:
            detail = f"{detail} ({self.strerror})"
        super().__init__(detail)


class ConfigurationError(PhotoToolError, ValueError):
    """Invalid run configuration (bad or clashing extensions)."""


class InvalidPathError(PhotoToolError):
    """The photo directory does not exist or cannot be used."""


class CatalogError(PhotoToolError):
    """The photo directory could not be listed."""


class QuarantineError(PhotoToolError):
    """The quarantine directory could not be created."""


class RelocationError(PhotoToolError):
    """Copying, removing or deleting an orphan failed."""
