"""Data model shared by the catalog builder and the orphan resolver."""

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from photo_orphans.core.errors import ConfigurationError

QUARANTINE_DIR_NAME = "to_delete"
DEFAULT_RAW_EXTENSION = "RAF"
DEFAULT_IMG_EXTENSION = "JPG"


class FilterMode(enum.Enum):
    """Which kind of file must have a counterpart to be kept."""

    RAW = "RAW"
    IMG = "IMG"

    @classmethod
    def parse(cls, value: str) -> "FilterMode":
        """
        Parse a filter literal.

        Args:
            value: "RAW" or "IMG"

        Returns:
            Matching FilterMode

        Raises:
            ConfigurationError: If the literal is not a known filter
        """
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"Unknown filter {value!r}, expected RAW or IMG"
            ) from None


@dataclass(frozen=True)
class PhotoRecord:
    """Completeness state of one logical photo."""

    base_name: str
    has_raw: bool
    has_jpg: bool

    def __post_init__(self) -> None:
        if not (self.has_raw or self.has_jpg):
            raise ValueError(f"Record {self.base_name!r} has neither RAW nor IMG")

    @property
    def is_complete(self) -> bool:
        return self.has_raw and self.has_jpg


def is_orphan(record: PhotoRecord, mode: FilterMode) -> bool:
    """
    Check whether a record lacks the counterpart the filter requires.

    Args:
        record: Photo record to check
        mode: Active filter mode

    Returns:
        True if the record should be relocated
    """
    if mode is FilterMode.RAW:
        return record.has_raw and not record.has_jpg
    return record.has_jpg and not record.has_raw


def _check_extension(label: str, extension: str) -> None:
    if not extension:
        raise ConfigurationError(f"The {label} extension is empty")
    if extension.startswith("."):
        raise ConfigurationError(
            f"The {label} extension {extension!r} must not start with a dot"
        )
    if os.sep in extension or (os.altsep and os.altsep in extension):
        raise ConfigurationError(
            f"The {label} extension {extension!r} contains a path separator"
        )


@dataclass(frozen=True)
class PhotoDirectory:
    """Immutable settings of one run, shared by builder and resolver."""

    path: Path
    filter_mode: FilterMode
    raw_extension: str = DEFAULT_RAW_EXTENSION
    img_extension: str = DEFAULT_IMG_EXTENSION

    def __post_init__(self) -> None:
        _check_extension("RAW", self.raw_extension)
        _check_extension("IMG", self.img_extension)
        # Equal extensions would mark every matching file complete
        if self.raw_extension == self.img_extension:
            raise ConfigurationError(
                f"RAW and IMG extensions are both {self.raw_extension!r}"
            )

    @property
    def filter_extension(self) -> str:
        """Extension of the file kind the filter keys on."""
        if self.filter_mode is FilterMode.RAW:
            return self.raw_extension
        return self.img_extension

    @property
    def quarantine_dir(self) -> Path:
        return self.path / QUARANTINE_DIR_NAME

    def source_path(self, base_name: str) -> Path:
        """Path of the filter-kind file for a base name."""
        return self.path / f"{base_name}.{self.filter_extension}"
