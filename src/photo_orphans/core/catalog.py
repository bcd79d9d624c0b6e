"""Catalog builder pairing RAW and IMG files of a photo directory."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from photo_orphans.core.errors import CatalogError
from photo_orphans.core.models import PhotoDirectory, PhotoRecord

logger = logging.getLogger(__name__)


class Catalog(Mapping):
    """Read-only mapping from photo identity to its completeness record."""

    def __init__(self, records: Optional[Dict[Path, PhotoRecord]] = None):
        self._records: Dict[Path, PhotoRecord] = dict(records or {})

    def __getitem__(self, identity: Path) -> PhotoRecord:
        return self._records[identity]

    def __iter__(self) -> Iterator[Path]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} records)"

    def counts(self) -> Dict[str, int]:
        """
        Count records by completeness.

        Returns:
            Dictionary with 'complete', 'raw_only' and 'img_only' counts
        """
        counts = {"complete": 0, "raw_only": 0, "img_only": 0}
        for record in self._records.values():
            if record.is_complete:
                counts["complete"] += 1
            elif record.has_raw:
                counts["raw_only"] += 1
            else:
                counts["img_only"] += 1
        return counts


def split_file_name(name: str) -> Optional[Tuple[str, str]]:
    """
    Split a file name into base name and extension at the last dot.

    Args:
        name: File name without directory

    Returns:
        (base_name, extension), or None if either part is missing
    """
    base_name, dot, extension = name.rpartition(".")
    if not dot or not base_name or not extension:
        return None
    return base_name, extension


def photo_identity(directory: Path, base_name: str, filter_extension: str) -> Path:
    """
    Build the catalog key for a photo.

    The key always carries the filter's extension, whatever file produced the
    observation, so a RAW file and its IMG counterpart land on the same key.
    """
    return directory / f"{base_name}.{filter_extension}"


def merge_observation(
    records: Dict[Path, PhotoRecord],
    identity: Path,
    base_name: str,
    raw: bool,
    jpg: bool,
) -> PhotoRecord:
    """
    Fold one file observation into the records being built.

    Args:
        records: Records built so far (updated in place)
        identity: Catalog key of the observation
        base_name: File name without extension
        raw: The observed file is a RAW file
        jpg: The observed file is an IMG file

    Returns:
        The record stored under the identity afterwards
    """
    existing = records.get(identity)
    if existing is None:
        record = PhotoRecord(base_name=base_name, has_raw=raw, has_jpg=jpg)
        records[identity] = record
        return record

    if (existing.has_raw and jpg) or (existing.has_jpg and raw):
        if not existing.is_complete:
            records[identity] = PhotoRecord(
                base_name=existing.base_name, has_raw=True, has_jpg=True
            )
    return records[identity]


class CatalogBuilder:
    """Scans one directory (non-recursively) and builds its photo catalog."""

    def __init__(self, photo_dir: PhotoDirectory):
        """
        Initialize the catalog builder.

        Args:
            photo_dir: Settings of the current run
        """
        self.photo_dir = photo_dir

    def build(self) -> Catalog:
        """
        Build the catalog of the configured directory.

        Returns:
            Catalog with one record per logical photo

        Raises:
            CatalogError: If the directory cannot be listed
        """
        directory = self.photo_dir.path
        raw_ext = self.photo_dir.raw_extension
        img_ext = self.photo_dir.img_extension
        filter_ext = self.photo_dir.filter_extension

        records: Dict[Path, PhotoRecord] = {}

        for entry in self._list_files(directory):
            parts = split_file_name(entry.name)
            if parts is None:
                logger.debug(f"Skipping file without base name or extension: {entry}")
                continue

            base_name, extension = parts
            if extension != raw_ext and extension != img_ext:
                continue

            identity = photo_identity(directory, base_name, filter_ext)
            merge_observation(
                records,
                identity,
                base_name,
                raw=extension == raw_ext,
                jpg=extension == img_ext,
            )

        catalog = Catalog(records)
        logger.info(f"Found {len(catalog)} photo files in the folder.")
        return catalog

    def _list_files(self, directory: Path) -> List[Path]:
        """
        List the regular files directly inside a directory.

        Args:
            directory: Directory to list

        Returns:
            File paths sorted by name

        Raises:
            CatalogError: If the directory cannot be read
        """
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise CatalogError("Could not list directory", directory, e) from e

        return [entry for entry in entries if entry.is_file()]
