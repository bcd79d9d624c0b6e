"""Orphan resolution: quarantine or delete photos missing their counterpart."""

import json
import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from send2trash import send2trash
from tqdm import tqdm

from photo_orphans.core.catalog import Catalog
from photo_orphans.core.errors import QuarantineError, RelocationError
from photo_orphans.core.models import FilterMode, PhotoDirectory, PhotoRecord, is_orphan

logger = logging.getLogger(__name__)

CatalogEntry = Tuple[Path, PhotoRecord]


def partition(
    catalog: Catalog, mode: FilterMode
) -> Tuple[List[CatalogEntry], List[CatalogEntry]]:
    """
    Split catalog entries into kept records and orphans.

    Args:
        catalog: Catalog to split
        mode: Active filter mode

    Returns:
        (kept, orphans), each sorted by identity
    """
    kept: List[CatalogEntry] = []
    orphans: List[CatalogEntry] = []
    for identity in sorted(catalog):
        record = catalog[identity]
        if is_orphan(record, mode):
            orphans.append((identity, record))
        else:
            kept.append((identity, record))
    return kept, orphans


@dataclass
class ResolutionSummary:
    """Outcome of one resolver run."""

    catalog_size: int
    quarantine_dir: Path
    kept: List[CatalogEntry] = field(default_factory=list)
    relocated: List[Tuple[Path, Path]] = field(default_factory=list)
    deleted: bool = False
    used_recycle_bin: bool = False

    @property
    def status(self) -> str:
        if not self.deleted:
            return "staged"
        return "recycled" if self.used_recycle_bin else "deleted"


class OrphanResolver:
    """Moves orphaned photos to the quarantine directory and optionally deletes it."""

    def __init__(
        self,
        photo_dir: PhotoDirectory,
        show_progress: bool = True,
        operations_log: Optional[Path] = None,
    ):
        """
        Initialize the orphan resolver.

        Args:
            photo_dir: Settings of the current run
            show_progress: Show a progress bar while relocating
            operations_log: Optional JSON-lines file recording each run
        """
        self.photo_dir = photo_dir
        self.show_progress = show_progress
        self.operations_log = operations_log

    @property
    def quarantine_dir(self) -> Path:
        return self.photo_dir.quarantine_dir

    def plan(self, catalog: Catalog) -> List[CatalogEntry]:
        """Return the orphans a resolve() call would relocate, touching nothing."""
        _, orphans = partition(catalog, self.photo_dir.filter_mode)
        return orphans

    def resolve(
        self,
        catalog: Catalog,
        permanently_delete: bool = False,
        use_recycle_bin: bool = False,
    ) -> ResolutionSummary:
        """
        Relocate every orphan of the catalog into the quarantine directory.

        Args:
            catalog: Fully built catalog of the directory
            permanently_delete: Remove the quarantine directory afterwards
            use_recycle_bin: Send the quarantine directory to the recycle bin
                instead of deleting it (only with permanently_delete)

        Returns:
            Summary of the run

        Raises:
            QuarantineError: If the quarantine directory cannot be created
            RelocationError: If a copy, remove or final delete fails
        """
        kept, orphans = partition(catalog, self.photo_dir.filter_mode)
        summary = ResolutionSummary(
            catalog_size=len(catalog),
            quarantine_dir=self.quarantine_dir,
            kept=kept,
        )

        self.ensure_quarantine()

        if not permanently_delete:
            logger.info(
                f"Files to be deleted by the user are located at: {self.quarantine_dir}"
            )

        if self.show_progress and orphans:
            orphan_iter = tqdm(orphans, desc="Relocating orphans", unit="file")
        else:
            orphan_iter = orphans

        for _, record in orphan_iter:
            source = self.photo_dir.source_path(record.base_name)
            target = self.relocate(record)
            summary.relocated.append((source, target))

        if permanently_delete:
            self.discard_quarantine(use_recycle_bin)
            summary.deleted = True
            summary.used_recycle_bin = use_recycle_bin

        self._log_operation(summary)
        return summary

    def ensure_quarantine(self) -> Path:
        """
        Create the quarantine directory if it does not exist yet.

        Returns:
            Path of the quarantine directory

        Raises:
            QuarantineError: If the directory cannot be created
        """
        if self.quarantine_dir.is_dir():
            return self.quarantine_dir

        try:
            self.quarantine_dir.mkdir()
        except OSError as e:
            raise QuarantineError(
                "The directory could not be created", self.quarantine_dir, e
            ) from e

        logger.debug(f"Created quarantine directory: {self.quarantine_dir}")
        return self.quarantine_dir

    def relocate(self, record: PhotoRecord) -> Path:
        """
        Copy an orphan into the quarantine directory, then remove the original.

        A failed copy leaves the original in place; a failed removal leaves
        both copies.

        Args:
            record: Orphan record to relocate

        Returns:
            Path of the quarantined copy

        Raises:
            RelocationError: If the copy or the removal fails
        """
        source = self.photo_dir.source_path(record.base_name)
        target = self.quarantine_dir / source.name

        try:
            shutil.copy2(source, target)
        except OSError as e:
            raise RelocationError("Could not copy file", source, e) from e

        try:
            source.unlink()
        except OSError as e:
            raise RelocationError("Could not remove file", source, e) from e

        logger.info(f"File {source} moved to {self.quarantine_dir.name} folder")
        return target

    def discard_quarantine(self, use_recycle_bin: bool = False) -> None:
        """
        Remove the quarantine directory and everything in it.

        Args:
            use_recycle_bin: Move to the recycle bin instead of deleting

        Raises:
            RelocationError: If the directory cannot be removed
        """
        try:
            if use_recycle_bin:
                send2trash(str(self.quarantine_dir))
                logger.info("Folder with discarded files moved to the recycle bin!")
            else:
                shutil.rmtree(self.quarantine_dir)
                logger.info("Folder with discarded files deleted!")
        except OSError as e:
            raise RelocationError(
                "Could not delete folder", self.quarantine_dir, e
            ) from e

    def _log_operation(self, summary: ResolutionSummary) -> None:
        """
        Append the run to the operations log file.

        Args:
            summary: Summary of the finished run
        """
        if self.operations_log is None:
            return

        try:
            self.operations_log.parent.mkdir(parents=True, exist_ok=True)

            with open(self.operations_log, "a", encoding="utf-8") as f:
                log_entry: Dict[str, Any] = {
                    "timestamp": datetime.now().isoformat(),
                    "directory": str(self.photo_dir.path),
                    "filter": self.photo_dir.filter_mode.value,
                    "files_count": len(summary.relocated),
                    "files": [source.name for source, _ in summary.relocated],
                    "status": summary.status,
                }
                f.write(json.dumps(log_entry) + "\n")

        except OSError as e:
            logger.warning(f"Failed to log operation: {e}")
