"""
Photo Orphans - find and discard photos missing their RAW or developed counterpart.

Scans a photo folder, pairs RAW files with their developed images, and moves
the files lacking a counterpart to a to_delete folder for review or deletion.
"""

__version__ = "0.1.0"
__author__ = "Photo Orphans Contributors"

from photo_orphans.core.catalog import Catalog, CatalogBuilder
from photo_orphans.core.models import FilterMode, PhotoDirectory, PhotoRecord
from photo_orphans.core.resolver import OrphanResolver

__all__ = [
    "Catalog",
    "CatalogBuilder",
    "FilterMode",
    "OrphanResolver",
    "PhotoDirectory",
    "PhotoRecord",
    "__version__",
]
