"""Core functionality for pairing photos and resolving orphans."""

from photo_orphans.core.catalog import Catalog, CatalogBuilder
from photo_orphans.core.resolver import OrphanResolver, ResolutionSummary

__all__ = ["Catalog", "CatalogBuilder", "OrphanResolver", "ResolutionSummary"]
