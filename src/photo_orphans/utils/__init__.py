"""Utility functions for configuration, logging, and paths."""

from photo_orphans.utils.config import Config
from photo_orphans.utils.logger import setup_logger
from photo_orphans.utils.paths import resolve_photo_dir

__all__ = ["Config", "resolve_photo_dir", "setup_logger"]
