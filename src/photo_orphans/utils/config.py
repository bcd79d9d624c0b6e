"""Configuration management for photo-orphans."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from photo_orphans.core.models import DEFAULT_IMG_EXTENSION, DEFAULT_RAW_EXTENSION

logger = logging.getLogger(__name__)


class Config:
    """Manages user defaults stored as JSON."""

    DEFAULT_CONFIG_DIR = Path.home() / ".photo-orphans"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"
    DEFAULT_OPERATIONS_LOG = DEFAULT_CONFIG_DIR / "operations.log"

    DEFAULT_SETTINGS = {
        "raw_extension": DEFAULT_RAW_EXTENSION,
        "img_extension": DEFAULT_IMG_EXTENSION,
        "show_progress": True,
        "safety": {
            "use_recycle_bin": False,
            "log_operations": True,
        },
    }

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to config file (default: ~/.photo-orphans/config.json)
        """
        self.config_file = config_file or self.DEFAULT_CONFIG_FILE
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file or create with defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    self.settings = json.load(f)
                logger.debug(f"Loaded configuration from {self.config_file}")
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid config file: {e}. Using defaults.")
                self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        else:
            logger.info("No config file found. Creating with defaults.")
            self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
            self.save()

    def save(self) -> None:
        """Save configuration to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(self.settings, f, indent=2)
        logger.debug(f"Saved configuration to {self.config_file}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (supports dot notation, e.g., 'safety.use_recycle_bin')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if k not in target or not isinstance(target[k], dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value
        self.save()

    def get_operations_log(self) -> Optional[Path]:
        """Get the operations log path, or None when logging is disabled."""
        if not self.get("safety.log_operations", True):
            return None
        return self.config_file.parent / self.DEFAULT_OPERATIONS_LOG.name
