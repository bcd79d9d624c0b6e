"""Test configuration and path helpers."""

import errno
import logging

import pytest

from photo_orphans.core.errors import InvalidPathError
from photo_orphans.utils.config import Config
from photo_orphans.utils.logger import setup_logger
from photo_orphans.utils.paths import resolve_photo_dir


class TestConfig:
    """Test Config class."""

    def test_creates_defaults(self, tmp_path):
        """Test that a missing config file is created with defaults."""
        config_file = tmp_path / "config.json"

        config = Config(config_file)

        assert config_file.exists()
        assert config.get("raw_extension") == "RAF"
        assert config.get("img_extension") == "JPG"
        assert config.get("safety.use_recycle_bin") is False

    def test_set_persists(self, tmp_path):
        """Test that set() is saved to disk."""
        config_file = tmp_path / "config.json"
        Config(config_file).set("raw_extension", "NEF")

        assert Config(config_file).get("raw_extension") == "NEF"

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        """Test fallback to defaults on invalid JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        config = Config(config_file)

        assert config.get("img_extension") == "JPG"

    def test_defaults_are_not_shared(self, tmp_path):
        """Test that nested defaults are copied per instance."""
        first = Config(tmp_path / "one.json")
        first.set("safety.use_recycle_bin", True)

        second = Config(tmp_path / "two.json")

        assert second.get("safety.use_recycle_bin") is False

    def test_operations_log(self, tmp_path):
        """Test the operations log path and its switch."""
        config = Config(tmp_path / "config.json")
        assert config.get_operations_log() == tmp_path / "operations.log"

        config.set("safety.log_operations", False)
        assert config.get_operations_log() is None

    def test_missing_key_default(self, tmp_path):
        """Test get() default for missing keys."""
        config = Config(tmp_path / "config.json")

        assert config.get("nope.deeper", "fallback") == "fallback"


class TestResolvePhotoDir:
    """Test resolving the directory given on the command line."""

    def test_empty_means_current_directory(self, tmp_path, monkeypatch):
        """Test that an empty path means the current directory."""
        monkeypatch.chdir(tmp_path)

        assert resolve_photo_dir("") == tmp_path.resolve()

    def test_relative_path_is_canonicalized(self, tmp_path, monkeypatch):
        """Test canonicalization of dot-prefixed paths."""
        (tmp_path / "photos").mkdir()
        monkeypatch.chdir(tmp_path)

        assert resolve_photo_dir("./photos") == (tmp_path / "photos").resolve()

    def test_absolute_path_used_as_given(self, tmp_path):
        """Test that absolute paths are kept as given."""
        assert resolve_photo_dir(str(tmp_path)) == tmp_path

    def test_missing_relative_path(self, tmp_path, monkeypatch):
        """Test that a missing relative path carries the OS error."""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(InvalidPathError) as excinfo:
            resolve_photo_dir("./missing")

        assert excinfo.value.errno is not None

    def test_missing_path(self, tmp_path):
        """Test that a missing path carries ENOENT."""
        with pytest.raises(InvalidPathError) as excinfo:
            resolve_photo_dir(str(tmp_path / "missing"))

        assert excinfo.value.errno == errno.ENOENT

    def test_file_is_not_a_directory(self, tmp_path):
        """Test that a file path is rejected with ENOTDIR."""
        photo = tmp_path / "a.JPG"
        photo.touch()

        with pytest.raises(InvalidPathError) as excinfo:
            resolve_photo_dir(str(photo))

        assert excinfo.value.errno == errno.ENOTDIR


def test_setup_logger_file_output(tmp_path):
    """Test that debug records reach the log file."""
    log_file = tmp_path / "logs" / "run.log"

    logger = setup_logger("photo_orphans.test", level=logging.WARNING, log_file=log_file)
    logger.debug("detail only in file")
    for handler in logger.handlers:
        handler.flush()

    assert "detail only in file" in log_file.read_text(encoding="utf-8")
    logger.handlers.clear()
