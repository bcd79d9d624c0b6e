"""Test the shared data model."""

from pathlib import Path

import pytest

from photo_orphans.core.errors import ConfigurationError
from photo_orphans.core.models import (
    FilterMode,
    PhotoDirectory,
    PhotoRecord,
    is_orphan,
)


@pytest.mark.parametrize(
    "has_raw, has_jpg, raw_orphan, img_orphan",
    [
        (True, True, False, False),
        (True, False, True, False),
        (False, True, False, True),
    ],
)
def test_orphan_condition(has_raw, has_jpg, raw_orphan, img_orphan):
    """Test the orphan condition for both filters."""
    record = PhotoRecord("x", has_raw=has_raw, has_jpg=has_jpg)

    assert is_orphan(record, FilterMode.RAW) is raw_orphan
    assert is_orphan(record, FilterMode.IMG) is img_orphan


def test_record_needs_a_flag():
    """Test that a record needs at least one flag."""
    with pytest.raises(ValueError):
        PhotoRecord("x", has_raw=False, has_jpg=False)


def test_filter_mode_parse():
    """Test parsing filter literals."""
    assert FilterMode.parse("RAW") is FilterMode.RAW
    assert FilterMode.parse("IMG") is FilterMode.IMG

    with pytest.raises(ConfigurationError):
        FilterMode.parse("JPG")


class TestPhotoDirectory:
    """Test run settings."""

    def test_derived_paths(self, tmp_path):
        """Test paths derived from the run settings."""
        photo_dir = PhotoDirectory(tmp_path, FilterMode.RAW)

        assert photo_dir.filter_extension == "RAF"
        assert photo_dir.quarantine_dir == tmp_path / "to_delete"
        assert photo_dir.source_path("a") == tmp_path / "a.RAF"

    def test_img_filter_extension(self, tmp_path):
        """Test the filter extension under the IMG filter."""
        photo_dir = PhotoDirectory(tmp_path, FilterMode.IMG, img_extension="HEIC")

        assert photo_dir.filter_extension == "HEIC"

    @pytest.mark.parametrize(
        "raw_ext, img_ext",
        [("", "JPG"), ("RAF", ""), (".RAF", "JPG"), ("RAF", "RAF"), ("a/b", "JPG")],
    )
    def test_invalid_extensions(self, raw_ext, img_ext):
        """Test that invalid extension pairs are rejected."""
        with pytest.raises(ConfigurationError):
            PhotoDirectory(Path("."), FilterMode.IMG, raw_ext, img_ext)
