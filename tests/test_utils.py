"""
Unit tests for formatting, validation and export utilities.
"""

import csv
import json

import pytest
from dupremover.models import FingerprintKey
from dupremover.utils import (
    format_number,
    pluralize,
    validate_directory,
    validate_file_accessible,
    validate_workers,
    directories_overlap,
    export_results,
)


MAPPING = {
    "/a/2.jpg": ["/b/1.jpg", "/b/3.jpg"],
    "/a/1.jpg": ["/b/1.jpg"],
}


class TestFormatters:
    """Test number formatting helpers."""

    def test_format_number(self):
        """Thousands are separated by commas."""
        assert format_number(1234567) == "1,234,567"

    def test_pluralize(self):
        """Counts other than one take the plural."""
        assert pluralize(1, "file") == "1 file"
        assert pluralize(0, "file") == "0 files"
        assert pluralize(1200, "file") == "1,200 files"


class TestValidators:
    """Test input validators."""

    def test_valid_directory(self, temp_dir):
        """An existing readable directory passes."""
        assert validate_directory(temp_dir) == (True, "")

    def test_missing_directory(self, temp_dir):
        """A missing directory is reported as not found."""
        is_valid, error = validate_directory(temp_dir / "missing")
        assert not is_valid
        assert "not found" in error

    def test_file_is_not_directory(self, temp_dir):
        """A regular file is not accepted as a directory."""
        path = temp_dir / "file.jpg"
        path.write_bytes(b"x")
        is_valid, error = validate_directory(path)
        assert not is_valid
        assert "not a directory" in error

    def test_empty_directory_argument(self):
        """An empty path is rejected."""
        assert validate_directory("") == (False, "Directory path is required")

    def test_file_accessible(self, temp_dir):
        """Only existing regular files may be removed."""
        path = temp_dir / "file.jpg"
        path.write_bytes(b"x")
        assert validate_file_accessible(str(path)) == (True, "")
        assert validate_file_accessible(str(temp_dir / "nope.jpg")) == (False, "File does not exist")
        assert validate_file_accessible(str(temp_dir)) == (False, "Path is not a file")

    @pytest.mark.parametrize('workers,expected', [(1, True), (32, True), (0, False), (33, False), ("x", False)])
    def test_validate_workers(self, workers, expected):
        """Worker counts must be integers from 1 to 32."""
        assert validate_workers(workers)[0] is expected

    def test_directories_overlap(self, temp_dir):
        """Equal and nested directories overlap, siblings do not."""
        (temp_dir / "a" / "b").mkdir(parents=True)
        (temp_dir / "c").mkdir()
        assert directories_overlap(temp_dir / "a", temp_dir / "a" / "b")
        assert directories_overlap(temp_dir / "a" / "b", temp_dir / "a")
        assert directories_overlap(temp_dir / "a", temp_dir / "a")
        assert not directories_overlap(temp_dir / "a", temp_dir / "c")


class TestExportResults:
    """Test export_results function."""

    def test_txt(self, temp_dir):
        """Text export lists groups sorted by primary path."""
        path = temp_dir / "out.txt"
        export_results(MAPPING, path, 'txt')
        text = path.read_text(encoding='utf-8')
        assert "Matched by: sha256" in text
        assert "[KEEP] /a/1.jpg" in text
        assert text.index("/a/1.jpg") < text.index("/a/2.jpg")

    def test_csv(self, temp_dir):
        """CSV export writes one row per primary and duplicate pair."""
        path = temp_dir / "out.csv"
        export_results(MAPPING, path, 'csv', key=FingerprintKey.SIZE_BYTES)
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert rows[0] == ['primary', 'duplicate', 'key']
        assert rows[1:] == [
            ['/a/1.jpg', '/b/1.jpg', 'filesize'],
            ['/a/2.jpg', '/b/1.jpg', 'filesize'],
            ['/a/2.jpg', '/b/3.jpg', 'filesize'],
        ]

    def test_csv_quotes_commas(self, temp_dir):
        """Paths containing commas survive a CSV round trip."""
        path = temp_dir / "out.csv"
        export_results({"/a/x,y.jpg": ["/b/x,y.jpg"]}, path, 'csv')
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert rows[1][:2] == ["/a/x,y.jpg", "/b/x,y.jpg"]

    def test_json(self, temp_dir):
        """JSON export holds the key and the mapping."""
        path = temp_dir / "out.json"
        export_results(MAPPING, path, 'json')
        data = json.loads(path.read_text(encoding='utf-8'))
        assert data == {'key': 'sha256', 'duplicates': MAPPING}

    def test_unknown_format(self, temp_dir):
        """Unsupported formats raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported export format"):
            export_results(MAPPING, temp_dir / "out.xml", 'xml')
