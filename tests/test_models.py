"""
Unit tests for data models (FileRecord, FingerprintKey and MatchResult).
"""

import pytest
from dupremover.models import (
    FileRecord,
    FingerprintKey,
    MatchResult,
    MatchStatus,
    format_size,
)
from dupremover.exceptions import InvalidInputError, StoreQueryFailed


class TestFormatSize:
    """Test the format_size utility function."""

    def test_bytes(self):
        assert format_size(500) == "500.0 B"

    def test_kilobytes(self):
        assert format_size(2048) == "2.0 KB"

    def test_megabytes(self):
        assert format_size(5242880) == "5.0 MB"

    def test_zero(self):
        assert format_size(0) == "0.0 B"


class TestFingerprintKey:
    """Test FingerprintKey parsing."""

    def test_parse_string_values(self):
        assert FingerprintKey.parse('sha256') is FingerprintKey.CONTENT_HASH
        assert FingerprintKey.parse('filesize') is FingerprintKey.SIZE_BYTES

    def test_parse_member(self):
        assert FingerprintKey.parse(FingerprintKey.SIZE_BYTES) is FingerprintKey.SIZE_BYTES

    @pytest.mark.parametrize('value', ['md5', '', 'SHA256', 42, None, 1.5, ['sha256']])
    def test_parse_unknown(self, value):
        assert FingerprintKey.parse(value) is None

    def test_column(self):
        assert FingerprintKey.CONTENT_HASH.column == 'sha256'
        assert FingerprintKey.SIZE_BYTES.column == 'filesize'


class TestFileRecord:
    """Test FileRecord data class."""

    def test_creation(self):
        record = FileRecord(filepath="/photos/a.jpg", sha256="ab" * 32, filesize=1024)
        assert record.filepath == "/photos/a.jpg"
        assert record.filename == "a.jpg"
        assert record.file_size_formatted == "1.0 KB"

    def test_immutable(self):
        record = FileRecord(filepath="/photos/a.jpg", sha256="ab" * 32, filesize=1024)
        with pytest.raises(AttributeError):
            record.filesize = 2048

    def test_value_for(self):
        record = FileRecord(filepath="/photos/a.jpg", sha256="ab" * 32, filesize=1024)
        assert record.value_for(FingerprintKey.CONTENT_HASH) == "ab" * 32
        assert record.value_for(FingerprintKey.SIZE_BYTES) == 1024

    def test_dict_roundtrip(self):
        record = FileRecord(filepath="/photos/a.jpg", sha256="ab" * 32, filesize=1024)
        data = record.to_dict()
        assert data['filename'] == "a.jpg"
        assert FileRecord.from_dict(data) == record


class TestMatchResult:
    """Test MatchResult tagged result."""

    def test_success_is_truthy(self):
        result = MatchResult.success({'/a/1.jpg': ['/b/1.jpg']})
        assert result
        assert result.ok
        assert result.status is MatchStatus.OK
        assert result.unwrap() == {'/a/1.jpg': ['/b/1.jpg']}

    def test_empty_success_is_still_truthy(self):
        assert MatchResult.success({})

    def test_invalid_input(self):
        result = MatchResult.invalid_input("bad key")
        assert not result
        assert result.status is MatchStatus.INVALID_INPUT
        assert result.mapping == {}
        with pytest.raises(InvalidInputError, match="bad key"):
            result.unwrap()

    def test_store_failure_reraises_cause(self):
        error = StoreQueryFailed('/a/1.jpg', 'sha256')
        result = MatchResult.store_failure(error)
        assert not result
        assert result.error is error
        with pytest.raises(StoreQueryFailed) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_duplicate_count_counts_distinct_paths(self):
        result = MatchResult.success({
            '/a/1.jpg': ['/b/1.jpg', '/b/3.jpg'],
            '/a/2.jpg': ['/b/1.jpg', '/b/3.jpg'],
        })
        assert result.duplicate_count == 2

    def test_to_dict(self):
        data = MatchResult.invalid_input("bad key").to_dict()
        assert data['status'] == 'invalid_input'
        assert data['reason'] == "bad key"
