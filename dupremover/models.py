"""
Data models for Image Duplicate Remover.

Contains the fingerprint record stored in the index, the fingerprint key
selector and the tagged result returned by matching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional
import os

from .exceptions import InvalidInputError


def format_size(size_bytes: int) -> str:
    """Format file size in human-readable form."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


class FingerprintKey(str, Enum):
    """Which FileRecord attribute is compared when matching."""

    CONTENT_HASH = 'sha256'
    SIZE_BYTES = 'filesize'

    @classmethod
    def parse(cls, value: Any) -> Optional['FingerprintKey']:
        """
        Convert a key selector into a FingerprintKey.

        Args:
            value: FingerprintKey member or its string value

        Returns:
            FingerprintKey, or None if the value is not a recognized key
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for member in cls:
            if member.value == value:
                return member
        return None

    @property
    def column(self) -> str:
        """Index column holding this fingerprint."""
        return self.value


@dataclass(frozen=True)
class FileRecord:
    """
    Fingerprint of a single file.

    Attributes:
        filepath: Path of the file, unique within the index
        sha256: Hex digest of the file contents
        filesize: Size in bytes
    """
    filepath: str
    sha256: str
    filesize: int

    @property
    def filename(self) -> str:
        """Return just the filename portion of the path."""
        return os.path.basename(self.filepath)

    @property
    def file_size_formatted(self) -> str:
        """Return human-readable file size."""
        return format_size(self.filesize)

    def value_for(self, key: FingerprintKey) -> Any:
        """Return the fingerprint value selected by key."""
        if key is FingerprintKey.SIZE_BYTES:
            return self.filesize
        return self.sha256

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'filepath': self.filepath,
            'filename': self.filename,
            'sha256': self.sha256,
            'filesize': self.filesize,
            'file_size_formatted': self.file_size_formatted,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'FileRecord':
        """Create FileRecord from dictionary."""
        return cls(
            filepath=data['filepath'],
            sha256=data.get('sha256', ''),
            filesize=data.get('filesize', 0),
        )


class MatchStatus(str, Enum):
    """Outcome of a matching run."""

    OK = 'ok'
    INVALID_INPUT = 'invalid_input'
    STORE_FAILURE = 'store_failure'


@dataclass
class MatchResult:
    """
    Result of matching primary files against secondary files.

    Exactly one of the three outcomes:
    - OK: ``mapping`` holds primary path -> secondary duplicate paths
    - INVALID_INPUT: ``reason`` says which argument was rejected
    - STORE_FAILURE: ``error`` holds the index failure that aborted the run

    A result is truthy only when OK, so callers can write
    ``if not result: ...`` before touching the mapping.
    """
    status: MatchStatus
    mapping: dict = field(default_factory=dict)
    error: Optional[BaseException] = None
    reason: str = ""

    @classmethod
    def success(cls, mapping: dict) -> 'MatchResult':
        return cls(status=MatchStatus.OK, mapping=mapping)

    @classmethod
    def invalid_input(cls, reason: str) -> 'MatchResult':
        return cls(status=MatchStatus.INVALID_INPUT, reason=reason)

    @classmethod
    def store_failure(cls, error: BaseException) -> 'MatchResult':
        return cls(status=MatchStatus.STORE_FAILURE, error=error, reason=str(error))

    @property
    def ok(self) -> bool:
        return self.status is MatchStatus.OK

    def __bool__(self) -> bool:
        return self.ok

    @property
    def duplicate_count(self) -> int:
        """Number of distinct secondary files found as duplicates."""
        return len({path for matches in self.mapping.values() for path in matches})

    def unwrap(self) -> dict:
        """
        Return the mapping or raise the failure.

        Raises:
            InvalidInputError: If the inputs were rejected
            StoreQueryFailed: If an index lookup failed
        """
        if self.status is MatchStatus.INVALID_INPUT:
            raise InvalidInputError(self.reason)
        if self.status is MatchStatus.STORE_FAILURE:
            raise self.error
        return self.mapping

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'status': self.status.value,
            'mapping': self.mapping,
            'duplicate_count': self.duplicate_count,
            'reason': self.reason or None,
        }
