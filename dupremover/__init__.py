"""
Image Duplicate Remover
=======================
Remove duplicate images found in a secondary directory tree when the same
content already exists in a primary directory tree.

Features:
- SHA-256 or file size fingerprints
- SQLite index populated in parallel
- Concurrent matching of primary files against the index
- Dry-run mode for safety
- TXT/CSV/JSON export of the duplicate mapping

Author: Zach
"""

__version__ = "1.0.0"
__author__ = "Zedidence"

from .models import FileRecord, FingerprintKey, MatchResult, MatchStatus
from .config import IMAGE_EXTENSIONS, DEFAULT_KEY, DEFAULT_WORKERS
from .exceptions import StoreQueryFailed, InvalidInputError
from .scanner import (
    find_image_files,
    calculate_file_hash,
    fingerprint_file,
    index_files_parallel,
    find_matching,
)
from .database import FingerprintIndex, IndexStats

__all__ = [
    "FileRecord",
    "FingerprintKey",
    "MatchResult",
    "MatchStatus",
    "IMAGE_EXTENSIONS",
    "DEFAULT_KEY",
    "DEFAULT_WORKERS",
    "StoreQueryFailed",
    "InvalidInputError",
    "find_image_files",
    "calculate_file_hash",
    "fingerprint_file",
    "index_files_parallel",
    "find_matching",
    "FingerprintIndex",
    "IndexStats",
]
