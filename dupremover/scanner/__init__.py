"""
Scanner package for Image Duplicate Remover.

Provides file discovery, fingerprinting into the index and matching of
primary files against secondary files.

Public API:
- find_image_files: Discover image files in directories
- calculate_file_hash: Calculate SHA-256 hash of files
- fingerprint_file: Build the FileRecord of a single file
- index_files_parallel: Fingerprint many files into a FingerprintIndex
- find_matching: Map primary files to their secondary duplicates
"""

from __future__ import annotations

from .file_discovery import find_image_files
from .hashing import calculate_file_hash, fingerprint_file
from .parallel import index_files_parallel
from .matching import find_matching
from .progress import HAS_TQDM


def has_progress_support() -> bool:
    """Check if tqdm progress bars are available."""
    return HAS_TQDM


__all__ = [
    'find_image_files',
    'calculate_file_hash',
    'fingerprint_file',
    'index_files_parallel',
    'find_matching',
    'has_progress_support',
]
