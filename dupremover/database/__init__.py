"""
SQLite fingerprint index for Image Duplicate Remover.

Stores one SHA-256 / file size record per file and answers the
"which other files share this fingerprint" lookups used by matching.

Public API:
- FingerprintIndex: Main index class
- IndexStats: Statistics dataclass for indexing runs
"""

from __future__ import annotations

from .core import FingerprintIndex
from .utils import IndexStats


__all__ = [
    'FingerprintIndex',
    'IndexStats',
]
