"""
Exceptions raised by Image Duplicate Remover.
"""

from __future__ import annotations


class StoreQueryFailed(Exception):
    """
    The fingerprint index could not answer a lookup.

    Attributes:
        filepath: Path whose lookup failed
        key: Fingerprint column that was queried
    """

    def __init__(self, filepath: str, key: str, message: str = ""):
        self.filepath = filepath
        self.key = key
        super().__init__(message or f"Index query failed for {filepath} (key={key})")


class InvalidInputError(ValueError):
    """Matching was called with non-sequence file lists or an unknown key."""


__all__ = ['StoreQueryFailed', 'InvalidInputError']
