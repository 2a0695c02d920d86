"""
Formatting utilities for Image Duplicate Remover.

Provides human-readable formatting for numbers and file sizes.
"""

from __future__ import annotations

# Re-export format_size from models for convenience
from ..models import format_size


def format_number(n: int) -> str:
    """
    Format large numbers with commas for readability.

    Examples:
        >>> format_number(1000)
        '1,000'
        >>> format_number(1234567)
        '1,234,567'
    """
    return f"{n:,}"


def pluralize(count: int, word: str) -> str:
    """
    Return count followed by word, with an 's' unless count is 1.

    Examples:
        >>> pluralize(1, 'file')
        '1 file'
        >>> pluralize(1200, 'file')
        '1,200 files'
    """
    return f"{count:,} {word}{'' if count == 1 else 's'}"


__all__ = ['format_number', 'format_size', 'pluralize']
