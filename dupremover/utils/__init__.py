"""
Utilities package for Image Duplicate Remover.

Provides:
- formatters: Human-readable formatting for numbers and file sizes
- validators: Input validation for directories, files and options
- exporters: Export duplicate mappings to files
"""

from __future__ import annotations

from . import formatters
from . import validators
from . import exporters

from .formatters import format_number, format_size, pluralize
from .validators import (
    validate_directory,
    validate_file_accessible,
    validate_workers,
    directories_overlap,
)
from .exporters import EXPORT_FORMATS, export_results

__all__ = [
    # Submodules
    'formatters',
    'validators',
    'exporters',
    # Formatters
    'format_number',
    'format_size',
    'pluralize',
    # Validators
    'validate_directory',
    'validate_file_accessible',
    'validate_workers',
    'directories_overlap',
    # Exporters
    'EXPORT_FORMATS',
    'export_results',
]
