"""
Export functionality for Image Duplicate Remover.

Provides functions to export the duplicate mapping to TXT, CSV and JSON.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TextIO

from ..models import FingerprintKey


EXPORT_FORMATS = ('txt', 'csv', 'json')


def _export_txt(mapping: dict[str, list[str]], key: FingerprintKey, file_handle: TextIO) -> None:
    """Export the mapping as a plain text report."""
    file_handle.write("DUPLICATE IMAGE REPORT\n")
    file_handle.write("=" * 70 + "\n")
    file_handle.write(f"Matched by: {key.value}\n")

    for i, primary in enumerate(sorted(mapping), 1):
        file_handle.write(f"\nGroup {i}:\n")
        file_handle.write(f"  [KEEP] {primary}\n")
        for duplicate in mapping[primary]:
            file_handle.write(f"  [DUPE] {duplicate}\n")


def _export_csv(mapping: dict[str, list[str]], key: FingerprintKey, file_handle: TextIO) -> None:
    """
    Export the mapping as CSV.

    Notes:
        CSV includes: primary, duplicate, key (one row per duplicate)
    """
    writer = csv.writer(file_handle)
    writer.writerow(['primary', 'duplicate', 'key'])
    for primary in sorted(mapping):
        for duplicate in mapping[primary]:
            writer.writerow([primary, duplicate, key.value])


def _export_json(mapping: dict[str, list[str]], key: FingerprintKey, file_handle: TextIO) -> None:
    """Export the mapping as a JSON document."""
    json.dump(
        {
            'key': key.value,
            'duplicates': {primary: mapping[primary] for primary in sorted(mapping)},
        },
        file_handle,
        indent=2,
    )
    file_handle.write("\n")


def export_results(
    mapping: dict[str, list[str]],
    output_path: Path,
    export_format: str = 'txt',
    key: FingerprintKey = FingerprintKey.CONTENT_HASH,
) -> None:
    """
    Export a duplicate mapping to a file.

    Args:
        mapping: Primary path -> list of secondary duplicate paths
        output_path: Path to output file
        export_format: 'txt', 'csv' or 'json'. Default: 'txt'
        key: Fingerprint the mapping was built with

    Raises:
        ValueError: If export_format is not supported
        OSError: If file cannot be written

    Examples:
        >>> export_results(mapping, Path('results.csv'), 'csv')
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(
            f"Unsupported export format: {export_format}. Use one of {', '.join(EXPORT_FORMATS)}."
        )

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        if export_format == 'txt':
            _export_txt(mapping, key, f)
        elif export_format == 'csv':
            _export_csv(mapping, key, f)
        else:
            _export_json(mapping, key, f)


__all__ = ['EXPORT_FORMATS', 'export_results']
