"""
Report formatting and display for the CLI interface.

Prints a duplicate mapping in a human-readable format.
"""

from __future__ import annotations

import os

from ..models import FingerprintKey, format_size


def _file_size(path: str) -> int:
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


def _calculate_statistics(mapping: dict[str, list[str]]) -> dict[str, int]:
    """
    Calculate statistics for a duplicate mapping.

    Returns:
        Dictionary with statistics:
        - total_primaries: Primary files that have duplicates
        - total_duplicates: Distinct secondary files found as duplicates
        - total_waste: Total size of those secondary files (bytes)
    """
    duplicates = {path for matches in mapping.values() for path in matches}
    return {
        'total_primaries': len(mapping),
        'total_duplicates': len(duplicates),
        'total_waste': sum(_file_size(path) for path in duplicates),
    }


def _print_section_header(title: str) -> None:
    """Print a section header with divider lines."""
    print("\n" + "-" * 70)
    print(title)
    print("-" * 70)


def print_duplicate_report(
    mapping: dict[str, list[str]],
    key: FingerprintKey = FingerprintKey.CONTENT_HASH,
) -> None:
    """
    Print a report of found duplicates.

    Args:
        mapping: Primary path -> list of secondary duplicate paths
        key: Fingerprint the mapping was built with

    Notes:
        - Primary files are listed in sorted order, marked [KEEP]
        - Their secondary duplicates follow, marked [DUPE]
    """
    print("\n" + "=" * 70)
    print("DUPLICATE IMAGE REPORT")
    print("=" * 70)

    stats = _calculate_statistics(mapping)
    print(f"\nMatched by: {key.value}")
    print(f"Duplicates found: {stats['total_duplicates']} secondary files for "
          f"{stats['total_primaries']} primary files")

    if mapping:
        _print_section_header("DUPLICATES")
        for i, primary in enumerate(sorted(mapping), 1):
            print(f"\nGroup {i} ({len(mapping[primary]) + 1} files):")
            print(f"  [KEEP] {primary}")
            for duplicate in mapping[primary]:
                print(f"  [DUPE] {duplicate}")

    print("\n" + "=" * 70)
    print(f"Total space recoverable: {format_size(stats['total_waste'])}")
    print("=" * 70)


__all__ = ['print_duplicate_report']
