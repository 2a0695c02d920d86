"""
Duplicate file removal for the CLI interface.

Deletes (or, in dry-run mode, only logs) the secondary files of a duplicate
mapping, collecting statistics and per-file errors.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..utils.validators import validate_file_accessible


def _plan_removals(mapping: dict[str, list[str]]) -> list[str]:
    """
    Secondary paths to remove, each listed once, in mapping order.

    When the directories overlap a file can be both a primary and another
    primary's duplicate. A primary that is itself planned for removal keeps
    nothing, so its matches are left alone and one copy of each image
    survives.

    Examples:
        >>> _plan_removals({'/p/a.jpg': ['/p/b.jpg'], '/p/b.jpg': ['/p/a.jpg']})
        ['/p/b.jpg']
    """
    planned: dict[str, None] = {}
    for primary, matches in mapping.items():
        if primary in planned:
            continue
        for path in matches:
            if path != primary:
                planned.setdefault(path, None)
    return list(planned)


def _note_failure(stats: dict, path: str, message: str, counter: str,
                  logger: Optional[logging.Logger]) -> None:
    stats[counter] += 1
    stats['error_details'].append({'path': path, 'error': message})
    if not logger:
        return
    if counter == 'skipped':
        logger.warning(f"Skipped {path}: {message}")
    else:
        logger.error(f"Could not remove {path}: {message}")


def remove_duplicates(
    mapping: dict[str, list[str]],
    dry_run: bool = True,
    logger: Optional[logging.Logger] = None,
) -> dict:
    """
    Remove the secondary duplicates listed in a mapping.

    Each file is checked right before removal. Failures are recorded per
    file and never stop the run.

    Args:
        mapping: Primary path -> list of secondary duplicate paths
        dry_run: If True, only log what would be removed
        logger: Optional logger instance

    Returns:
        Statistics dictionary with keys:
        - processed: Files removed, or that would be removed in a dry run
        - errors: Files that could not be removed
        - skipped: Files missing or no longer regular files
        - space_saved: Total size of the processed files in bytes
        - error_details: {'path', 'error'} for every error and skip

    Examples:
        >>> stats = remove_duplicates({'/a/1.jpg': ['/b/1.jpg']}, dry_run=True)
        >>> stats['skipped']
        1
    """
    stats = {'processed': 0, 'errors': 0, 'skipped': 0, 'space_saved': 0, 'error_details': []}

    for dupe in _plan_removals(mapping):
        is_valid, reason = validate_file_accessible(dupe)
        if not is_valid:
            _note_failure(stats, dupe, reason, 'skipped', logger)
            continue

        try:
            size = os.path.getsize(dupe)
            if not dry_run:
                Path(dupe).unlink()
        except FileNotFoundError:
            _note_failure(stats, dupe, "File not found (removed during the run)", 'errors', logger)
            continue
        except PermissionError:
            _note_failure(stats, dupe, "Cannot delete: file is read-only or locked", 'errors', logger)
            continue
        except OSError as e:
            _note_failure(stats, dupe, str(e), 'errors', logger)
            continue

        stats['processed'] += 1
        stats['space_saved'] += size
        if logger:
            logger.info(f"[DRY RUN] Would delete: {dupe}" if dry_run else f"Deleted: {dupe}")

    return stats


__all__ = ['remove_duplicates']
