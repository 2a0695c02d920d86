"""
Parallel processing module for the scanner package.

Provides parallel fingerprinting of files into the index, with progress
tracking and callback support.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional, Callable

from ..config import DEFAULT_WORKERS
from ..database import FingerprintIndex, IndexStats
from ..models import FileRecord
from .hashing import fingerprint_file
from .progress import progress_bar


def index_files_parallel(
    filepaths: list[str],
    index: FingerprintIndex,
    max_workers: int = DEFAULT_WORKERS,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    show_progress: bool = True,
    logger: Optional[logging.Logger] = None,
) -> IndexStats:
    """
    Fingerprint files in parallel and store the records in the index.

    Args:
        filepaths: List of file paths to fingerprint
        index: FingerprintIndex receiving the records
        max_workers: Number of parallel workers
        progress_callback: Optional callback(current, total) for progress updates
        show_progress: Whether to show tqdm progress bar
        logger: Optional logger for status messages

    Returns:
        IndexStats with counts of indexed and failed files. store_errors
        counts records that were fingerprinted but could not be stored.
    """
    stats = IndexStats(total_files=len(filepaths))
    if not filepaths:
        return stats

    records: list[FileRecord] = []

    pbar = progress_bar(len(filepaths), "Fingerprinting", enabled=show_progress)

    # Batch progress callbacks to reduce overhead (every 1000 files or 1 second)
    last_callback_time = time.time()
    callback_batch_size = 1000
    callback_interval = 1.0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(fingerprint_file, path): path
            for path in filepaths
        }

        for i, future in enumerate(as_completed(futures)):
            filepath = futures[future]
            try:
                record = future.result()
            except Exception as e:
                record = None
                if logger:
                    logger.warning(f"Fingerprinting failed for {filepath}: {e}")

            if record is None:
                stats.failed += 1
                if logger:
                    logger.warning(f"Could not read {filepath}")
            else:
                records.append(record)
                if logger:
                    logger.debug(f"Fingerprinted {filepath} ({record.sha256[:12]}, {record.filesize} bytes)")

            if pbar is not None:
                pbar.update(1)

            if progress_callback:
                current_time = time.time()
                should_callback = (
                    (i + 1) % callback_batch_size == 0 or
                    current_time - last_callback_time >= callback_interval or
                    i == len(filepaths) - 1
                )
                if should_callback:
                    progress_callback(i + 1, len(filepaths))
                    last_callback_time = current_time

    if pbar is not None:
        pbar.close()

    stored = index.put_batch(records)
    stats.indexed = stored
    stats.store_errors = len(records) - stored
    stats.failed += stats.store_errors
    if stats.store_errors and logger:
        logger.error(f"Index rejected {stats.store_errors:,} of {len(records):,} fingerprinted files")

    if logger:
        logger.info(
            f"Indexed {stats.indexed:,} of {stats.total_files:,} files "
            f"({stats.success_rate:.1f}%)"
        )

    return stats


__all__ = ['index_files_parallel']
