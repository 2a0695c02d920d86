"""
Matching module for the scanner package.

Finds, for every primary file, the secondary files whose fingerprint in the
index equals its own. Lookups run concurrently, one per primary file, and are
joined before the mapping is built.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed, Future
from typing import Any, Optional, Sequence

from ..config import DEFAULT_WORKERS
from ..database import FingerprintIndex
from ..exceptions import StoreQueryFailed
from ..models import FingerprintKey, MatchResult


_logger = logging.getLogger(__name__)


def _is_path_sequence(value: Any) -> bool:
    """Only lists and tuples count as file lists; a bare string does not."""
    return isinstance(value, (list, tuple))


def _lookup(
    index: FingerprintIndex,
    primary: str,
    key: FingerprintKey,
    secondary_set: frozenset,
) -> list[str]:
    """Return the secondary files sharing the fingerprint of primary."""
    return [
        path for path in index.find_same(primary, key)
        if path in secondary_set
    ]


def find_matching(
    primary_files: Sequence[str],
    secondary_files: Sequence[str],
    index: FingerprintIndex,
    key: Any = None,
    max_workers: int = DEFAULT_WORKERS,
    logger: Optional[logging.Logger] = None,
) -> MatchResult:
    """
    Find secondary files that duplicate primary files.

    Args:
        primary_files: List of primary file paths
        secondary_files: List of secondary file paths (candidates for removal)
        index: Populated FingerprintIndex containing records for both lists
        key: FingerprintKey or 'sha256' / 'filesize'. Defaults to content hash.
        max_workers: Number of concurrent index lookups
        logger: Optional logger for status messages

    Returns:
        MatchResult:
        - OK with mapping primary path -> secondary duplicate paths; primary
          files without duplicates are left out and insertion order follows
          lookup completion order
        - INVALID_INPUT when a file list is not a list/tuple or the key is
          not recognized
        - STORE_FAILURE when any lookup fails; no partial mapping is kept

    Notes:
        A path never matches itself, even when it appears in both lists.
    """
    log = logger or _logger

    if not _is_path_sequence(primary_files) or not _is_path_sequence(secondary_files):
        log.warning("Matching needs lists of file paths for both primary and secondary files")
        return MatchResult.invalid_input("primary and secondary files must be lists of paths")

    if key is None:
        key = FingerprintKey.CONTENT_HASH
    fingerprint_key = FingerprintKey.parse(key)
    if fingerprint_key is None:
        log.warning(f"Unknown fingerprint key: {key!r}")
        return MatchResult.invalid_input(f"unknown fingerprint key: {key!r}")

    if not primary_files:
        return MatchResult.success({})

    secondary_set = frozenset(secondary_files)
    mapping: dict[str, list[str]] = {}

    log.debug(
        f"Matching {len(primary_files):,} primary files against "
        f"{len(secondary_set):,} secondary files by {fingerprint_key.value}"
    )

    executor = ThreadPoolExecutor(max_workers=max(1, max_workers))
    futures: dict[Future, str] = {}
    try:
        for primary in primary_files:
            futures[executor.submit(_lookup, index, primary, fingerprint_key, secondary_set)] = primary

        for future in as_completed(futures):
            primary = futures[future]
            try:
                matches = future.result()
            except StoreQueryFailed as e:
                log.error(f"Index lookup failed for {primary}: {e}")
                for pending in futures:
                    pending.cancel()
                return MatchResult.store_failure(e)

            if matches:
                mapping[primary] = matches
                log.debug(f"{primary}: {len(matches)} duplicate(s)")
    finally:
        executor.shutdown(wait=True, cancel_futures=True)

    return MatchResult.success(mapping)


__all__ = ['find_matching']
