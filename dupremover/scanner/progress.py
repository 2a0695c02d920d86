"""
Optional terminal progress bars for the scanner.

tqdm comes with the ``progress`` extra
(``pip install image-duplicate-remover[progress]``). Without it the scanner
only logs.
"""

from __future__ import annotations

import logging

try:
    from tqdm import tqdm
except ImportError:
    tqdm = None
    logging.getLogger(__name__).debug("tqdm not installed - progress bars disabled")

HAS_TQDM = tqdm is not None


def progress_bar(total: int, desc: str, enabled: bool = True):
    """
    Open a tqdm bar counting files.

    Returns:
        tqdm instance, or None when disabled, unavailable or there is nothing to count
    """
    if not enabled or tqdm is None or total <= 0:
        return None
    return tqdm(total=total, desc=desc, unit="file", ncols=80)


__all__ = ['HAS_TQDM', 'progress_bar']
