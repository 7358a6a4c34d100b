# ==================================================
# pwned_store/verify.py
# ==================================================
import logging
from pathlib import Path
from typing import Optional

import numpy as np

from .const import DIGEST_SIZE, RECORD_SIZE
from .errors import MissingInput
from .search import check_aligned

logger = logging.getLogger(__name__)


def _ascending(prev: np.ndarray, cur: np.ndarray) -> np.ndarray:
    """Row‑wise `cur > prev` for (m, k) uint8 arrays, unsigned lexicographic."""
    diff  = prev != cur
    first = diff.argmax(axis=1)             # first differing column (0 if equal)
    rows  = np.arange(len(prev))
    return diff.any(axis=1) & (cur[rows, first] > prev[rows, first])


def verify_sorted(path, batch: int = 1 << 20) -> Optional[int]:
    """Index of the first record not strictly above its predecessor, or None.

    Search never calls this; it is an offline check of a converted file.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingInput(path)
    n = check_aligned(path.stat().st_size) // RECORD_SIZE
    if n < 2:
        return None

    recs = np.memmap(path, dtype=np.uint8, mode="r", shape=(n, RECORD_SIZE))
    for lo in range(0, n - 1, batch):
        hi  = min(n, lo + batch + 1)
        win = np.asarray(recs[lo:hi, :DIGEST_SIZE])
        ok  = _ascending(win[:-1], win[1:])
        if not ok.all():
            bad = lo + 1 + int(ok.argmin())
            logger.info("%s: record %d out of order", path, bad)
            return bad
    return None
