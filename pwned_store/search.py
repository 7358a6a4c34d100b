# ==================================================
# pwned_store/search.py
# ==================================================
"""
Bisection over a sorted file of fixed‑width records.

The search works on byte offsets of any seekable source (file object or
``mmap``); nothing but the probed records is ever read.
"""
from __future__ import annotations

import io
import logging
from typing import Optional

from .const import DIGEST_SIZE, RECORD_SIZE
from .errors import MalformedBinaryFile

logger = logging.getLogger(__name__)


def find_record(source, start: int, end: int, digest: bytes,
                stride: int = RECORD_SIZE) -> Optional[int]:
    """Return the byte offset of the record whose key equals `digest`.

    [start, end) must be record aligned.  Probes the lower‑middle record of
    the range, then continues strictly before or strictly after it.
    """
    key_len = len(digest)
    probes  = 0
    while start < end:
        middle   = ((end - start) // stride) // 2
        read_pos = start + middle * stride
        source.seek(read_pos)
        record = source.read(stride)
        probes += 1
        if len(record) != stride:
            raise MalformedBinaryFile(read_pos + len(record), stride)

        key = record[:key_len]
        if key == digest:
            logger.debug("found at offset %d after %d probes", read_pos, probes)
            return read_pos
        if key > digest:
            end = read_pos
        else:
            start = read_pos + stride
    logger.debug("not found after %d probes", probes)
    return None


def find_digest(source, start: int, end: int, digest: bytes) -> bool:
    return find_record(source, start, end, digest) is not None


def source_size(source) -> int:
    """Total byte length of a seekable source (position is not preserved)."""
    source.seek(0, io.SEEK_END)
    return source.tell()


def check_digest(digest: bytes) -> bytes:
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    return bytes(digest)


def check_aligned(size: int) -> int:
    if size % RECORD_SIZE:
        raise MalformedBinaryFile(size, RECORD_SIZE)
    return size


def lookup(source, digest: bytes) -> bool:
    """Does `digest` occur in the sorted binary file behind `source`?"""
    digest = check_digest(digest)
    size   = check_aligned(source_size(source))
    return find_digest(source, 0, size, digest)
