# ==================================================
# pwned_store/converter.py
# ==================================================
"""
Linear text → binary conversion.

Every 63‑byte corpus line ``<40 hex>:<count><padding>\\r\\n`` becomes one
24‑byte record: the 20 raw digest bytes followed by the count as a
little‑endian int32.  Record order is the line order, so a sorted corpus
yields a sorted binary file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Callable, Optional

import numpy as np
import zstandard as zstd

from . import const
from .const import (LINE_WIDTH, HEX_DIGEST_LEN, COUNT_FIELD, DIGEST_SIZE,
                    RECORD_SIZE, COUNT_MIN, COUNT_MAX)
from .errors import InvalidFormat, CountParseFailure, MissingInput
from .hexcodec import decode_hex_block

logger = logging.getLogger(__name__)

RECORD_DTYPE = np.dtype([("digest", np.uint8, (DIGEST_SIZE,)), ("count", "<i4")])
assert RECORD_DTYPE.itemsize == RECORD_SIZE

Progress = Callable[[int, Optional[float]], None]

# ── helpers ──────────────────────────────────────────────────
def _read_full(stream: BinaryIO, size: int) -> bytes:
    """Read until `size` bytes or EOF; short reads are refilled."""
    parts = []
    remaining = size
    while remaining:
        data = stream.read(remaining)
        if not data:
            break
        parts.append(data)
        remaining -= len(data)
    return b"".join(parts)

def _parse_counts(block: np.ndarray, first_line: int) -> np.ndarray:
    counts = np.empty(len(block), dtype="<i4")
    for i, field in enumerate(block[:, COUNT_FIELD]):
        raw = field.tobytes()
        try:
            n = int(raw)
        except ValueError:
            raise CountParseFailure(first_line + i, raw) from None
        if not COUNT_MIN <= n <= COUNT_MAX:
            raise CountParseFailure(first_line + i, raw)
        counts[i] = n
    return counts

def _hits_mark(start: int, n: int, every: int) -> bool:
    # some record index in [start, start + n) is a multiple of `every`
    return -(-start // every) * every < start + n

def _percent(done: int, total: Optional[int]) -> Optional[float]:
    if not total:
        return None
    return min(100.0, done * 100.0 / total)

# ── public api ───────────────────────────────────────────────
def convert(stream: BinaryIO, output_path, total_size: Optional[int] = None,
            progress: Optional[Progress] = None,
            position: Optional[Callable[[], int]] = None) -> int:
    """Convert a sorted text corpus read from `stream` into `output_path`.

    `output_path` is created or truncated.  `progress(records, percent)` is
    called roughly every PROGRESS_EVERY records and once more at the end
    with 100.0.  `position()` overrides the byte counter used for the
    percentage (e.g. compressed bytes consumed); by default it is the
    number of corpus bytes read.  Returns the number of records written.

    On any error the partially written output is left in place.
    """
    chunk_size = LINE_WIDTH * const.CHUNK_LINES
    every      = const.PROGRESS_EVERY
    records    = 0
    consumed   = 0

    logger.info("converting to %s (chunk=%d bytes)", output_path, chunk_size)
    with open(output_path, "wb") as out:
        while True:
            chunk = _read_full(stream, chunk_size)
            if not chunk:
                break
            if len(chunk) % LINE_WIDTH:
                raise InvalidFormat(consumed, len(chunk), LINE_WIDTH)

            block = np.frombuffer(chunk, dtype=np.uint8).reshape(-1, LINE_WIDTH)
            n     = len(block)
            recs  = np.empty(n, dtype=RECORD_DTYPE)
            recs["digest"] = decode_hex_block(block[:, :HEX_DIGEST_LEN])
            recs["count"]  = _parse_counts(block, records + 1)
            out.write(recs.tobytes())

            consumed += len(chunk)
            if progress is not None and _hits_mark(records, n, every):
                done = position() if position is not None else consumed
                progress(records + n, _percent(done, total_size))
            records += n

    if progress is not None:
        progress(records, 100.0)
    logger.info("wrote %d records (%d bytes) to %s",
                records, records * RECORD_SIZE, output_path)
    return records


def convert_file(input_path, output_path, progress: Optional[Progress] = None) -> int:
    """Open `input_path` (plain or ``.zst``) and run :func:`convert`."""
    src = Path(input_path)
    if not src.is_file():
        raise MissingInput(src)
    total = src.stat().st_size

    with open(src, "rb") as raw:
        if src.suffix == ".zst":
            logger.debug("decompressing %s with zstandard", src)
            dctx = zstd.ZstdDecompressor()
            with dctx.stream_reader(raw, read_across_frames=True, closefd=False) as reader:
                return convert(reader, output_path, total_size=total,
                               progress=progress, position=raw.tell)
        return convert(raw, output_path, total_size=total, progress=progress)
