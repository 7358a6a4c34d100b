# ==================================================
# pwned_store/const.py
# ==================================================
import os
import struct

# ── text corpus line: 40 hex chars, ':' separator, count field, padding, CRLF ──
LINE_WIDTH     = 63
HEX_DIGEST_LEN = 40
COUNT_FIELD    = slice(41, 51)    # 10‑byte decimal count field

# ── binary record: raw digest + signed int32 count (little‑endian) ──
DIGEST_SIZE = 20
RECORD_FMT  = "<20si"
RECORD      = struct.Struct(RECORD_FMT)
RECORD_SIZE = RECORD.size         # 24 bytes, no padding
COUNT_FMT   = "<i"
COUNT_MIN, COUNT_MAX = -2**31, 2**31 - 1


# ───────────────────────── configuration ──────────────────────
def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or val.strip() == "":
        return default
    try:
        n = int(val)
    except ValueError:
        return default
    return n if n > 0 else default

CHUNK_LINES    = _env_int("PWNED_CHUNK_LINES", 1000)
PROGRESS_EVERY = _env_int("PWNED_PROGRESS_EVERY", 1_000_000)
LOG_LEVEL      = os.getenv("PWNED_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
