# ==================================================
# pwned_store/hexcodec.py
# ==================================================
import numpy as np

# -------- lookup table (built once, read‑only) ---------------------------

def _build_lookup() -> bytes:
    table = bytearray(256)
    for i in range(256):
        if 0x30 <= i <= 0x39:        # '0'‑'9'
            table[i] = i - 0x30
        elif 0x41 <= i <= 0x46:      # 'A'‑'F'
            table[i] = i - 0x41 + 10
        elif 0x61 <= i <= 0x66:      # 'a'‑'f'
            table[i] = i - 0x61 + 10
        # anything else stays 0: invalid hex is not rejected
    return bytes(table)

HEX_LOOKUP    = _build_lookup()
HEX_LOOKUP_NP = np.frombuffer(HEX_LOOKUP, dtype=np.uint8)   # read‑only view

# -------- scalar helpers --------------------------------------------------

def decode_hex(raw: bytes) -> bytes:
    """Decode ASCII hex bytes into raw bytes via HEX_LOOKUP.

    Characters outside [0-9A-Fa-f] decode as nibble 0.
    """
    if len(raw) % 2:
        raise ValueError(f"odd-length hex input ({len(raw)} bytes)")
    t = HEX_LOOKUP
    return bytes((t[raw[i]] << 4) | t[raw[i + 1]] for i in range(0, len(raw), 2))

def encode_hex(digest: bytes) -> str:
    return digest.hex().upper()

# -------- vectorised block decoder ----------------------------------------

def decode_hex_block(lines: np.ndarray) -> np.ndarray:
    """(n, 2k) uint8 ASCII hex -> (n, k) uint8 digests."""
    if lines.ndim != 2 or lines.shape[1] % 2:
        raise ValueError(f"expected (n, 2k) array, got shape {lines.shape}")
    nibbles = HEX_LOOKUP_NP[lines]
    return (nibbles[:, 0::2] << 4) | nibbles[:, 1::2]
