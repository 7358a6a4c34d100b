# ==================================================
# pwned_store/digest.py
# ==================================================
import hashlib
import string

from .const import DIGEST_SIZE, HEX_DIGEST_LEN

_HEXDIGITS = frozenset(string.hexdigits)


def password_digest(password: str) -> bytes:
    """SHA‑1 of the UTF‑8 encoded password (20 bytes)."""
    return hashlib.sha1(password.encode("utf-8")).digest()


def parse_digest(text: str) -> bytes:
    """Strict parse of a 40‑char hex SHA‑1 typed by a user."""
    text = text.strip()
    if len(text) != HEX_DIGEST_LEN or not _HEXDIGITS.issuperset(text):
        raise ValueError(f"not a {DIGEST_SIZE}-byte hex digest: {text!r}")
    return bytes.fromhex(text)
