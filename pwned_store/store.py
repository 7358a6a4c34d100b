# ==================================================
# pwned_store/store.py
# ==================================================
import mmap, os, struct
from pathlib import Path
from typing import Optional

from .const  import COUNT_FMT, DIGEST_SIZE, RECORD_SIZE
from .digest import password_digest
from .errors import MissingInput
from .search import check_aligned, check_digest, find_record


class PwnedHashFile:
    """Read‑only view of a sorted binary digest file, optionally mmap‑backed."""
    def __init__(self, path: str | os.PathLike, use_mmap: bool = False):
        self.path = Path(path)
        if not self.path.is_file():
            raise MissingInput(self.path)

        self.file = open(self.path, "rb")
        try:
            self.size = check_aligned(os.fstat(self.file.fileno()).st_size)
        except Exception:
            self.file.close()
            raise
        # mmap refuses zero‑length files; plain seek/read is used then
        self.mm = None
        if use_mmap and self.size:
            self.mm = mmap.mmap(self.file.fileno(), 0, access=mmap.ACCESS_READ)

    # ------------------------------------------------------------------
    @property
    def _source(self):
        return self.mm if self.mm is not None else self.file

    def __len__(self) -> int:
        return self.size // RECORD_SIZE

    def _offset_of(self, digest: bytes) -> Optional[int]:
        return find_record(self._source, 0, self.size, check_digest(digest))

    # ------------------------------------------------------------------
    def __contains__(self, digest: bytes) -> bool:
        return self._offset_of(digest) is not None

    def count(self, digest: bytes) -> Optional[int]:
        """Occurrence count stored with `digest`; None if absent."""
        off = self._offset_of(digest)
        if off is None:
            return None
        src = self._source
        src.seek(off + DIGEST_SIZE)
        return struct.unpack(COUNT_FMT, src.read(RECORD_SIZE - DIGEST_SIZE))[0]

    def contains_password(self, password: str) -> bool:
        return password_digest(password) in self

    # ------------------------------------------------------------------
    def close(self):
        if self.mm is not None:
            self.mm.close()
            self.mm = None
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
