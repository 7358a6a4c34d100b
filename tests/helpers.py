import os
import shutil
import struct
import tempfile

from pwned_store.const import RECORD_FMT


class TempDirMixin:
    def setUp(self):
        super().setUp()
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)
        super().tearDown()

    def path(self, name):
        return os.path.join(self.tmpdir, name)

    def write_bytes(self, name, data):
        p = self.path(name)
        with open(p, "wb") as f:
            f.write(data)
        return p


def pack_records(pairs):
    """[(digest, count), ...] -> concatenated 24‑byte records."""
    return b"".join(struct.pack(RECORD_FMT, d, c) for d, c in pairs)


class ProbeCounter:
    """Wraps a seekable source and counts fixed‑size record reads."""
    def __init__(self, inner):
        self.inner = inner
        self.reads = 0

    def seek(self, *args):
        return self.inner.seek(*args)

    def tell(self):
        return self.inner.tell()

    def read(self, n=-1):
        self.reads += 1
        return self.inner.read(n)
