import io
import os
import struct
import unittest
from unittest import mock

import zstandard as zstd

from pwned_store import const
from pwned_store.converter import convert, convert_file
from pwned_store.errors import CountParseFailure, InvalidFormat, MissingInput
from pwned_store.examples.build_sample import format_line, sample_lines
from tests.helpers import TempDirMixin


class ShortReads(io.RawIOBase):
    """Stream that never returns more than `step` bytes per read."""
    def __init__(self, data, step=10):
        self.buf = io.BytesIO(data)
        self.step = step

    def readable(self):
        return True

    def read(self, n=-1):
        if n < 0 or n > self.step:
            n = self.step
        return self.buf.read(n)


class TestConvert(TempDirMixin, unittest.TestCase):
    def test_single_line_scenario(self):
        line = (b"A" * 40 + b":5").ljust(61) + b"\r\n"
        self.assertEqual(len(line), 63)
        out = self.path("one.bin")
        self.assertEqual(convert(io.BytesIO(line), out), 1)
        with open(out, "rb") as f:
            self.assertEqual(f.read(), b"\xaa" * 20 + b"\x05\x00\x00\x00")

    def test_format_invariant_across_chunks(self):
        lines = sample_lines(200, seed=3)
        out = self.path("sample.bin")
        with mock.patch.object(const, "CHUNK_LINES", 7):
            n = convert(io.BytesIO(b"".join(lines)), out)
        self.assertEqual(n, len(lines))
        with open(out, "rb") as f:
            data = f.read()
        self.assertEqual(len(data), 24 * len(lines))
        for i, line in enumerate(lines):
            rec = data[i * 24:(i + 1) * 24]
            self.assertEqual(rec[:20], bytes.fromhex(line[:40].decode()))
            self.assertEqual(struct.unpack("<i", rec[20:])[0], int(line[41:51]))

    def test_lowercase_hex_and_large_count(self):
        line = format_line(bytes(range(20)), 2_000_000_000).lower()
        out = self.path("lc.bin")
        convert(io.BytesIO(line), out)
        with open(out, "rb") as f:
            rec = f.read()
        self.assertEqual(rec[:20], bytes(range(20)))
        self.assertEqual(struct.unpack("<i", rec[20:])[0], 2_000_000_000)

    def test_short_reads_are_refilled(self):
        lines = sample_lines(30, seed=4)
        out_a, out_b = self.path("a.bin"), self.path("b.bin")
        with mock.patch.object(const, "CHUNK_LINES", 4):
            convert(io.BytesIO(b"".join(lines)), out_a)
            convert(ShortReads(b"".join(lines), step=10), out_b)
        with open(out_a, "rb") as a, open(out_b, "rb") as b:
            self.assertEqual(a.read(), b.read())

    def test_empty_corpus(self):
        out = self.path("empty.bin")
        self.assertEqual(convert(io.BytesIO(b""), out), 0)
        self.assertEqual(os.path.getsize(out), 0)

    def test_output_is_truncated(self):
        out = self.write_bytes("old.bin", b"x" * 1000)
        convert(io.BytesIO(format_line(b"\x01" * 20, 1)), out)
        self.assertEqual(os.path.getsize(out), 24)

    def test_residual_bytes_are_fatal_and_partial_output_kept(self):
        lines = sample_lines(10, seed=5)
        out = self.path("bad.bin")
        with mock.patch.object(const, "CHUNK_LINES", 7):
            with self.assertRaises(InvalidFormat) as cm:
                convert(io.BytesIO(b"".join(lines) + b"xx"), out)
        self.assertEqual(cm.exception.offset, 7 * 63)
        self.assertEqual(cm.exception.size, 3 * 63 + 2)
        self.assertEqual(os.path.getsize(out), 7 * 24)

    def test_count_parse_failure(self):
        good = format_line(b"\x01" * 20, 3)
        bad = (b"B" * 40 + b":abc").ljust(61) + b"\r\n"
        with self.assertRaises(CountParseFailure) as cm:
            convert(io.BytesIO(good + bad), self.path("c.bin"))
        self.assertEqual(cm.exception.line_no, 2)
        self.assertTrue(isinstance(cm.exception, ValueError))

    def test_count_out_of_int32_range(self):
        line = (b"C" * 40 + b":9999999999").ljust(61) + b"\r\n"
        with self.assertRaises(CountParseFailure):
            convert(io.BytesIO(line), self.path("o.bin"))

    def test_progress_notifications(self):
        lines = sample_lines(12, seed=6)
        self.assertEqual(len(lines), 12)
        calls = []
        with mock.patch.object(const, "CHUNK_LINES", 3), \
             mock.patch.object(const, "PROGRESS_EVERY", 5):
            convert(io.BytesIO(b"".join(lines)), self.path("p.bin"),
                    total_size=12 * 63, progress=lambda r, p: calls.append((r, p)))
        self.assertEqual(calls, [(3, 25.0), (6, 50.0), (12, 100.0), (12, 100.0)])

    def test_progress_without_total(self):
        calls = []
        convert(io.BytesIO(format_line(b"\x02" * 20, 1)), self.path("q.bin"),
                progress=lambda r, p: calls.append((r, p)))
        self.assertEqual(calls, [(1, None), (1, 100.0)])


class TestConvertFile(TempDirMixin, unittest.TestCase):
    def test_missing_input(self):
        out = self.path("never.bin")
        with self.assertRaises(MissingInput):
            convert_file(self.path("nope.txt"), out)
        self.assertFalse(os.path.exists(out))

    def test_plain_and_zstd_inputs_agree(self):
        corpus = b"".join(sample_lines(150, seed=8))
        plain = self.write_bytes("c.txt", corpus)
        packed = self.write_bytes("c.txt.zst", zstd.ZstdCompressor(level=3).compress(corpus))
        out_plain, out_zst = self.path("p.bin"), self.path("z.bin")
        seen = []
        with mock.patch.object(const, "CHUNK_LINES", 16):
            n1 = convert_file(plain, out_plain)
            n2 = convert_file(packed, out_zst, progress=lambda r, p: seen.append(p))
        self.assertEqual(n1, n2)
        with open(out_plain, "rb") as a, open(out_zst, "rb") as b:
            self.assertEqual(a.read(), b.read())
        self.assertEqual(seen[-1], 100.0)


if __name__ == "__main__":
    unittest.main()
