# ==================================================
# examples/build_sample.py
# ==================================================
import argparse, hashlib, random

from pwned_store.const import LINE_WIDTH


def format_line(digest: bytes, count: int) -> bytes:
    """One corpus line: uppercase hex, ':', count, space padding, CRLF."""
    body = f"{digest.hex().upper()}:{count}".encode("ascii")
    return body.ljust(LINE_WIDTH - 2) + b"\r\n"


def sample_lines(count: int, seed: int = 0) -> list[bytes]:
    rng = random.Random(seed)
    digests = sorted({hashlib.sha1(f"pw{rng.random()}".encode()).digest()
                      for _ in range(count)})
    return [format_line(d, rng.randint(1, 10_000_000)) for d in digests]


def main():
    p = argparse.ArgumentParser()
    p.add_argument("output", help="path of the text corpus to write")
    p.add_argument("count", type=int)
    p.add_argument("--seed", type=int, default=0)
    args = p.parse_args()

    with open(args.output, "wb") as f:
        f.writelines(sample_lines(args.count, args.seed))

if __name__ == "__main__":
    main()
