# ==================================================
# pwned_store/cli.py
# ==================================================
"""
pwned-store  optimize INPUT OUTPUT   – text corpus → 24‑byte binary records
pwned-store  check BINARY PASSWORD   – is PASSWORD's SHA‑1 in BINARY?
pwned-store  verify BINARY           – offline ordering check
"""
from __future__ import annotations
import argparse, logging, sys, time

from . import const
from .converter import convert_file
from .digest    import parse_digest, password_digest
from .errors    import PwnedStoreError
from .hexcodec  import encode_hex
from .store     import PwnedHashFile
from .verify    import verify_sorted

logger = logging.getLogger("pwned_store")

# ── small utils ──────────────────────────────────────────────
def print_progress(records: int, percent: float | None):
    if percent is None:
        print(f"{records:>14,d} records", end="\r", flush=True)
    else:
        print(f"{percent:6.2f}%", end="\r", flush=True)

# ── commands ─────────────────────────────────────────────────
def cmd_optimize(args) -> int:
    t0 = time.perf_counter()
    n  = convert_file(args.input, args.output,
                      progress=None if args.quiet else print_progress)
    if not args.quiet:
        print()
    print(f"Wrote {n:,d} records to {args.output} in {time.perf_counter() - t0:.2f}s")
    return 0

def cmd_check(args) -> int:
    digest = parse_digest(args.password) if args.sha1 else password_digest(args.password)
    with PwnedHashFile(args.input, use_mmap=args.mmap) as store:
        t0 = time.perf_counter()
        count = store.count(digest)
        elapsed = time.perf_counter() - t0
    logger.debug("digest %s", encode_hex(digest))
    print(f"Password exists = {count is not None}, elapsed = {elapsed * 1e6:.1f} µs")
    if count is not None:
        print(f"Occurrences = {count:,d}")
    return 0

def cmd_verify(args) -> int:
    bad = verify_sorted(args.input)
    if bad is None:
        print(f"{args.input}: sorted")
        return 0
    print(f"{args.input}: record {bad} is out of order")
    return 1

# ── entry point ──────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    p  = argparse.ArgumentParser(prog="pwned-store",
                                 description="Compact binary lookups over sorted SHA-1 hash lists")
    sp = p.add_subparsers(dest="cmd", required=True)

    p_opt = sp.add_parser("optimize", help="convert a 63-byte-line text corpus (optionally .zst)")
    p_opt.add_argument("input")
    p_opt.add_argument("output")
    p_opt.add_argument("-q", "--quiet", action="store_true", help="no progress display")
    p_opt.set_defaults(func=cmd_optimize)

    p_chk = sp.add_parser("check", help="look up a password in a binary file")
    p_chk.add_argument("input")
    p_chk.add_argument("password")
    p_chk.add_argument("--sha1", action="store_true", help="PASSWORD is already a hex SHA-1")
    p_chk.add_argument("--mmap", action="store_true", help="probe through mmap")
    p_chk.set_defaults(func=cmd_check)

    p_ver = sp.add_parser("verify", help="check that a binary file is strictly sorted")
    p_ver.add_argument("input")
    p_ver.set_defaults(func=cmd_verify)
    return p

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, const.LOG_LEVEL, logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (PwnedStoreError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
