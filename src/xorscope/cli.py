"""Command-line front end for the xorscope exercises.

Usage:
    python -m xorscope.cli b64 49276d206b696c6c...
    python -m xorscope.cli xor 1c0111001f010100061a024b53535009181c
    python -m xorscope.cli crack 1b37373331363f78... --top 5
    python -m xorscope.cli detect ./ciphertexts.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from xorscope.breaker import (
    best_candidate,
    detect_single_byte_xor,
    rank_candidates,
)
from xorscope.codec import InvalidHex, decode_hex, hex_to_base64
from xorscope.fixed_xor import REFERENCE_HEX, fixed_xor
from xorscope.log import configure_logging
from xorscope.settings import load_settings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xorscope")
    p.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default from settings, e.g. DEBUG, INFO)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    b64 = sub.add_parser("b64", help="Re-encode hex as base64")
    b64.add_argument("hex")

    xor = sub.add_parser("xor", help="XOR two hex strings")
    xor.add_argument("hex")
    xor.add_argument(
        "other",
        nargs="?",
        default=REFERENCE_HEX,
        help="Second operand (default: the reference phrase)",
    )

    crack = sub.add_parser("crack", help="Break a single-byte XOR ciphertext")
    crack.add_argument("hex")
    crack.add_argument(
        "--top",
        default=0,
        type=int,
        help="Print the N best candidates instead of the plaintext",
    )
    crack.add_argument(
        "--workers",
        default=None,
        type=int,
        help="Score keys on this many threads (default from settings)",
    )

    detect = sub.add_parser(
        "detect", help="Find the single-byte XOR line in a file of hex lines"
    )
    detect.add_argument("path")
    return p


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        if args.command == "b64":
            print(hex_to_base64(args.hex))
        elif args.command == "xor":
            print(fixed_xor(args.hex, args.other))
        elif args.command == "crack":
            ciphertext = decode_hex(args.hex)
            if args.top > 0:
                for c in rank_candidates(ciphertext, args.top):
                    print(f"{c.key:02x}\t{c.score:.4f}\t{c.text!r}")
            else:
                workers = args.workers or settings.workers
                print(best_candidate(ciphertext, workers=workers).text)
        elif args.command == "detect":
            lines = Path(args.path).read_text(encoding="utf-8").splitlines()
            idx, cand = detect_single_byte_xor(lines)
            print(f"{idx}\t{cand.key:02x}\t{cand.text}")
    except InvalidHex as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
