"""Command-line front end: split a secret into hex shares, or combine them back."""

from __future__ import annotations

import argparse
import binascii
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import load_sharing_config
from .crypto.shamir import combine, split
from .errors import SharingError
from .models.share import Share
from .utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shamir secret sharing over GF(2^8)")
    parser.add_argument("--config", type=Path, default=None, help="JSON file with split defaults")
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    split_parser = sub.add_parser("split", help="Split a secret into hex shares, one per line")
    split_parser.add_argument("--shares", type=int, default=None, help="Number of shares to produce")
    split_parser.add_argument("--threshold", type=int, default=None, help="Shares needed to reconstruct")
    split_parser.add_argument(
        "--secret-hex",
        type=str,
        default=None,
        help="Secret as hex (default: read UTF-8 text from stdin)",
    )

    combine_parser = sub.add_parser("combine", help="Combine hex shares and print the secret as hex")
    combine_parser.add_argument("shares", nargs="+", help="Hex-encoded shares")
    return parser


def _read_secret(secret_hex: Optional[str]) -> bytes:
    if secret_hex is None:
        return sys.stdin.read().rstrip("\n").encode("utf-8")
    try:
        return binascii.unhexlify(secret_hex.strip())
    except (binascii.Error, ValueError) as exc:
        raise SharingError(f"secret is not valid hex: {exc}") from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config = load_sharing_config(args.config)
        configure_logging(level=args.log_level or config.log_level, json_output=config.json_logs)

        if args.command == "split":
            share_count = args.shares if args.shares is not None else config.share_count
            threshold = args.threshold if args.threshold is not None else config.threshold
            shares = split(_read_secret(args.secret_hex), share_count, threshold)
            logger.info("Produced %d shares, threshold %d", share_count, threshold)
            for share in shares:
                print(share.hex())
        else:
            share_list: List[Share] = [Share.from_hex(value) for value in args.shares]
            print(combine(share_list).hex())
    except SharingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
