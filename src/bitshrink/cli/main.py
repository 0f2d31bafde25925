"""Main CLI entry point for bitshrink."""

from __future__ import annotations

import argparse
import binascii
import logging
import os
import sys
from typing import Optional

from .. import __version__
from ..codec.bitmask import decode_bitmask, encode_bitmask
from ..config import MAX_IDENTIFIER_ENV, BitmaskLimits
from ..exceptions import BitshrinkError, InvalidEncodingError
from ..transport.text import decode_from_base64, encode_to_base64


def _parse_ids(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Identifiers must be comma-separated integers: {text}") from e


def _decode_text(text: str, as_hex: bool) -> bytes:
    if not as_hex:
        return decode_from_base64(text)
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(f"Invalid hex input: {e}") from e


def _limits(max_id: Optional[int]) -> Optional[BitmaskLimits]:
    if max_id is not None:
        return BitmaskLimits(max_identifier=max_id)
    if os.getenv(MAX_IDENTIFIER_ENV) is not None:
        return BitmaskLimits.from_env()
    return None


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the bitshrink CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="bitshrink",
        description="bitshrink: Compact bitmask encoding for identifier sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bitshrink --encode 1,3,5               Encode identifiers as base64
  bitshrink --decode AAAABio=            Decode base64 back to identifiers
  bitshrink --encode 1,3,5 --hex         Encode identifiers as hex
  bitshrink --version                    Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--encode",
        metavar="IDS",
        type=_parse_ids,
        help="Comma-separated identifiers to encode",
    )
    action.add_argument(
        "--decode",
        metavar="TEXT",
        type=str,
        help="Encoded bitmask to decode",
    )

    parser.add_argument(
        "--hex",
        action="store_true",
        help="Use hex instead of base64 for encoded data",
    )
    parser.add_argument(
        "--max-id",
        metavar="N",
        type=int,
        help=f"Reject identifiers that are negative or larger than N (default: ${MAX_IDENTIFIER_ENV} if set)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bitshrink {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.encode is not None:
            data = encode_bitmask(args.encode, limits=_limits(args.max_id))
            print(data.hex() if args.hex else encode_to_base64(data))
            return 0

        if args.decode is not None:
            ids = decode_bitmask(_decode_text(args.decode, args.hex))
            print(",".join(str(identifier) for identifier in ids))
            return 0
    except (BitshrinkError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
