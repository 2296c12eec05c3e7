"""Main CLI entry point for byteio."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .. import __version__
from ..cli.commands import decode_command, encode_command, types_command
from ..exceptions import ByteIOError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the byteio CLI."""
    parser = argparse.ArgumentParser(
        prog="byteio",
        description="byteio: fixed-width binary number codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  byteio decode u32 "00 00 01 01"          Decode big-endian u32
  byteio decode u16[] 34127856 --order le  Decode a little-endian u16 list
  byteio encode i16 -2 --order le          Encode a value, print hex
  byteio types                             List codec names
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"byteio {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes to a value")
    decode_parser.add_argument("type", help="Codec name, e.g. u32, f64, u16[]")
    decode_parser.add_argument("hex", help="Hex bytes (whitespace allowed)")
    decode_parser.add_argument(
        "--order", choices=["be", "le"], default="be", help="Byte order (default: be)"
    )
    decode_parser.add_argument(
        "--offset", type=int, default=0, help="Byte offset to start decoding at"
    )

    encode_parser = subparsers.add_parser("encode", help="Encode values to hex bytes")
    encode_parser.add_argument("type", help="Codec name, e.g. u32, f64, u16[]")
    encode_parser.add_argument("values", nargs="*", metavar="VALUE", help="Value(s) to encode")
    encode_parser.add_argument(
        "--order", choices=["be", "le"], default="be", help="Byte order (default: be)"
    )

    subparsers.add_parser("types", help="List available codec names")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the byteio CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "decode":
            print(decode_command(args.type, args.hex, args.order, args.offset))
            return 0

        if args.command == "encode":
            print(encode_command(args.type, args.values, args.order))
            return 0

        if args.command == "types":
            print(types_command())
            return 0
    except (ByteIOError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
