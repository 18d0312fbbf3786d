"""Command line interface for dxclparser.

Usage::

    dxclparser spot "DX de DJ1TO:      3780.0  OH5Z         LSB      2200Z JO62"
    dxclparser type "WWV de VE7CC <21>:   SFI=70, A=12, K=3, No Storms -> No Storms"
    dxclparser rbn "CW     9 dB  21 WPM  NCDXF B"
    dxclparser file cluster.log
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from dxclparser.errors import ParseError
from dxclparser.feed import clean_line, describe, parse_file
from dxclparser.middleware.logging import log_error, set_log_level
from dxclparser.parser import parse, parse_rbn


def _fail(e: ParseError) -> int:
    print(f"Failed to parse spot ({e.message})", file=sys.stderr)
    return 1


def cmd_spot(args: argparse.Namespace) -> int:
    try:
        spot = parse(clean_line(args.line))
    except ParseError as e:
        return _fail(e)
    print(spot.to_json())
    return 0


def cmd_type(args: argparse.Namespace) -> int:
    try:
        spot = parse(clean_line(args.line))
    except ParseError as e:
        return _fail(e)
    print(describe(spot))
    return 0


def cmd_rbn(args: argparse.Namespace) -> int:
    try:
        rbn = parse_rbn(args.comment.strip())
    except ParseError as e:
        return _fail(e)
    print(rbn.to_json())
    return 0


def cmd_file(args: argparse.Namespace) -> int:
    try:
        for item in parse_file(args.path, encoding=args.encoding):
            if item.spot is not None:
                print(item.spot.to_json())
            elif not args.quiet:
                print(
                    f"Failed to parse spot in line {item.line_no} ({item.error.message})",
                    file=sys.stderr,
                )
    except OSError as e:
        log_error("feed_file_error", path=args.path, error=str(e))
        print(f"Failed to read {args.path}: {e.strerror or e}", file=sys.stderr)
        return 2
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dxclparser",
        description="Parse DX Cluster spots into structured records.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Level of the structured logger (DEBUG, INFO, WARNING, ERROR)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("spot", help="Parse one spot and print it as JSON")
    p.add_argument("line")
    p.set_defaults(func=cmd_spot)

    p = sub.add_parser("type", help="Print the type and spotter of one spot")
    p.add_argument("line")
    p.set_defaults(func=cmd_type)

    p = sub.add_parser("rbn", help="Parse the comment section of an RBN spot")
    p.add_argument("comment")
    p.set_defaults(func=cmd_rbn)

    p = sub.add_parser("file", help="Parse a file of spots, one JSON object per line")
    p.add_argument("path")
    p.add_argument("--encoding", default="utf-8")
    p.add_argument(
        "-q", "--quiet", action="store_true", help="Do not report lines that fail"
    )
    p.set_defaults(func=cmd_file)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
