#!/usr/bin/env python3
"""Convert dates between the Gregorian and Hijri calendars.

Examples::

    python src/main.py 2023-08-20
    python src/main.py --to gregorian --format DD/MM/YYYY 04/02/1445
    python src/main.py --check 2023-08-20
    python src/main.py --csv orders.csv --column created --output out.csv
    python src/main.py            # interactive prompt

"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from hijri_convert.logging_setup import get_logger, setup_logging
from hijri_convert.utils import date_utils
from hijri_convert.utils.frame_utils import convert_date_column

logger = get_logger("main")

LOG_FILE_ENV = "HIJRI_CONVERT_LOG_FILE"

_DIRECTIONS = {
    "hijri": ("gregorian_to_hijri", date_utils.convert_gregorian_to_hijri),
    "gregorian": ("hijri_to_gregorian", date_utils.convert_hijri_to_gregorian),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gregorian ⇄ Hijri date converter")
    parser.add_argument("dates", nargs="*", help="Date strings to convert")
    parser.add_argument(
        "--to",
        choices=sorted(_DIRECTIONS),
        default="hijri",
        help="Target calendar (default: hijri, i.e. input is Gregorian)",
    )
    parser.add_argument(
        "--format",
        dest="fmt",
        default=date_utils.DEFAULT_FORMAT,
        help="Input pattern; Y/M/D mark digit positions (default: YYYY-MM-DD)",
    )
    parser.add_argument("--check", metavar="DATE", help="Round-trip a Gregorian date and print all three values")
    parser.add_argument("--csv", type=Path, help="CSV file to batch convert")
    parser.add_argument("--column", help="Column of --csv holding the dates")
    parser.add_argument("--output", type=Path, help="Where to write the converted CSV (default: stdout)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=os.getenv(LOG_FILE_ENV),
        help=f"Optional rotating log file (default: ${LOG_FILE_ENV})",
    )
    return parser


def convert_one(text: str, target: str, fmt: str) -> tuple[bool, str]:
    _, convert = _DIRECTIONS[target]
    res = convert(text, fmt)
    if res["kind"] == "exact":
        return True, res["date"]
    return False, f"{res['kind']}: {res['reason']}"


def run_csv(path: Path, column: str, target: str, fmt: str, output: Optional[Path]) -> int:
    direction, _ = _DIRECTIONS[target]
    # Keep every cell as text so leading zeros survive.
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    if column not in df.columns:
        print(f"Column {column!r} not found in {path}", file=sys.stderr)
        return 1
    out = convert_date_column(df, column, direction=direction, fmt=fmt)
    if output:
        out.to_csv(output, index=False)
        logger.info("Wrote %s rows to %s", len(out), output)
    else:
        out.to_csv(sys.stdout, index=False)
    return 0


def interactive(target: str, fmt: str) -> int:
    while True:
        try:
            text = input("\nDate> ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return 0
        if not text:
            continue
        ok, out = convert_one(text, target, fmt)
        print(out if ok else f"💥 {out}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=getattr(logging, args.log_level),
        console=True,
        log_file=args.log_file,
    )

    if args.csv is not None:
        if not args.column:
            parser.error("--csv requires --column")
        if not args.csv.is_file():
            parser.error(f"{args.csv} does not exist")
        return run_csv(args.csv, args.column, args.to, args.fmt, args.output)

    if args.check:
        res = date_utils.test_conversion(args.check)
        print(f"Gregorian: {res['gregorian']}")
        print(f"Hijri: {res['hijri']}")
        print(f"Back to Gregorian: {res['backToGregorian']}")
        return 0 if res["gregorian"] == res["backToGregorian"] else 1

    if not args.dates:
        return interactive(args.to, args.fmt)

    status = 0
    for text in args.dates:
        ok, out = convert_one(text, args.to, args.fmt)
        if ok:
            print(f"{text} -> {out}")
        else:
            print(f"{text} -> {out}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
