"""
Command line driver for the safe dial.

Run:
    safe-dial input.txt
    python -m safe_dial input.txt --start 50 --quiet

The starting position can also be set with the SAFE_DIAL_START
environment variable.
"""

import argparse
import os
import sys

from .dial import DEFAULT_POSITION, DIAL_SIZE
from .runner import LineError, Tally, read_lines, run

START_ENV = "SAFE_DIAL_START"


def dial_position(value: str) -> int:
    try:
        position = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if not 0 <= position < DIAL_SIZE:
        raise argparse.ArgumentTypeError(
            f"must be between 0 and {DIAL_SIZE - 1}, got {position}"
        )
    return position


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="safe-dial",
        description="Turn a 0-99 safe dial through a list of L/R rotations and count zeros.",
    )
    parser.add_argument("input", help="File with one rotation per line, e.g. L68 or R14")
    parser.add_argument(
        "--start",
        type=dial_position,
        default=os.environ.get(START_ENV, str(DEFAULT_POSITION)),
        help=f"Starting position (default: ${START_ENV} or {DEFAULT_POSITION})",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Warn about unparsable lines and keep going instead of stopping",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the totals")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    totals = Tally()

    try:
        for report in run(read_lines(args.input), start=args.start, skip_invalid=args.skip_invalid):
            totals.add(report)
            if not args.quiet:
                print(report.describe())
    except LineError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[ERROR] Failed to read {args.input}: {exc}", file=sys.stderr)
        return 1

    print(f"Zero-stopping count was {totals.zero_stops}")
    print(f"Zero-crossing count was {totals.zero_crossings}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
