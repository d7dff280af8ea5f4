"""Test client that writes "Button Clicked" entries into the shared log."""

from __future__ import annotations

import argparse
import sys

from palmlog.logdb import DEFAULT_PATH, LogDB

APP_NAME = "LogTestApp"
CREATOR = "LTst"
CLICK_MESSAGE = "Button Clicked"


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("count must not be negative")
    return value


def main(argv: list[str] | None = None) -> int:
    """Log one entry per simulated button press; return an exit status."""
    parser = argparse.ArgumentParser(
        prog="palmlog-test", description="Write test entries to the debug log."
    )
    parser.add_argument("--db", default=DEFAULT_PATH, help="log database file")
    parser.add_argument(
        "--count", type=_count, default=1, help="number of button presses"
    )
    args = parser.parse_args(argv)

    try:
        with LogDB(args.db, APP_NAME) as db:
            for _ in range(args.count):
                db.log(CLICK_MESSAGE)
                print("\a", end="", flush=True)
    except (OSError, ValueError) as error:
        print(f"{APP_NAME}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())