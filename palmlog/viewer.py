"""Viewer for the shared debug log: filter by app and time, newest first."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Iterable

from palmlog.logdb import DEFAULT_PATH, LogDB, LogRecord, from_palm_seconds, palm_seconds

APP_NAME = "LogViewerApp"
CREATOR = "LVwr"
ALL_APPS = "All"
MAX_APPS = 32


class TimeFilter(IntEnum):
    """Time windows offered by the viewer, in list order."""

    ALL = 0
    LAST_HOUR = 1
    LAST_24H = 2
    LAST_7D = 3
    TODAY = 4

    @property
    def option(self) -> str:
        """The command-line spelling of this filter."""
        return self.name.lower().replace("_", "-")


_WINDOWS = {
    TimeFilter.LAST_HOUR: 60 * 60,
    TimeFilter.LAST_24H: 24 * 60 * 60,
    TimeFilter.LAST_7D: 7 * 24 * 60 * 60,
}


def format_datetime(seconds: int) -> str:
    """Format Palm seconds as ``YYYY-MM-DD hh:mm``."""
    return from_palm_seconds(seconds).strftime("%Y-%m-%d %H:%M")


def passes_time_filter(time_filter: int, now_seconds: int, record_seconds: int) -> bool:
    """Whether a record timestamp falls inside the chosen time window.

    Unknown filter values let every record through.
    """
    try:
        chosen = TimeFilter(time_filter)
    except ValueError:
        return True
    if chosen is TimeFilter.ALL:
        return True
    if chosen is TimeFilter.TODAY:
        now = from_palm_seconds(now_seconds)
        rec = from_palm_seconds(record_seconds)
        return now.date() == rec.date()
    if now_seconds < record_seconds:
        return False
    return now_seconds - record_seconds <= _WINDOWS[chosen]


def app_choices(records: Iterable[LogRecord]) -> list[str]:
    """``"All"`` followed by distinct app names in first-seen order, at most 32."""
    names: list[str] = []
    seen: set[str] = set()
    for record in records:
        if record.app in seen or len(names) >= MAX_APPS:
            continue
        seen.add(record.app)
        names.append(record.app)
    return [ALL_APPS, *names]


def select_records(
    records: Iterable[LogRecord],
    app: str | None = None,
    time_filter: int = TimeFilter.ALL,
    now_seconds: int | None = None,
) -> list[LogRecord]:
    """Records matching the app (``None`` for all) and time filter, newest first.

    Records with equal timestamps keep their storage order.
    """
    if now_seconds is None:
        now_seconds = palm_seconds(datetime.now())
    chosen = [
        record
        for record in records
        if (app is None or record.app == app)
        and passes_time_filter(time_filter, now_seconds, record.seconds)
    ]
    return sorted(chosen, key=lambda record: record.seconds, reverse=True)


def render(records: Iterable[LogRecord]) -> str:
    """One ``YYYY-MM-DD hh:mm - App - Message`` line per record."""
    return "".join(
        f"{format_datetime(record.seconds)} - {record.app} - {record.message}\n"
        for record in records
    )


def _read_records(path: Path) -> list[LogRecord]:
    if not path.exists():
        return []
    with LogDB(path, "") as db:
        return list(db.records())


def main(argv: list[str] | None = None) -> int:
    """Print the filtered log; return an exit status."""
    filters = {choice.option: choice for choice in TimeFilter}
    parser = argparse.ArgumentParser(
        prog="palmlog-view", description="Show entries from the debug log."
    )
    parser.add_argument("--db", default=DEFAULT_PATH, help="log database file")
    parser.add_argument("--app", help="show only entries from this app")
    parser.add_argument(
        "--time", choices=list(filters), default=TimeFilter.ALL.option,
        help="time window to show",
    )
    parser.add_argument("--clear", action="store_true", help="remove all entries first")
    parser.add_argument(
        "--list-apps", action="store_true", help="list app names instead of entries"
    )
    args = parser.parse_args(argv)

    path = Path(args.db)
    try:
        if args.clear:
            with LogDB(path, "") as db:
                db.clear_all()
        records = _read_records(path)
    except (OSError, ValueError) as error:
        print(f"{APP_NAME}: {error}", file=sys.stderr)
        return 1

    if args.list_apps:
        for name in app_choices(records):
            print(name)
        return 0

    app = None if args.app in (None, ALL_APPS) else args.app
    selected = select_records(records, app, filters[args.time])
    print(render(selected), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())