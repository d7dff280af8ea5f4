# palmlog

A small shared debug log. Several applications append timestamped
messages to one log file. A viewer lists them newest first. You can
narrow the list to one application and to a time window.

Each record holds three things:

- a timestamp, counted in seconds since 1904-01-01 in local wall-clock time,
- the name of the application that wrote it,
- the message.

A record is encoded as the timestamp in four big-endian bytes. The
application name follows, ending in a NUL byte. The message comes last,
also ending in a NUL byte. Text is stored as Latin-1, and NUL characters
are dropped. The log file starts with a fixed header. After the header,
each record is stored with a four-byte length in front of it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Both commands use `DebugLog.pdb` in the current directory unless `--db`
names another file. Run either command with `--help` to see its options.

### `palmlog-test`

This command writes `Button Clicked` entries under the application name
`LogTestApp`. Each entry rings the terminal bell.

- `--db FILE` sets the log file. The file is created if it is missing.
- `--count N` sets the number of entries to write. The default is 1.

### `palmlog-view`

This command prints the log newest first, one line per record:

```
YYYY-MM-DD hh:mm - App - Message
```

- `--db FILE` sets the log file. A missing file prints nothing.
- `--app NAME` shows only entries from that application. `All` shows every
  entry.
- `--time WINDOW` sets the time window. The choices are `all` (the default),
  `last-hour`, `last-24h`, `last-7d` and `today`.
- `--clear` removes all entries before anything is shown.
- `--list-apps` prints `All` and then each application name once, instead of
  printing the entries.

Both commands exit with status 1 when the file cannot be read or written.
They also exit with status 1 when the file is not a debug log.

## Library use

```python
from datetime import datetime

from palmlog.logdb import LogDB, palm_seconds
from palmlog.viewer import TimeFilter, app_choices, render, select_records

with LogDB("debuglog.db", "MyApp") as db:
    db.log("Started")
    records = list(db.records())

print(app_choices(records))          # ["All", "MyApp"]
now = palm_seconds(datetime.now())
chosen = select_records(records, "MyApp", TimeFilter.LAST_HOUR, now)
print(render(chosen), end="")
```

### `palmlog.logdb`

- `LogRecord` is a frozen dataclass with `seconds`, `app` and `message`.
  Its `moment` property gives the timestamp as a naive `datetime`.
- `LogDB(path, app_name)` opens the log file. It creates the file if it is
  missing, and raises `ValueError` if the file has a foreign header. The
  application name is cut to 31 characters.
  - `log(message, seconds=None)` appends a record and returns it. Without
    `seconds`, the current time is used. A message of `None` is stored as
    an empty string.
  - `records()` yields every record in storage order.
  - `clear_all()` removes every record.
  - `close()` closes the file. It is safe to call more than once.
    `LogDB` also works as a context manager.
- `encode_record(record)` and `decode_record(data)` convert a record to and
  from its byte layout.
- `palm_seconds(moment)` converts a `datetime` into the 1904-based seconds
  count. An aware `datetime` is converted to local time first.
  `from_palm_seconds(seconds)` converts the count back. Both raise
  `ValueError` for values that do not fit in an unsigned 32-bit count.

### `palmlog.viewer`

- `TimeFilter` is an `IntEnum` with the members `ALL`, `LAST_HOUR`,
  `LAST_24H`, `LAST_7D` and `TODAY`.
- `format_datetime(seconds)` formats a timestamp as `YYYY-MM-DD hh:mm`.
- `passes_time_filter(time_filter, now_seconds, record_seconds)` tells
  whether a record falls inside a time window.
  - Records dated after "now" fail the last-hour, last-24h and last-7d
    windows.
  - `TODAY` compares calendar dates only.
  - Unknown filter values let every record through.
- `app_choices(records)` returns `"All"` followed by the distinct
  application names in first-seen order. At most 32 names are listed.
- `select_records(records, app=None, time_filter=TimeFilter.ALL,
  now_seconds=None)` applies both filters and sorts the result newest
  first. Records with equal timestamps keep their storage order.
- `render(records)` produces the text the viewer prints.

## What it does not do

The viewer prints plain text and exits. It has no interactive screen,
scrolling or pickers. Timestamps are naive local times, so the log records
no time zone. Access to the log file is not locked.