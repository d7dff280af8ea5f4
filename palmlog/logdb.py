"""Shared debug-log database: a single file of timestamped, app-tagged records.

Each record is stored as ``[UInt32 seconds][app name NUL][message NUL]``,
with seconds counted from the Palm epoch (1904-01-01, local wall-clock time)
and all integers big-endian.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import BinaryIO, Iterator

LOGDB_NAME = "DebugLog"
LOGDB_TYPE = b"DATA"
LOGDB_CREATOR = b"LgDB"
DEFAULT_PATH = "DebugLog.pdb"

APP_NAME_LIMIT = 31
PALM_EPOCH = datetime(1904, 1, 1)
MAX_SECONDS = 0xFFFFFFFF

_ENCODING = "latin-1"
_HEADER = struct.Struct(">32s4s4s")
_SECONDS = struct.Struct(">I")
_LENGTH = struct.Struct(">I")


@dataclass(frozen=True)
class LogRecord:
    """One log entry."""

    seconds: int
    app: str
    message: str

    @property
    def moment(self) -> datetime:
        """The record's timestamp as a naive local datetime."""
        return from_palm_seconds(self.seconds)


def _encode_text(text: str) -> bytes:
    return text.encode(_ENCODING, errors="replace").replace(b"\0", b"")


def encode_record(record: LogRecord) -> bytes:
    """Serialise a record into its on-disk byte layout."""
    if not 0 <= record.seconds <= MAX_SECONDS:
        raise ValueError(f"seconds out of range: {record.seconds}")
    return (
        _SECONDS.pack(record.seconds)
        + _encode_text(record.app)
        + b"\0"
        + _encode_text(record.message)
        + b"\0"
    )


def decode_record(data: bytes) -> LogRecord:
    """Parse the byte layout written by :func:`encode_record`."""
    if len(data) < _SECONDS.size:
        raise ValueError("record too short to hold a timestamp")
    (seconds,) = _SECONDS.unpack_from(data)
    app, _, rest = data[_SECONDS.size:].partition(b"\0")
    message, _, _ = rest.partition(b"\0")
    return LogRecord(seconds, app.decode(_ENCODING), message.decode(_ENCODING))


def palm_seconds(moment: datetime) -> int:
    """Seconds since 1904-01-01 for a local wall-clock moment."""
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    seconds = int((moment - PALM_EPOCH) // timedelta(seconds=1))
    if not 0 <= seconds <= MAX_SECONDS:
        raise ValueError(f"{moment!r} cannot be expressed as Palm seconds")
    return seconds


def from_palm_seconds(seconds: int) -> datetime:
    """The naive local datetime for a count of Palm seconds."""
    if not 0 <= seconds <= MAX_SECONDS:
        raise ValueError(f"seconds out of range: {seconds}")
    return PALM_EPOCH + timedelta(seconds=seconds)


def _expected_header() -> bytes:
    return _HEADER.pack(LOGDB_NAME.encode(_ENCODING), LOGDB_TYPE, LOGDB_CREATOR)


def _check_header(header: bytes, path: Path) -> None:
    if header != _expected_header():
        raise ValueError(f"{path} is not a debug log database")


class LogDB:
    """Writer for the shared log database, tagging entries with an app name."""

    def __init__(self, path: str | Path, app_name: str) -> None:
        if app_name is None:
            raise ValueError("app_name is required")
        self.path = Path(path)
        self.app_name = _encode_text(app_name)[:APP_NAME_LIMIT].decode(_ENCODING)
        self._file: BinaryIO | None = None
        self._open()

    def _open(self) -> BinaryIO:
        if self._file is not None:
            return self._file
        handle = open(self.path, "a+b")
        try:
            handle.seek(0)
            header = handle.read(_HEADER.size)
            if not header:
                handle.write(_expected_header())
                handle.flush()
            else:
                _check_header(header, self.path)
        except BaseException:
            handle.close()
            raise
        self._file = handle
        return handle

    def log(self, message: str | None, seconds: int | None = None) -> LogRecord:
        """Append one message, timestamped now unless ``seconds`` is given."""
        handle = self._open()
        if seconds is None:
            seconds = palm_seconds(datetime.now())
        record = LogRecord(seconds, self.app_name, "" if message is None else message)
        payload = encode_record(record)
        handle.write(_LENGTH.pack(len(payload)) + payload)
        handle.flush()
        return record

    def clear_all(self) -> None:
        """Remove every record from the database."""
        handle = self._open()
        handle.truncate(_HEADER.size)
        handle.flush()

    def records(self) -> Iterator[LogRecord]:
        """Yield all records in storage order, read through a separate handle."""
        with open(self.path, "rb") as handle:
            _check_header(handle.read(_HEADER.size), self.path)
            while True:
                prefix = handle.read(_LENGTH.size)
                if not prefix:
                    return
                if len(prefix) < _LENGTH.size:
                    raise ValueError("truncated record length")
                (size,) = _LENGTH.unpack(prefix)
                payload = handle.read(size)
                if len(payload) < size:
                    raise ValueError("truncated record")
                yield decode_record(payload)

    def close(self) -> None:
        """Close the database; safe to call repeatedly."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> LogDB:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()