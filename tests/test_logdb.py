from datetime import datetime

import pytest

from palmlog.logdb import (
    APP_NAME_LIMIT,
    LogDB,
    LogRecord,
    decode_record,
    encode_record,
    from_palm_seconds,
    palm_seconds,
)


def test_encode_record_layout():
    assert encode_record(LogRecord(1, "A", "B")) == b"\x00\x00\x00\x01A\x00B\x00"


def test_encode_decode_round_trip():
    record = LogRecord(3_000_000_000, "HelloPalm", "MainSubmitButton Clicked")
    assert decode_record(encode_record(record)) == record


def test_decode_short_data_raises():
    with pytest.raises(ValueError):
        decode_record(b"\x00\x01")


def test_decode_missing_terminators():
    record = decode_record(b"\x00\x00\x00\x05App")
    assert record == LogRecord(5, "App", "")


def test_encode_rejects_negative_seconds():
    with pytest.raises(ValueError):
        encode_record(LogRecord(-1, "a", "b"))


def test_palm_epoch_is_zero():
    assert palm_seconds(datetime(1904, 1, 1)) == 0


def test_palm_seconds_round_trip():
    moment = datetime(2003, 7, 14, 9, 30, 15)
    assert from_palm_seconds(palm_seconds(moment)) == moment


def test_palm_seconds_before_epoch_raises():
    with pytest.raises(ValueError):
        palm_seconds(datetime(1900, 1, 1))


def test_log_and_read_back(tmp_path):
    path = tmp_path / "log.pdb"
    with LogDB(path, "LogTestApp") as db:
        first = db.log("Button Clicked", seconds=100)
        db.log("Second", seconds=200)
        records = list(db.records())
    assert records[0] == first
    assert [r.message for r in records] == ["Button Clicked", "Second"]
    assert all(r.app == "LogTestApp" for r in records)


def test_none_message_logs_empty(tmp_path):
    with LogDB(tmp_path / "log.pdb", "App") as db:
        db.log(None, seconds=1)
        assert [r.message for r in db.records()] == [""]


def test_default_timestamp_is_now(tmp_path):
    before = palm_seconds(datetime.now())
    with LogDB(tmp_path / "log.pdb", "App") as db:
        record = db.log("x")
    after = palm_seconds(datetime.now())
    assert before <= record.seconds <= after


def test_app_name_is_truncated(tmp_path):
    with LogDB(tmp_path / "log.pdb", "N" * 50) as db:
        assert len(db.app_name) == APP_NAME_LIMIT
        record = db.log("m", seconds=1)
    assert record.app == "N" * APP_NAME_LIMIT


def test_app_name_none_raises(tmp_path):
    with pytest.raises(ValueError):
        LogDB(tmp_path / "log.pdb", None)


def test_clear_all_removes_records(tmp_path):
    with LogDB(tmp_path / "log.pdb", "App") as db:
        for n in range(5):
            db.log(f"m{n}", seconds=n)
        db.clear_all()
        assert list(db.records()) == []
        db.log("after", seconds=9)
        assert [r.message for r in db.records()] == ["after"]


def test_records_persist_across_instances(tmp_path):
    path = tmp_path / "log.pdb"
    with LogDB(path, "One") as db:
        db.log("from one", seconds=10)
    with LogDB(path, "Two") as db:
        db.log("from two", seconds=20)
        apps = [r.app for r in db.records()]
    assert apps == ["One", "Two"]


def test_log_after_close_reopens(tmp_path):
    db = LogDB(tmp_path / "log.pdb", "App")
    db.close()
    db.close()
    db.log("again", seconds=3)
    db.close()
    assert [r.message for r in db.records()] == ["again"]


def test_foreign_file_rejected(tmp_path):
    path = tmp_path / "other.bin"
    path.write_bytes(b"not a log database at all, definitely not" * 2)
    with pytest.raises(ValueError):
        LogDB(path, "App")


def test_truncated_record_raises(tmp_path):
    path = tmp_path / "log.pdb"
    with LogDB(path, "App") as db:
        db.log("complete", seconds=1)
    data = path.read_bytes()
    path.write_bytes(data[:-3])
    with LogDB(path, "App") as db:
        with pytest.raises(ValueError):
            list(db.records())


def test_record_moment_property():
    moment = datetime(2024, 2, 29, 23, 59)
    assert LogRecord(palm_seconds(moment), "a", "b").moment == moment