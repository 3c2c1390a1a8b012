# SPDX-License-Identifier: MIT

import csv
import io
import json

import pendulum
import pytest

from conftest import NOW, local, make_entry
from wellness_log.model.event_type import EventType
from wellness_log.model.filter import DateRange
from wellness_log.service.export import (
    ImportValidationError,
    dumps_envelope,
    get_export_filename,
    get_filtered_export_filename,
    get_json_export_filename,
    parse_import,
    to_envelope,
    to_table,
)

# ---- to_table ----


def test_table_quotes_commas_and_quotes():
    entry = make_entry(EventType.EXERCISE, local(2024, 3, 5, 14, 30), comments='He said, "rest today"')
    lines = to_table([entry]).splitlines()

    assert lines[0] == "Date,Time,Type,Duration,Dosage,Comments"
    assert lines[1] == '3/5/2024,02:30 PM,Exercise,,,"He said, ""rest today"""'


def test_table_round_trips_detail_fields():
    entries = [
        make_entry(EventType.SVT_EPISODE, local(2024, 3, 5, 9, 0), duration="3 minutes", comments="a, b"),
        make_entry(EventType.MEDICATION, local(2024, 3, 4, 9, 0), dosage="1/2 tablet"),
    ]
    rows = list(csv.reader(io.StringIO(to_table(entries))))

    # oldest first
    assert rows[1][2:] == ["Medication", "", "1/2 tablet", ""]
    assert rows[2][2:] == ["SVT Episode", "3 minutes", "", "a, b"]


def test_table_of_empty_collection_has_header_only():
    assert to_table([]) == "Date,Time,Type,Duration,Dosage,Comments\n"


# ---- envelope ----


def test_envelope_fields():
    entry = make_entry(EventType.EXERCISE, local(2024, 3, 5, 14, 30))
    envelope = to_envelope([entry], NOW)

    assert envelope["version"] == "1.1.0"
    assert envelope["source"] == "cli"
    assert envelope["totalEntries"] == 1
    assert envelope["exportedAt"] == NOW.in_tz("UTC").isoformat()
    assert envelope["entries"][0]["id"] == entry["id"]
    assert envelope["entries"][0]["timestamp"] == entry["timestamp"].in_tz("UTC").isoformat()


def test_envelope_imports_back():
    entries = [
        make_entry(EventType.SVT_EPISODE, local(2024, 3, 5, 9, 0), duration="3 minutes"),
        make_entry(EventType.EXERCISE, local(2024, 3, 6, 9, 0), comments="ünïcode"),
    ]
    imported = parse_import(dumps_envelope(entries, NOW))

    assert [entry["id"] for entry in imported] == [entry["id"] for entry in entries]
    assert imported[0]["timestamp"] == entries[0]["timestamp"]
    assert imported[0]["details"] == {"duration": "3 minutes"}
    assert imported[1]["details"] == {"comments": "ünïcode"}


# ---- parse_import ----


def test_import_accepts_bare_list():
    raw = [
        {
            "id": "abc",
            "type": "Medication",
            "timestamp": "2024-03-05T09:00:00+00:00",
            "details": {"dosage": "1 tablet"},
        }
    ]
    imported = parse_import(json.dumps(raw))

    assert imported[0]["type"] == "Medication"
    assert imported[0]["timestamp"] == pendulum.datetime(2024, 3, 5, 9, 0, tz="UTC")


def test_import_rejects_object_without_entries():
    with pytest.raises(ImportValidationError, match="Expected a list of entries"):
        parse_import('{"foo": "bar"}')


def test_import_rejects_invalid_json():
    with pytest.raises(ImportValidationError, match="Invalid JSON"):
        parse_import("{not json")


@pytest.mark.parametrize(
    "raw_entry",
    [
        "just a string",
        {"type": "Exercise", "timestamp": "2024-03-05T09:00:00Z", "details": {}},
        {"id": "a", "type": "", "timestamp": "2024-03-05T09:00:00Z", "details": {}},
        {"id": "a", "type": "Exercise", "timestamp": "2024-03-05T09:00:00Z", "details": []},
        {"id": "a", "type": "Exercise", "timestamp": "yesterday", "details": {}},
        {"id": "a", "type": "Yoga", "timestamp": "2024-03-05T09:00:00Z", "details": {}},
    ],
)
def test_import_rejects_invalid_entries(raw_entry):
    with pytest.raises(ImportValidationError):
        parse_import(json.dumps([raw_entry]))


def test_import_rejects_duplicate_ids():
    raw_entry = {"id": "a", "type": "Exercise", "timestamp": "2024-03-05T09:00:00Z", "details": {}}
    with pytest.raises(ImportValidationError, match="Duplicate entry id"):
        parse_import(json.dumps([raw_entry, raw_entry]))


# ---- filenames ----


def test_export_filename_spans_first_to_last_day():
    entries = [
        make_entry(EventType.EXERCISE, local(2024, 3, 5, 9, 0)),
        make_entry(EventType.EXERCISE, local(2024, 1, 2, 9, 0)),
    ]
    assert get_export_filename(entries) == "wellness_log_2024-01-02_to_2024-03-05.csv"


def test_filtered_export_filename():
    spec = {"type": EventType.EXERCISE, "date_range": DateRange.THIS_MONTH}
    filename = get_filtered_export_filename(spec, pendulum.date(2024, 3, 15))
    assert filename == "wellness_log_filtered_exercise_thisMonth_2024-03-15.csv"


def test_json_export_filename():
    assert get_json_export_filename(pendulum.date(2024, 3, 15)) == "wellness_log_2024-03-15.json"


def test_import_rejects_bytes_that_are_not_utf8():
    with pytest.raises(ImportValidationError, match="UTF-8"):
        parse_import(b"\xff\xfe[not utf8")


def test_import_accepts_utf8_bytes():
    raw = [
        {
            "id": "a",
            "type": "Exercise",
            "timestamp": "2024-03-05T09:00:00Z",
            "details": {"comments": "café"},
        }
    ]
    imported = parse_import(json.dumps(raw, ensure_ascii=False).encode("utf-8"))
    assert imported[0]["details"] == {"comments": "café"}
