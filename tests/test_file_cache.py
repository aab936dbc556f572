"""Tests for the file-based daily record cache."""

import json
from datetime import date, timedelta

import pytest

from otd.adapters.file_cache import FileRecordCache
from otd.core.record import Birthday, Event, Record


@pytest.fixture
def today():
    return date(2025, 3, 14)


@pytest.fixture
def record():
    return Record(
        date="March 14",
        events=[Event("1879", "Einstein born")],
        birthdays=[Birthday("Albert Einstein", "b. 1879")],
    )


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "otd-cli"


@pytest.fixture
def cache(cache_dir, today):
    return FileRecordCache(cache_dir, today=lambda: today)


class TestRead:
    def test_miss_when_no_file(self, cache):
        assert cache.read() is None

    def test_creates_directory(self, cache, cache_dir):
        cache.read()
        assert cache_dir.is_dir()

    def test_miss_on_corrupt_json(self, cache, cache_dir):
        cache_dir.mkdir(parents=True)
        (cache_dir / "today.json").write_text("{not json")
        assert cache.read() is None

    def test_miss_on_wrong_shape(self, cache, cache_dir):
        cache_dir.mkdir(parents=True)
        (cache_dir / "today.json").write_text(json.dumps(["2025-03-14"]))
        assert cache.read() is None

    def test_miss_on_missing_data(self, cache, cache_dir):
        cache_dir.mkdir(parents=True)
        (cache_dir / "today.json").write_text(json.dumps({"Date": "2025-03-14"}))
        assert cache.read() is None

    def test_miss_on_binary_garbage(self, cache, cache_dir):
        cache_dir.mkdir(parents=True)
        (cache_dir / "today.json").write_bytes(b"\xff\xfe\x00garbage")
        assert cache.read() is None

    def test_miss_on_deeply_nested_json(self, cache, cache_dir):
        cache_dir.mkdir(parents=True)
        (cache_dir / "today.json").write_text("[" * 100000 + "]" * 100000)
        assert cache.read() is None

    def test_miss_when_cache_dir_is_a_file(self, tmp_path, today):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        cache = FileRecordCache(blocker / "otd-cli", today=lambda: today)
        assert cache.read() is None

    def test_reads_entry_written_by_hand(self, cache, cache_dir, record):
        cache_dir.mkdir(parents=True)
        (cache_dir / "today.json").write_text(
            json.dumps({"Date": "2025-03-14", "Data": record.to_dict()})
        )
        assert cache.read() == record


class TestWrite:
    def test_round_trip_same_day(self, cache, record):
        cache.write(record)
        assert cache.read() == record

    def test_file_layout(self, cache, cache_dir, record):
        cache.write(record)
        entry = json.loads((cache_dir / "today.json").read_text())
        assert entry["Date"] == "2025-03-14"
        assert entry["Data"]["Date"] == "March 14"
        assert entry["Data"]["Events"] == [{"Year": "1879", "Text": "Einstein born"}]
        assert entry["Data"]["Birthdays"] == [{"Name": "Albert Einstein", "Year": "b. 1879"}]

    def test_next_day_is_a_miss(self, cache_dir, today, record):
        FileRecordCache(cache_dir, today=lambda: today).write(record)
        tomorrow = FileRecordCache(cache_dir, today=lambda: today + timedelta(days=1))
        assert tomorrow.read() is None

    def test_previous_day_is_a_miss(self, cache_dir, today, record):
        FileRecordCache(cache_dir, today=lambda: today).write(record)
        yesterday = FileRecordCache(cache_dir, today=lambda: today - timedelta(days=1))
        assert yesterday.read() is None

    def test_overwrites_single_slot(self, cache, cache_dir, record):
        cache.write(record)
        newer = Record(date="March 14", events=[Event("2000", "Something else")])
        cache.write(newer)

        assert cache.read() == newer
        assert [p.name for p in cache_dir.iterdir()] == ["today.json"]

    def test_write_failure_is_swallowed(self, tmp_path, today, record):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        cache = FileRecordCache(blocker / "otd-cli", today=lambda: today)

        cache.write(record)  # no exception

        assert blocker.read_text() == ""

    def test_unicode_survives(self, cache):
        record = Record(date="14 mars", events=[Event("1879", "Naissance d’Einstein – Ulm")])
        cache.write(record)
        assert cache.read() == record
