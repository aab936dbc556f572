"""Tests for the shared workflow layer."""

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from otd.adapters.file_cache import FileRecordCache
from otd.adapters.wikipedia import StatusError, TransportError
from otd.config import Config
from otd.core.record import Birthday, Event, Record
from otd.workflows import get_cache, get_record

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def config(tmp_path):
    return Config(cache_dir=tmp_path / "cache")


@pytest.fixture
def cache(config):
    return FileRecordCache(config.cache_dir, today=lambda: date(2025, 3, 14))


@pytest.fixture
def source():
    source = MagicMock()
    source.fetch.return_value = (FIXTURES / "today.html").read_text(encoding="utf-8")
    return source


class TestGetCache:
    def test_uses_configured_dir(self, config):
        assert get_cache(config).cache_dir == config.cache_dir


class TestGetRecord:
    def test_fetches_and_extracts_on_miss(self, config, cache, source):
        record = get_record(config, cache=cache, source=source)

        source.fetch.assert_called_once()
        assert record.date == "March 14"
        assert record.events[0] == Event(
            "1489", "Catherine Cornaro, the queen of Cyprus, sold her kingdom to Venice."
        )
        assert Birthday("Albert Einstein", "b. 1879") in record.birthdays

    def test_writes_result_to_cache(self, config, cache, source):
        record = get_record(config, cache=cache, source=source)
        assert cache.read() == record

    def test_second_call_served_from_cache(self, config, cache, source):
        first = get_record(config, cache=cache, source=source)
        second = get_record(config, cache=cache, source=source)

        source.fetch.assert_called_once()
        assert first == second

    def test_cache_hit_skips_network(self, config, cache, source):
        cached = Record(date="March 14", events=[Event("1990", "Cached")])
        cache.write(cached)

        assert get_record(config, cache=cache, source=source) == cached
        source.fetch.assert_not_called()

    def test_status_error_propagates_without_cache_write(self, config, source):
        cache = MagicMock()
        cache.read.return_value = None
        source.fetch.side_effect = StatusError(503, "Service Unavailable")

        with pytest.raises(StatusError) as exc_info:
            get_record(config, cache=cache, source=source)

        assert exc_info.value.code == 503
        cache.write.assert_not_called()

    def test_transport_error_propagates(self, config, cache, source):
        source.fetch.side_effect = TransportError("connection refused")

        with pytest.raises(TransportError, match="connection refused"):
            get_record(config, cache=cache, source=source)

        assert not cache.path.exists()

    def test_unusable_page_still_cached(self, config, cache, source):
        source.fetch.return_value = "<html></html>"

        record = get_record(config, cache=cache, source=source)

        assert record == Record()
        assert cache.read() == Record()

    @patch("otd.workflows.WikipediaPageSource")
    def test_builds_default_source_from_config(self, mock_cls, config, cache):
        mock_cls.return_value.fetch.return_value = "<html></html>"

        get_record(config, cache=cache)

        mock_cls.assert_called_once_with(config)

    @patch("otd.workflows.load_config")
    def test_loads_config_when_not_given(self, mock_load, tmp_path, source):
        mock_load.return_value = Config(cache_dir=tmp_path / "loaded")

        get_record(source=source)

        mock_load.assert_called_once()
        assert (tmp_path / "loaded" / "today.json").exists()
