import logging

import pytest

from scores_api.cache import CacheEntry, SimpleCache, cache_key
from scores_api.logging_config import LOGGER_NAME


def test_get_returns_value_within_ttl(clock) -> None:
    cache = SimpleCache(clock=clock)
    cache.set("scoreboard_today", {"scoreboard": {"games": []}}, ttl=10)

    clock.advance(9.999)

    assert cache.get("scoreboard_today") == {"scoreboard": {"games": []}}


def test_expired_entry_is_absent_and_removed(clock) -> None:
    cache = SimpleCache(clock=clock)
    cache.set("scoreboard_today", {"x": 1}, ttl=10)

    clock.advance(10)

    assert "scoreboard_today" in cache
    assert cache.get("scoreboard_today") is None
    assert "scoreboard_today" not in cache
    assert len(cache) == 0


def test_unread_expired_entry_stays_until_accessed(clock) -> None:
    cache = SimpleCache(clock=clock)
    cache.set("boxscore_1", {"x": 1}, ttl=15)
    clock.advance(60)

    # no background sweep
    assert len(cache) == 1


def test_set_overwrites_and_restarts_ttl(clock) -> None:
    cache = SimpleCache(clock=clock)
    cache.set("scoreboard_2024-01-15", "old", ttl=10)
    clock.advance(8)
    cache.set("scoreboard_2024-01-15", "new", ttl=10)
    clock.advance(8)

    assert cache.get("scoreboard_2024-01-15") == "new"


def test_default_ttl_applies_when_ttl_omitted(clock) -> None:
    cache = SimpleCache(default_ttl_seconds=300, clock=clock)
    cache.set("scoreboard_2023-12-25", "value")

    clock.advance(299)
    assert cache.get("scoreboard_2023-12-25") == "value"
    clock.advance(1)
    assert cache.get("scoreboard_2023-12-25") is None


def test_missing_key_returns_none(clock) -> None:
    assert SimpleCache(clock=clock).get("scoreboard_today") is None


def test_disabled_cache_never_stores(clock) -> None:
    cache = SimpleCache(enabled=False, clock=clock)
    cache.set("scoreboard_today", "value", ttl=10)

    assert cache.get("scoreboard_today") is None
    assert len(cache) == 0


def test_clear_drops_everything(clock) -> None:
    cache = SimpleCache(clock=clock)
    cache.set("scoreboard_today", 1)
    cache.set("boxscore_0022300555", 2)

    cache.clear()

    assert len(cache) == 0


def test_cache_entry_validity_window() -> None:
    entry = CacheEntry(value=None, stored_at=100.0, ttl=10.0)

    assert entry.is_valid(109.9)
    assert not entry.is_valid(110.0)


def test_cache_key_prefixes_category() -> None:
    assert cache_key("scoreboard", "today") == "scoreboard_today"
    assert cache_key("scoreboard", "2024-01-15") == "scoreboard_2024-01-15"
    assert cache_key("boxscore", "0022300555") == "boxscore_0022300555"
    assert cache_key("scoreboard", "today") != cache_key("boxscore", "today")


def test_cache_key_rejects_unknown_category() -> None:
    with pytest.raises(ValueError):
        cache_key("standings", "today")


def test_disabled_cache_warning_does_not_name_an_environment_variable(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            SimpleCache(enabled=False)
    finally:
        logger.removeHandler(caplog.handler)

    assert "[CACHE] Caching is disabled" in caplog.messages
    assert "environment" not in caplog.text
