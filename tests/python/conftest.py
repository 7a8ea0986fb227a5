import os
from typing import Any, Callable, Optional

# scores_api.main builds a module-level app on import; keep it off the disk log
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest

from scores_api.cache import SimpleCache
from scores_api.resolver import CacheTTLs, ScoreboardResolver

from nba_payloads import cdn_boxscore, cdn_scoreboard, stats_payload


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCdnClient:
    source = "NBA CDN"

    def __init__(self, scoreboard: Optional[dict[str, Any]] = None, boxscore: Optional[dict[str, Any]] = None):
        self.scoreboard = scoreboard if scoreboard is not None else cdn_scoreboard()
        self.boxscore = boxscore if boxscore is not None else cdn_boxscore()
        self.scoreboard_calls = 0
        self.boxscore_calls: list[str] = []
        self.error: Optional[Exception] = None

    def fetch_todays_scoreboard(self) -> dict[str, Any]:
        self.scoreboard_calls += 1
        if self.error is not None:
            raise self.error
        return self.scoreboard

    def fetch_boxscore(self, game_id: str) -> dict[str, Any]:
        self.boxscore_calls.append(game_id)
        if self.error is not None:
            raise self.error
        return self.boxscore


class FakeStatsClient:
    source = "NBA Stats"

    def __init__(self, payload: Optional[dict[str, Any]] = None):
        self.payload = payload if payload is not None else stats_payload([], [])
        self.calls: list[str] = []
        self.error: Optional[Exception] = None

    def fetch_scoreboard(self, game_date: str) -> dict[str, Any]:
        self.calls.append(game_date)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cdn_client() -> FakeCdnClient:
    return FakeCdnClient()


@pytest.fixture
def stats_client() -> FakeStatsClient:
    return FakeStatsClient()


@pytest.fixture
def make_resolver(clock: FakeClock, cdn_client: FakeCdnClient, stats_client: FakeStatsClient) -> Callable[..., ScoreboardResolver]:
    def _make(enabled: bool = True) -> ScoreboardResolver:
        return ScoreboardResolver(
            cache=SimpleCache(enabled=enabled, clock=clock),
            cdn_client=cdn_client,
            stats_client=stats_client,
            ttls=CacheTTLs(today=10, historical=300, boxscore=15),
        )

    return _make
