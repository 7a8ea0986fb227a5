"""
Scoreboard resolver - source selection, caching and normalization.

Design Pattern: Cache-Aside + Strategy (CDN for today, Stats API for a date)
Algorithm: cache lookup, then a single upstream fetch on miss
Big O: O(1) on cache hit, O(g * l) transform on a historical miss

Routing:
  no date       -> CDN todaysScoreboard, cached for the short TTL (live scores)
  YYYY-MM-DD    -> Stats scoreboardv2 + transform, cached for the long TTL
  box score     -> CDN boxscore, cached for the medium TTL

Failures propagate to the caller and nothing is cached. There are no retries
and no request coalescing.
"""

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Protocol

from .cache import SimpleCache, cache_key
from .constants import BOXSCORE_TTL_SECONDS, HISTORICAL_SCOREBOARD_TTL_SECONDS, TODAY_SCOREBOARD_TTL_SECONDS
from .errors import InvalidRequestError, UpstreamPayloadError
from .logging_config import get_logger
from .transform import transform_stats_scoreboard

logger = get_logger(__name__)


class CdnSource(Protocol):
    source: str

    def fetch_todays_scoreboard(self) -> dict[str, Any]: ...

    def fetch_boxscore(self, game_id: str) -> dict[str, Any]: ...


class StatsSource(Protocol):
    source: str

    def fetch_scoreboard(self, game_date: str) -> dict[str, Any]: ...


@dataclass(frozen=True)
class CacheTTLs:
    """TTL (seconds) per response kind."""

    today: float = TODAY_SCOREBOARD_TTL_SECONDS
    historical: float = HISTORICAL_SCOREBOARD_TTL_SECONDS
    boxscore: float = BOXSCORE_TTL_SECONDS


def to_stats_date(date: str) -> str:
    """Convert YYYY-MM-DD into the MM/DD/YYYY form scoreboardv2 expects."""
    try:
        parsed = datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        raise InvalidRequestError(f"Invalid date {date!r}, expected YYYY-MM-DD") from None
    return parsed.strftime("%m/%d/%Y")


def _check_cdn_scoreboard(payload: dict[str, Any]) -> dict[str, Any]:
    scoreboard = payload.get("scoreboard")
    if not isinstance(scoreboard, dict) or not isinstance(scoreboard.get("games"), list):
        raise UpstreamPayloadError("NBA CDN scoreboard payload has no scoreboard.games list")
    return payload


class ScoreboardResolver:
    """
    Answers scoreboard and box score requests from cache or upstream.

    The resolver owns its SimpleCache; one resolver is created per app and
    lives as long as the app does.
    """

    def __init__(
        self,
        cache: SimpleCache,
        cdn_client: CdnSource,
        stats_client: StatsSource,
        ttls: Optional[CacheTTLs] = None,
    ):
        self.cache = cache
        self.cdn_client = cdn_client
        self.stats_client = stats_client
        self.ttls = ttls or CacheTTLs()

    def get_scoreboard(self, date: Optional[str] = None) -> dict[str, Any]:
        """
        Return the scoreboard payload for `date` (YYYY-MM-DD) or for today.

        Both branches answer with {"scoreboard": {"games": [...], "gameDate": ...}}.
        """
        date = date or None
        key = cache_key("scoreboard", date or "today")

        cached_payload = self.cache.get(key)
        if cached_payload is not None:
            logger.info(f"[CACHE] HIT: {key}")
            return cached_payload

        logger.info(f"[CACHE] MISS: {key} - fetching from NBA API")
        start_time = time.time()

        if date is None:
            payload = _check_cdn_scoreboard(self.cdn_client.fetch_todays_scoreboard())
            ttl = self.ttls.today
            source = self.cdn_client.source
        else:
            raw = self.stats_client.fetch_scoreboard(to_stats_date(date))
            payload = transform_stats_scoreboard(raw).to_payload()
            ttl = self.ttls.historical
            source = self.stats_client.source

        self.cache.set(key, payload, ttl=ttl)
        logger.info(
            f"[UPSTREAM] {source} scoreboard for {date or 'today'}: "
            f"{len(payload['scoreboard']['games'])} games in {time.time() - start_time:.3f}s (ttl: {ttl}s)"
        )
        return payload

    def get_boxscore(self, game_id: str) -> dict[str, Any]:
        """Return the raw CDN box score payload for `game_id` (not transformed)."""
        if not game_id:
            raise InvalidRequestError("gameId is required")

        key = cache_key("boxscore", game_id)
        cached_payload = self.cache.get(key)
        if cached_payload is not None:
            logger.info(f"[CACHE] HIT: {key}")
            return cached_payload

        logger.info(f"[CACHE] MISS: {key} - fetching from NBA API")
        payload = self.cdn_client.fetch_boxscore(game_id)
        self.cache.set(key, payload, ttl=self.ttls.boxscore)
        return payload
