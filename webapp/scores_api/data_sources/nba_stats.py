"""
NBA Stats API client (stats.nba.com).

Endpoint pattern:
  {base}/scoreboardv2?GameDate=MM/DD/YYYY&LeagueID=00&DayOffset=0

The response is tabular (resultSets of positional rows); see
scores_api.transform for the conversion to the CDN scoreboard shape.
"""

from typing import Any, Optional

import requests

from ..constants import NBA_LEAGUE_ID, NBA_STATS_BASE, STATS_DAY_OFFSET, STATS_HEADERS, STATS_SCOREBOARD_PATH
from ..fetch_lib import http_get_json


class NBAStatsClient:
    """Fetches the scoreboard of one calendar date from the Stats API."""

    source = "NBA Stats"

    def __init__(
        self,
        base_url: str = NBA_STATS_BASE,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session

    def fetch_scoreboard(self, game_date: str) -> dict[str, Any]:
        """
        Fetch scoreboardv2 for `game_date`.

        Args:
            game_date: Date already formatted as MM/DD/YYYY
        """
        params = {
            "GameDate": game_date,
            "LeagueID": NBA_LEAGUE_ID,
            "DayOffset": STATS_DAY_OFFSET,
        }
        return http_get_json(
            f"{self.base_url}{STATS_SCOREBOARD_PATH}",
            source=self.source,
            headers=dict(STATS_HEADERS),
            params=params,
            timeout_seconds=self.timeout_seconds,
            session=self.session,
        )
