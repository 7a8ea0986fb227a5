"""
NBA CDN live-data client (cdn.nba.com).

Endpoint patterns:
  {base}/scoreboard/todaysScoreboard_00.json
  {base}/boxscore/boxscore_{gameId}.json
"""

from typing import Any, Optional
from urllib.parse import quote

import requests

from ..constants import CDN_BOXSCORE_PATH, CDN_HEADERS, CDN_TODAYS_SCOREBOARD_PATH, NBA_CDN_BASE
from ..fetch_lib import http_get_json


class NBACdnClient:
    """Fetches today's scoreboard and per-game box scores from the CDN feed."""

    source = "NBA CDN"

    def __init__(
        self,
        base_url: str = NBA_CDN_BASE,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session

    def _get(self, path: str) -> dict[str, Any]:
        return http_get_json(
            f"{self.base_url}{path}",
            source=self.source,
            headers=dict(CDN_HEADERS),
            timeout_seconds=self.timeout_seconds,
            session=self.session,
        )

    def fetch_todays_scoreboard(self) -> dict[str, Any]:
        return self._get(CDN_TODAYS_SCOREBOARD_PATH)

    def fetch_boxscore(self, game_id: str) -> dict[str, Any]:
        return self._get(CDN_BOXSCORE_PATH.format(game_id=quote(game_id, safe="")))
