"""
Upstream constants: base URLs, endpoint paths, request headers and the
positional column layout of the NBA Stats scoreboardv2 result sets.

Design Pattern: Constants Module Pattern
Algorithm: Static data lookup
Big O: O(1) for lookups
"""

from enum import IntEnum

NBA_CDN_BASE = "https://cdn.nba.com/static/json/liveData"
NBA_STATS_BASE = "https://stats.nba.com/stats"

CDN_TODAYS_SCOREBOARD_PATH = "/scoreboard/todaysScoreboard_00.json"
CDN_BOXSCORE_PATH = "/boxscore/boxscore_{game_id}.json"
STATS_SCOREBOARD_PATH = "/scoreboardv2"

NBA_LEAGUE_ID = "00"
STATS_DAY_OFFSET = "0"

BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

# cdn.nba.com rejects default client fingerprints
CDN_HEADERS: dict[str, str] = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "application/json",
}

# stats.nba.com also checks the browser origin
STATS_HEADERS: dict[str, str] = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "application/json",
    "Referer": "https://www.nba.com/",
    "Origin": "https://www.nba.com",
    "Accept-Language": "en-US,en;q=0.9",
}

# Default cache TTLs (seconds)
TODAY_SCOREBOARD_TTL_SECONDS = 10.0
HISTORICAL_SCOREBOARD_TTL_SECONDS = 300.0
BOXSCORE_TTL_SECONDS = 15.0

DEFAULT_UPSTREAM_TIMEOUT_SECONDS = 10.0

GAME_HEADER_RESULT_SET = "GameHeader"
LINE_SCORE_RESULT_SET = "LineScore"


class GameHeaderColumn(IntEnum):
    """Column positions of a scoreboardv2 GameHeader row."""

    GAME_DATE_EST = 0
    GAME_SEQUENCE = 1
    GAME_ID = 2
    GAME_STATUS_ID = 3
    GAME_STATUS_TEXT = 4
    GAMECODE = 5
    HOME_TEAM_ID = 6
    VISITOR_TEAM_ID = 7
    SEASON = 8
    LIVE_PERIOD = 9


class LineScoreColumn(IntEnum):
    """Column positions of a scoreboardv2 LineScore row."""

    GAME_DATE_EST = 0
    GAME_SEQUENCE = 1
    GAME_ID = 2
    TEAM_ID = 3
    TEAM_ABBREVIATION = 4
    TEAM_CITY_NAME = 5
    TEAM_NAME = 6
    PTS = 22
