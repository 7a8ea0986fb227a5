"""
Stats API scoreboard -> CDN scoreboard shape.

Design Pattern: Adapter Pattern (tabular result sets to unified records)
Algorithm: One pass over GameHeader rows, linear search of LineScore rows per team
Big O: O(g * l) where g = game header rows, l = line score rows

scoreboardv2 answers with positional rows. The column layout is fixed in
constants.GameHeaderColumn / constants.LineScoreColumn.

Tolerance rules:
  - missing result sets or no GameHeader rows -> empty scoreboard (a day
    without games is normal)
  - a game whose home or visitor LineScore row is missing is dropped
  - missing period / score -> 0, missing team strings -> ""
"""

from typing import Any, Optional, Sequence

from .constants import (
    GAME_HEADER_RESULT_SET,
    LINE_SCORE_RESULT_SET,
    GameHeaderColumn,
    LineScoreColumn,
)
from .logging_config import get_logger
from .models import Scoreboard, TeamSide, UnifiedGame

logger = get_logger(__name__)


def _cell(row: Sequence[Any], column: int) -> Any:
    if column < len(row):
        return row[column]
    return None


def _as_int(value: Any) -> int:
    if not value:
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_str(value: Any) -> str:
    return str(value) if value else ""


def _find_result_set(result_sets: list[Any], name: str, position: int) -> Optional[dict[str, Any]]:
    """Look up a result set by name, falling back to its usual position."""
    for result_set in result_sets:
        if isinstance(result_set, dict) and result_set.get("name") == name:
            return result_set
    if position < len(result_sets) and isinstance(result_sets[position], dict):
        return result_sets[position]
    return None


def _rows(result_set: Optional[dict[str, Any]]) -> list[list[Any]]:
    if not result_set:
        return []
    row_set = result_set.get("rowSet")
    if not isinstance(row_set, list):
        return []
    return [row for row in row_set if isinstance(row, (list, tuple))]


def _find_line_score(line_rows: list[list[Any]], game_id: Any, team_id: Any) -> Optional[list[Any]]:
    # first match wins
    for row in line_rows:
        if _cell(row, LineScoreColumn.GAME_ID) == game_id and _cell(row, LineScoreColumn.TEAM_ID) == team_id:
            return row
    return None


def _team_side(team_id: Any, line_row: list[Any]) -> TeamSide:
    return TeamSide(
        team_id=team_id,
        team_name=_as_str(_cell(line_row, LineScoreColumn.TEAM_NAME)),
        team_city=_as_str(_cell(line_row, LineScoreColumn.TEAM_CITY_NAME)),
        team_tricode=_as_str(_cell(line_row, LineScoreColumn.TEAM_ABBREVIATION)),
        score=_as_int(_cell(line_row, LineScoreColumn.PTS)),
    )


def _build_game(header_row: list[Any], line_rows: list[list[Any]]) -> Optional[UnifiedGame]:
    game_id = _cell(header_row, GameHeaderColumn.GAME_ID)
    home_team_id = _cell(header_row, GameHeaderColumn.HOME_TEAM_ID)
    visitor_team_id = _cell(header_row, GameHeaderColumn.VISITOR_TEAM_ID)

    home_line = _find_line_score(line_rows, game_id, home_team_id)
    visitor_line = _find_line_score(line_rows, game_id, visitor_team_id)
    if home_line is None or visitor_line is None:
        missing = f"home team {home_team_id}" if home_line is None else f"visitor team {visitor_team_id}"
        logger.warning(f"[TRANSFORM] Dropping game {game_id}: no LineScore row for {missing}")
        return None

    game_date = _as_str(_cell(header_row, GameHeaderColumn.GAME_DATE_EST))
    return UnifiedGame(
        game_id=_as_str(game_id),
        game_date=game_date,
        game_status=_as_int(_cell(header_row, GameHeaderColumn.GAME_STATUS_ID)),
        period=_as_int(_cell(header_row, GameHeaderColumn.LIVE_PERIOD)),
        home_team=_team_side(home_team_id, home_line),
        away_team=_team_side(visitor_team_id, visitor_line),
        game_time_utc=game_date,
    )


def transform_stats_scoreboard(raw: Any) -> Scoreboard:
    """
    Convert a scoreboardv2 payload into a Scoreboard.

    Games keep the GameHeader row order. `game_date` is the date of the first
    GameHeader row; it is None only for the empty result.
    """
    result_sets = raw.get("resultSets") if isinstance(raw, dict) else None
    if not isinstance(result_sets, list) or len(result_sets) < 2:
        logger.info("[TRANSFORM] Stats payload has no GameHeader/LineScore result sets, returning no games")
        return Scoreboard(games=[])

    header_rows = _rows(_find_result_set(result_sets, GAME_HEADER_RESULT_SET, 0))
    if not header_rows:
        logger.info("[TRANSFORM] No GameHeader rows, returning no games")
        return Scoreboard(games=[])

    line_rows = _rows(_find_result_set(result_sets, LINE_SCORE_RESULT_SET, 1))

    games = []
    for header_row in header_rows:
        game = _build_game(header_row, line_rows)
        if game is not None:
            games.append(game)

    game_date = _as_str(_cell(header_rows[0], GameHeaderColumn.GAME_DATE_EST))
    live_count = sum(1 for game in games if game.is_live)
    logger.info(
        f"[TRANSFORM] Built {len(games)}/{len(header_rows)} games for {game_date or 'unknown date'} "
        f"(live: {live_count})"
    )
    return Scoreboard(games=games, game_date=game_date)
