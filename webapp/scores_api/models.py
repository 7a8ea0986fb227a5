"""
Unified scoreboard records.

Both upstream paths answer with the CDN scoreboard shape. The historical
(Stats API) path builds these dataclasses explicitly; `to_dict()` renders the
CDN camelCase field names.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional


class GameStatus(IntEnum):
    """Upstream gameStatus codes."""

    SCHEDULED = 1
    LIVE = 2
    FINAL = 3


@dataclass(frozen=True)
class TeamSide:
    team_id: Any
    team_name: str = ""
    team_city: str = ""
    team_tricode: str = ""
    score: int = 0
    # Present for CDN shape compatibility, never populated from the Stats API
    team_slug: str = ""
    wins: int = 0
    losses: int = 0
    seed: Optional[int] = None
    in_bonus: Optional[bool] = None
    timeouts_remaining: int = 0
    periods: tuple = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "teamId": self.team_id,
            "teamName": self.team_name,
            "teamCity": self.team_city,
            "teamTricode": self.team_tricode,
            "teamSlug": self.team_slug,
            "wins": self.wins,
            "losses": self.losses,
            "score": self.score,
            "seed": self.seed,
            "inBonus": self.in_bonus,
            "timeoutsRemaining": self.timeouts_remaining,
            "periods": list(self.periods),
        }


@dataclass(frozen=True)
class UnifiedGame:
    game_id: str
    game_date: str
    game_status: int
    period: int
    home_team: TeamSide
    away_team: TeamSide
    game_time_utc: str = ""
    game_clock: str = ""

    @property
    def is_live(self) -> bool:
        return self.game_status == GameStatus.LIVE

    def to_dict(self) -> dict[str, Any]:
        return {
            "gameId": self.game_id,
            "gameDate": self.game_date,
            "gameStatus": self.game_status,
            "gameTimeUTC": self.game_time_utc,
            "period": self.period,
            "gameClock": self.game_clock,
            "homeTeam": self.home_team.to_dict(),
            "awayTeam": self.away_team.to_dict(),
        }


@dataclass(frozen=True)
class Scoreboard:
    games: list[UnifiedGame] = field(default_factory=list)
    game_date: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Render as the `{"scoreboard": {...}}` response body."""
        body: dict[str, Any] = {"games": [game.to_dict() for game in self.games]}
        if self.game_date is not None:
            body["gameDate"] = self.game_date
        return {"scoreboard": body}
