"""
Scoreboard endpoint - today's games (NBA CDN) or any date (NBA Stats API).

Design Pattern: Proxy Pattern with cache-aside resolver
Algorithm: Delegates to ScoreboardResolver
Big O: O(1) on cache hit, O(n) in the number of games on a miss
"""

from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..resolver import ScoreboardResolver
from .utils import error_response, get_resolver

router = APIRouter()


@router.get("/scoreboard", response_model=None)
def get_scoreboard(
    date: Optional[str] = Query(None, description="Game date (YYYY-MM-DD); omit for today's games"),
    resolver: ScoreboardResolver = Depends(get_resolver),
) -> Union[dict[str, Any], JSONResponse]:
    """
    Get the scoreboard for today or for a specific date.

    Returns:
        {
            "scoreboard": {
                "gameDate": "2023-12-25T00:00:00",
                "games": [
                    {
                        "gameId": "0022300412",
                        "gameStatus": 3,
                        "period": 4,
                        "homeTeam": {"teamTricode": "LAL", "score": 106, ...},
                        "awayTeam": {"teamTricode": "BOS", "score": 115, ...},
                        ...
                    }
                ]
            }
        }
    """
    try:
        return resolver.get_scoreboard(date)
    except Exception as e:
        return error_response(e, context="scoreboard")
