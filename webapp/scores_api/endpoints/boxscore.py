"""
Box score endpoint - pass-through of the NBA CDN box score for one game.
"""

from typing import Any, Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..resolver import ScoreboardResolver
from .utils import error_response, get_resolver

router = APIRouter()


@router.get("/boxscore/{game_id}", response_model=None)
def get_boxscore(
    game_id: str,
    resolver: ScoreboardResolver = Depends(get_resolver),
) -> Union[dict[str, Any], JSONResponse]:
    """Get the raw CDN box score (teams with nested player statistics)."""
    try:
        return resolver.get_boxscore(game_id)
    except Exception as e:
        return error_response(e, context=f"box score {game_id}")
