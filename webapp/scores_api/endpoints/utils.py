"""
Shared helpers for the API routers.

Design Pattern: Utility Module Pattern
Algorithm: Dependency lookup on app state + error-to-JSON conversion
Big O: O(1)
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from ..errors import ScoresApiError
from ..logging_config import get_logger
from ..resolver import ScoreboardResolver

logger = get_logger(__name__)


def get_resolver(request: Request) -> ScoreboardResolver:
    """FastAPI dependency: the resolver created by create_app()."""
    return request.app.state.resolver


def error_response(error: Exception, context: str) -> JSONResponse:
    """
    Convert any failure into the uniform {"error": message} body.

    Proxy errors keep their own status code (500, or 400 for bad input);
    anything unexpected becomes a 500.
    """
    if isinstance(error, ScoresApiError):
        status_code = error.status_code
        logger.error(f"Error fetching {context}: {error}")
    else:
        status_code = 500
        logger.error(f"Unexpected error fetching {context}: {type(error).__name__}: {error}", exc_info=True)
    return JSONResponse(status_code=status_code, content={"error": str(error)})
