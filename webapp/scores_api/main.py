"""
NBA Scores API Proxy - FastAPI Backend

Data Sources:
  - NBA CDN (cdn.nba.com liveData): today's scoreboard, box scores
  - NBA Stats (stats.nba.com scoreboardv2): scoreboard for a given date

Endpoints:
  GET /api/scoreboard                  - Today's games
  GET /api/scoreboard?date=YYYY-MM-DD  - Games on a given date
  GET /api/boxscore/{game_id}          - Box score for one game
  GET /api/health                      - Liveness check

Usage:
  cd webapp && uvicorn scores_api.main:app --reload --port 3001
  nba-scores-api  (reads HOST / PORT)

Debug Mode:
  DEBUG=true nba-scores-api

Design Pattern: Application Factory + Modular Router Pattern
Algorithm: FastAPI router composition
Big O: O(1) for route registration
"""

import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from .cache import SimpleCache
from .config import Settings, load_settings
from .data_sources.nba_cdn import NBACdnClient
from .data_sources.nba_stats import NBAStatsClient
from .endpoints import boxscore, health, scoreboard
from .logging_config import get_logger, setup_logging
from .resolver import CacheTTLs, ScoreboardResolver

logger = get_logger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log request/response timing for performance debugging.

    Design Pattern: Middleware Pattern
    Algorithm: Time measurement before and after request processing
    Big O: O(1) overhead per request
    """
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        logger.debug(f"[TIMING] {request.method} {request.url.path} - START")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"[TIMING] {request.method} {request.url.path} - ERROR "
                f"({duration:.3f}s) - {type(e).__name__}: {e}"
            )
            raise

        duration = time.time() - start_time
        status_code = response.status_code
        if duration > 1.0:
            logger.warning(
                f"[TIMING] {request.method} {request.url.path} - COMPLETE "
                f"({duration:.3f}s) - Status: {status_code} - SLOW REQUEST"
            )
        else:
            logger.debug(
                f"[TIMING] {request.method} {request.url.path} - COMPLETE "
                f"({duration:.3f}s) - Status: {status_code}"
            )
        return response


def build_resolver(settings: Settings) -> ScoreboardResolver:
    """
    Wire the cache and both upstream clients from settings.

    The clients get no shared Session: handlers run on several threads, so
    each upstream call goes through requests.get on its own connection.
    """
    return ScoreboardResolver(
        cache=SimpleCache(default_ttl_seconds=settings.historical_ttl_seconds, enabled=settings.cache_enabled),
        cdn_client=NBACdnClient(
            base_url=settings.cdn_base_url,
            timeout_seconds=settings.upstream_timeout_seconds,
        ),
        stats_client=NBAStatsClient(
            base_url=settings.stats_base_url,
            timeout_seconds=settings.upstream_timeout_seconds,
        ),
        ttls=CacheTTLs(
            today=settings.today_ttl_seconds,
            historical=settings.historical_ttl_seconds,
            boxscore=settings.boxscore_ttl_seconds,
        ),
    )


def create_app(settings: Optional[Settings] = None, resolver: Optional[ScoreboardResolver] = None) -> FastAPI:
    """
    Build the FastAPI app.

    The resolver (and the cache it owns) is stored on app.state and lives as
    long as the app; pass one in to use fake upstream clients.
    """
    if settings is None:
        settings = load_settings()
    setup_logging(debug=settings.debug, log_to_file=settings.log_to_file, log_dir=settings.log_dir)

    if resolver is None:
        resolver = build_resolver(settings)

    app = FastAPI(
        title="NBA Scores API Proxy",
        description="Scoreboards and box scores proxied from the NBA CDN and NBA Stats API",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.resolver = resolver

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(TimingMiddleware)

    app.include_router(scoreboard.router, prefix="/api", tags=["scoreboard"])
    app.include_router(boxscore.router, prefix="/api", tags=["boxscore"])
    app.include_router(health.router, prefix="/api", tags=["health"])

    if settings.debug:
        logger.info("=" * 60)
        logger.info("DEBUG MODE ENABLED - Verbose logging active")
        logger.info("=" * 60)
    logger.info(f"Cache {'enabled' if resolver.cache.enabled else 'DISABLED'}; TTLs: {resolver.ttls}")
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    settings = app.state.settings
    logger.info(f"NBA API Proxy running on http://{settings.host}:{settings.port}")
    logger.info(f"Scoreboard: http://{settings.host}:{settings.port}/api/scoreboard")
    logger.info(f"With date: http://{settings.host}:{settings.port}/api/scoreboard?date=YYYY-MM-DD")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
