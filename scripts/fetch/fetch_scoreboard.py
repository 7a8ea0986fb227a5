#!/usr/bin/env python3
"""
Fetch one NBA scoreboard in the unified (CDN) shape and write it as JSON.

Sources:
  no --date : https://cdn.nba.com/static/json/liveData/scoreboard/todaysScoreboard_00.json
  --date    : https://stats.nba.com/stats/scoreboardv2 (converted to the CDN shape)

Examples:
  python scripts/fetch/fetch_scoreboard.py
  python scripts/fetch/fetch_scoreboard.py --date 2023-12-25 --out data/raw/scoreboard/2023-12-25.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from scores_api.cache import SimpleCache
from scores_api.constants import NBA_CDN_BASE, NBA_STATS_BASE
from scores_api.data_sources.nba_cdn import NBACdnClient
from scores_api.data_sources.nba_stats import NBAStatsClient
from scores_api.errors import ScoresApiError
from scores_api.resolver import ScoreboardResolver


def atomic_write_json(path: Path, obj: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_bytes(json.dumps(obj, indent=2, sort_keys=True).encode("utf-8"))
    tmp.replace(path)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch an NBA scoreboard (today from cdn.nba.com, or a date from stats.nba.com).")
    p.add_argument("--date", default=None, help="Game date YYYY-MM-DD; omit for today's scoreboard")
    p.add_argument("--out", default=None, help="Output JSON path; prints to stdout when omitted")
    p.add_argument("--timeout-seconds", type=float, default=10.0)
    p.add_argument("--cdn-base-url", default=NBA_CDN_BASE)
    p.add_argument("--stats-base-url", default=NBA_STATS_BASE)
    return p.parse_args(argv)


def build_resolver(args: argparse.Namespace) -> ScoreboardResolver:
    return ScoreboardResolver(
        cache=SimpleCache(enabled=False),
        cdn_client=NBACdnClient(base_url=args.cdn_base_url, timeout_seconds=args.timeout_seconds),
        stats_client=NBAStatsClient(base_url=args.stats_base_url, timeout_seconds=args.timeout_seconds),
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    resolver = build_resolver(args)

    try:
        payload = resolver.get_scoreboard(args.date)
    except ScoresApiError as e:
        print(f"[fetch_scoreboard] {e}", file=sys.stderr)
        return 1

    games = payload["scoreboard"]["games"]
    if args.out:
        out_path = Path(args.out)
        atomic_write_json(out_path, payload)
        print(f"Wrote {out_path} ({len(games)} games).")
    else:
        print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
