"""
HTTP helpers shared by the upstream clients.

A single GET per call with a bounded timeout. No retries: a failed request is
reported to the caller as a typed ScoresApiError.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import requests

from .errors import TransportError, UpstreamError, UpstreamPayloadError
from .logging_config import get_logger

logger = get_logger(__name__)


def parse_json_bytes(body: bytes, *, source: str, url: str) -> dict[str, Any]:
    try:
        obj = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise UpstreamPayloadError(f"{source} returned invalid JSON for {url}: {e}") from e
    if not isinstance(obj, dict):
        raise UpstreamPayloadError(f"{source} returned {type(obj).__name__}, expected a JSON object")
    return obj


def http_get_json(
    url: str,
    *,
    source: str,
    headers: dict[str, str],
    params: Optional[dict[str, str]] = None,
    timeout_seconds: float = 10.0,
    session: Optional[requests.Session] = None,
) -> dict[str, Any]:
    """
    GET `url` and return the decoded top-level JSON object.

    Raises:
        UpstreamError: non-2xx HTTP status
        TransportError: DNS failure, refused connection, timeout, ...
        UpstreamPayloadError: body is not a JSON object
    """
    http = session if session is not None else requests
    logger.debug(f"[UPSTREAM] GET {url} params={params}")
    try:
        resp = http.get(url, headers=headers, params=params, timeout=timeout_seconds)
    except requests.Timeout as e:
        logger.warning(f"[UPSTREAM] {source} timed out after {timeout_seconds}s: {url}")
        raise TransportError(source, url, f"timed out after {timeout_seconds}s") from e
    except requests.RequestException as e:
        logger.warning(f"[UPSTREAM] {source} unreachable: {url} ({type(e).__name__}: {e})")
        raise TransportError(source, url, f"{type(e).__name__}: {e}") from e

    status = int(resp.status_code)
    if not 200 <= status < 300:
        logger.warning(f"[UPSTREAM] {source} returned HTTP {status} for {url}")
        raise UpstreamError(source, status, resp.reason or "", url)

    return parse_json_bytes(resp.content, source=source, url=url)
