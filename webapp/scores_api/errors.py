"""
Error taxonomy for the NBA Scores API proxy.

Every error raised on purpose by the proxy derives from ScoresApiError and
carries the HTTP status the request handler should answer with.
"""

from typing import Optional


class ScoresApiError(RuntimeError):
    """Base exception for proxy failures."""

    status_code = 500


class UpstreamError(ScoresApiError):
    """An upstream source answered with a non-success HTTP status."""

    def __init__(self, source: str, status: int, reason: str, url: Optional[str] = None):
        self.source = source
        self.status = status
        self.reason = reason
        self.url = url
        super().__init__(f"{source} Error: {status} {reason}".rstrip())


class TransportError(ScoresApiError):
    """The upstream source could not be reached (DNS, refused connection, timeout)."""

    def __init__(self, source: str, url: str, detail: str):
        self.source = source
        self.url = url
        self.detail = detail
        super().__init__(f"{source} request failed: {detail}")


class UpstreamPayloadError(ScoresApiError):
    """Upstream answered 2xx but the body is not the JSON document we expect."""


class InvalidRequestError(ScoresApiError):
    """Caller input that cannot be forwarded upstream."""

    status_code = 400
