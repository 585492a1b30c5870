"""Error taxonomy for the lookup pipeline.

Errors carry structured reasons only. Turning them into user-facing text is
the presentation layer's job.
"""
from __future__ import annotations

from typing import Any, Optional


class LeagueStatsError(Exception):
    """Base error for every failure raised by the lookup."""


class InvalidName(LeagueStatsError):
    """Raised when a summoner name is empty or has a disallowed character."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid summoner name: {raw!r}")
        self.raw = raw


# ── Fetch errors ─────────────────────────────────────────────────────────


class FetchError(LeagueStatsError):
    """Base error for anything that went wrong talking to the stats service."""


class TransientNetwork(FetchError):
    """Timeout or connection failure. Retryable."""


class HttpError(FetchError):
    """Non-2xx response from the stats service."""

    def __init__(self, status: int, body: Any = None, url: Optional[str] = None) -> None:
        super().__init__(f"http {status}" + (f" for {url}" if url else ""))
        self.status = status
        self.body = body
        self.url = url


class NotFound(HttpError):
    """404 from the stats service."""


class RateLimited(HttpError):
    """429 from the stats service; ``retry_after`` is in seconds when known."""

    def __init__(
        self,
        status: int = 429,
        body: Any = None,
        url: Optional[str] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        super().__init__(status, body, url)
        self.retry_after = retry_after


class AuthRejected(HttpError):
    """401/403: the API key was rejected. Fatal for the session."""


class UpstreamError(HttpError):
    """Any other unexpected response, including 5xx after retries."""


# ── Extraction errors ────────────────────────────────────────────────────


class ExtractionError(LeagueStatsError):
    """Raised when a raw match cannot be turned into MatchStats."""


class ParticipantNotFound(ExtractionError):
    """The queried summoner does not appear among the match participants."""

    def __init__(self, summoner_name: str, match_id: Any = None) -> None:
        super().__init__(f"{summoner_name!r} not found in match {match_id}")
        self.summoner_name = summoner_name
        self.match_id = match_id


class MalformedMatch(ExtractionError):
    """The match payload is missing a field the extractor needs."""
