"""httpx-backed transport for the Riot API."""
import asyncio
import logging
from typing import Any, Optional

import httpx

from config import attempts_budget, settings
from domain.errors import (
    AuthRejected, HttpError, NotFound, RateLimited, TransientNetwork, UpstreamError,
)
from domain.interfaces import Transport
from .rate_limiter import EndpointRateLimiter

logger = logging.getLogger(__name__)


def _retry_after_seconds(response: httpx.Response) -> Optional[float]:
    value = response.headers.get("Retry-After")
    if not value:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        return None


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport(Transport):
    """Asynchronous GET transport with credential injection and pacing.

    5xx responses and network errors are retried with exponential backoff up
    to ``max_retries``. 429 is never retried here: it is surfaced at once as
    ``RateLimited`` so callers can apply backpressure.
    """

    def __init__(
        self,
        api_key: str,
        *,
        proxy_url: str = "",
        timeout: float = None,
        max_retries: int = None,
        backoff: float = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key     = api_key
        self.proxy_url   = proxy_url
        self.timeout     = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.max_retries = settings.MAX_RETRIES if max_retries is None else max_retries
        self.backoff     = settings.RETRY_BACKOFF if backoff is None else backoff
        self.session: Optional[httpx.AsyncClient] = client
        self._owns_session = client is None
        self.last_status_code: Optional[int] = None

        self.rate_limiter = EndpointRateLimiter()
        self.rate_limiter.set_default_limiter(
            requests_per_1_sec=settings.RATE_LIMIT_PER_1_SEC,
            requests_per_2_min=settings.RATE_LIMIT_PER_2_MIN,
        )
        self.rate_limiter.add_endpoint_limiter(
            "summoner",
            requests_per_1_sec=settings.SUMMONER_RATE_LIMIT_PER_1_SEC,
            requests_per_2_min=settings.SUMMONER_RATE_LIMIT_PER_2_MIN,
        )
        self.rate_limiter.add_endpoint_limiter(
            "match",
            requests_per_1_sec=settings.MATCH_RATE_LIMIT_PER_1_SEC,
            requests_per_2_min=settings.MATCH_RATE_LIMIT_PER_2_MIN,
        )

    async def __aenter__(self):
        if self.session is None:
            self.session = httpx.AsyncClient(timeout=self.timeout)
            self._owns_session = True
        return self

    async def __aexit__(self, *_):
        if self.session and self._owns_session:
            await self.session.aclose()
            self.session = None

    @property
    def call_budget(self) -> float:
        """Longest a single ``get_json`` may take, retries and backoff included."""
        return attempts_budget(self.timeout, self.max_retries, self.backoff)

    async def get_json(self, url: str, *, endpoint: str = "default") -> Any:
        if self.session is None:
            raise RuntimeError("HttpxTransport used outside of 'async with'")
        full_url = f"{self.proxy_url}{url}"

        for attempt in range(self.max_retries + 1):
            await self.rate_limiter.acquire(endpoint)
            try:
                response = await self.session.get(full_url, headers={"X-Riot-Token": self.api_key})
            except httpx.TimeoutException as exc:
                if attempt < self.max_retries:
                    await asyncio.sleep(self.backoff ** attempt)
                    continue
                raise TransientNetwork(f"timeout for {url}") from exc
            except httpx.HTTPError as exc:
                logger.error(f"Network error: {exc}")
                if attempt < self.max_retries:
                    await asyncio.sleep(self.backoff ** attempt)
                    continue
                raise TransientNetwork(str(exc)) from exc

            status = response.status_code
            self.last_status_code = status

            if 200 <= status < 300:
                try:
                    return response.json()
                except ValueError as exc:
                    logger.warning(f"HTTP {status} with an undecodable body for {url}")
                    raise UpstreamError(status, response.text, url) from exc

            if status in (401, 403):
                logger.error(f"{status}: the Riot API key was rejected")
                raise AuthRejected(status, _body(response), url)

            if status == 404:
                raise NotFound(status, _body(response), url)

            if status == 429:
                retry_after = _retry_after_seconds(response)
                logger.warning(f"429 rate-limited on {endpoint}, retry after {retry_after}s")
                if retry_after:
                    self.rate_limiter.cooldown(endpoint, retry_after)
                raise RateLimited(status, _body(response), url, retry_after=retry_after)

            if status >= 500 and attempt < self.max_retries:
                await asyncio.sleep(self.backoff ** attempt)
                continue

            logger.warning(f"HTTP {status} for {url}")
            raise UpstreamError(status, _body(response), url)

        # unreachable: the last attempt always returns or raises
        raise HttpError(self.last_status_code or 0, None, url)
