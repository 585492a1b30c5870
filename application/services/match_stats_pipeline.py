"""Summoner lookup pipeline: name → account → match list → per-match stats."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar

from config import settings
from core.logging import get_logger, log_context
from domain.entities import MatchRef, MatchResult, PerMatchFailure, PipelineOutcome, SummonerName
from domain.enums import FailureReason, OutcomeKind, PipelineState
from domain.errors import (
    AuthRejected, ExtractionError, FetchError, InvalidName, LeagueStatsError, MalformedMatch,
    NotFound, ParticipantNotFound, RateLimited, TransientNetwork,
)
from domain.interfaces import IAccountResolver, IMatchRepository
from .fan_out import Backpressure, BoundedFanOut
from .name_validator import validate_summoner_name
from .retry_policy import RateLimitRetryPolicy
from .stats_extractor import extract_match_stats

T = TypeVar("T")

logger = get_logger(__name__, service="match-stats")


def _stage_outcome(error: FetchError) -> OutcomeKind:
    if isinstance(error, NotFound):
        return OutcomeKind.ACCOUNT_NOT_FOUND
    if isinstance(error, RateLimited):
        return OutcomeKind.RATE_LIMITED
    if isinstance(error, AuthRejected):
        return OutcomeKind.AUTH_REJECTED
    return OutcomeKind.TRANSIENT_ERROR


def _failure_reason(error: LeagueStatsError) -> FailureReason:
    if isinstance(error, ParticipantNotFound):
        return FailureReason.PARTICIPANT_NOT_FOUND
    if isinstance(error, MalformedMatch):
        return FailureReason.MALFORMED
    if isinstance(error, NotFound):
        return FailureReason.NOT_FOUND
    if isinstance(error, RateLimited):
        return FailureReason.RATE_LIMITED
    if isinstance(error, AuthRejected):
        return FailureReason.AUTH_REJECTED
    if isinstance(error, TransientNetwork):
        return FailureReason.TRANSIENT
    return FailureReason.UPSTREAM


class MatchStatsPipeline:
    """
    Looks up a summoner and computes stats for their recent matches.

    Flow:
    - validate the raw name (no request is made for an invalid one);
    - resolve the account, then list its matches, one after the other;
    - fetch and extract every match through a BoundedFanOut, at most
      ``concurrency`` detail requests in flight;
    - return a PipelineOutcome whose ``matches`` holds one entry per listed
      match, in list order.

    Stage failures end the run with a distinct OutcomeKind. A failing match
    only produces a PerMatchFailure in its own slot. Each network call is
    bounded by ``call_timeout``, which defaults to the transport's whole
    retry budget so its own timeout retries still get to run.

    An instance runs one lookup at a time; ``state`` reflects its progress.
    """

    def __init__(
        self,
        account_resolver: IAccountResolver,
        match_repo: IMatchRepository,
        *,
        match_limit: Optional[int] = None,
        concurrency: Optional[int] = None,
        call_timeout: Optional[float] = None,
        retry_policy: Optional[RateLimitRetryPolicy] = None,
    ):
        self.account_resolver = account_resolver
        self.match_repo       = match_repo
        self.match_limit      = settings.MATCH_LIST_LIMIT if match_limit is None else match_limit
        self.concurrency      = settings.MAX_CONCURRENT_REQUESTS if concurrency is None else concurrency
        self.call_timeout     = settings.call_budget() if call_timeout is None else call_timeout
        self.retry_policy     = retry_policy or RateLimitRetryPolicy.from_settings()
        self.state            = PipelineState.IDLE

    # ------------------------------------------------------------------ #
    # Public entry points
    # ------------------------------------------------------------------ #

    def submit(self, raw_input: str) -> "asyncio.Task[PipelineOutcome]":
        """Schedule ``run`` on the running loop and return its task."""
        return asyncio.ensure_future(self.run(raw_input))

    async def run(self, raw_input: str) -> PipelineOutcome:
        self._enter(PipelineState.IDLE)
        try:
            return await self._run(raw_input)
        except BaseException:
            if not self.state.is_terminal:
                self._enter(PipelineState.FAILED)
            raise

    # ------------------------------------------------------------------ #
    # Stages
    # ------------------------------------------------------------------ #

    async def _run(self, raw_input: str) -> PipelineOutcome:
        self._enter(PipelineState.VALIDATING)
        try:
            name = validate_summoner_name(raw_input)
        except InvalidName as e:
            return self._fail(OutcomeKind.INVALID_INPUT, None, e)

        with log_context(summoner=name):
            try:
                self._enter(PipelineState.RESOLVING_ACCOUNT)
                account = await self._timed(self.account_resolver.resolve_account(name))

                self._enter(PipelineState.LISTING_MATCHES)
                refs = await self._timed(self.match_repo.fetch_match_list(account, self.match_limit))
            except FetchError as e:
                return self._fail(_stage_outcome(e), name, e)

            if not refs:
                self._enter(PipelineState.COMPLETED)
                logger.info("no matches")
                return PipelineOutcome(OutcomeKind.NO_MATCHES, summoner_name=name)

            self._enter(PipelineState.FETCHING_DETAILS)
            fan_out = BoundedFanOut(self.concurrency, Backpressure())

            async def handle(index: int, ref: MatchRef) -> MatchResult:
                return await self._fetch_one(index, ref, name, fan_out.backpressure)

            results = await fan_out.run(refs, handle)

            self._enter(PipelineState.COMPLETED)
            outcome = PipelineOutcome(OutcomeKind.SUCCESS, summoner_name=name, matches=tuple(results))
            logger.success(lambda: f"lookup done: {len(outcome.stats)} ok, {len(outcome.failures)} failed")
            return outcome

    async def _fetch_one(
        self,
        index: int,
        ref: MatchRef,
        name: SummonerName,
        backpressure: Backpressure,
    ) -> MatchResult:
        with log_context(match_id=ref.match_id):
            try:
                raw = await self.retry_policy.run(
                    lambda: self._timed(self.match_repo.fetch_match_detail(ref)),
                    logger=logger,
                    on_rate_limited=backpressure.pause,
                    context={"match_id": ref.match_id},
                )
                return extract_match_stats(raw, name, match_id=ref.match_id)
            except (FetchError, ExtractionError) as e:
                reason = _failure_reason(e)
                logger.warning(lambda: f"match failed: {reason.value}: {e}")
                return PerMatchFailure(index=index, match_id=ref.match_id, reason=reason, message=str(e))
            except Exception:
                logger.exception(lambda: f"unexpected error on match {ref.match_id}, aborting lookup")
                raise

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    async def _timed(self, call: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(call, timeout=self.call_timeout)
        except asyncio.TimeoutError as e:
            raise TransientNetwork(f"no response within {self.call_timeout}s") from e

    def _enter(self, state: PipelineState) -> None:
        self.state = state
        logger.trace(lambda: f"state -> {state.value}")

    def _fail(self, kind: OutcomeKind, name: Optional[str], error: Exception) -> PipelineOutcome:
        self._enter(PipelineState.FAILED)
        logger.warning(lambda: f"lookup failed: {kind.value}: {error}")
        return PipelineOutcome(kind, summoner_name=name, message=str(error))
