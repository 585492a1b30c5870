"""End-to-end lookups through the real client, repositories and pipeline."""
import asyncio

import httpx
import pytest

from application.use_cases import LookupSummonerUseCase
from domain.entities import MatchStats, PerMatchFailure
from domain.enums import FailureReason, OutcomeKind, Region
from domain.errors import NotFound, RateLimited
from fakes import FakeTransport, v4_match
from infrastructure import HttpxTransport


def _raise(error):
    def _route(url):
        raise error
    return _route


def _use_case(routes) -> tuple:
    transport = FakeTransport(routes)
    options = {"concurrency": 3, "call_timeout": 2.0, "match_limit": 10}
    return LookupSummonerUseCase(Region.KR, transport=transport, pipeline_options=options), transport


@pytest.mark.asyncio
async def test_full_lookup() -> None:
    use_case, transport = _use_case({
        "/by-name/": {"accountId": "acc-1"},
        "/matchlists/": {"matches": [{"gameId": 11}, {"gameId": 12}, {"gameId": 13}]},
        "/matches/11": v4_match(11, "Hide on bush", duration=630, minions=105),
        "/matches/12": _raise(NotFound(404)),
        "/matches/13": v4_match(13, "HIDE ON BUSH"),
    })

    outcome = await use_case.execute("hide on bush")

    assert outcome.kind is OutcomeKind.SUCCESS
    first, second, third = outcome.matches
    assert isinstance(first, MatchStats) and first.match_id == "11"
    assert first.duration_label == "10m 30s"
    assert isinstance(second, PerMatchFailure) and second.match_id == "12"
    assert isinstance(third, MatchStats) and third.match_id == "13"
    assert transport.calls[0] == "https://kr.api.riotgames.com/lol/summoner/v4/summoners/by-name/hide%20on%20bush"


@pytest.mark.asyncio
async def test_account_without_games() -> None:
    use_case, transport = _use_case({
        "/by-name/": {"accountId": "acc-1"},
        "/matchlists/": _raise(NotFound(404)),
    })

    outcome = await use_case.execute("Faker")

    assert outcome.kind is OutcomeKind.NO_MATCHES
    assert len(transport.calls) == 2


@pytest.mark.asyncio
async def test_rate_limited_account_lookup_makes_one_call() -> None:
    use_case, transport = _use_case({"/by-name/": _raise(RateLimited(retry_after=5))})

    outcome = await use_case.execute("Faker")

    assert outcome.kind is OutcomeKind.RATE_LIMITED
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_invalid_name_makes_no_calls() -> None:
    use_case, transport = _use_case({})

    outcome = await use_case.execute("Robert'); DROP TABLE--")

    assert outcome.kind is OutcomeKind.INVALID_INPUT
    assert transport.calls == []


def _riot_handler(details):
    """Serves the account and a three-game list; ``details`` answers each match request."""
    async def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if "/by-name/" in path:
            return httpx.Response(200, json={"accountId": "acc-1"})
        if "/matchlists/" in path:
            return httpx.Response(200, json={"matches": [{"gameId": 1}, {"gameId": 2}, {"gameId": 3}]})
        return await details(request, int(path.rsplit("/", 1)[-1]))
    return handler


def _httpx_transport(handler, **kwargs) -> HttpxTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpxTransport("RGAPI-test", client=client, **kwargs)


@pytest.mark.asyncio
async def test_non_json_detail_body_only_fails_its_own_match() -> None:
    async def details(request, game_id):
        if game_id == 2:
            return httpx.Response(200, text="<html>proxy error</html>", headers={"Content-Type": "text/html"})
        return httpx.Response(200, json=v4_match(game_id))

    transport = _httpx_transport(_riot_handler(details), max_retries=0)
    use_case = LookupSummonerUseCase(transport=transport, pipeline_options={"concurrency": 3})

    outcome = await use_case.execute("Faker")

    assert outcome.kind is OutcomeKind.SUCCESS
    first, second, third = outcome.matches
    assert isinstance(first, MatchStats) and isinstance(third, MatchStats)
    assert isinstance(second, PerMatchFailure)
    assert second.reason is FailureReason.UPSTREAM


@pytest.mark.asyncio
async def test_non_json_account_body_is_a_transient_outcome() -> None:
    async def handler(request):
        return httpx.Response(200, text="<html>proxy error</html>", headers={"Content-Type": "text/html"})

    use_case = LookupSummonerUseCase(transport=_httpx_transport(handler, max_retries=0))

    outcome = await use_case.execute("Faker")

    assert outcome.kind is OutcomeKind.TRANSIENT_ERROR


@pytest.mark.asyncio
async def test_transport_timeout_retry_completes_within_the_call_budget() -> None:
    attempts = {}

    async def details(request, game_id):
        attempts[game_id] = attempts.get(game_id, 0) + 1
        if game_id == 2 and attempts[game_id] == 1:
            # Spend the whole per-attempt timeout before timing out.
            await asyncio.sleep(0.2)
            raise httpx.ReadTimeout("read timed out", request=request)
        return httpx.Response(200, json=v4_match(game_id))

    transport = _httpx_transport(_riot_handler(details), timeout=0.2, max_retries=1, backoff=2.0)
    use_case = LookupSummonerUseCase(transport=transport, pipeline_options={"concurrency": 3})

    assert use_case.build_pipeline(transport).call_timeout == pytest.approx(transport.call_budget)

    outcome = await use_case.execute("Faker")

    assert [type(m) for m in outcome.matches] == [MatchStats, MatchStats, MatchStats]
    assert attempts[2] == 2
