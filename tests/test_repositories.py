"""Tests for the Riot client URLs and the summoner/match repositories."""
import pytest

from domain.entities import MatchRef
from domain.enums import Region
from domain.errors import NotFound, RateLimited, UpstreamError
from infrastructure import MatchRepository, RiotAPIClient, SummonerRepository
from fakes import FakeTransport, v4_match

EUW = "https://euw1.api.riotgames.com"


def _raise(error):
    def _route(url):
        raise error
    return _route


@pytest.mark.asyncio
async def test_resolve_account_quotes_the_name_and_keeps_case() -> None:
    transport = FakeTransport({"/by-name/": {"accountId": "acc-9", "name": "Mr. Smith"}})
    repo = SummonerRepository(RiotAPIClient(transport, Region.EUW1))

    account = await repo.resolve_account("Mr. Smith")

    assert account == "acc-9"
    assert transport.calls == [f"{EUW}/lol/summoner/v4/summoners/by-name/Mr.%20Smith"]


@pytest.mark.asyncio
async def test_resolve_account_propagates_not_found_and_rate_limits() -> None:
    for error in (NotFound(404), RateLimited(retry_after=2)):
        transport = FakeTransport({"/by-name/": _raise(error)})
        repo = SummonerRepository(RiotAPIClient(transport))

        with pytest.raises(type(error)):
            await repo.resolve_account("Faker")
        assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_resolve_account_without_account_id_is_upstream_error() -> None:
    repo = SummonerRepository(RiotAPIClient(FakeTransport({"/by-name/": {"name": "Faker"}})))

    with pytest.raises(UpstreamError):
        await repo.resolve_account("Faker")


@pytest.mark.asyncio
async def test_fetch_match_list_v4_payload() -> None:
    payload = {
        "matches": [
            {"gameId": 3, "champion": 157, "queue": 420, "timestamp": 300},
            {"gameId": 2, "champion": 238, "queue": 440, "timestamp": 200},
            {"gameId": 1, "champion": 1, "queue": 450, "timestamp": 100},
        ],
        "startIndex": 0,
        "endIndex": 3,
        "totalGames": 3,
    }
    transport = FakeTransport({"/matchlists/": payload})
    repo = MatchRepository(RiotAPIClient(transport, Region.EUW1))

    refs = await repo.fetch_match_list("acc/9", limit=2)

    assert refs == (
        MatchRef(match_id="3"),
        MatchRef(match_id="2"),
    )
    assert transport.calls == [f"{EUW}/lol/match/v4/matchlists/by-account/acc%2F9?endIndex=2"]


@pytest.mark.asyncio
async def test_fetch_match_list_accepts_an_id_list() -> None:
    repo = MatchRepository(RiotAPIClient(FakeTransport({"/matchlists/": ["EUW1_3", "EUW1_2"]})))

    refs = await repo.fetch_match_list("acc-1")

    assert [r.match_id for r in refs] == ["EUW1_3", "EUW1_2"]


@pytest.mark.asyncio
async def test_fetch_match_list_empty_or_404_is_no_matches() -> None:
    empty = MatchRepository(RiotAPIClient(FakeTransport({"/matchlists/": {"matches": []}})))
    missing = MatchRepository(RiotAPIClient(FakeTransport({"/matchlists/": _raise(NotFound(404))})))

    assert await empty.fetch_match_list("acc-1") == ()
    assert await missing.fetch_match_list("acc-1") == ()


@pytest.mark.asyncio
async def test_fetch_match_list_rejects_garbage() -> None:
    repo = MatchRepository(RiotAPIClient(FakeTransport({"/matchlists/": {"matches": [{"champion": 1}]}})))

    with pytest.raises(UpstreamError):
        await repo.fetch_match_list("acc-1")


@pytest.mark.asyncio
async def test_fetch_match_detail() -> None:
    transport = FakeTransport({"/matches/1001": v4_match(1001)})
    repo = MatchRepository(RiotAPIClient(transport))

    raw = await repo.fetch_match_detail(MatchRef(match_id="1001"))

    assert raw["gameId"] == 1001
    assert transport.calls == ["https://na1.api.riotgames.com/lol/match/v4/matches/1001"]
