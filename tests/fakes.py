"""Test doubles and payload builders shared by the test modules."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from domain.entities import AccountId, MatchRef
from domain.interfaces import IAccountResolver, IMatchRepository, Transport


def v4_match(
    game_id: int = 1001,
    name: str = "Faker",
    *,
    duration: int = 1830,
    minions: int = 180,
    win: bool = True,
    participant_id: int = 3,
    items: Optional[Dict[str, int]] = None,
) -> Dict[str, Any]:
    """A minimal match-v4 payload with the queried player plus one other."""
    stats = {
        "win": win,
        "kills": 7,
        "deaths": 2,
        "assists": 9,
        "champLevel": 16,
        "totalMinionsKilled": minions,
        "perkPrimaryStyle": 8100,
        "perkSubStyle": 8300,
    }
    stats.update(items if items is not None else {f"item{i}": 3000 + i for i in range(7)})
    return {
        "gameId": game_id,
        "gameDuration": duration,
        "participantIdentities": [
            {"participantId": 1, "player": {"summonerName": "Someone Else"}},
            {"participantId": participant_id, "player": {"summonerName": name}},
        ],
        "participants": [
            {"participantId": 1, "championId": 1, "spell1Id": 1, "spell2Id": 1, "stats": dict(stats, win=not win)},
            {"participantId": participant_id, "championId": 157, "spell1Id": 4, "spell2Id": 14, "stats": stats},
        ],
    }


def v5_match(
    match_id: str = "EUW1_42",
    game_name: str = "Faker",
    *,
    duration: int = 1830,
    ms_duration: bool = False,
    minions: int = 180,
) -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "gameDuration": duration * 1000 if ms_duration else duration,
        "participants": [
            {
                "participantId": 1,
                "riotIdGameName": game_name,
                "championId": 157,
                "summoner1Id": 4,
                "summoner2Id": 12,
                "win": False,
                "kills": 3,
                "deaths": 5,
                "assists": 4,
                "champLevel": 14,
                "totalMinionsKilled": minions,
                "perks": {"styles": [
                    {"description": "primaryStyle", "style": 8000},
                    {"description": "subStyle", "style": 8400},
                ]},
                "item0": 6672,
                "item6": 3340,
            },
        ],
    }
    if not ms_duration:
        info["gameEndTimestamp"] = 1_700_000_000_000
    return {"metadata": {"matchId": match_id}, "info": info}


class FakeTransport(Transport):
    """Answers GETs from ``routes``: the first key contained in the URL wins.

    A route value is either a payload or a callable ``(url) -> payload``
    that may raise.
    """

    def __init__(self, routes: Dict[str, Any]) -> None:
        self.routes = routes
        self.calls: List[str] = []

    async def get_json(self, url: str, *, endpoint: str = "default") -> Any:
        self.calls.append(url)
        for key, value in self.routes.items():
            if key in url:
                return value(url) if callable(value) else value
        raise AssertionError(f"unexpected url {url}")


class FakeAccountResolver(IAccountResolver):
    def __init__(self, account: str = "acc-1", error: Optional[Exception] = None) -> None:
        self.account = account
        self.error = error
        self.calls: List[str] = []

    async def resolve_account(self, name):
        self.calls.append(name)
        if self.error:
            raise self.error
        return AccountId(self.account)


class FakeMatchRepository(IMatchRepository):
    """Instrumented match repository.

    ``details`` maps a match id to a payload, an exception to raise, or a
    callable returning either. ``delay`` (seconds) keeps each detail call in
    flight so concurrency can be observed.
    """

    def __init__(
        self,
        match_ids: List[str],
        details: Optional[Dict[str, Any]] = None,
        *,
        name: str = "Faker",
        delay: float = 0.0,
        delays: Optional[Dict[str, float]] = None,
        list_error: Optional[Exception] = None,
    ) -> None:
        self.match_ids = match_ids
        self.details = details or {}
        self.name = name
        self.delay = delay
        self.delays = delays or {}
        self.list_error = list_error
        self.list_calls: List[tuple] = []
        self.detail_calls: List[str] = []
        self.call_times: Dict[str, List[float]] = {}
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_match_list(self, account, limit=10):
        self.list_calls.append((account, limit))
        if self.list_error:
            raise self.list_error
        return tuple(MatchRef(match_id=m) for m in self.match_ids[:limit])

    async def fetch_match_detail(self, ref):
        self.detail_calls.append(ref.match_id)
        self.call_times.setdefault(ref.match_id, []).append(asyncio.get_running_loop().time())
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(ref.match_id, self.delay))
            value = self.details.get(ref.match_id)
            if callable(value):
                value = value()
            if isinstance(value, BaseException):
                raise value
            if value is None:
                value = v4_match(int(ref.match_id), self.name)
            return value
        finally:
            self.in_flight -= 1


def sequence(*values: Any) -> Callable[[], Any]:
    """Return each value in turn on successive calls; the last one repeats."""
    remaining = list(values)

    def _next() -> Any:
        return remaining.pop(0) if len(remaining) > 1 else remaining[0]
    return _next
