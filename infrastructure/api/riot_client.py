"""Riot Games API client."""
import logging
from typing import Any, Dict
from urllib.parse import quote

from domain.enums import Region
from domain.interfaces import Transport

logger = logging.getLogger(__name__)


class RiotAPIClient:
    """Builds the summoner and match endpoint URLs and fetches them through
    a ``Transport``.

    Status handling, credentials and pacing all live in the transport; this
    class only knows where things are.
    """

    def __init__(self, transport: Transport, region: Region = Region.NA1):
        self.transport = transport
        self.region    = region

    @property
    def base_url(self) -> str:
        return self.region.base_url

    # ── Summoner API ───────────────────────────────────────────────────

    def summoner_by_name_url(self, name: str) -> str:
        return f"{self.base_url}/lol/summoner/v4/summoners/by-name/{quote(name, safe='')}"

    async def get_summoner_by_name(self, name: str) -> Dict[str, Any]:
        return await self.transport.get_json(self.summoner_by_name_url(name), endpoint="summoner")

    # ── Match API ──────────────────────────────────────────────────────

    def match_list_url(self, account_id: str, end_index: int) -> str:
        return (
            f"{self.base_url}/lol/match/v4/matchlists/by-account/"
            f"{quote(str(account_id), safe='')}?endIndex={end_index}"
        )

    def match_url(self, match_id: str) -> str:
        return f"{self.base_url}/lol/match/v4/matches/{quote(str(match_id), safe='')}"

    async def get_match_list(self, account_id: str, end_index: int = 10) -> Any:
        logger.debug(f"match list {account_id} endIndex={end_index}")
        return await self.transport.get_json(self.match_list_url(account_id, end_index), endpoint="match")

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        return await self.transport.get_json(self.match_url(match_id), endpoint="match")
