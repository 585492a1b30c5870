"""Summoner repository implementation."""
import logging

from domain.entities import AccountId, SummonerName
from domain.errors import UpstreamError
from domain.interfaces import IAccountResolver
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class SummonerRepository(IAccountResolver):
    """Resolves summoner names through the Riot summoner endpoint."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize summoner repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def resolve_account(self, name: SummonerName) -> AccountId:
        """
        Get the account id owning ``name``.

        Exactly one request is issued; NotFound, RateLimited and
        AuthRejected from the transport propagate untouched.

        Args:
            name: Validated summoner name, case as typed

        Returns:
            Opaque account id
        """
        summoner_data = await self.api_client.get_summoner_by_name(name)
        account_id = summoner_data.get('accountId') if isinstance(summoner_data, dict) else None
        if not account_id:
            logger.warning(f"Summoner payload for {name!r} has no accountId")
            raise UpstreamError(200, summoner_data, self.api_client.summoner_by_name_url(name))
        return AccountId(str(account_id))
