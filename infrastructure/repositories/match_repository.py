"""Match repository implementation."""
import logging
from typing import Any, Dict, Tuple

from domain.entities import AccountId, MatchRef
from domain.errors import NotFound, UpstreamError
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match lists and match details using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def fetch_match_list(self, account: AccountId, limit: int = 10) -> Tuple[MatchRef, ...]:
        """
        Get the most recent match refs of an account.

        An account without games yields an empty tuple, never an error
        (the v4 list endpoint answers 404 in that case).

        Args:
            account: Account id from the summoner lookup
            limit: Maximum number of refs to return

        Returns:
            Match refs in source order, at most ``limit`` of them
        """
        if limit <= 0:
            return ()
        try:
            payload = await self.api_client.get_match_list(account, end_index=limit)
        except NotFound:
            logger.info(f"No match list for account {account}")
            return ()

        entries = payload.get('matches') if isinstance(payload, dict) else payload
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise UpstreamError(200, payload, self.api_client.match_list_url(account, limit))

        try:
            refs = tuple(MatchRef.from_payload(entry) for entry in entries[:limit])
        except (KeyError, AttributeError) as e:
            raise UpstreamError(200, payload, self.api_client.match_list_url(account, limit)) from e
        return refs

    async def fetch_match_detail(self, ref: MatchRef) -> Dict[str, Any]:
        """
        Get the raw payload of a single match.

        Args:
            ref: Match reference from the match list

        Returns:
            Decoded match payload
        """
        match_data = await self.api_client.get_match_by_id(ref.match_id)
        if not isinstance(match_data, dict):
            raise UpstreamError(200, match_data, self.api_client.match_url(ref.match_id))
        return match_data
