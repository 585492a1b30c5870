"""Repository interfaces for the stats service."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple
from ..entities import AccountId, MatchRef, SummonerName


class IAccountResolver(ABC):
    """Resolves a display name to the account that owns its match history."""

    @abstractmethod
    async def resolve_account(self, name: SummonerName) -> AccountId:
        """Get the account id for an exact (case-preserved) summoner name."""
        pass


class IMatchRepository(ABC):
    """Interface for match list and match detail lookups."""

    @abstractmethod
    async def fetch_match_list(self, account: AccountId, limit: int = 10) -> Tuple[MatchRef, ...]:
        """Get at most ``limit`` most recent match refs, newest first."""
        pass

    @abstractmethod
    async def fetch_match_detail(self, ref: MatchRef) -> Dict[str, Any]:
        """Get the raw match payload for one ref."""
        pass
