"""Application layer - Services and use cases."""
from .services import MatchStatsPipeline
from .use_cases import LookupSummonerUseCase

__all__ = [
    'MatchStatsPipeline',
    'LookupSummonerUseCase',
]
