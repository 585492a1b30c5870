"""Application use cases."""
from .lookup_summoner import LookupSummonerUseCase

__all__ = [
    'LookupSummonerUseCase',
]
