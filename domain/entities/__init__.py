"""Domain entities."""
from .summoner import SummonerName, AccountId
from .match_ref import MatchRef
from .match_stats import MatchStats, ITEM_SLOTS
from .outcome import PerMatchFailure, PipelineOutcome, MatchResult

__all__ = [
    'SummonerName',
    'AccountId',
    'MatchRef',
    'MatchStats',
    'ITEM_SLOTS',
    'PerMatchFailure',
    'PipelineOutcome',
    'MatchResult',
]
