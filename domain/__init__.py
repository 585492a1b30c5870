"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import (
    SummonerName, AccountId, MatchRef, MatchStats,
    PerMatchFailure, PipelineOutcome, MatchResult,
)
from .enums import Region, OutcomeKind, FailureReason, PipelineState
from .interfaces import IAccountResolver, IMatchRepository, Transport

__all__ = [
    # Entities
    'SummonerName',
    'AccountId',
    'MatchRef',
    'MatchStats',
    'PerMatchFailure',
    'PipelineOutcome',
    'MatchResult',
    # Enums
    'Region',
    'OutcomeKind',
    'FailureReason',
    'PipelineState',
    # Interfaces
    'IAccountResolver',
    'IMatchRepository',
    'Transport',
]
