"""Pipeline result entities."""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .match_stats import MatchStats
from ..enums import FailureReason, OutcomeKind


@dataclass(frozen=True)
class PerMatchFailure:
    """Marks a match whose detail fetch or extraction failed."""

    index: int
    match_id: str
    reason: FailureReason
    message: str = ""


MatchResult = Union[MatchStats, PerMatchFailure]


@dataclass(frozen=True)
class PipelineOutcome:
    """Everything a lookup hands back to its caller."""

    kind: OutcomeKind
    summoner_name: Optional[str] = None
    # One entry per listed match, in match-list order.
    matches: Tuple[MatchResult, ...] = ()
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def stats(self) -> Tuple[MatchStats, ...]:
        return tuple(m for m in self.matches if isinstance(m, MatchStats))

    @property
    def failures(self) -> Tuple[PerMatchFailure, ...]:
        return tuple(m for m in self.matches if isinstance(m, PerMatchFailure))
