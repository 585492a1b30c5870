"""Match reference entity."""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MatchRef:
    """Pointer to one played game; its position in the match list decides output order."""

    match_id: str

    @classmethod
    def from_payload(cls, entry: Any) -> 'MatchRef':
        """Build a ref from a match-list entry.

        v4 entries are objects keyed by ``gameId``; v5 lists are bare id
        strings.
        """
        if isinstance(entry, (str, int)):
            return cls(match_id=str(entry))
        match_id = entry.get('gameId', entry.get('matchId'))
        if match_id is None:
            raise KeyError('gameId')
        return cls(match_id=str(match_id))
