"""Per-match statistics for the looked-up summoner."""
from dataclasses import dataclass, field

ITEM_SLOTS = 7


@dataclass(frozen=True)
class MatchStats:
    """Display-ready statistics of one match, from the queried player's seat."""

    # Identity
    match_id: str
    summoner_name: str

    # Outcome & timing
    outcome: bool
    duration_minutes: int
    duration_seconds: int

    # Loadout
    spell_primary: int
    spell_secondary: int
    rune_primary: int
    rune_secondary: int
    champion_id: int

    # Combat
    kills: int = 0
    deaths: int = 0
    assists: int = 0

    # Items (slots 0-6, 0 = empty, slot 6 is the trinket)
    items: tuple = field(default=(0,) * ITEM_SLOTS)

    # Progression & farm
    champion_level: int = 0
    minions_killed: int = 0
    minions_per_minute: float = 0.0

    def __post_init__(self) -> None:
        if len(self.items) != ITEM_SLOTS:
            raise ValueError(f"items must have exactly {ITEM_SLOTS} slots, got {len(self.items)}")

    @property
    def kda_ratio(self) -> float:
        """(kills + assists) / deaths, with deaths floored at 1."""
        return (self.kills + self.assists) / max(1, self.deaths)

    @property
    def duration_label(self) -> str:
        return f"{self.duration_minutes}m {self.duration_seconds}s"

    def to_dict(self) -> dict:
        """Convert to the camelCase record shape used on the wire."""
        return {
            'matchId': self.match_id,
            'summonerName': self.summoner_name,
            'outcome': self.outcome,
            'durationMinutes': self.duration_minutes,
            'durationSeconds': self.duration_seconds,
            'spellPrimary': self.spell_primary,
            'spellSecondary': self.spell_secondary,
            'runePrimary': self.rune_primary,
            'runeSecondary': self.rune_secondary,
            'championId': self.champion_id,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'items': list(self.items),
            'championLevel': self.champion_level,
            'minionsKilled': self.minions_killed,
            'minionsPerMinute': self.minions_per_minute,
        }
