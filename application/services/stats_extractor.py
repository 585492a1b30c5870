"""Turns a raw match payload into the queried player's MatchStats.

Two payload shapes are understood:

* match-v4: ``participantIdentities`` links a participant slot to a player
  name; ``participants[*].stats`` holds the numbers; ``gameDuration`` is
  in seconds.
* match-v5: everything lives on ``info.participants[*]``; the player name
  is ``riotIdGameName`` or the legacy ``summonerName``. ``gameDuration``
  was reported in milliseconds for games that predate
  ``gameEndTimestamp``.

Numeric rules: minutes are truncated, the seconds are the rounded
remainder of ``duration / 60`` (a remainder that rounds to 60 carries into
the minutes), and minions per minute is 0 when the game
lasted under a minute.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from domain.entities import ITEM_SLOTS, MatchStats
from domain.errors import MalformedMatch, ParticipantNotFound


def split_duration(total_seconds: float) -> Tuple[int, int]:
    """Return (whole minutes, remaining seconds) of a game duration."""
    if not total_seconds:
        return 0, 0
    as_minutes = total_seconds / 60
    minutes = math.floor(as_minutes)
    seconds = round((as_minutes - minutes) * 60)
    if seconds == 60:
        # 1799.999 s is 30m 0s, not 29m 60s.
        minutes, seconds = minutes + 1, 0
    return int(minutes), int(seconds)


def minions_per_minute(minions_killed: int, minutes: int) -> float:
    if minutes == 0:
        return 0.0
    return minions_killed / minutes


def _same_name(a: Optional[str], b: str) -> bool:
    return isinstance(a, str) and a.casefold() == b.casefold()


def _items(block: Dict[str, Any]) -> tuple:
    items: List[int] = [block.get(f"item{slot}") or 0 for slot in range(ITEM_SLOTS)]
    return tuple(items)


def _find(participants: Iterable[Dict[str, Any]], key: str, value: Any) -> Optional[Dict[str, Any]]:
    return next((p for p in participants if p.get(key) == value), None)


def _extract_v4(raw: Dict[str, Any], name: str, match_id: str) -> MatchStats:
    identity = next(
        (
            pi for pi in raw.get("participantIdentities") or []
            if _same_name((pi.get("player") or {}).get("summonerName"), name)
        ),
        None,
    )
    if identity is None:
        raise ParticipantNotFound(name, match_id)

    participant = _find(raw.get("participants") or [], "participantId", identity.get("participantId"))
    if participant is None or not isinstance(participant.get("stats"), dict):
        raise MalformedMatch(f"no stat block for participant {identity.get('participantId')} in match {match_id}")
    stats = participant["stats"]

    minutes, seconds = split_duration(raw["gameDuration"])
    minions = stats["totalMinionsKilled"]
    return MatchStats(
        match_id=match_id,
        summoner_name=name,
        outcome=bool(stats["win"]),
        duration_minutes=minutes,
        duration_seconds=seconds,
        spell_primary=participant["spell1Id"],
        spell_secondary=participant["spell2Id"],
        rune_primary=stats["perkPrimaryStyle"],
        rune_secondary=stats["perkSubStyle"],
        champion_id=participant["championId"],
        kills=stats["kills"],
        deaths=stats["deaths"],
        assists=stats["assists"],
        items=_items(stats),
        champion_level=stats["champLevel"],
        minions_killed=minions,
        minions_per_minute=minions_per_minute(minions, minutes),
    )


def _v5_duration_seconds(info: Dict[str, Any]) -> float:
    duration = info["gameDuration"]
    if "gameEndTimestamp" not in info:
        return duration / 1000
    return duration


def _v5_styles(participant: Dict[str, Any]) -> Tuple[int, int]:
    styles = (participant.get("perks") or {}).get("styles") or []
    primary = _find(styles, "description", "primaryStyle") or (styles[0] if styles else {})
    secondary = _find(styles, "description", "subStyle") or (styles[1] if len(styles) > 1 else {})
    return primary.get("style", 0), secondary.get("style", 0)


def _extract_v5(raw: Dict[str, Any], name: str, match_id: str) -> MatchStats:
    info = raw["info"]
    participant = next(
        (
            p for p in info.get("participants") or []
            if _same_name(p.get("riotIdGameName"), name) or _same_name(p.get("summonerName"), name)
        ),
        None,
    )
    if participant is None:
        raise ParticipantNotFound(name, match_id)

    minutes, seconds = split_duration(_v5_duration_seconds(info))
    minions = participant["totalMinionsKilled"]
    rune_primary, rune_secondary = _v5_styles(participant)
    return MatchStats(
        match_id=match_id,
        summoner_name=name,
        outcome=bool(participant["win"]),
        duration_minutes=minutes,
        duration_seconds=seconds,
        spell_primary=participant["summoner1Id"],
        spell_secondary=participant["summoner2Id"],
        rune_primary=rune_primary,
        rune_secondary=rune_secondary,
        champion_id=participant["championId"],
        kills=participant["kills"],
        deaths=participant["deaths"],
        assists=participant["assists"],
        items=_items(participant),
        champion_level=participant["champLevel"],
        minions_killed=minions,
        minions_per_minute=minions_per_minute(minions, minutes),
    )


def extract_match_stats(raw: Dict[str, Any], name: str, *, match_id: Optional[str] = None) -> MatchStats:
    """Compute the MatchStats of ``name`` in ``raw``.

    The player is matched case-insensitively. ``match_id`` is used when the
    payload carries none of its own.

    Raises:
        ParticipantNotFound: ``name`` is not among the participants.
        MalformedMatch: a field needed for the stats is missing.
    """
    if not isinstance(raw, dict):
        raise MalformedMatch(f"match payload is {type(raw).__name__}, not an object")
    try:
        if isinstance(raw.get("info"), dict):
            own_id = (raw.get("metadata") or {}).get("matchId")
            return _extract_v5(raw, name, str(own_id or match_id))
        own_id = raw.get("gameId")
        return _extract_v4(raw, name, str(own_id if own_id is not None else match_id))
    except (KeyError, TypeError, AttributeError) as e:
        raise MalformedMatch(f"match {match_id or '?'} is missing {e}") from e
