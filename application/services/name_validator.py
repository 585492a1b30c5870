"""Summoner name validation."""
from __future__ import annotations

from domain.entities import SummonerName
from domain.errors import InvalidName

_ASCII_ALNUM = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
_PUNCTUATION = frozenset(" _.")


def _allowed(ch: str) -> bool:
    # str.isalpha() is exactly the Unicode letter categories (Lu Ll Lt Lm Lo).
    return ch in _ASCII_ALNUM or ch in _PUNCTUATION or ch.isalpha()


def is_valid_summoner_name(raw: str) -> bool:
    return bool(raw) and all(_allowed(ch) for ch in raw)


def validate_summoner_name(raw: str) -> SummonerName:
    """Return ``raw`` unchanged as a SummonerName, or raise InvalidName.

    Allowed: ASCII letters and digits, any Unicode letter, space,
    underscore and period. The empty string is rejected.
    """
    if not isinstance(raw, str) or not is_valid_summoner_name(raw):
        raise InvalidName(raw)
    return SummonerName(raw)
