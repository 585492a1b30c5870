"""Summoner identity types."""
from typing import NewType

# A display name that passed validation. Only the name validator creates one.
SummonerName = NewType('SummonerName', str)

# Opaque key the stats service uses to address a player's match history.
AccountId = NewType('AccountId', str)
