"""Infrastructure layer - API clients and repositories."""
from .api import RiotAPIClient, RateLimiter, EndpointRateLimiter, HttpxTransport
from .repositories import MatchRepository, SummonerRepository

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'EndpointRateLimiter',
    'HttpxTransport',
    'MatchRepository',
    'SummonerRepository',
]
