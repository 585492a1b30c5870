"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .rate_limiter import RateLimiter, EndpointRateLimiter
from .transport import HttpxTransport

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'EndpointRateLimiter',
    'HttpxTransport',
]
