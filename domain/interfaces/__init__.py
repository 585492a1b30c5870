"""Domain interfaces."""
from .repository import IAccountResolver, IMatchRepository
from .transport import Transport

__all__ = [
    'IAccountResolver',
    'IMatchRepository',
    'Transport',
]
