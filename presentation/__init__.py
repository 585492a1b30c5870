"""Presentation layer - User interfaces."""
from .cli import LookupCommand

__all__ = [
    "LookupCommand",
]
