"""Configuration package."""
from .settings import settings, Settings, attempts_budget

__all__ = [
    'settings',
    'Settings',
    'attempts_budget',
]
