"""Presentation CLI exports."""
from .lookup_command import LookupCommand, render_outcome, MESSAGES

__all__ = [
    "LookupCommand",
    "render_outcome",
    "MESSAGES",
]
