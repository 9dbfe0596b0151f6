"""Domain repository interfaces."""

from .personality_repository import IPersonalityRepository

__all__ = [
    "IPersonalityRepository",
]
