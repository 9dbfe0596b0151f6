"""Infrastructure repositories module."""

from .personality_repository import InMemoryPersonalityRepository

__all__ = [
    "InMemoryPersonalityRepository",
]
