"""Domain entities module."""

from .personality import Personality

__all__ = [
    "Personality",
]
