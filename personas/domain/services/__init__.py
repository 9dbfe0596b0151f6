"""Domain services module."""

from .personality_registry import AliasResolution, PersonalityRegistry, ResolutionStatus

__all__ = [
    "AliasResolution",
    "PersonalityRegistry",
    "ResolutionStatus",
]
