"""Application use cases module."""

from .personality_use_cases import (
    AddAliasUseCase,
    ListPersonalitiesUseCase,
    RegisterPersonalityUseCase,
    RemoveAliasUseCase,
    RemovePersonalityUseCase,
    ResolvePersonalityUseCase,
    UpdatePersonalityProfileUseCase,
    slugify,
)

__all__ = [
    "AddAliasUseCase",
    "ListPersonalitiesUseCase",
    "RegisterPersonalityUseCase",
    "RemoveAliasUseCase",
    "RemovePersonalityUseCase",
    "ResolvePersonalityUseCase",
    "UpdatePersonalityProfileUseCase",
    "slugify",
]
