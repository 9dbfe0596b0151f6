"""Application DTOs module."""

from .personality_dto import (
    ModelConfigDTO,
    PersonalityDTO,
    RegisterPersonalityDTO,
    UpdatePersonalityProfileDTO,
)

__all__ = [
    "ModelConfigDTO",
    "PersonalityDTO",
    "RegisterPersonalityDTO",
    "UpdatePersonalityProfileDTO",
]
