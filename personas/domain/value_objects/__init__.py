"""Domain value objects module."""

from .base import ValueObject
from .personality_id import PersonalityId
from .user_id import UserId
from .alias import Alias
from .personality_profile import PersonalityProfile
from .model_config import ModelConfig

__all__ = [
    "ValueObject",
    "PersonalityId",
    "UserId",
    "Alias",
    "PersonalityProfile",
    "ModelConfig",
]
