"""Personality DTOs for application layer."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ...domain.entities import Personality


@dataclass
class ModelConfigDTO:
    """DTO for a personality's model."""

    name: str
    endpoint: str
    max_tokens: int
    supports_images: bool
    supports_audio: bool


@dataclass
class PersonalityDTO:
    """DTO for personality responses."""

    id: str
    owner_id: str
    name: str
    display_name: str
    prompt: str
    model_path: str
    max_word_count: int
    model: ModelConfigDTO
    aliases: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, personality: Personality) -> "PersonalityDTO":
        """Convert personality entity to DTO."""
        profile = personality.profile
        model = personality.model

        return cls(
            id=personality.id.value,
            owner_id=personality.owner_id.value,
            name=profile.name,
            display_name=personality.display_name,
            prompt=profile.prompt,
            model_path=profile.model_path,
            max_word_count=profile.max_word_count,
            model=ModelConfigDTO(
                name=model.name,
                endpoint=model.endpoint,
                max_tokens=model.max_tokens,
                supports_images=model.supports_images,
                supports_audio=model.supports_audio,
            ),
            aliases=[alias.value for alias in personality.aliases],
            created_at=personality.created_at,
            updated_at=personality.updated_at,
        )


@dataclass
class RegisterPersonalityDTO:
    """DTO for registering a personality."""

    name: str
    owner_id: str
    prompt: Optional[str] = None
    display_name: Optional[str] = None
    model_path: Optional[str] = None
    max_word_count: Optional[int] = None
    model_name: Optional[str] = None
    aliases: List[str] = field(default_factory=list)
    personality_id: Optional[str] = None


@dataclass
class UpdatePersonalityProfileDTO:
    """DTO for updating a personality's profile. ``None`` keeps the current value."""

    personality_name: str
    requester_id: str
    prompt: Optional[str] = None
    display_name: Optional[str] = None
    model_path: Optional[str] = None
    max_word_count: Optional[int] = None
    model_name: Optional[str] = None
