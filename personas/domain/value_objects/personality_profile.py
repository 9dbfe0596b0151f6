"""Personality profile value object."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions import ValidationError
from .base import ValueObject

DEFAULT_MODEL_PATH = "/default"
DEFAULT_MAX_WORD_COUNT = 1000


@dataclass(frozen=True, eq=False)
class PersonalityProfile(ValueObject):
    """What a personality says and how much of it."""

    name: str
    prompt: str
    model_path: str = DEFAULT_MODEL_PATH
    max_word_count: int = DEFAULT_MAX_WORD_COUNT
    display_name: Optional[str] = None

    def validate(self) -> None:
        """Validate personality profile."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("profile name", self.name, "must be a non-empty string")

        if not isinstance(self.prompt, str) or not self.prompt.strip():
            raise ValidationError("profile prompt", self.prompt, "must be a non-empty string")

        if not isinstance(self.model_path, str) or not self.model_path:
            raise ValidationError("model path", self.model_path, "must be a non-empty string")

        # bool is an int subclass
        if (
            not isinstance(self.max_word_count, int)
            or isinstance(self.max_word_count, bool)
            or self.max_word_count <= 0
        ):
            raise ValidationError(
                "max word count", self.max_word_count, "must be a positive integer"
            )

        if self.display_name is not None and not isinstance(self.display_name, str):
            raise ValidationError("display name", self.display_name, "must be a string")

    @property
    def effective_display_name(self) -> str:
        """Display name, falling back to the profile name."""
        return self.display_name or self.name

    @classmethod
    def for_name(cls, name: str, **overrides: Any) -> "PersonalityProfile":
        """Profile with the default prompt for ``name``."""
        overrides.setdefault("prompt", f"You are {name}")
        return cls(name=name, **overrides)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonalityProfile":
        """Build a profile from stored data, filling legacy gaps."""
        name = data.get("name") or data.get("display_name")
        return cls(
            name=name,
            prompt=data.get("prompt") or f"You are {name}",
            model_path=data.get("model_path") or DEFAULT_MODEL_PATH,
            max_word_count=data.get("max_word_count") or DEFAULT_MAX_WORD_COUNT,
            display_name=data.get("display_name"),
        )
