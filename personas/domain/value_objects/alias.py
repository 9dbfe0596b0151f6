"""Alias value object."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..exceptions import ValidationError
from .base import ValueObject


@dataclass(frozen=True, eq=False)
class Alias(ValueObject):
    """Short, case-insensitive name for a personality.

    ``value`` is stored normalized (trimmed, lower-cased); ``original`` keeps
    the spelling the user typed and is not part of equality.
    """

    value: str
    original: str = field(init=False, compare=False, repr=False)

    MAX_LENGTH = 100

    def __post_init__(self) -> None:
        raw = self.value
        if not isinstance(raw, str):
            raise ValidationError("alias", raw, "must be a string")

        object.__setattr__(self, "original", raw.strip())
        object.__setattr__(self, "value", self.normalize(raw) or "")
        super().__post_init__()

    def validate(self) -> None:
        """Validate alias."""
        if not self.value:
            raise ValidationError("alias", self.original, "must not be empty")

        if len(self.value) > self.MAX_LENGTH:
            raise ValidationError(
                "alias", self.original, f"must be at most {self.MAX_LENGTH} characters"
            )

    @staticmethod
    def normalize(raw: Any) -> Optional[str]:
        """Trim and lower-case raw alias text; ``None`` for unusable input."""
        if isinstance(raw, Alias):
            return raw.value
        if not isinstance(raw, str):
            return None
        normalized = raw.strip().lower()
        return normalized or None

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "original": self.original}

    def __str__(self) -> str:
        """String representation."""
        return self.value
