"""Personality ID value object."""

import re
from dataclasses import dataclass
from typing import Union
from uuid import uuid4

from ..exceptions import ValidationError


@dataclass(frozen=True)
class PersonalityId:
    """Identity of a personality aggregate.

    Compared by value so it can key the registry, but it is an identity,
    not a structural value object.
    """

    value: str

    SLUG_PATTERN = re.compile(r"^[^\s]+$")

    def __post_init__(self) -> None:
        """Validate personality ID."""
        if not isinstance(self.value, str):
            raise ValidationError("personality id", self.value, "must be a string")

        value = self.value.strip()
        if not value:
            raise ValidationError("personality id", self.value, "must not be empty")

        if not self.SLUG_PATTERN.match(value):
            raise ValidationError("personality id", self.value, "must not contain whitespace")

        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @classmethod
    def of(cls, value: Union["PersonalityId", str]) -> "PersonalityId":
        """Coerce a raw string into a PersonalityId."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def generate(cls) -> "PersonalityId":
        """Create a random personality ID."""
        return cls(f"personality-{uuid4().hex[:12]}")
