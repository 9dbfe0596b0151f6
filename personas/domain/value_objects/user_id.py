"""User ID value object."""

from dataclasses import dataclass
from typing import Union

from ..exceptions import ValidationError
from .base import ValueObject


@dataclass(frozen=True, eq=False)
class UserId(ValueObject):
    """Value object for the owner of a personality."""

    value: str

    def validate(self) -> None:
        """Validate user ID."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("user id", self.value, "must be a non-empty string")

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @classmethod
    def of(cls, value: Union["UserId", str, int]) -> "UserId":
        """Create UserId from a string, an int or an existing UserId."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        return cls(value)
