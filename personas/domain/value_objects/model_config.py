"""Model configuration value object."""

from dataclasses import dataclass
from typing import Any, Dict

from ..exceptions import ValidationError
from .base import ValueObject

DEFAULT_MODEL_NAME = "default"
DEFAULT_ENDPOINT = "/default"
DEFAULT_MAX_TOKENS = 4096


@dataclass(frozen=True, eq=False)
class ModelConfig(ValueObject):
    """Model a personality talks through, with its capability flags."""

    name: str
    endpoint: str = DEFAULT_ENDPOINT
    max_tokens: int = DEFAULT_MAX_TOKENS
    supports_images: bool = False
    supports_audio: bool = False

    def validate(self) -> None:
        """Validate model configuration."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("model name", self.name, "must be a non-empty string")

        if not isinstance(self.endpoint, str) or not self.endpoint:
            raise ValidationError("model endpoint", self.endpoint, "must be a non-empty string")

        if (
            not isinstance(self.max_tokens, int)
            or isinstance(self.max_tokens, bool)
            or self.max_tokens <= 0
        ):
            raise ValidationError("max tokens", self.max_tokens, "must be a positive integer")

        if not isinstance(self.supports_images, bool) or not isinstance(self.supports_audio, bool):
            raise ValidationError("model capabilities", self.snapshot(), "flags must be booleans")

    @property
    def is_multimodal(self) -> bool:
        """Check if the model accepts anything besides text."""
        return self.supports_images or self.supports_audio

    @classmethod
    def create_default(cls) -> "ModelConfig":
        """Default model used when nothing else is configured."""
        return cls(name=DEFAULT_MODEL_NAME)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelConfig":
        """Build a model config from stored data."""
        capabilities = data.get("capabilities") or {}
        return cls(
            name=data.get("name") or DEFAULT_MODEL_NAME,
            endpoint=data.get("endpoint") or DEFAULT_ENDPOINT,
            max_tokens=data.get("max_tokens", capabilities.get("max_tokens", DEFAULT_MAX_TOKENS)),
            supports_images=data.get("supports_images", capabilities.get("supports_images", False)),
            supports_audio=data.get("supports_audio", capabilities.get("supports_audio", False)),
        )
