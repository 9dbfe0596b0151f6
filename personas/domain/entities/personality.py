"""Personality domain entity."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..exceptions import InvalidPersonalityError
from ..value_objects import Alias, ModelConfig, PersonalityId, PersonalityProfile, UserId

AliasLike = Union[Alias, str]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Personality:
    """Aggregate owning a personality's identity, profile, model and aliases.

    Two personalities are equal when they share a ``PersonalityId``; the
    profile and model inside are compared structurally only where callers
    compare them directly.
    """

    def __init__(
        self,
        personality_id: PersonalityId,
        owner_id: UserId,
        profile: PersonalityProfile,
        model: ModelConfig,
        aliases: Iterable[AliasLike] = (),
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = personality_id
        self.owner_id = owner_id
        self._profile = profile
        self._model = model
        self._aliases: Dict[str, Alias] = {}
        for alias in aliases:
            alias = self._as_alias(alias)
            self._aliases.setdefault(alias.value, alias)

        self.created_at = created_at or _utcnow()
        self.updated_at = updated_at or self.created_at

    @classmethod
    def create(
        cls,
        personality_id: PersonalityId,
        owner_id: UserId,
        profile: PersonalityProfile,
        model: ModelConfig,
    ) -> "Personality":
        """Create a new personality with an empty alias set."""
        if not isinstance(personality_id, PersonalityId):
            raise InvalidPersonalityError("a PersonalityId is required")

        if not isinstance(owner_id, UserId):
            raise InvalidPersonalityError("an owner UserId is required")

        if not isinstance(profile, PersonalityProfile):
            raise InvalidPersonalityError("a PersonalityProfile is required")

        if not isinstance(model, ModelConfig):
            raise InvalidPersonalityError("a ModelConfig is required")

        return cls(personality_id, owner_id, profile, model)

    @property
    def id(self) -> PersonalityId:
        return self._id

    @property
    def profile(self) -> PersonalityProfile:
        return self._profile

    @property
    def model(self) -> ModelConfig:
        return self._model

    @property
    def aliases(self) -> Tuple[Alias, ...]:
        """Aliases in the order they were added."""
        return tuple(self._aliases.values())

    @property
    def display_name(self) -> str:
        """Profile display name, falling back to the personality ID."""
        return self._profile.display_name or self._profile.name or self._id.value

    def add_alias(self, alias: AliasLike) -> bool:
        """Add an alias; returns False if it was already present."""
        alias = self._as_alias(alias)
        if alias.value in self._aliases:
            return False

        self._aliases[alias.value] = alias
        self._touch()
        return True

    def remove_alias(self, alias: AliasLike) -> bool:
        """Remove an alias; returns False if it was not present."""
        key = alias.value if isinstance(alias, Alias) else Alias.normalize(alias)
        if key is None or key not in self._aliases:
            return False

        del self._aliases[key]
        self._touch()
        return True

    def has_alias(self, alias: AliasLike) -> bool:
        """Check if the alias belongs to this personality."""
        key = alias.value if isinstance(alias, Alias) else Alias.normalize(alias)
        return key is not None and key in self._aliases

    def replace_profile(self, profile: PersonalityProfile) -> None:
        """Swap in a new profile."""
        if not isinstance(profile, PersonalityProfile):
            raise InvalidPersonalityError("a PersonalityProfile is required")

        self._profile = profile
        self._touch()

    def replace_model(self, model: ModelConfig) -> None:
        """Swap in a new model configuration."""
        if not isinstance(model, ModelConfig):
            raise InvalidPersonalityError("a ModelConfig is required")

        self._model = model
        self._touch()

    def is_owned_by(self, user_id: Any) -> bool:
        """Check if ``user_id`` owns this personality."""
        return isinstance(user_id, UserId) and user_id == self.owner_id

    def needs_profile_refresh(self, max_age: timedelta, now: Optional[datetime] = None) -> bool:
        """Check if the profile is older than ``max_age``."""
        now = now or _utcnow()
        return now - self.updated_at > max_age

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for repositories and DTOs."""
        return {
            "id": self._id.value,
            "owner_id": self.owner_id.value,
            "profile": self._profile.to_dict(),
            "model": self._model.to_dict(),
            "aliases": [alias.to_dict() for alias in self.aliases],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Personality":
        """Rebuild a personality from ``to_dict`` output."""
        personality_id = PersonalityId(data["id"])
        profile_data = data.get("profile") or {"name": personality_id.value}
        aliases: List[str] = []
        for alias_data in data.get("aliases") or []:
            if isinstance(alias_data, str):
                aliases.append(alias_data)
            else:
                aliases.append(alias_data.get("original") or alias_data["value"])

        return cls(
            personality_id=personality_id,
            owner_id=UserId(data["owner_id"]),
            profile=PersonalityProfile.from_dict(profile_data),
            model=ModelConfig.from_dict(data.get("model") or {}),
            aliases=aliases,
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
        )

    def _touch(self) -> None:
        self.updated_at = _utcnow()

    @staticmethod
    def _as_alias(alias: AliasLike) -> Alias:
        return alias if isinstance(alias, Alias) else Alias(alias)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Personality):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        aliases = ", ".join(alias.value for alias in self.aliases)
        return f"Personality(id={self._id.value!r}, owner={self.owner_id.value!r}, aliases=[{aliases}])"


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)
