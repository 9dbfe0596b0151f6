"""In-memory personality registry."""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from ..entities import Personality
from ..exceptions import InvalidPersonalityError, ValidationError
from ..value_objects import Alias, PersonalityId, UserId

logger = logging.getLogger(__name__)


def _word_count(alias: str) -> int:
    return len(alias.split())


class ResolutionStatus(Enum):
    """Outcome of an alias lookup or claim."""
    FOUND = "found"
    NOT_FOUND = "not_found"              # Unmapped alias or unknown personality
    REJECTED_INPUT = "rejected_input"    # None, blank or non-string alias
    STALE = "stale"                      # Alias points at an unregistered ID


@dataclass(frozen=True)
class AliasResolution:
    """Typed result of ``resolve`` and ``claim_alias``."""

    status: ResolutionStatus
    alias: Optional[str] = None
    personality: Optional[Personality] = None
    displaced: Optional[PersonalityId] = None

    @property
    def ok(self) -> bool:
        """Check if the alias resolved to a personality."""
        return self.status is ResolutionStatus.FOUND


class PersonalityRegistry:
    """Index of personalities by canonical ID and by alias.

    Lookups and alias claims never raise on bad input: they return ``None``,
    ``False`` or an ``AliasResolution``. One lock guards both maps so an
    alias is never observed pointing at a half-registered personality.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._personalities: Dict[PersonalityId, Personality] = {}
        self._aliases: Dict[str, PersonalityId] = {}
        self._max_alias_word_count = 1

    # ------------------------------------------------------------------
    # Personalities
    # ------------------------------------------------------------------

    def register(self, personality: Personality) -> Personality:
        """Insert or replace a personality under its ID.

        The alias map is left alone; use ``set_alias`` or ``load`` for that.
        """
        if not isinstance(personality, Personality):
            raise InvalidPersonalityError("only Personality aggregates can be registered")

        with self._lock:
            replaced = personality.id in self._personalities
            self._personalities[personality.id] = personality

        logger.debug(
            f"{'Replaced' if replaced else 'Registered'} personality {personality.id}"
        )
        return personality

    def get_by_id(self, personality_id: Any) -> Optional[Personality]:
        """Get personality by ID."""
        key = self._coerce_id(personality_id)
        if key is None:
            return None

        with self._lock:
            return self._personalities.get(key)

    def unregister(self, personality_id: Any) -> Optional[Personality]:
        """Remove a personality and every alias pointing at it."""
        key = self._coerce_id(personality_id)
        if key is None:
            return None

        with self._lock:
            personality = self._personalities.pop(key, None)
            if personality is None:
                return None

            dangling = [alias for alias, target in self._aliases.items() if target == key]
            for alias in dangling:
                del self._aliases[alias]
            self._recount_alias_words()

        logger.info(f"Unregistered personality {key} and {len(dangling)} alias(es)")
        return personality

    def list_by_owner(self, owner_id: Any) -> List[Personality]:
        """Get personalities owned by a user."""
        try:
            owner = UserId.of(owner_id)
        except ValidationError:
            return []

        with self._lock:
            return [p for p in self._personalities.values() if p.owner_id == owner]

    def all(self) -> List[Personality]:
        """Get all registered personalities."""
        with self._lock:
            return list(self._personalities.values())

    # ------------------------------------------------------------------
    # Aliases
    # ------------------------------------------------------------------

    def resolve(self, alias: Any) -> AliasResolution:
        """Resolve an alias to a personality with a typed outcome."""
        key = Alias.normalize(alias)
        if key is None:
            return AliasResolution(ResolutionStatus.REJECTED_INPUT)

        with self._lock:
            target = self._aliases.get(key)
            if target is None:
                return AliasResolution(ResolutionStatus.NOT_FOUND, alias=key)

            personality = self._personalities.get(target)

        if personality is None:
            logger.warning(f"Alias '{key}' points at unregistered personality {target}")
            return AliasResolution(ResolutionStatus.STALE, alias=key)

        return AliasResolution(ResolutionStatus.FOUND, alias=key, personality=personality)

    def get_by_alias(self, alias: Any) -> Optional[Personality]:
        """Get personality by alias, or None."""
        return self.resolve(alias).personality

    def claim_alias(self, alias: Any, personality_id: Any) -> AliasResolution:
        """Point an alias at a personality, displacing any previous owner."""
        if Alias.normalize(alias) is None:
            return AliasResolution(ResolutionStatus.REJECTED_INPUT)
        try:
            alias_vo = alias if isinstance(alias, Alias) else Alias(alias)
        except ValidationError:
            return AliasResolution(ResolutionStatus.REJECTED_INPUT)

        key = self._coerce_id(personality_id)

        with self._lock:
            personality = self._personalities.get(key) if key is not None else None
            if personality is None:
                return AliasResolution(ResolutionStatus.NOT_FOUND, alias=alias_vo.value)

            previous = self._aliases.get(alias_vo.value)
            if previous is not None and previous != key:
                previous_owner = self._personalities.get(previous)
                if previous_owner is not None:
                    previous_owner.remove_alias(alias_vo)

            self._aliases[alias_vo.value] = key
            self._max_alias_word_count = max(
                self._max_alias_word_count, _word_count(alias_vo.value)
            )
            personality.add_alias(alias_vo)

        displaced = previous if previous is not None and previous != key else None
        if displaced is not None:
            logger.info(f"Alias '{alias_vo.value}' moved from {displaced} to {key}")
        else:
            logger.debug(f"Alias '{alias_vo.value}' set for {key}")

        return AliasResolution(
            ResolutionStatus.FOUND,
            alias=alias_vo.value,
            personality=personality,
            displaced=displaced,
        )

    def set_alias(self, alias: Any, personality_id: Any) -> bool:
        """Point an alias at a personality; False on bad alias or unknown ID."""
        return self.claim_alias(alias, personality_id).ok

    def remove_alias(self, alias: Any) -> bool:
        """Drop an alias mapping; False if it was not mapped."""
        key = Alias.normalize(alias)
        if key is None:
            return False

        with self._lock:
            target = self._aliases.pop(key, None)
            if target is None:
                return False

            owner = self._personalities.get(target)
            if owner is not None:
                owner.remove_alias(key)
            self._recount_alias_words()

        logger.debug(f"Alias '{key}' removed from {target}")
        return True

    def aliases_for(self, personality_id: Any) -> List[str]:
        """Get aliases currently mapped to a personality."""
        key = self._coerce_id(personality_id)
        if key is None:
            return []

        with self._lock:
            return [alias for alias, target in self._aliases.items() if target == key]

    def alias_map(self) -> Dict[str, str]:
        """Snapshot of alias -> personality ID."""
        with self._lock:
            return {alias: target.value for alias, target in self._aliases.items()}

    @property
    def max_alias_word_count(self) -> int:
        """Most words in any mapped alias, at least 1.

        Mention parsers use it to know how many words after ``@`` may form
        a multi-word alias.
        """
        with self._lock:
            return self._max_alias_word_count

    def _recount_alias_words(self) -> None:
        self._max_alias_word_count = max(
            (_word_count(alias) for alias in self._aliases), default=1
        )

    # ------------------------------------------------------------------
    # Bulk
    # ------------------------------------------------------------------

    def load(self, personalities: Iterable[Personality]) -> None:
        """Rebuild both maps from aggregates and their alias sets."""
        with self._lock:
            self.clear()
            loaded = list(personalities)
            for personality in loaded:
                self.register(personality)

            for personality in loaded:
                for alias in personality.aliases:
                    self.claim_alias(alias, personality.id)

        logger.info(
            f"Registry loaded {len(self._personalities)} personalities "
            f"and {len(self._aliases)} aliases"
        )

    def clear(self) -> None:
        """Remove everything."""
        with self._lock:
            self._personalities.clear()
            self._aliases.clear()
            self._max_alias_word_count = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._personalities)

    def __contains__(self, personality_id: Any) -> bool:
        return self.get_by_id(personality_id) is not None

    @staticmethod
    def _coerce_id(personality_id: Any) -> Optional[PersonalityId]:
        if isinstance(personality_id, PersonalityId):
            return personality_id
        if isinstance(personality_id, Personality):
            return personality_id.id
        try:
            return PersonalityId(personality_id)
        except ValidationError:
            return None
