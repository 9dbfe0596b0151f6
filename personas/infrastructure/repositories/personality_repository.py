"""In-memory personality repository implementation."""

import copy
import logging
from typing import Any, Dict, List, Optional

from ...domain.entities import Personality
from ...domain.exceptions import PersistenceError
from ...domain.repositories import IPersonalityRepository
from ...domain.value_objects import Alias, PersonalityId, UserId

logger = logging.getLogger(__name__)


class InMemoryPersonalityRepository(IPersonalityRepository):
    """Process-local implementation of the personality repository.

    Stores serialized snapshots, so entities handed out are never the ones
    held by the store.
    """

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None):
        self._seed = seed or []
        self._personalities: Dict[str, Dict[str, Any]] = {}
        self._aliases: Dict[str, str] = {}
        self._initialized = False

    async def initialize(self) -> None:
        """Load seed data once."""
        if self._initialized:
            return

        for data in self._seed:
            self._store(Personality.from_dict(data))

        self._initialized = True
        logger.info(f"Personality repository initialized with {len(self._personalities)} entries")

    async def save(self, personality: Personality) -> None:
        """Create or update a personality."""
        self._ensure_initialized("save")
        self._store(personality)
        logger.debug(f"Saved personality: {personality.id}")

    async def find_by_id(self, personality_id: PersonalityId) -> Optional[Personality]:
        """Get personality by ID."""
        self._ensure_initialized("find_by_id")
        data = self._personalities.get(personality_id.value)
        return self._hydrate(data) if data else None

    async def find_by_name(self, name: str) -> Optional[Personality]:
        """Get personality by profile name, display name or ID."""
        self._ensure_initialized("find_by_name")
        if not name:
            return None

        needle = name.strip().lower()
        for data in self._personalities.values():
            profile = data.get("profile") or {}
            candidates = (profile.get("name"), profile.get("display_name"), data.get("id"))
            if any(c and c.lower() == needle for c in candidates):
                return self._hydrate(data)

        return None

    async def find_by_alias(self, alias: str) -> Optional[Personality]:
        """Get personality owning an alias."""
        self._ensure_initialized("find_by_alias")
        key = Alias.normalize(alias)
        if key is None:
            return None

        personality_id = self._aliases.get(key)
        data = self._personalities.get(personality_id) if personality_id else None
        if data is None:
            # Alias points at nothing, clean up
            self._aliases.pop(key, None)
            return None

        return self._hydrate(data)

    async def find_by_owner(self, owner_id: UserId) -> List[Personality]:
        """Get all personalities owned by a user."""
        self._ensure_initialized("find_by_owner")
        return [
            self._hydrate(data)
            for data in self._personalities.values()
            if data["owner_id"] == owner_id.value
        ]

    async def find_all(self) -> List[Personality]:
        """Get all personalities."""
        self._ensure_initialized("find_all")
        return [self._hydrate(data) for data in self._personalities.values()]

    async def delete(self, personality_id: PersonalityId) -> bool:
        """Delete personality and the aliases pointing at it."""
        self._ensure_initialized("delete")
        removed = self._personalities.pop(personality_id.value, None)
        self._aliases = {
            alias: target
            for alias, target in self._aliases.items()
            if target != personality_id.value
        }

        if removed:
            logger.info(f"Deleted personality: {personality_id}")
        return removed is not None

    async def exists(self, personality_id: PersonalityId) -> bool:
        """Check if a personality is stored."""
        self._ensure_initialized("exists")
        return personality_id.value in self._personalities

    def _store(self, personality: Personality) -> None:
        data = personality.to_dict()
        key = personality.id.value

        # Aliases this personality dropped since the last save
        self._aliases = {
            alias: target for alias, target in self._aliases.items() if target != key
        }
        for alias in personality.aliases:
            self._aliases[alias.value] = key

        self._personalities[key] = data

    @staticmethod
    def _hydrate(data: Dict[str, Any]) -> Personality:
        return Personality.from_dict(copy.deepcopy(data))

    def _ensure_initialized(self, operation: str) -> None:
        if not self._initialized:
            raise PersistenceError(operation, "repository not initialized")
