"""Personality repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Personality
from ..value_objects import PersonalityId, UserId


class IPersonalityRepository(ABC):
    """Personality repository interface.

    Implementations raise ``PersistenceError`` on storage failures and never
    retry; the caller decides what to do.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Acquire backing storage. Must finish before the registry is loaded."""
        pass

    @abstractmethod
    async def save(self, personality: Personality) -> None:
        """Create or update a personality."""
        pass

    @abstractmethod
    async def find_by_id(self, personality_id: PersonalityId) -> Optional[Personality]:
        """Get personality by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Personality]:
        """Get personality by profile name, display name or ID (case-insensitive)."""
        pass

    @abstractmethod
    async def find_by_alias(self, alias: str) -> Optional[Personality]:
        """Get personality owning an alias."""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Personality]:
        """Get all personalities owned by a user."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Personality]:
        """Get all personalities."""
        pass

    @abstractmethod
    async def delete(self, personality_id: PersonalityId) -> bool:
        """Delete personality and its aliases."""
        pass

    @abstractmethod
    async def exists(self, personality_id: PersonalityId) -> bool:
        """Check if a personality is stored."""
        pass
