"""Dependency injection container."""

import logging
from typing import Any, Dict, Optional

from ..application.dto import RegisterPersonalityDTO
from ..application.use_cases import (
    AddAliasUseCase,
    ListPersonalitiesUseCase,
    RegisterPersonalityUseCase,
    RemoveAliasUseCase,
    RemovePersonalityUseCase,
    ResolvePersonalityUseCase,
    UpdatePersonalityProfileUseCase,
    slugify,
)
from ..domain.exceptions import PersonasException
from ..domain.repositories import IPersonalityRepository
from ..domain.services import PersonalityRegistry
from ..infrastructure.repositories import InMemoryPersonalityRepository
from .settings import Settings

logger = logging.getLogger(__name__)


class Container:
    """Application context holding the registry, repository and use cases.

    Built explicitly and passed to the command layer. ``initialize`` runs in
    a fixed order: repository initialize, repository load, registry populate,
    owner seeding. Lookups are trusted only after it returns.
    """

    def __init__(
        self,
        settings: Settings,
        repository: Optional[IPersonalityRepository] = None,
        registry: Optional[PersonalityRegistry] = None,
    ):
        self.settings = settings
        self.repository = repository if repository is not None else InMemoryPersonalityRepository()
        self.registry = registry if registry is not None else PersonalityRegistry()
        self._instances: Dict[str, Any] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Initialize container and all dependencies."""
        if self._initialized:
            return

        try:
            await self.repository.initialize()
            self.registry.load(await self.repository.find_all())

            self._register_use_cases()
            self._initialized = True

            await self._seed_owner_personalities()
            logger.info(f"Container initialized with {len(self.registry)} personalities")

        except Exception as e:
            self._initialized = False
            logger.error(f"Failed to initialize container: {e}")
            raise

    def _register_use_cases(self) -> None:
        """Register use cases."""
        registry, repository = self.registry, self.repository

        self._instances["personality_registry"] = registry
        self._instances["personality_repository"] = repository
        self._instances["register_personality"] = RegisterPersonalityUseCase(registry, repository)
        self._instances["add_alias"] = AddAliasUseCase(
            registry, repository, max_aliases=self.settings.max_aliases_per_personality
        )
        self._instances["remove_alias"] = RemoveAliasUseCase(registry, repository)
        self._instances["resolve_personality"] = ResolvePersonalityUseCase(registry)
        self._instances["remove_personality"] = RemovePersonalityUseCase(registry, repository)
        self._instances["list_personalities"] = ListPersonalitiesUseCase(registry)
        self._instances["update_personality_profile"] = UpdatePersonalityProfileUseCase(
            registry, repository
        )

    async def _seed_owner_personalities(self) -> None:
        """Register the configured owner personalities that are missing."""
        owner_id = self.settings.bot_owner_id
        if not owner_id:
            logger.info("No bot owner ID configured, skipping seeding")
            return

        existing = {p.id.value for p in self.registry.list_by_owner(owner_id)}
        missing = [
            name for name in self.settings.owner_personality_names
            if slugify(name) not in existing
        ]
        if not missing:
            return

        logger.info(f"Seeding {len(missing)} owner personalities: {', '.join(missing)}")

        register = self.get("register_personality")
        for name in missing:
            try:
                await register.execute(RegisterPersonalityDTO(name=name, owner_id=owner_id))
            except PersonasException as e:
                logger.error(f"Error seeding {name}: {e.message}")

    def get(self, service_name: str) -> Any:
        """Get service instance."""
        if not self._initialized:
            raise RuntimeError("Container not initialized")

        instance = self._instances.get(service_name)
        if instance is None:
            raise ValueError(f"Service '{service_name}' not found")

        return instance

    async def close(self) -> None:
        """Drop in-memory state."""
        self.registry.clear()
        self._instances.clear()
        self._initialized = False
        logger.info("Container closed successfully")
