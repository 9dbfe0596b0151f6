"""Personality-related use cases."""

import logging
import random
import re
import string
from typing import List, Optional

from ...domain.entities import Personality
from ...domain.exceptions import (
    PermissionDeniedError,
    PersistenceError,
    PersonalityAlreadyExistsError,
    PersonalityNotFoundError,
    ValidationError,
)
from ...domain.repositories import IPersonalityRepository
from ...domain.services import PersonalityRegistry, ResolutionStatus
from ...domain.value_objects import (
    Alias,
    ModelConfig,
    PersonalityId,
    PersonalityProfile,
    UserId,
)
from ..dto import PersonalityDTO, RegisterPersonalityDTO, UpdatePersonalityProfileDTO

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Turn a personality name into an ID slug."""
    return _WHITESPACE.sub("-", name.strip().lower())


def _random_suffix(length: int = 6) -> str:
    return "".join(random.choices(string.ascii_lowercase, k=length))


class _PersonalityUseCase:
    """Shared lookup and ownership checks."""

    def __init__(self, registry: PersonalityRegistry, personality_repository: IPersonalityRepository):
        self.registry = registry
        self.personality_repository = personality_repository

    def _find(self, name: str) -> Personality:
        personality = self.registry.get_by_id(name) or self.registry.get_by_alias(name)
        if not personality:
            raise PersonalityNotFoundError(name)
        return personality

    @staticmethod
    def _check_owner(personality: Personality, requester_id: str, action: str) -> None:
        if not personality.is_owned_by(UserId.of(requester_id)):
            raise PermissionDeniedError(f"{action} {personality.id}", str(requester_id))


class RegisterPersonalityUseCase(_PersonalityUseCase):
    """Use case for registering a new personality."""

    async def execute(self, command: RegisterPersonalityDTO) -> PersonalityDTO:
        """Create the aggregate, index it and its aliases, then persist it."""

        logger.info(f"Registering personality: {command.name}")

        personality_id = PersonalityId(command.personality_id or slugify(command.name))
        if self.registry.get_by_id(personality_id):
            raise PersonalityAlreadyExistsError(personality_id.value)

        aliases = [Alias(alias) for alias in command.aliases]
        for alias in aliases:
            if alias.value == personality_id.value.lower():
                raise ValidationError("alias", alias.original, "cannot match the personality name")

            owner = self.registry.get_by_alias(alias.value)
            if owner:
                raise PersonalityAlreadyExistsError(
                    alias.original, f"alias already used by {owner.id}"
                )

        profile = PersonalityProfile.for_name(
            command.name,
            prompt=command.prompt or f"You are {command.display_name or command.name}",
            display_name=command.display_name,
        ).copy_with(
            model_path=command.model_path,
            max_word_count=command.max_word_count,
        )
        model = ModelConfig.create_default().copy_with(
            name=command.model_name,
            endpoint=command.model_path,
        )

        personality = Personality.create(personality_id, UserId.of(command.owner_id), profile, model)
        self.registry.register(personality)

        for alias in aliases:
            self.registry.claim_alias(alias.original, personality_id)

        if command.display_name:
            self._claim_display_name_alias(command.display_name.strip(), personality_id)

        try:
            await self.personality_repository.save(personality)
        except PersistenceError:
            logger.error(f"Failed to persist personality {personality_id}, rolling back registry")
            self.registry.unregister(personality_id)
            raise

        logger.info(f"Successfully registered personality: {personality_id}")
        return PersonalityDTO.from_entity(personality)

    def _claim_display_name_alias(self, display_name: str, personality_id: PersonalityId) -> None:
        """Use the display name as an alias, or an alternate one when it is taken.

        The alternate is the display name plus the next part of the slug
        (``lilith`` for ``lilith-second-part`` becomes ``lilith-second``),
        else the display name plus a random six-letter suffix.
        """
        if not display_name or display_name.lower() == personality_id.value.lower():
            return

        if not self._alias_taken(display_name, personality_id):
            self.registry.claim_alias(display_name, personality_id)
            logger.info(f"Set display name alias '{display_name.lower()}' for {personality_id}")
            return

        alternate = None
        name_parts = personality_id.value.lower().split("-")
        display_parts = display_name.lower().split("-")
        if len(name_parts) > len(display_parts) and display_parts[0] in name_parts:
            index = name_parts.index(display_parts[0])
            if index + 1 < len(name_parts):
                alternate = f"{display_name}-{name_parts[index + 1]}"

        if alternate is None or self._alias_taken(alternate, personality_id):
            alternate = f"{display_name}-{_random_suffix()}"
            while self._alias_taken(alternate, personality_id):
                alternate = f"{display_name}-{_random_suffix()}"

        self.registry.claim_alias(alternate, personality_id)
        logger.info(
            f"Created alternate alias {alternate} for {personality_id} ({display_name} was taken)"
        )

    def _alias_taken(self, alias: str, personality_id: PersonalityId) -> bool:
        normalized = Alias.normalize(alias)
        if normalized == personality_id.value.lower():
            return True

        # Stale mappings count as taken; our own aliases do not
        result = self.registry.resolve(normalized)
        if result.status is ResolutionStatus.NOT_FOUND:
            return False
        return result.personality is None or result.personality.id != personality_id


class AddAliasUseCase(_PersonalityUseCase):
    """Use case for pointing an alias at a personality.

    A claimed alias displaces whatever personality held it before.
    """

    def __init__(
        self,
        registry: PersonalityRegistry,
        personality_repository: IPersonalityRepository,
        max_aliases: int = 25,
    ):
        super().__init__(registry, personality_repository)
        self.max_aliases = max_aliases

    async def execute(self, personality_name: str, alias: str, requester_id: str) -> PersonalityDTO:
        """Add alias and persist every personality it touched."""

        logger.info(f'Adding alias "{alias}" to personality: {personality_name}')

        personality = self._find(personality_name)
        self._check_owner(personality, requester_id, "add aliases to")

        normalized = Alias.normalize(alias)
        if normalized is None:
            raise ValidationError("alias", alias, "must not be empty")

        if normalized == personality.id.value.lower():
            raise ValidationError("alias", alias, "cannot match the personality name")

        if not personality.has_alias(normalized) and len(personality.aliases) >= self.max_aliases:
            raise ValidationError(
                "alias", alias, f"personality already has {self.max_aliases} aliases"
            )

        already_mapped = self.registry.resolve(normalized).personality is personality

        result = self.registry.claim_alias(alias, personality.id)
        if result.status is ResolutionStatus.REJECTED_INPUT:
            raise ValidationError("alias", alias)
        if not result.ok:
            raise PersonalityNotFoundError(personality_name)

        try:
            await self.personality_repository.save(personality)

            if result.displaced is not None:
                displaced = self.registry.get_by_id(result.displaced)
                if displaced:
                    await self.personality_repository.save(displaced)
        except PersistenceError:
            logger.error(f'Failed to persist alias "{result.alias}", rolling back registry')
            if not already_mapped:
                self.registry.remove_alias(result.alias)
            if result.displaced is not None:
                self.registry.claim_alias(result.alias, result.displaced)
            raise

        logger.info(f'Successfully added alias "{result.alias}" to {personality.id}')
        return PersonalityDTO.from_entity(personality)


class RemoveAliasUseCase(_PersonalityUseCase):
    """Use case for removing an alias from a personality."""

    async def execute(self, personality_name: str, alias: str, requester_id: str) -> PersonalityDTO:
        """Remove alias if the personality owns it."""

        logger.info(f'Removing alias "{alias}" from personality: {personality_name}')

        personality = self._find(personality_name)
        self._check_owner(personality, requester_id, "remove aliases from")

        if not personality.has_alias(alias):
            logger.info(f'Alias "{alias}" not set on {personality.id}, nothing to remove')
            return PersonalityDTO.from_entity(personality)

        if self.registry.resolve(alias).personality is personality:
            self.registry.remove_alias(alias)
        else:
            personality.remove_alias(alias)

        await self.personality_repository.save(personality)
        return PersonalityDTO.from_entity(personality)


class ResolvePersonalityUseCase:
    """Use case for resolving a mention or command argument to a personality."""

    def __init__(self, registry: PersonalityRegistry):
        self.registry = registry

    def execute(self, name: Optional[str]) -> Optional[PersonalityDTO]:
        """Resolve by alias first, then by ID. Never raises on bad input."""

        personality = self.registry.get_by_alias(name) or self.registry.get_by_id(name)
        if not personality:
            return None

        return PersonalityDTO.from_entity(personality)


class RemovePersonalityUseCase(_PersonalityUseCase):
    """Use case for removing a personality and its aliases."""

    async def execute(self, personality_name: str, requester_id: str) -> PersonalityDTO:
        """Unregister and delete a personality."""

        logger.info(f"Removing personality: {personality_name}")

        personality = self._find(personality_name)
        self._check_owner(personality, requester_id, "remove")

        self.registry.unregister(personality.id)
        await self.personality_repository.delete(personality.id)

        logger.info(f"Successfully removed personality: {personality.id}")
        return PersonalityDTO.from_entity(personality)


class ListPersonalitiesUseCase:
    """Use case for listing a user's personalities."""

    def __init__(self, registry: PersonalityRegistry):
        self.registry = registry

    def execute(self, owner_id: str) -> List[PersonalityDTO]:
        """List personalities owned by a user, sorted by ID."""

        personalities = sorted(self.registry.list_by_owner(owner_id), key=lambda p: p.id.value)
        return [PersonalityDTO.from_entity(p) for p in personalities]


class UpdatePersonalityProfileUseCase(_PersonalityUseCase):
    """Use case for replacing a personality's profile or model."""

    async def execute(self, command: UpdatePersonalityProfileDTO) -> PersonalityDTO:
        """Apply non-empty fields to copies of the profile and model."""

        logger.info(f"Updating personality: {command.personality_name}")

        personality = self._find(command.personality_name)
        self._check_owner(personality, command.requester_id, "update")

        # Build both values before touching the aggregate
        profile = personality.profile.copy_with(
            prompt=command.prompt,
            display_name=command.display_name,
            model_path=command.model_path,
            max_word_count=command.max_word_count,
        )
        model = None
        if command.model_name or command.model_path:
            model = personality.model.copy_with(name=command.model_name, endpoint=command.model_path)

        personality.replace_profile(profile)
        if model is not None:
            personality.replace_model(model)

        await self.personality_repository.save(personality)

        logger.info(f"Successfully updated personality: {personality.id}")
        return PersonalityDTO.from_entity(personality)
