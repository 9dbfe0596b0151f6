"""
Unit Tests: In-Memory Personality Repository

Covers the repository boundary:
- initialize before use
- save / find by id, name, alias, owner
- stored snapshots are isolated from live aggregates
- delete cleans alias mappings
"""

import pytest

from personas.domain.entities import Personality
from personas.domain.exceptions import PersistenceError
from personas.domain.value_objects import (
    ModelConfig,
    PersonalityId,
    PersonalityProfile,
    UserId,
)
from personas.infrastructure.repositories import InMemoryPersonalityRepository


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def personality():
    personality = Personality.create(
        PersonalityId("cold-kerach-batuach"),
        UserId("u1"),
        PersonalityProfile(name="cold-kerach-batuach", prompt="You are Cold", display_name="Cold"),
        ModelConfig.create_default(),
    )
    personality.add_alias("cold")
    return personality


@pytest.fixture
def repository():
    return InMemoryPersonalityRepository()


# ============================================================================
# TESTS
# ============================================================================

@pytest.mark.asyncio
async def test_requires_initialize(repository, personality):
    """Test: using the repository before initialize() raises PersistenceError"""
    with pytest.raises(PersistenceError) as exc_info:
        await repository.save(personality)

    assert exc_info.value.code == "PERSISTENCE_ERROR"


@pytest.mark.asyncio
async def test_initialize_is_idempotent_and_loads_seed(personality):
    """Test: seed data is loaded once"""
    repository = InMemoryPersonalityRepository(seed=[personality.to_dict()])

    await repository.initialize()
    await repository.initialize()

    assert len(await repository.find_all()) == 1
    assert await repository.exists(PersonalityId("cold-kerach-batuach"))


@pytest.mark.asyncio
async def test_save_and_find(repository, personality):
    """Test: a saved personality can be found by id, name, alias and owner"""
    await repository.initialize()
    await repository.save(personality)

    by_id = await repository.find_by_id(personality.id)
    by_name = await repository.find_by_name("COLD")
    by_slug = await repository.find_by_name("cold-kerach-batuach")
    by_alias = await repository.find_by_alias(" Cold ")
    by_owner = await repository.find_by_owner(UserId("u1"))

    assert by_id == personality
    assert by_name == personality
    assert by_slug == personality
    assert by_alias == personality
    assert by_owner == [personality]
    assert await repository.find_by_owner(UserId("u2")) == []


@pytest.mark.asyncio
async def test_missing_lookups_return_none(repository):
    """Test: misses return None instead of raising"""
    await repository.initialize()

    assert await repository.find_by_id(PersonalityId("nobody")) is None
    assert await repository.find_by_name("nobody") is None
    assert await repository.find_by_name("") is None
    assert await repository.find_by_alias("nobody") is None
    assert await repository.find_by_alias(None) is None


@pytest.mark.asyncio
async def test_found_entities_are_copies(repository, personality):
    """Test: mutating a loaded entity does not change the store"""
    await repository.initialize()
    await repository.save(personality)

    loaded = await repository.find_by_id(personality.id)
    loaded.add_alias("sneaky")

    reloaded = await repository.find_by_id(personality.id)
    assert loaded is not personality
    assert not reloaded.has_alias("sneaky")


@pytest.mark.asyncio
async def test_save_drops_removed_aliases(repository, personality):
    """Test: re-saving after removing an alias drops its mapping"""
    await repository.initialize()
    await repository.save(personality)

    personality.remove_alias("cold")
    await repository.save(personality)

    assert await repository.find_by_alias("cold") is None


@pytest.mark.asyncio
async def test_delete(repository, personality):
    """Test: delete removes the personality and its aliases"""
    await repository.initialize()
    await repository.save(personality)

    assert await repository.delete(personality.id) is True
    assert await repository.delete(personality.id) is False
    assert await repository.find_by_id(personality.id) is None
    assert await repository.find_by_alias("cold") is None
    assert not await repository.exists(personality.id)
