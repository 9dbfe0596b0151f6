"""Application entry point."""

import asyncio
import logging
from typing import Optional

from .config import Container, Settings, get_settings
from .domain.repositories import IPersonalityRepository
from .monitoring import setup_logging_from_settings

logger = logging.getLogger(__name__)


async def create_container(
    settings: Optional[Settings] = None,
    repository: Optional[IPersonalityRepository] = None,
) -> Container:
    """Configure logging and build a ready-to-use container."""

    settings = settings or get_settings()
    setup_logging_from_settings(settings)

    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    container = Container(settings, repository=repository)
    await container.initialize()

    logger.info(f"{settings.app_name} ready")
    return container


async def _main() -> None:
    container = await create_container()
    registry = container.registry
    for personality in registry.all():
        aliases = ", ".join(registry.aliases_for(personality.id)) or "-"
        logger.info(f"{personality.id}: {personality.display_name} [{aliases}]")
    await container.close()


if __name__ == "__main__":
    asyncio.run(_main())
