"""Application settings and configuration."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PERSONAS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Personas"
    debug: bool = False
    environment: str = "production"

    # Monitoring
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    # Owner seeding
    bot_owner_id: Optional[str] = Field(default=None)
    owner_personalities: str = Field(default="")

    # Registry limits
    max_aliases_per_personality: int = Field(default=25, gt=0)

    @property
    def owner_personality_names(self) -> List[str]:
        """Owner personalities as a list."""
        return [name.strip() for name in self.owner_personalities.split(",") if name.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
