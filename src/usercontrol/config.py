"""Application configuration from environment variables."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from usercontrol.domain.value_objects import RoleKind

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="USERCONTROL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Credential form rules
    min_username_length: int = Field(default=3, ge=1, description="Minimum username length at login")
    min_password_length: int = Field(default=4, ge=1, description="Minimum password length at login")
    default_role: RoleKind = Field(
        default=RoleKind.GUEST,
        description="Role assigned when a registration names an unknown role",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings. Unknown level names fall back to INFO."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        logger.warning("Invalid log level: %s, using INFO", settings.log_level)
        level = logging.INFO
    if settings.debug:
        level = logging.DEBUG
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
