from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional
import logging


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


class Settings(BaseSettings):
    """Engine settings loaded with Pydantic Settings"""

    # Log settings
    log_level: str = Field(default="info")

    # Search settings
    search_limit: int = Field(default=10, ge=0)
    similarity_limit: int = Field(default=10, ge=0)

    class Config:
        env_prefix = "EXOANALYSIS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore unrelated variables

    @property
    def logging_level(self) -> int:
        """Numeric level for the logging module"""
        return _resolve_level(self.log_level)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings"""
    return settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the engine"""
    logging.basicConfig(
        level=_resolve_level(level) if level else settings.logging_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
