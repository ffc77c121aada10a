from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Exercise service (the Go server listens on 2100 by default)
    api_base_url: str = "http://localhost:2100"
    # No timeout unless one is configured; a hung request leaves the UI as is
    request_timeout: Optional[float] = None

    # Logging
    log_level: str = "INFO"

    # Page
    page_title: str = "Albook"

    @property
    def api_root(self) -> str:
        """Base URL without a trailing slash."""
        return self.api_base_url.rstrip("/")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
