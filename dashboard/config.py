"""
Configuration management for the Job Application Dashboard.
"""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Backend
    backend_url: str = "http://localhost:8000"
    request_timeout: float | None = None  # None waits indefinitely

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
