"""Configuration management for the goal update analyzer."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    host: str = Field("127.0.0.1", description="Interface the HTTP server binds to")
    port: int = Field(3000, description="Port the HTTP server listens on")

    # Analysis
    max_text_length: int = Field(5000, description="Longest accepted update, counted after trimming")

    # Logging
    log_level: str = Field("INFO", description="Logging level")


settings = Settings()


def setup_logging() -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
