"""Configuration management for the URL redirector."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration.

    Every default reproduces the stock behaviour (port 8080 on all
    interfaces, short URLs printed as http://localhost:8080/<id>), so the
    program needs no environment at all.
    """

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        ge=0,
        le=65535,
        description="Port to listen on"
    )

    access_log: bool = Field(
        default=False,
        description="Enable the uvicorn access log"
    )

    # Short URL settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL for printed short URLs"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for printed short URLs when a proxy strips it (e.g. '/s')"
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stderr if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
