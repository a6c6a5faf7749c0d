"""
Configuration management for the Busylight client.
Supports environment variables and a .env file.
"""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings with environment variable support (BUSYLIGHT_ prefix)."""

    # Busylight HTTP server
    base_url: str = "http://localhost:8989"
    timeout: float = 5.0  # seconds, per request

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    class Config:
        env_prefix = "BUSYLIGHT_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
