# vehicles_api/config.py
"""
Runtime settings for the vehicles API.

Defaults match the values the service was originally deployed with; any of
them can be overridden through VEHICLES_* environment variables or a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 8000
DEFAULT_DATA_PATH = "data/vehicles.json"  # relative to the working directory


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VEHICLES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    data_path: str = DEFAULT_DATA_PATH
    log_level: str = "info"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
