"""Redash client configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Connection settings for a Redash instance.

    All fields can be overridden via environment variables with
    the REDASH_ prefix (e.g., REDASH_URL, REDASH_API_KEY).
    """

    url: str
    api_key: SecretStr
    timeout: float = 30.0
    verify_tls: bool = True
    user_agent: str = "redash-client"

    model_config = {
        "env_prefix": "REDASH_",
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings (singleton)."""
    return Settings()
