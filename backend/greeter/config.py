"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults provided for every setting: works out-of-the-box without a .env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Joke provider
    joke_api_url: str = "https://icanhazdadjoke.com/"
    joke_api_timeout_seconds: float = 5.0
    # icanhazdadjoke asks clients to identify themselves
    joke_api_user_agent: str = (
        "dadjoke-greeter (https://github.com/dadjoke-greeter)"
    )

    @field_validator("joke_api_timeout_seconds")
    @classmethod
    def require_positive_timeout(cls, v: float) -> float:
        """A provider call must fail in bounded time."""
        if v <= 0:
            raise ValueError("joke_api_timeout_seconds must be positive")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
