"""
core/config.py - Environment-driven defaults for the Nexus API client
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Nexus API settings read from the environment or a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str = Field(default="", validation_alias="NEXUS_API_KEY")
    base_url: str = Field(default="", validation_alias="NEXUS_API_BASE_URL")

    # Milliseconds, 0 disables the timeout
    timeout_ms: int = Field(
        default=30_000,
        ge=0,
        validation_alias=AliasChoices("NEXUS_API_TIMEOUT_MS", "RETRY_DELAY"),
    )

    @property
    def timeout_seconds(self) -> float | None:
        if not self.timeout_ms:
            return None
        return self.timeout_ms / 1000
