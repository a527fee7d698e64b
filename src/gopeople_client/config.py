"""Client configuration."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoPeopleSettings(BaseSettings):
    """Runtime config for the GoPeople client.

    Reads from environment variables with GOPEOPLE_ prefix, and from a
    ``.env`` file in the working directory when one exists.
    """

    model_config = SettingsConfigDict(
        env_prefix="GOPEOPLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str | None = None
    key: str | None = None

    # Transport settings
    timeout_seconds: float = Field(default=30.0, gt=0)

    # Credential store settings
    database_url: str | None = None
    service_name: str = "gopeople"
