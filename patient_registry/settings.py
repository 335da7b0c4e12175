"""
Settings for the patient registry core.

- Defaults preserve the historical identifier lookup behavior.
- For production, set PATIENT_REGISTRY_* environment variables to override fields.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdentifierFallback(str, Enum):
    """Which non-preferred match a preferred-by-type lookup returns."""

    LAST = "last"
    FIRST = "first"


class Settings(BaseSettings):
    """Patient registry configuration."""

    identifier_fallback: IdentifierFallback = Field(
        default=IdentifierFallback.LAST,
        description=(
            "Match returned by preferred-by-type lookups when no identifier "
            "of the type is flagged preferred"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="PATIENT_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
