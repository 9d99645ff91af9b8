from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def check_template_extension(value: str) -> str:
    """Return ``value`` if it is a usable template extension such as ``.hbs``."""
    if not value.startswith(".") or len(value) < 2:
        raise ValueError(f"template_extension must start with '.', got {value!r}")
    return value


class Settings(BaseSettings):
    """Runtime configuration for the template store.

    Values are loaded from ``TEMPLATE_STORE_*`` environment variables by
    default and may be overridden via CLI flags.
    """

    # Suffix appended to a partial's name to form its template file name
    template_extension: str = ".hbs"

    # Directory the CLI describes when none is given
    partials_directory: str = "CodeTemplates/Partials"

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("template_extension")
    @classmethod
    def _extension_has_dot(cls, value: str) -> str:
        return check_template_extension(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
