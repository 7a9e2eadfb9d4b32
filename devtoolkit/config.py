"""Runtime settings, read from ``DEVTOOLKIT_*`` environment variables."""
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the command-line front end. The engines take explicit arguments."""

    timezone: str = Field(default='UTC')
    log_level: str = Field(default='WARNING')
    json_indent: int = Field(default=2, ge=0, le=8)
    default_v5_name: str = Field(default='example')

    model_config = SettingsConfigDict(
        env_prefix='DEVTOOLKIT_',
        extra='ignore',
        case_sensitive=False,
    )

    @field_validator('log_level')
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator('timezone')
    @classmethod
    def _non_empty_zone(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("timezone must not be empty")
        return value
