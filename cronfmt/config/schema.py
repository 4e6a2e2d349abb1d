"""Configuration schema using Pydantic."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime settings, read from CRONFMT_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="CRONFMT_", extra="ignore", case_sensitive=False)

    log_level: LogLevel = Field(default="WARNING", description="Loguru level for the stderr sink")
    output: Literal["table", "json"] = Field(default="table", description="Result format on stdout")

    @field_validator("log_level", "output", mode="before")
    @classmethod
    def _normalize_case(cls, value, info):
        if not isinstance(value, str):
            return value
        return value.upper() if info.field_name == "log_level" else value.lower()
