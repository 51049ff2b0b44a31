"""
Runtime settings for the Color Filters MCP Server, read from the environment.
"""

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_VARS = {
    "host": "COLOR_FILTERS_HOST",
    "port": "COLOR_FILTERS_PORT",
    "log_level": "COLOR_FILTERS_LOG_LEVEL",
}


class Settings(BaseModel):
    host: str = Field("0.0.0.0", description="Interface to bind")
    port: int = Field(8973, ge=1, le=65535, description="Port to listen on")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field("INFO", description="Root log level")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    """Build Settings from whichever COLOR_FILTERS_* variables are set."""
    values = {field: os.environ[name] for field, name in ENV_VARS.items() if name in os.environ}
    return Settings(**values)
