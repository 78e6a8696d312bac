"""Service settings read from the environment."""

from pathlib import Path
from typing import Mapping, Optional
import os

from pydantic import BaseModel, Field, field_validator


class ServiceSettings(BaseModel):
    catalog_path: Optional[Path] = Field(default=None, description="Theme catalog file (bundled catalog if unset)")
    log_level: str = Field(default="INFO", description="Root log level for the service")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceSettings":
        environ = os.environ if environ is None else environ
        values = {}
        if environ.get("THEMEDAY_CATALOG_PATH"):
            values["catalog_path"] = environ["THEMEDAY_CATALOG_PATH"]
        if environ.get("THEMEDAY_LOG_LEVEL"):
            values["log_level"] = environ["THEMEDAY_LOG_LEVEL"]
        return cls(**values)
