"""Configuration models."""

import logging
import re
from typing import List

import pendulum
from pydantic import BaseModel, Field, field_validator

DEFAULT_SEPARATOR = "%%%"
DEFAULT_SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._~-]*$"


class ConfigModel(BaseModel):
    """Main configuration model."""

    content_root: str = Field("content", description="Directory holding the Markdown corpus")
    extensions: List[str] = Field(
        default_factory=lambda: [".md", ".markdown"],
        description="File extensions treated as content records",
    )
    record_separator: str = Field(
        DEFAULT_SEPARATOR,
        description="Line token separating records concatenated in one file",
    )
    default_timezone: str = Field("UTC", description="Timezone for dates without an offset")
    slug_pattern: str = Field(DEFAULT_SLUG_PATTERN, description="Regex a valid slug must match")
    log_level: str = Field("WARNING", description="Logging level for the CLI")

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Lowercase extensions and ensure a leading dot."""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    @field_validator("record_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separator must be a non-blank token distinct from the metadata marker."""
        v = v.strip()
        if not v:
            raise ValueError("record_separator must not be blank")
        if v == "---":
            raise ValueError("record_separator must differ from the '---' metadata marker")
        return v

    @field_validator("default_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Timezone must be known to pendulum."""
        try:
            pendulum.timezone(v)
        except Exception as e:
            raise ValueError(f"Unknown timezone {v!r}: {e}")
        return v

    @field_validator("slug_pattern")
    @classmethod
    def validate_slug_pattern(cls, v: str) -> str:
        """Slug pattern must be a valid regular expression."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid slug_pattern: {e}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Log level must be a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
