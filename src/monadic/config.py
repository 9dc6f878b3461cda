"""Process-wide settings, read from ``MONADIC_*`` environment variables."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MonadicConfig(BaseSettings):
    log_level: int = Field(
        default=logging.WARNING,
        description="Level of the 'monadic' logger (name or number)",
    )
    trace_traversal: bool = Field(
        default=False,
        description="Log a debug record for every unresolved traversal step",
    )
    rich_console: bool = Field(
        default=True,
        description="Render console logs with rich instead of a plain stream",
    )

    model_config = SettingsConfigDict(
        env_prefix="MONADIC_",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """Accept level names such as ``debug`` as well as numbers"""
        if isinstance(v, str):
            raw = v.strip()
            if raw.isdigit():
                return int(raw)
            level = logging.getLevelName(raw.upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown logging level {v!r}")
            return level
        return v

    def reload(self) -> None:
        """Re-read every setting from the environment."""
        fresh = type(self)()
        for name in type(self).model_fields:
            setattr(self, name, getattr(fresh, name))

    def __repr__(self) -> str:
        return (
            f"MonadicConfig(log_level={logging.getLevelName(self.log_level)!r}, "
            f"trace_traversal={self.trace_traversal}, "
            f"rich_console={self.rich_console})"
        )


MONADIC_CONFIG = MonadicConfig()

__all__ = ["MONADIC_CONFIG", "MonadicConfig"]
