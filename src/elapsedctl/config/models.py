"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, elapsedctl.toml only contains
overrides. An empty file counts from the default start instant.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator

DEFAULT_START = datetime(2022, 2, 24, 0, 0, 0)

# --- elapsedctl.toml sections ---


class CounterConfig(BaseModel):
    """[counter] section."""

    model_config = {"frozen": True}

    start: datetime = DEFAULT_START
    label: str = "ELAPSED"


class WatchConfig(BaseModel):
    """[watch] section."""

    model_config = {"frozen": True}

    interval: float = 1.0

    @field_validator("interval")
    @classmethod
    def _positive_interval(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("interval must be positive")
        return value

