"""Tests for configuration models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from elapsedctl.config.models import DEFAULT_START, CounterConfig, WatchConfig


class TestCounterConfig:
    def test_defaults(self) -> None:
        config = CounterConfig()
        assert config.start == DEFAULT_START == datetime(2022, 2, 24, 0, 0, 0)
        assert config.label == "ELAPSED"

    def test_iso_string_start(self) -> None:
        assert CounterConfig(start="2020-01-01T08:30:00").start == datetime(2020, 1, 1, 8, 30)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            CounterConfig().label = "x"  # type: ignore[misc]


class TestWatchConfig:
    def test_default_interval(self) -> None:
        assert WatchConfig().interval == 1.0

    @pytest.mark.parametrize("interval", [0, -2.0])
    def test_rejects_non_positive(self, interval: float) -> None:
        with pytest.raises(ValidationError):
            WatchConfig(interval=interval)

