"""Shared fixtures for HabitDNA tests."""

import os
from datetime import datetime, timedelta, timezone

import pytest

from habit_dna.common.config import Settings, reset_settings
from habit_dna.data.schemas import ComponentVector, HabitEntry


BASE_TIME = datetime(2026, 1, 25, 8, 0, 0, tzinfo=timezone.utc)


def _make_entry(category="exercise", value=10, hours=0.0, unit="minutes"):
    """Build an entry ``hours`` after BASE_TIME."""
    return HabitEntry(
        category=category,
        value=value,
        unit=unit,
        timestamp=BASE_TIME + timedelta(hours=hours),
    )


@pytest.fixture
def make_entry():
    """Factory for entries offset from a fixed base time."""
    return _make_entry


@pytest.fixture(autouse=True)
def _isolate_settings():
    """Never leak the settings singleton between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings(monkeypatch):
    """Settings built from a clean environment."""
    for key in list(os.environ):
        if key.startswith("HABIT_DNA_"):
            monkeypatch.delenv(key, raising=False)
    return Settings()


@pytest.fixture
def daily_exercise_entries():
    """Two exercise entries 24h apart, values 10 and 20."""
    return [
        _make_entry("exercise", 10, hours=0),
        _make_entry("exercise", 20, hours=24),
    ]


@pytest.fixture
def daily_exercise_vector():
    """Vector produced by ``daily_exercise_entries``."""
    return ComponentVector(
        consistency=100, diversity=14, intensity=75, balance=100, growth=50
    )


@pytest.fixture
def mid_vector():
    return ComponentVector(
        consistency=30, diversity=30, intensity=50, balance=50, growth=0
    )
