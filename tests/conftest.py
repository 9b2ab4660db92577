from datetime import datetime, timezone
from typing import Any, Callable

import pytest

from liftload.models import Cycle, Day, ExerciseDefinition, PerformedExercise
from liftload.utils import dates
from tests.test_data import BENCH, CURL, SQUAT


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    now = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    monkeypatch.setattr(dates, "now", lambda: now)
    return now


# --------------- Catalog ---------------


@pytest.fixture
def catalog() -> list[ExerciseDefinition]:
    """Bench (SFR 1.0), Squat (SFR 1.2) and Curl (no SFR)."""
    return [ExerciseDefinition.model_validate(item) for item in (BENCH, SQUAT, CURL)]


# --------------- Days ---------------


@pytest.fixture
def make_day() -> Callable[..., Day]:
    """
    Factory fixture building a Day from (name, sets) pairs.
    Example:
        day = make_day(("Squat", 3), ("Barbell Curl", 2), name="Legs")
    """

    def _make(*entries: tuple[str, int], name: str = "Day 1", **overrides: Any) -> Day:
        exercises = [
            PerformedExercise(name=exercise, sets=sets, **overrides)
            for exercise, sets in entries
        ]
        return Day(name=name, exercises=exercises)

    return _make


@pytest.fixture
def make_cycle(make_day) -> Callable[..., Cycle]:
    def _make(name: str = "Micro Cycle 1", days: int = 2) -> Cycle:
        return Cycle(
            name=name,
            days=[make_day(("Squat", 3), name=f"Day {i + 1}") for i in range(days)],
        )

    return _make
