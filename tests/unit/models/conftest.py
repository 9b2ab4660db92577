import pytest

from liftload.models import ExerciseDefinition, PerformedExercise
from tests.test_data import BENCH

# ───────────── Exercise definition  ─────────────


@pytest.fixture
def definition():
    """Factory fixture for ExerciseDefinition instances."""

    def _make(**overrides):
        return ExerciseDefinition.model_validate({**BENCH, **overrides})

    return _make


# ───────────── Performed exercise  ─────────────


@pytest.fixture
def performed():
    """Factory fixture for PerformedExercise instances."""

    def _make(**overrides):
        defaults = {"name": "Barbell Bench Press"}
        return PerformedExercise.model_validate({**defaults, **overrides})

    return _make
