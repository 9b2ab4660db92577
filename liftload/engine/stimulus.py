import math
from typing import Sequence

from pydantic import BaseModel, Field

from liftload.engine.resolve import CatalogIndex
from liftload.models import Day, ExerciseDefinition, PerformedExercise


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded) if value >= 0 else -int(rounded)


def effective_sets(
    performed: PerformedExercise,
    definition: ExerciseDefinition,
    use_felt_sets: bool,
) -> float:
    """
    Sets credited to every muscle the exercise trains.

    Felt sets scale by the exercise's stimulus-to-fatigue ratio and are
    rounded; without a ratio the raw set count is used either way.
    """
    if use_felt_sets and definition.stimulus_fatigue is not None:
        return round_half_away(performed.sets * definition.stimulus_fatigue)
    return performed.sets


class StimulusTable(BaseModel):
    """New stimulus per day index, per muscle, for one micro-cycle."""

    days: list[dict[str, float]]
    unresolved: list[str] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.days)

    def for_muscle(self, muscle: str) -> list[float]:
        return [day.get(muscle, 0.0) for day in self.days]

    def totals(self) -> dict[str, float]:
        totals: dict[str, float] = {}
        for day in self.days:
            for muscle, value in day.items():
                totals[muscle] = totals.get(muscle, 0.0) + value
        return totals


def day_stimulus(
    day: Day, index: CatalogIndex, use_felt_sets: bool
) -> tuple[dict[str, float], list[str]]:
    """
    New stimulus per muscle for one day, plus the names that did not resolve.

    Unresolved entries contribute nothing. Blank names (an entry whose
    exercise has not been picked yet) are skipped without being reported.
    """
    stimulus: dict[str, float] = {}
    unresolved: list[str] = []

    for performed in day.exercises:
        definition = index.resolve(performed.name)
        if definition is None:
            if performed.name.strip():
                unresolved.append(performed.name)
            continue

        sets = effective_sets(performed, definition, use_felt_sets)
        for muscle, contribution in definition.muscles.items():
            stimulus[muscle] = stimulus.get(muscle, 0.0) + sets * contribution

    return stimulus, unresolved


def cycle_stimulus(
    days: Sequence[Day], index: CatalogIndex, use_felt_sets: bool
) -> StimulusTable:
    table = StimulusTable(days=[])
    for day in days:
        stimulus, unresolved = day_stimulus(day, index, use_felt_sets)
        table.days.append(stimulus)
        for name in unresolved:
            if name not in table.unresolved:
                table.unresolved.append(name)
    return table
