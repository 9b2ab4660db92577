from typing import Optional, Sequence

from pydantic import BaseModel

from liftload.engine.resolve import CatalogIndex
from liftload.engine.stimulus import cycle_stimulus, round_half_away
from liftload.models import Day
from liftload.utils.taxonomy import MUSCLE_GROUPS


class SfrCoverage(BaseModel):
    total_exercises: int = 0
    exercises_with_sfr: int = 0

    @property
    def ratio(self) -> float:
        if not self.total_exercises:
            return 0.0
        return self.exercises_with_sfr / self.total_exercises


def weekly_volume(days: Sequence[Day], index: CatalogIndex) -> dict[str, float]:
    """
    Flat ``sets * contribution`` per muscle across one micro-cycle.

    Always counts raw sets; felt-set weighting only applies to the decay views.
    """
    return cycle_stimulus(days, index, use_felt_sets=False).totals()


def trained_muscles(days: Sequence[Day], index: CatalogIndex) -> list[str]:
    """Muscles touched by any resolvable exercise, in display order."""
    touched: set[str] = set()
    for day in days:
        for performed in day.exercises:
            definition = index.resolve(performed.name)
            if definition is not None:
                touched.update(definition.muscles)
    return [m for m in MUSCLE_GROUPS if m in touched]


def average_sfr(days: Sequence[Day], index: CatalogIndex) -> dict[str, Optional[float]]:
    """
    Stimulus-to-fatigue ratio per muscle, weighted by ``sets * contribution``.

    Muscles with no SFR-carrying work map to None.
    """
    weighted: dict[str, float] = {}
    weights: dict[str, float] = {}

    for day in days:
        for performed in day.exercises:
            definition = index.resolve(performed.name)
            if definition is None or definition.stimulus_fatigue is None:
                continue
            for muscle, contribution in definition.muscles.items():
                weight = performed.sets * contribution
                weighted[muscle] = (
                    weighted.get(muscle, 0.0) + definition.stimulus_fatigue * weight
                )
                weights[muscle] = weights.get(muscle, 0.0) + weight

    result: dict[str, Optional[float]] = {}
    for muscle in MUSCLE_GROUPS:
        total = weights.get(muscle, 0.0)
        result[muscle] = weighted[muscle] / total if total > 0 else None
    return result


def felt_volume(volume: float, sfr: Optional[float]) -> Optional[int]:
    if sfr is None:
        return None
    return round_half_away(volume * sfr)


def sfr_coverage(days: Sequence[Day], index: CatalogIndex) -> SfrCoverage:
    coverage = SfrCoverage()
    for day in days:
        for performed in day.exercises:
            definition = index.resolve(performed.name)
            if definition is None:
                continue
            coverage.total_exercises += 1
            if definition.stimulus_fatigue is not None:
                coverage.exercises_with_sfr += 1
    return coverage
