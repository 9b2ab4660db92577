from functools import cached_property
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from liftload.engine import decay, landmarks, volume
from liftload.engine.resolve import CatalogIndex
from liftload.engine.stimulus import StimulusTable, cycle_stimulus
from liftload.models import (
    Day,
    ExerciseDefinition,
    MuscleDecayProfile,
    MuscleVolumeLandmarks,
)
from liftload.settings import settings
from liftload.utils.log import logger
from liftload.utils.reference_data import DECAY_PROFILES, VOLUME_LANDMARKS
from liftload.utils.taxonomy import MUSCLE_GROUPS

# ─────────────────────────────────────────────────────────
# Reports
# ─────────────────────────────────────────────────────────


class VolumeReport(BaseModel):
    volume: dict[str, float]
    unresolved: list[str] = Field(default_factory=list)

    def for_muscle(self, muscle: str) -> float:
        return self.volume.get(muscle, 0.0)


class DailyStressReport(BaseModel):
    day_index: int
    day_name: Optional[str] = None
    use_felt_sets: bool
    muscles: dict[str, decay.StressBreakdown]
    unresolved: list[str] = Field(default_factory=list)

    def stimulated(self) -> list[str]:
        """Muscles that receive new stimulus on this day."""
        return [m for m, b in self.muscles.items() if b.new_stress > 0]

    def stressed(self) -> list[str]:
        """Muscles carrying any stress on this day, new or carried over."""
        return [m for m, b in self.muscles.items() if b.total_stress > 0]


class TimelineReport(BaseModel):
    labels: list[str]
    cycles: int
    cycle_length: int
    series: dict[str, list[float]]
    cumulative: Optional[list[float]] = None
    unresolved: list[str] = Field(default_factory=list)


class MuscleVolumeStatus(BaseModel):
    muscle: str
    volume: float
    band: landmarks.VolumeBand
    color: str
    recommendation: str
    average_sfr: Optional[float] = None
    felt_volume: Optional[int] = None


def timeline_labels(total_days: int, cycle_length: int, cycles: int) -> list[str]:
    labels = []
    for i in range(total_days):
        day_number = i % cycle_length + 1
        if cycles > 1:
            labels.append(f"C{i // cycle_length + 1} D{day_number}")
        else:
            labels.append(f"Day {day_number}")
    return labels


# ─────────────────────────────────────────────────────────
# Engine
# ─────────────────────────────────────────────────────────


class StressEngine:
    """
    Per-muscle volume, stress and frequency for one micro-cycle.

    Pure and stateless apart from caching the per-day stimulus tables, which
    every view shares. Build a new engine when the catalog or days change.
    """

    def __init__(
        self,
        catalog: Iterable[ExerciseDefinition],
        days: Sequence[Day],
        *,
        use_felt_sets: Optional[bool] = None,
        decay_profiles: Optional[dict[str, MuscleDecayProfile]] = None,
        volume_landmarks: Optional[dict[str, MuscleVolumeLandmarks]] = None,
    ):
        self.index = CatalogIndex(catalog)
        self.days = list(days)
        self.use_felt_sets = (
            settings.USE_FELT_SETS_DEFAULT if use_felt_sets is None else use_felt_sets
        )
        self.decay_profiles = decay_profiles or DECAY_PROFILES
        self.volume_landmarks = volume_landmarks or VOLUME_LANDMARKS

    # ----------------------- Stimulus -----------------------------

    @cached_property
    def raw_stimulus(self) -> StimulusTable:
        return cycle_stimulus(self.days, self.index, use_felt_sets=False)

    @cached_property
    def felt_stimulus(self) -> StimulusTable:
        return cycle_stimulus(self.days, self.index, use_felt_sets=True)

    @property
    def stimulus(self) -> StimulusTable:
        """The table the decay views use, per the felt-sets switch."""
        return self.felt_stimulus if self.use_felt_sets else self.raw_stimulus

    @property
    def unresolved(self) -> list[str]:
        return list(self.raw_stimulus.unresolved)

    def trained_muscles(self) -> list[str]:
        return volume.trained_muscles(self.days, self.index)

    def _select(self, muscles: Optional[Iterable[str]]) -> list[str]:
        wanted = set(self.trained_muscles() if muscles is None else muscles)
        return [m for m in MUSCLE_GROUPS if m in wanted and m in self.decay_profiles]

    # ----------------------- Weekly volume -----------------------------

    def weekly_volume(self) -> VolumeReport:
        return VolumeReport(
            volume=self.raw_stimulus.totals(), unresolved=self.unresolved
        )

    def volume_status(self) -> list[MuscleVolumeStatus]:
        """Landmark band, advice and SFR figures per muscle, for the sidebar."""
        weekly = self.weekly_volume()
        sfr = volume.average_sfr(self.days, self.index)

        rows = []
        for muscle, marks in self.volume_landmarks.items():
            amount = weekly.for_muscle(muscle)
            band = landmarks.classify_volume(amount, marks)
            rows.append(
                MuscleVolumeStatus(
                    muscle=muscle,
                    volume=amount,
                    band=band,
                    color=landmarks.band_color(band),
                    recommendation=landmarks.volume_recommendation(amount, marks),
                    average_sfr=sfr.get(muscle),
                    felt_volume=volume.felt_volume(amount, sfr.get(muscle)),
                )
            )
        return rows

    def radar_rows(self) -> list[landmarks.RadarRow]:
        return landmarks.radar_rows(self.weekly_volume().volume, self.volume_landmarks)

    def sfr_coverage(self) -> volume.SfrCoverage:
        return volume.sfr_coverage(self.days, self.index)

    # ----------------------- Daily stress -----------------------------

    def daily_stress(self, day_index: int) -> DailyStressReport:
        """
        Accumulated stress on ``day_index`` of a single pass through the cycle.

        Out-of-range indices give an all-zero report rather than an error.
        """
        table = self.stimulus
        muscles: dict[str, decay.StressBreakdown] = {}

        if not 0 <= day_index < len(table):
            logger.debug(f"daily_stress: day index {day_index} out of range")
            return DailyStressReport(
                day_index=day_index,
                use_felt_sets=self.use_felt_sets,
                muscles={m: decay.StressBreakdown() for m in MUSCLE_GROUPS},
                unresolved=list(table.unresolved),
            )

        for muscle in MUSCLE_GROUPS:
            profile = self.decay_profiles.get(muscle)
            if profile is None:
                muscles[muscle] = decay.StressBreakdown()
                continue
            stimulus = table.for_muscle(muscle)[: day_index + 1]
            series = decay.decay_series(stimulus, profile.decay_rate)
            muscles[muscle] = decay.breakdown(
                series, stimulus, profile.decay_rate, day_index
            )

        return DailyStressReport(
            day_index=day_index,
            day_name=self.days[day_index].name,
            use_felt_sets=self.use_felt_sets,
            muscles=muscles,
            unresolved=list(table.unresolved),
        )

    # ----------------------- Timelines -----------------------------

    def _clamp_cycles(self, cycles: int) -> int:
        clamped = max(1, min(cycles, settings.MAX_TIMELINE_CYCLES))
        if clamped != cycles:
            logger.debug(f"Projected cycles {cycles} clamped to {clamped}")
        return clamped

    def _cycle_length(self, cycle_length: Optional[int]) -> int:
        """An explicit length still covers every day of the micro-cycle."""
        if cycle_length is None:
            return decay.timeline_cycle_length(len(self.days))
        return max(1, cycle_length, len(self.days))

    def stress_timeline(
        self,
        cycles: int = 1,
        muscles: Optional[Iterable[str]] = None,
        cumulative: bool = False,
        cycle_length: Optional[int] = None,
    ) -> TimelineReport:
        """
        Decayed stress per muscle across repeated micro-cycles.

        With ``cumulative`` the selected muscles' series are also summed
        pointwise into one combined series.
        """
        cycles = self._clamp_cycles(cycles)
        length = self._cycle_length(cycle_length)
        total_days = cycles * length
        table = self.stimulus

        series = {}
        for muscle in self._select(muscles):
            profile = self.decay_profiles[muscle]
            series[muscle] = decay.decay_series(
                table.for_muscle(muscle),
                profile.decay_rate,
                total_days=total_days,
                cycle_length=length,
            )

        return TimelineReport(
            labels=timeline_labels(total_days, length, cycles),
            cycles=cycles,
            cycle_length=length,
            series=series,
            cumulative=(
                decay.sum_series(list(series.values()), total_days)
                if cumulative
                else None
            ),
            unresolved=list(table.unresolved),
        )

    def frequency_timeline(
        self,
        cycles: int = 1,
        muscles: Optional[Iterable[str]] = None,
        cumulative: bool = False,
        cycle_length: Optional[int] = None,
    ) -> TimelineReport:
        """Raw ``sets * contribution`` per day, repeated without decay."""
        cycles = self._clamp_cycles(cycles)
        length = self._cycle_length(cycle_length)
        total_days = cycles * length
        table = self.raw_stimulus

        series = {
            muscle: decay.project(table.for_muscle(muscle), total_days, length)
            for muscle in self._select(muscles)
        }

        return TimelineReport(
            labels=timeline_labels(total_days, length, cycles),
            cycles=cycles,
            cycle_length=length,
            series=series,
            cumulative=(
                decay.sum_series(list(series.values()), total_days)
                if cumulative
                else None
            ),
            unresolved=list(table.unresolved),
        )
