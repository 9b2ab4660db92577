"""
Exponential stress decay.

Each day a muscle keeps ``1 - decay_rate`` of yesterday's total stress and
adds that day's new stimulus:

    stress[0] = s(0)
    stress[d] = stress[d - 1] * (1 - r) + s(d)

which unrolls to ``stress[D] = sum(s(i) * (1 - r) ** (D - i) for i <= D)``.
Carried stress and totals under the display floor are clamped to exactly zero.
"""

from typing import Optional, Sequence

from pydantic import BaseModel

from liftload.settings import settings


class StressBreakdown(BaseModel):
    carried_over: float = 0.0
    new_stress: float = 0.0
    total_stress: float = 0.0


def _floor_value(floor: Optional[float]) -> float:
    return settings.STRESS_FLOOR if floor is None else floor


def timeline_cycle_length(num_days: int, min_length: Optional[int] = None) -> int:
    """
    Length of one repetition in a multi-cycle projection.

    Micro-cycles shorter than ``min_length`` are padded with rest days.
    """
    if min_length is None:
        min_length = settings.MIN_TIMELINE_CYCLE_LENGTH
    return max(1, min_length, num_days)


def stimulus_on(
    stimulus: Sequence[float], day: int, cycle_length: Optional[int] = None
) -> float:
    """New stimulus on absolute ``day``, wrapping every ``cycle_length`` days."""
    length = cycle_length or len(stimulus)
    if length <= 0:
        return 0.0
    day_in_cycle = day % length
    return stimulus[day_in_cycle] if day_in_cycle < len(stimulus) else 0.0


def decay_series(
    stimulus: Sequence[float],
    decay_rate: float,
    total_days: Optional[int] = None,
    cycle_length: Optional[int] = None,
    floor: Optional[float] = None,
) -> list[float]:
    """
    Total stress per day for one muscle, by the iterative recurrence.

    ``total_days`` defaults to one pass over ``stimulus``; longer projections
    repeat the stimulus every ``cycle_length`` days.
    """
    if total_days is None:
        total_days = len(stimulus)
    floor = _floor_value(floor)
    retention = 1 - decay_rate

    series: list[float] = []
    previous = 0.0
    for day in range(total_days):
        carried = previous * retention
        if carried < floor:
            carried = 0.0
        total = carried + stimulus_on(stimulus, day, cycle_length)
        if total < floor:
            total = 0.0
        series.append(total)
        previous = total
    return series


def accumulated_stress(
    stimulus: Sequence[float], decay_rate: float, day: int
) -> float:
    """Stress on ``day`` looking backward, by the closed-form sum. No floor."""
    retention = 1 - decay_rate
    return sum(
        stimulus[i] * retention ** (day - i)
        for i in range(min(day + 1, len(stimulus)))
    )


def breakdown(
    series: Sequence[float],
    stimulus: Sequence[float],
    decay_rate: float,
    day: int,
    floor: Optional[float] = None,
) -> StressBreakdown:
    """
    Split a day's total into stress carried from yesterday and new stress.

    ``carried_over + new_stress == total_stress`` holds exactly. A day whose
    total falls under the floor reports all three parts as zero.
    """
    floor = _floor_value(floor)
    carried = series[day - 1] * (1 - decay_rate) if day > 0 else 0.0
    if carried < floor:
        carried = 0.0
    new = stimulus_on(stimulus, day)
    total = carried + new
    if total < floor:
        return StressBreakdown()
    return StressBreakdown(carried_over=carried, new_stress=new, total_stress=total)


def sum_series(series: Sequence[Sequence[float]], length: int) -> list[float]:
    """
    Pointwise sum of already-decayed per-muscle series.

    Decay rates differ by muscle, so aggregation always happens after decay.
    """
    combined = [0.0] * length
    for values in series:
        for day, value in enumerate(values[:length]):
            combined[day] += value
    return combined


def project(
    values: Sequence[float], total_days: int, cycle_length: Optional[int] = None
) -> list[float]:
    """Repeat per-day values across ``total_days`` without any decay."""
    return [stimulus_on(values, day, cycle_length) for day in range(total_days)]
