from typing import Literal

from pydantic import BaseModel

from liftload.engine.stimulus import round_half_away
from liftload.models import MuscleVolumeLandmarks
from liftload.utils.reference_data import BAND_COLORS

VolumeBand = Literal[
    "below_maintenance",
    "maintenance",
    "minimum_effective",
    "adaptive",
    "recoverable",
    "above_recoverable",
]
TrainingLevel = Literal["beginner", "intermediate", "advanced"]
StressLevel = Literal["High", "Moderate", "Low", "None"]

VOLUME_BANDS: tuple[str, ...] = (
    "below_maintenance",
    "maintenance",
    "minimum_effective",
    "adaptive",
    "recoverable",
    "above_recoverable",
)


class RadarRow(BaseModel):
    subject: str
    volume: float
    target: float
    full_mark: float


def classify_volume(volume: float, landmarks: MuscleVolumeLandmarks) -> VolumeBand:
    """
    Place a weekly volume into one of six ordered bands.

    Lower bounds are inclusive. The adaptive band includes its upper end,
    anything past it up to the recoverable maximum is "recoverable", and the
    top band is open-ended.
    """
    if volume < landmarks.maintenance_volume:
        return "below_maintenance"
    if volume < landmarks.minimum_effective_volume:
        return "maintenance"
    if volume < landmarks.maximum_adaptive_volume.min:
        return "minimum_effective"
    if volume <= landmarks.maximum_adaptive_volume.max:
        return "adaptive"
    if volume <= landmarks.maximum_recoverable_volume.max:
        return "recoverable"
    return "above_recoverable"


def band_color(band: VolumeBand) -> str:
    return BAND_COLORS[band]


def volume_recommendation(volume: float, landmarks: MuscleVolumeLandmarks) -> str:
    if volume < landmarks.minimum_effective_volume:
        return "Below minimum effective volume - increase for growth"
    if volume < landmarks.maximum_adaptive_volume.min:
        return "In growth range but could increase for better results"
    if is_in_optimal_range(volume, landmarks):
        return "In optimal growth range"
    if is_recoverable(volume, landmarks):
        return "High volume - monitor recovery carefully"
    return "Volume may exceed recovery capacity - consider reducing"


def is_in_optimal_range(volume: float, landmarks: MuscleVolumeLandmarks) -> bool:
    return landmarks.maximum_adaptive_volume.contains(volume)


def is_recoverable(volume: float, landmarks: MuscleVolumeLandmarks) -> bool:
    return volume <= landmarks.maximum_recoverable_volume.max


def optimal_volume_for_level(
    landmarks: MuscleVolumeLandmarks, level: TrainingLevel
) -> float:
    mav = landmarks.maximum_adaptive_volume
    if level == "intermediate":
        return float(round_half_away((mav.min + mav.max) / 2))
    if level == "advanced":
        return mav.max
    return landmarks.minimum_effective_volume


def stress_level(total_stress: float) -> StressLevel:
    if total_stress >= 10:
        return "High"
    if total_stress >= 5:
        return "Moderate"
    if total_stress > 0:
        return "Low"
    return "None"


def radar_rows(
    volume: dict[str, float], landmarks: dict[str, MuscleVolumeLandmarks]
) -> list[RadarRow]:
    """Volume against the start of the adaptive range, scaled to the MRV max."""
    return [
        RadarRow(
            subject=muscle,
            volume=volume.get(muscle, 0.0),
            target=marks.maximum_adaptive_volume.min,
            full_mark=marks.maximum_recoverable_volume.max,
        )
        for muscle, marks in landmarks.items()
    ]
