from .resolve import CatalogIndex, resolve_exercise
from .stress_engine import (
    DailyStressReport,
    MuscleVolumeStatus,
    StressEngine,
    TimelineReport,
    VolumeReport,
)

__all__ = [
    "CatalogIndex",
    "DailyStressReport",
    "MuscleVolumeStatus",
    "StressEngine",
    "TimelineReport",
    "VolumeReport",
    "resolve_exercise",
]
