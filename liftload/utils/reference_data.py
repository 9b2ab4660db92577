"""
Static exercise-science reference tables.

These values are domain data, never computed or mutated at runtime.
"""

from liftload.models.landmarks import (
    MuscleDecayProfile,
    MuscleVolumeLandmarks,
    VolumeRange,
)


def _landmarks(
    mv: float,
    mev: float,
    mav: tuple[float, float],
    mrv: tuple[float, float],
    frequency: tuple[float, float],
) -> MuscleVolumeLandmarks:
    return MuscleVolumeLandmarks(
        maintenance_volume=mv,
        minimum_effective_volume=mev,
        maximum_adaptive_volume=VolumeRange(min=mav[0], max=mav[1]),
        maximum_recoverable_volume=VolumeRange(min=mrv[0], max=mrv[1]),
        frequency=VolumeRange(min=frequency[0], max=frequency[1]),
    )


# Sets per week.
VOLUME_LANDMARKS: dict[str, MuscleVolumeLandmarks] = {
    "Chest": _landmarks(4, 6, (7, 19), (20, 35), (2, 3)),
    "Front Delts": _landmarks(0, 0, (0, 15), (16, 30), (2, 6)),
    "Side Delts": _landmarks(6, 8, (9, 24), (25, 40), (3, 6)),
    "Rear Delts": _landmarks(0, 6, (7, 17), (18, 35), (2, 5)),
    "Biceps": _landmarks(4, 8, (9, 19), (20, 35), (2, 3)),
    "Triceps": _landmarks(4, 6, (7, 19), (20, 35), (2, 6)),
    "Forearms": _landmarks(0, 2, (9, 19), (20, 35), (2, 6)),
    "Traps": _landmarks(0, 4, (7, 24), (25, 35), (2, 6)),
    "Upper Back": _landmarks(6, 10, (11, 19), (20, 35), (2, 4)),
    "Lower Back": _landmarks(0, 0, (2, 10), (11, 20), (1, 3)),
    "Core": _landmarks(0, 0, (7, 24), (25, 35), (2, 6)),
    "Glutes": _landmarks(0, 0, (4, 16), (17, 30), (1, 3)),
    "Quads": _landmarks(6, 8, (9, 17), (18, 30), (2, 3)),
    "Hamstrings": _landmarks(3, 4, (5, 12), (13, 18), (2, 3)),
    "Calves": _landmarks(0, 2, (9, 19), (20, 35), (2, 6)),
}

# Single source of truth for every decay computation. An older daily-chart
# table with different constants is deliberately not carried over.
DECAY_PROFILES: dict[str, MuscleDecayProfile] = {
    "Chest": MuscleDecayProfile(decay_rate=0.40, recovery="Moderate"),
    "Front Delts": MuscleDecayProfile(decay_rate=0.40, recovery="Moderate"),
    "Side Delts": MuscleDecayProfile(decay_rate=0.60, recovery="Fast"),
    "Rear Delts": MuscleDecayProfile(decay_rate=0.60, recovery="Fast"),
    "Biceps": MuscleDecayProfile(decay_rate=0.55, recovery="Fast"),
    "Triceps": MuscleDecayProfile(decay_rate=0.55, recovery="Fast"),
    "Forearms": MuscleDecayProfile(decay_rate=0.65, recovery="Fast"),
    "Traps": MuscleDecayProfile(decay_rate=0.45, recovery="Moderate"),
    "Upper Back": MuscleDecayProfile(decay_rate=0.35, recovery="Moderate"),
    "Lower Back": MuscleDecayProfile(decay_rate=0.20, recovery="Slow"),
    "Core": MuscleDecayProfile(decay_rate=0.50, recovery="Moderate"),
    "Glutes": MuscleDecayProfile(decay_rate=0.25, recovery="Slow"),
    "Quads": MuscleDecayProfile(decay_rate=0.25, recovery="Slow"),
    "Hamstrings": MuscleDecayProfile(decay_rate=0.25, recovery="Slow"),
    "Calves": MuscleDecayProfile(decay_rate=0.65, recovery="Fast"),
}

# Display colour per landmark band, lowest band first.
BAND_COLORS: dict[str, str] = {
    "below_maintenance": "blue",
    "maintenance": "sky",
    "minimum_effective": "emerald",
    "adaptive": "green",
    "recoverable": "yellow",
    "above_recoverable": "red",
}

MUSCLE_COLORS: dict[str, str] = {
    "Chest": "#3b82f6",
    "Front Delts": "#8b5cf6",
    "Side Delts": "#a855f7",
    "Rear Delts": "#d946ef",
    "Biceps": "#f43f5e",
    "Triceps": "#ef4444",
    "Forearms": "#84cc16",
    "Traps": "#14b8a6",
    "Upper Back": "#6366f1",
    "Lower Back": "#06b6d4",
    "Core": "#0ea5e9",
    "Glutes": "#facc15",
    "Quads": "#f97316",
    "Hamstrings": "#fb923c",
    "Calves": "#22c55e",
}
