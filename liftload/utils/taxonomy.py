# liftload/utils/taxonomy.py

# Display order used by every per-muscle table and chart.
MUSCLE_GROUPS: tuple[str, ...] = (
    "Chest",
    "Front Delts",
    "Side Delts",
    "Rear Delts",
    "Biceps",
    "Triceps",
    "Forearms",
    "Traps",
    "Upper Back",
    "Lower Back",
    "Core",
    "Glutes",
    "Quads",
    "Hamstrings",
    "Calves",
)

EXERCISE_CATEGORIES: tuple[str, ...] = (
    "Push",
    "Pull",
    "Legs",
    "Arms",
    "Core",
    "Full Body",
    "Uncategorized",
)

SET_TYPES: tuple[str, ...] = (
    "Regular",
    "Dropset",
    "Myo-rep",
    "Myo-rep match",
)

INTENSITY_TYPES: tuple[str, ...] = (
    "rir",
    "rpe",
    "percentage",
)

# Value used for the active intensity field when none is given.
INTENSITY_DEFAULTS: dict[str, int] = {
    "rir": 2,
    "rpe": 8,
    "percentage": 80,
}

TRAINING_LEVELS: tuple[str, ...] = (
    "beginner",
    "intermediate",
    "advanced",
)
