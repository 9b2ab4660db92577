from .exercise import ExerciseCategory, ExerciseDefinition, MuscleGroup
from .landmarks import MuscleDecayProfile, MuscleVolumeLandmarks, VolumeRange
from .routine import AppMessage, Cycle, Day, PerformedExercise, SavedRoutine

__all__ = [
    "AppMessage",
    "Cycle",
    "Day",
    "ExerciseCategory",
    "ExerciseDefinition",
    "MuscleDecayProfile",
    "MuscleGroup",
    "MuscleVolumeLandmarks",
    "PerformedExercise",
    "SavedRoutine",
    "VolumeRange",
]
