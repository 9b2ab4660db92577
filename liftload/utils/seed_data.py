from typing import List

from liftload.models import Cycle, Day, ExerciseDefinition, PerformedExercise


def _ex(
    name: str, category: str, muscles: dict[str, float], sfr: float
) -> ExerciseDefinition:
    return ExerciseDefinition(
        name=name, category=category, muscles=muscles, stimulus_fatigue=sfr
    )


def build_default_catalog() -> List[ExerciseDefinition]:
    """
    The compiled-in exercise catalog, used when storage is empty or unreadable.
    """
    return [
        # ──────────────── Chest ────────────────
        _ex("Barbell Bench Press", "Push", {"Chest": 1, "Triceps": 0.5, "Front Delts": 0.5}, 1.0),
        _ex("Dumbbell Bench Press", "Push", {"Chest": 1, "Triceps": 0.5, "Front Delts": 0.5}, 1.0),
        _ex("Incline Barbell Press", "Push", {"Chest": 1, "Front Delts": 0.6, "Triceps": 0.5}, 1.1),
        _ex("Incline Dumbbell Press", "Push", {"Chest": 1, "Front Delts": 0.5, "Triceps": 0.5}, 1.2),
        _ex("Decline Bench Press", "Push", {"Chest": 1, "Triceps": 0.5, "Front Delts": 0.3}, 1.0),
        _ex("Decline Dumbbell Press", "Push", {"Chest": 1, "Triceps": 0.5, "Front Delts": 0.3}, 1.0),
        _ex("Cambered Bar Bench Press", "Push", {"Chest": 1, "Triceps": 0.5, "Front Delts": 0.4}, 1.0),
        _ex("Cambered Bar Incline Bench Press", "Push", {"Chest": 1, "Front Delts": 0.5, "Triceps": 0.5}, 1.1),
        _ex("Machine Chest Press", "Push", {"Chest": 1, "Triceps": 0.4, "Front Delts": 0.4}, 0.8),
        _ex("Cable Fly", "Push", {"Chest": 1, "Front Delts": 0.2}, 0.7),
        _ex("Dumbbell Fly", "Push", {"Chest": 1, "Front Delts": 0.2}, 0.7),
        _ex("Pec Deck", "Push", {"Chest": 1, "Front Delts": 0.2}, 0.6),
        _ex("Pushup", "Push", {"Chest": 1, "Triceps": 0.6, "Front Delts": 0.4, "Core": 0.3}, 0.8),
        _ex("Dips (Bodyweight)", "Push", {"Chest": 0.7, "Triceps": 1, "Front Delts": 0.3, "Core": 0.2}, 1.1),
        _ex("Fly Curl (Dumbbells)", "Arms", {"Chest": 0.7, "Biceps": 0.3}, 0.7),
        _ex("Fly Curl (Cable)", "Arms", {"Chest": 0.7, "Biceps": 0.3}, 0.7),
        # ──────────────── Shoulders ────────────────
        _ex("Overhead Press", "Push", {"Front Delts": 1, "Side Delts": 0.5, "Triceps": 0.5, "Core": 0.2, "Traps": 0.1}, 1.5),
        _ex("Push Press (Barbell)", "Push", {"Front Delts": 1, "Side Delts": 0.3, "Triceps": 0.3, "Quads": 0.2, "Core": 0.3}, 1.4),
        _ex("Arnold Press (Dumbbells)", "Push", {"Front Delts": 1, "Side Delts": 0.7, "Triceps": 0.3, "Traps": 0.2, "Core": 0.1}, 1.3),
        _ex("Front Raises (Dumbbells)", "Push", {"Front Delts": 1}, 0.5),
        _ex("Lu Raises", "Push", {"Front Delts": 1, "Side Delts": 0.6}, 0.8),
        _ex("Pike Pushups", "Push", {"Front Delts": 1, "Side Delts": 0.4, "Triceps": 0.6, "Core": 0.3}, 1.1),
        _ex("Handstand Pushups", "Push", {"Front Delts": 1, "Side Delts": 0.5, "Triceps": 0.8, "Core": 0.4}, 1.5),
        _ex("Lateral Raise", "Push", {"Side Delts": 1}, 0.5),
        _ex("Lateral Raises (Cable)", "Push", {"Side Delts": 1}, 0.5),
        _ex("Incline Lateral Raises (Dumbbells)", "Push", {"Side Delts": 1}, 0.5),
        _ex("Face Pulls with Rope (Cable)", "Pull", {"Rear Delts": 1, "Upper Back": 0.3, "Traps": 0.2}, 0.6),
        _ex("Reverse Flyes (Dumbbells)", "Pull", {"Rear Delts": 1, "Upper Back": 0.2, "Traps": 0.1}, 0.6),
        _ex("Rear Delt Flyes (Cable)", "Pull", {"Rear Delts": 1}, 0.6),
        _ex("Rear Delt Rows", "Pull", {"Rear Delts": 1, "Upper Back": 0.3, "Traps": 0.2}, 0.7),
        # ──────────────── Triceps ────────────────
        _ex("Close Grip Bench Press", "Push", {"Triceps": 1, "Chest": 0.6, "Front Delts": 0.4}, 1.0),
        _ex("Diamond Pushups", "Push", {"Triceps": 1, "Chest": 0.6, "Front Delts": 0.3, "Core": 0.2}, 1.0),
        _ex("Tricep Dips (Bench)", "Push", {"Triceps": 1, "Chest": 0.4, "Front Delts": 0.3}, 0.9),
        _ex("Skull Crushers (Dumbbells)", "Arms", {"Triceps": 1}, 1.0),
        _ex("Lying Triceps Extension", "Arms", {"Triceps": 1}, 1.0),
        _ex("Overhead Tricep Extension (Dumbbell)", "Arms", {"Triceps": 1, "Core": 0.1}, 0.9),
        _ex("Overhead Triceps Extensions (Cable)", "Arms", {"Triceps": 1}, 0.9),
        _ex("Triceps Pushdown (Rope)", "Arms", {"Triceps": 1}, 0.8),
        _ex("Raise Extension (Dumbbells)", "Push", {"Front Delts": 1, "Triceps": 0.7}, 1.0),
        # ──────────────── Biceps ────────────────
        _ex("Barbell Curl", "Arms", {"Biceps": 1, "Forearms": 0.1}, 1.0),
        _ex("Curls (EZ Bar)", "Arms", {"Biceps": 1, "Forearms": 0.1}, 1.0),
        _ex("Incline Dumbbell Curl", "Arms", {"Biceps": 1, "Forearms": 0.1}, 0.9),
        _ex("Preacher Curls", "Arms", {"Biceps": 1, "Forearms": 0.2}, 0.9),
        _ex("Cable Bicep Curls", "Arms", {"Biceps": 1, "Forearms": 0.1}, 0.8),
        _ex("Concentration Curls", "Arms", {"Biceps": 1, "Forearms": 0.1}, 0.7),
        _ex("Lying Dumbbell Curl", "Arms", {"Biceps": 1}, 0.8),
        _ex("Clown Curl", "Arms", {"Biceps": 1, "Forearms": 0.2}, 0.8),
        _ex("Hammer Curls", "Arms", {"Biceps": 0.7, "Forearms": 0.3}, 0.8),
        _ex("Chin-Ups", "Pull", {"Upper Back": 1, "Biceps": 0.8, "Forearms": 0.3, "Core": 0.1}, 1.1),
        # ──────────────── Upper back ────────────────
        _ex("Barbell Row", "Pull", {"Upper Back": 1, "Biceps": 0.5, "Rear Delts": 0.3, "Lower Back": 0.2, "Forearms": 0.1}, 1.3),
        _ex("Pendlay Rows (Barbell)", "Pull", {"Upper Back": 1, "Rear Delts": 0.3, "Lower Back": 0.3, "Biceps": 0.2, "Forearms": 0.1}, 1.4),
        _ex("T-Bar Row", "Pull", {"Upper Back": 1, "Biceps": 0.5, "Rear Delts": 0.4, "Lower Back": 0.3, "Forearms": 0.2}, 1.3),
        _ex("One-Arm Dumbbell Row", "Pull", {"Upper Back": 1, "Biceps": 0.5, "Rear Delts": 0.3, "Core": 0.2, "Forearms": 0.1}, 1.0),
        _ex("Seated Cable Row (Wide Grip)", "Pull", {"Upper Back": 1, "Rear Delts": 0.4, "Biceps": 0.3, "Traps": 0.2, "Lower Back": 0.3, "Forearms": 0.1}, 1.0),
        _ex("Rows with Close Grip (Cable)", "Pull", {"Upper Back": 1, "Biceps": 0.5, "Rear Delts": 0.1}, 1.0),
        _ex("Chest-Supported Row", "Pull", {"Upper Back": 1, "Biceps": 0.4, "Rear Delts": 0.3, "Forearms": 0.1}, 0.9),
        _ex("Machine Row", "Pull", {"Upper Back": 1, "Biceps": 0.4, "Rear Delts": 0.2}, 0.9),
        _ex("Inverted Rows", "Pull", {"Upper Back": 1, "Biceps": 0.4, "Rear Delts": 0.3, "Core": 0.2}, 0.8),
        _ex("Meadows Row", "Pull", {"Upper Back": 1, "Biceps": 0.4, "Rear Delts": 0.3, "Core": 0.3, "Forearms": 0.2}, 1.1),
        _ex("Landmine Row", "Pull", {"Upper Back": 1, "Biceps": 0.5, "Rear Delts": 0.3, "Core": 0.4, "Forearms": 0.2}, 1.2),
        _ex("Seal Row", "Pull", {"Upper Back": 1, "Biceps": 0.4, "Rear Delts": 0.3, "Forearms": 0.1}, 1.0),
        _ex("Pull-Up", "Pull", {"Upper Back": 1, "Biceps": 0.5, "Forearms": 0.3, "Core": 0.1}, 1.0),
        _ex("Pull-Ups with Close Overhand Grip", "Pull", {"Upper Back": 1, "Biceps": 0.5, "Forearms": 0.3}, 1.0),
        _ex("Lat Pulldowns (Cable)", "Pull", {"Upper Back": 1, "Biceps": 0.3}, 0.9),
        _ex("Lat Pullovers (EZ Bar)", "Pull", {"Upper Back": 0.5, "Chest": 0.5, "Triceps": 0.5}, 0.9),
        _ex("Lat Pullovers (DB)", "Pull", {"Upper Back": 0.5, "Chest": 0.5, "Triceps": 0.5}, 0.9),
        _ex("Lat Prayer (Cable)", "Pull", {"Upper Back": 0.5, "Chest": 0.5, "Triceps": 0.5}, 0.9),
        _ex("Deficit Deadlifts (Trap Bar)", "Pull", {"Hamstrings": 1, "Glutes": 1, "Upper Back": 1, "Lower Back": 0.5, "Core": 0.3, "Traps": 0.2, "Forearms": 0.2}, 2.1),
        # ──────────────── Traps ────────────────
        _ex("Shrugs (Barbell)", "Pull", {"Traps": 1}, 0.7),
        _ex("Shrugs (Trap Bar)", "Pull", {"Traps": 1, "Forearms": 0.2}, 0.8),
        # ──────────────── Forearms ────────────────
        _ex("Wrist Curls (Barbell)", "Arms", {"Forearms": 1}, 0.6),
        _ex("Reverse Wrist Curls (Barbell)", "Arms", {"Forearms": 1}, 0.6),
        _ex("Wrist Roller", "Arms", {"Forearms": 1}, 0.7),
        _ex("Gripper", "Arms", {"Forearms": 1}, 0.5),
        # ──────────────── Quads ────────────────
        _ex("Squat", "Legs", {"Quads": 1, "Glutes": 0.5, "Core": 0.2, "Lower Back": 0.5}, 2.0),
        _ex("Front Squat", "Legs", {"Quads": 1, "Glutes": 0.5, "Core": 0.4, "Upper Back": 0.3, "Front Delts": 0.2}, 1.9),
        _ex("Hack Squat (Machine)", "Legs", {"Quads": 1, "Glutes": 0.4, "Hamstrings": 0.1}, 1.4),
        _ex("Belt Squat", "Legs", {"Quads": 1, "Glutes": 0.7, "Hamstrings": 0.2}, 1.5),
        _ex("Leg Press (Machine)", "Legs", {"Quads": 1, "Glutes": 0.5, "Hamstrings": 0.2}, 1.2),
        _ex("Leg Extensions (Machine)", "Legs", {"Quads": 1}, 0.8),
        _ex("Walking Lunges", "Legs", {"Quads": 1, "Glutes": 0.8, "Hamstrings": 0.3, "Core": 0.3, "Calves": 0.2}, 1.3),
        _ex("Stationary Lunges", "Legs", {"Quads": 1, "Glutes": 0.7, "Hamstrings": 0.3, "Core": 0.2}, 1.1),
        _ex("Reverse Lunges", "Legs", {"Quads": 1, "Glutes": 0.8, "Hamstrings": 0.4, "Core": 0.2}, 1.2),
        _ex("Lateral Lunges", "Legs", {"Quads": 1, "Glutes": 0.7, "Hamstrings": 0.3, "Core": 0.3}, 1.1),
        _ex("Bulgarian Split Squats (Smith Machine)", "Legs", {"Quads": 1, "Glutes": 0.7, "Core": 0.2}, 1.3),
        _ex("Reverse Nordic Hamstring Curl", "Legs", {"Quads": 1, "Core": 0.3, "Hamstrings": 0.2}, 1.2),
        _ex("Sumo Deadlift", "Pull", {"Glutes": 1, "Hamstrings": 0.8, "Quads": 0.6, "Upper Back": 0.4, "Lower Back": 0.7, "Core": 0.3, "Traps": 0.2, "Forearms": 0.2}, 1.9),
        # ──────────────── Hamstrings ────────────────
        _ex("Deadlift", "Pull", {"Hamstrings": 1, "Glutes": 1, "Upper Back": 0.5, "Lower Back": 0.7, "Core": 0.3, "Traps": 0.2, "Forearms": 0.2}, 2.0),
        _ex("Romanian Deadlift", "Pull", {"Hamstrings": 1, "Glutes": 0.8, "Lower Back": 0.4, "Forearms": 0.2, "Traps": 0.1, "Core": 0.2}, 1.5),
        _ex("Stiff Leg Deadlift", "Pull", {"Hamstrings": 1, "Glutes": 0.7, "Lower Back": 0.5, "Core": 0.2, "Forearms": 0.2}, 1.4),
        _ex("Leg Curl", "Legs", {"Hamstrings": 1}, 0.7),
        _ex("Lying Leg Curls (Machine)", "Legs", {"Hamstrings": 1}, 0.7),
        _ex("Glute Ham Raise", "Legs", {"Hamstrings": 0.7, "Glutes": 1, "Lower Back": 0.3, "Core": 0.2}, 1.1),
        # ──────────────── Glutes / calves ────────────────
        _ex("Barbell Hip Thrust", "Legs", {"Glutes": 1, "Hamstrings": 0.3, "Quads": 0.1, "Core": 0.2}, 1.0),
        _ex("Standing Calf Raises (Machine)", "Legs", {"Calves": 1}, 0.6),
        _ex("Calf Raises on Leg Press (Machine)", "Legs", {"Calves": 1}, 0.6),
        # ──────────────── Lower back ────────────────
        _ex("Good Morning", "Pull", {"Lower Back": 1, "Hamstrings": 0.8, "Glutes": 0.6, "Core": 0.3}, 1.2),
        _ex("Hyperextensions on Roman Chair", "Pull", {"Glutes": 0.5, "Lower Back": 1, "Hamstrings": 0.3}, 0.9),
        # ──────────────── Core ────────────────
        _ex("Cable Crunch", "Core", {"Core": 1, "Forearms": 0.3, "Upper Back": 0.2}, 1.1),
        _ex("Hanging Leg Raises", "Core", {"Core": 1, "Forearms": 0.3, "Upper Back": 0.2}, 1.1),
        _ex("Ab Wheel Rollouts", "Core", {"Core": 1, "Front Delts": 0.4, "Triceps": 0.3, "Upper Back": 0.2}, 1.3),
        # ──────────────── Full body ────────────────
        _ex("Farmers Walk", "Full Body", {"Forearms": 1, "Traps": 0.5, "Core": 0.5, "Quads": 0.2, "Hamstrings": 0.2, "Glutes": 0.2, "Upper Back": 0.1, "Lower Back": 0.1}, 1.8),
    ]


def _day(name: str, entries: list[tuple[str, int] | tuple[str, int, bool]]) -> Day:
    exercises = []
    for entry in entries:
        superset = entry[2] if len(entry) > 2 else False
        exercises.append(
            PerformedExercise(name=entry[0], sets=entry[1], superset=superset)
        )
    return Day(name=name, exercises=exercises)


def build_default_cycles() -> List[Cycle]:
    """
    A six-day push/legs/pull split used for first runs and as a load fallback.
    """
    days = [
        _day(
            "Push A",
            [
                ("Cambered Bar Bench Press", 3),
                ("Arnold Press (Dumbbells)", 3),
                ("Dips (Bodyweight)", 3),
                ("Lateral Raise", 4, True),
                ("Lat Pullovers (EZ Bar)", 4, True),
                ("Wrist Curls (Barbell)", 3),
            ],
        ),
        _day(
            "Legs A",
            [
                ("Squat", 3),
                ("Romanian Deadlift", 3, True),
                ("Shrugs (Barbell)", 3),
                ("Bulgarian Split Squats (Smith Machine)", 3),
                ("Leg Extensions (Machine)", 3),
                ("Lying Leg Curls (Machine)", 3),
                ("Standing Calf Raises (Machine)", 3),
                ("Cable Crunch", 3),
            ],
        ),
        _day(
            "Pull A",
            [
                ("Barbell Row", 3, True),
                ("Shrugs (Barbell)", 3),
                ("Pull-Up", 3),
                ("Face Pulls with Rope (Cable)", 3),
                ("Lat Prayer (Cable)", 3, True),
                ("Cable Bicep Curls", 3),
                ("Standing Calf Raises (Machine)", 3),
            ],
        ),
        _day(
            "Push B",
            [
                ("Push Press (Barbell)", 3),
                ("Dumbbell Bench Press", 3),
                ("Cable Fly", 3, True),
                ("Lateral Raises (Cable)", 3),
                ("Overhead Triceps Extensions (Cable)", 3, True),
                ("Rear Delt Flyes (Cable)", 3),
            ],
        ),
        _day(
            "Legs B",
            [
                ("Deadlift", 1),
                ("Deficit Deadlifts (Trap Bar)", 3),
                ("Leg Press (Machine)", 4, True),
                ("Calf Raises on Leg Press (Machine)", 4),
                ("Glute Ham Raise", 3),
                ("Cable Crunch", 3, True),
                ("Wrist Curls (Barbell)", 3),
            ],
        ),
        _day(
            "Pull B",
            [
                ("Pull-Up", 3),
                ("Machine Row", 3),
                ("Shrugs (Barbell)", 3),
                ("Cable Bicep Curls", 3, True),
                ("Lateral Raise", 3, True),
                ("Rear Delt Flyes (Cable)", 3),
                ("Raise Extension (Dumbbells)", 3, True),
                ("Standing Calf Raises (Machine)", 3),
            ],
        ),
    ]
    return [Cycle(name="Micro Cycle 1", days=days)]
