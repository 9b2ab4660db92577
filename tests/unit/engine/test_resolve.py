from liftload.engine import CatalogIndex, resolve_exercise
from liftload.models import ExerciseDefinition


def _definition(name: str, muscle: str = "Chest") -> ExerciseDefinition:
    return ExerciseDefinition(name=name, muscles={muscle: 1})


def test_exact_match_wins_over_case_insensitive_match():
    catalog = [_definition("bench", "Triceps"), _definition("Bench", "Chest")]

    found = CatalogIndex(catalog).resolve("Bench")

    assert found is catalog[1]


def test_case_insensitive_match():
    catalog = [_definition("Barbell Row", "Upper Back")]

    assert CatalogIndex(catalog).resolve("barbell ROW") is catalog[0]


def test_trimmed_case_insensitive_match():
    catalog = [_definition("Barbell Row", "Upper Back")]

    assert CatalogIndex(catalog).resolve("  barbell row ") is catalog[0]


def test_first_catalog_entry_wins_on_collision():
    catalog = [_definition("Squat", "Quads"), _definition("SQUAT", "Glutes")]

    found = CatalogIndex(catalog).resolve("squat")

    assert found is catalog[0]


def test_unknown_name_resolves_to_none(catalog):
    assert CatalogIndex(catalog).resolve("Nordic Curl") is None


def test_blank_name_resolves_to_none(catalog):
    assert CatalogIndex(catalog).resolve("") is None


def test_resolve_exercise_one_off_lookup(catalog):
    assert resolve_exercise("squat", catalog).name == "Squat"


def test_index_length_counts_distinct_names(catalog):
    assert len(CatalogIndex(catalog)) == 3
