import json
from datetime import timedelta

import pytest

from liftload.models import Cycle, Day, SavedRoutine
from liftload.services.workspace import PlannerWorkspace, _move
from liftload.settings import settings
from liftload.utils.transfer import PARSE_ERROR
from tests.unit.services.fakes import FakeCatalogRepo, FakeCycleRepo, FakeRoutineRepo

# ----------------------- Load -----------------------------


def test_load_uses_stored_collections(workspace):
    assert [e.name for e in workspace.catalog] == [
        "Barbell Bench Press",
        "Squat",
        "Barbell Curl",
    ]
    assert [d.name for d in workspace.days] == ["Day 1", "Day 2"]
    assert workspace.message.text == ""


def test_load_falls_back_to_defaults_when_store_is_empty():
    ws = PlannerWorkspace(FakeCatalogRepo(), FakeCycleRepo(), FakeRoutineRepo())

    message = ws.load()

    assert len(ws.catalog) > 50
    assert ws.cycles[0].name == "Micro Cycle 1"
    assert message.is_error is False


def test_load_failure_of_one_collection_keeps_the_others(catalog_repo, routine_repo):
    cycle_repo = FakeCycleRepo()
    cycle_repo.fail_load = True
    ws = PlannerWorkspace(catalog_repo, cycle_repo, routine_repo)

    message = ws.load()

    assert message.text == "Failed to load data from database"
    assert len(ws.catalog) == 3
    assert [d.name for d in ws.days][:2] == ["Push A", "Legs A"]


def test_load_auto_selects_saved_routine(catalog_repo, cycle_repo, make_cycle):
    saved = SavedRoutine(name="PPL", weeks=[make_cycle("Week A", days=1)])
    routine_repo = FakeRoutineRepo([saved], selected="PPL")
    ws = PlannerWorkspace(catalog_repo, cycle_repo, routine_repo)

    ws.load()

    assert ws.selected_routine_name == "PPL"
    assert [c.name for c in ws.cycles] == ["Week A"]
    ws.cycles[0].name = "Edited"
    assert saved.weeks[0].name == "Week A"


def test_load_clears_selection_of_missing_routine(catalog_repo, cycle_repo):
    ws = PlannerWorkspace(catalog_repo, cycle_repo, FakeRoutineRepo(selected="Gone"))

    ws.load()

    assert ws.selected_routine_name == ""
    assert ws.cycles[0].name == "Micro Cycle 1"


# ----------------------- Messages -----------------------------


def test_current_message_expires_after_ttl(workspace, monkeypatch):
    monkeypatch.setattr(settings, "MESSAGE_TTL_SECONDS", 4)

    message = workspace.add_day()

    created = message.created_at
    assert workspace.current_message(created + timedelta(seconds=1)) is message
    assert workspace.current_message(created + timedelta(seconds=4)).text == ""


def test_clear_message(workspace):
    workspace.add_day()

    workspace.clear_message()

    assert workspace.message.text == ""


# ----------------------- Catalog -----------------------------


def test_add_exercise_persists_catalog(workspace, catalog_repo):
    message = workspace.add_exercise(
        {"name": "Leg Press", "category": "Legs", "muscles": {"Quads": 1}}
    )

    assert message.type == "success"
    assert catalog_repo.exercises[-1].name == "Leg Press"


def test_add_exercise_rejects_duplicate_name_case_insensitively(workspace):
    message = workspace.add_exercise({"name": "  squat ", "muscles": {"Quads": 1}})

    assert message.text == "An exercise with this name already exists."
    assert len(workspace.catalog) == 3


def test_add_exercise_requires_fields(workspace):
    message = workspace.add_exercise({"name": "Mystery", "muscles": {}})

    assert message.text == (
        "Please fill in all required fields "
        "(name, category, and at least one muscle)."
    )


def test_edit_exercise_may_keep_its_own_name(workspace, catalog_repo):
    message = workspace.edit_exercise(
        "Squat", {"name": "Squat", "category": "Legs", "muscles": {"Quads": 1}}
    )

    assert message.type == "success"
    assert catalog_repo.exercises[1].muscles == {"Quads": 1}


def test_edit_exercise_cannot_take_another_name(workspace):
    message = workspace.edit_exercise(
        "Squat", {"name": "barbell curl", "muscles": {"Quads": 1}}
    )

    assert message.text == "An exercise with this name already exists."


def test_delete_exercise(workspace):
    workspace.delete_exercise("Barbell Curl")

    assert [e.name for e in workspace.catalog] == ["Barbell Bench Press", "Squat"]
    assert workspace.delete_exercise("Barbell Curl").is_error


def test_catalog_save_failure_is_reported(workspace, catalog_repo):
    catalog_repo.fail_save = True

    message = workspace.delete_exercise("Squat")

    assert message.text == "Failed to save exercises"
    assert message.is_error


# ----------------------- Micro cycles -----------------------------


def test_add_cycle_names_it_by_position(workspace, cycle_repo):
    workspace.add_cycle()

    added = workspace.cycles[-1]
    assert added.name == "Micro Cycle 2"
    assert [d.name for d in added.days] == ["Day 1"]
    assert len(cycle_repo.cycles) == 2


def test_cannot_delete_last_cycle(workspace):
    message = workspace.delete_cycle(0)

    assert message.text == "You must have at least one micro cycle."
    assert len(workspace.cycles) == 1


def test_delete_cycle_keeps_current_index_in_range(workspace):
    workspace.add_cycle()
    workspace.add_cycle()
    workspace.select_cycle(2)

    workspace.delete_cycle(2)

    assert workspace.current_cycle_index == 1


def test_delete_cycle_before_current_shifts_index(workspace):
    workspace.add_cycle()
    workspace.select_cycle(1)

    workspace.delete_cycle(0)

    assert workspace.current_cycle_index == 0
    assert workspace.current_cycle.name == "Micro Cycle 2"


def test_copy_cycle_is_deep(workspace):
    message = workspace.copy_cycle(0)

    assert message.text == 'Micro Cycle "Micro Cycle 1" copied successfully!'
    copied = workspace.cycles[1]
    assert copied.name == "Micro Cycle 1 (Copy)"
    copied.days[0].exercises[0].sets = 9
    assert workspace.cycles[0].days[0].exercises[0].sets == 3


def test_select_unknown_cycle(workspace):
    assert workspace.select_cycle(5).is_error
    assert workspace.current_cycle_index == 0


def test_cycle_save_failure_is_reported(workspace, cycle_repo):
    cycle_repo.fail_save = True

    message = workspace.add_cycle()

    assert message.text == "Failed to save cycles"


# ----------------------- Days -----------------------------


def test_add_day(workspace):
    workspace.add_day()

    assert workspace.days[-1].name == "Day 3"


def test_cannot_delete_last_day(workspace):
    workspace.delete_day(0)

    message = workspace.delete_day(0)

    assert message.text == "You must have at least one day."
    assert len(workspace.days) == 1


def test_copy_day_appends_copy(workspace):
    message = workspace.copy_day(0)

    assert message.text == 'Day "Day 1" copied successfully!'
    assert workspace.days[-1].name == "Day 1 (Copy)"
    assert workspace.days[-1].exercises == workspace.days[0].exercises


def test_rename_day_rejects_blank(workspace):
    assert workspace.rename_day(0, "   ").text == "Day name cannot be empty."

    workspace.rename_day(0, "Legs")

    assert workspace.days[0].name == "Legs"
    assert workspace.days[0].exercises[0].name == "Squat"


@pytest.mark.parametrize(
    "source, target, expected",
    [
        (0, 0, "ABCD"),
        (0, 1, "ABCD"),
        (0, 2, "BACD"),
        (0, 4, "BCDA"),
        (3, 0, "DABC"),
        (2, 1, "ACBD"),
    ],
)
def test_move_drop_semantics(source, target, expected):
    items = list("ABCD")

    _move(items, source, target)

    assert "".join(items) == expected


def test_move_day_reorders_and_persists(workspace, cycle_repo):
    workspace.rename_day(1, "Pull")

    workspace.move_day(1, 0)

    assert [d.name for d in workspace.days] == ["Pull", "Day 1"]
    assert [d.name for d in cycle_repo.cycles[0].days] == ["Pull", "Day 1"]


def test_move_day_onto_itself_is_noop(workspace, cycle_repo):
    saves = cycle_repo.saves

    workspace.move_day(0, 1)

    assert cycle_repo.saves == saves


# ----------------------- Exercise entries -----------------------------


def test_add_exercise_entry_uses_defaults(workspace):
    workspace.add_exercise_entry(1)

    entry = workspace.days[1].exercises[-1]
    assert entry.name == ""
    assert (entry.sets, entry.set_type, entry.rir) == (3, "Regular", 2)


def test_update_exercise_entry(workspace):
    workspace.update_exercise_entry(0, 0, sets=5, intensity_type="rpe")

    entry = workspace.days[0].exercises[0]
    assert entry.sets == 5
    assert entry.intensity_type == "rpe"
    assert entry.rpe == 8


def test_update_exercise_entry_rejects_invalid_values(workspace):
    message = workspace.update_exercise_entry(0, 0, sets=0)

    assert message.is_error
    assert workspace.days[0].exercises[0].sets == 3


def test_copy_exercise_entry_inserts_after_source(workspace):
    workspace.add_exercise_entry(0, "Barbell Curl")

    message = workspace.copy_exercise_entry(0, 0)

    assert message.text == "Exercise copied successfully!"
    assert [e.name for e in workspace.days[0].exercises] == [
        "Squat",
        "Squat",
        "Barbell Curl",
    ]


def test_toggle_superset_and_delete_entry(workspace):
    workspace.toggle_superset(0, 0)
    assert workspace.days[0].exercises[0].superset is True

    workspace.delete_exercise_entry(0, 0)
    assert workspace.days[0].exercises == []
    assert workspace.delete_exercise_entry(0, 0).is_error


def test_move_exercise_entry_between_days(workspace):
    workspace.add_exercise_entry(0, "Barbell Curl")

    workspace.move_exercise_entry(0, 1, 1, 0)

    assert [e.name for e in workspace.days[0].exercises] == ["Squat"]
    assert [e.name for e in workspace.days[1].exercises] == ["Barbell Curl", "Squat"]


def test_move_exercise_entry_within_day(workspace):
    workspace.add_exercise_entry(0, "Barbell Curl")
    workspace.add_exercise_entry(0, "Barbell Bench Press")

    workspace.move_exercise_entry(0, 0, 0, 3)

    assert [e.name for e in workspace.days[0].exercises] == [
        "Barbell Curl",
        "Barbell Bench Press",
        "Squat",
    ]


def test_moving_exercise_changes_daily_stress(workspace):
    before = workspace.engine(use_felt_sets=False).daily_stress(0)
    workspace.add_exercise_entry(1, "Barbell Curl")

    workspace.move_exercise_entry(1, 1, 0, 0)

    after = workspace.engine(use_felt_sets=False).daily_stress(0)
    assert before.muscles["Biceps"].new_stress == 0
    assert after.muscles["Biceps"].new_stress == 3


# ----------------------- Routines -----------------------------


def test_new_routine_resets_cycles(workspace, routine_repo):
    message = workspace.new_routine()

    assert message.text == (
        "New routine created! Start adding exercises to build your workout."
    )
    assert [c.name for c in workspace.cycles] == ["Micro Cycle 1"]
    assert [d.name for d in workspace.days] == ["Day 1"]
    assert workspace.days[0].exercises == []
    assert routine_repo.selected == ""


def test_save_routine_as_selects_it(workspace, routine_repo):
    message = workspace.save_routine_as("  PPL ")

    assert message.text == 'Routine "PPL" saved and selected!'
    assert workspace.selected_routine_name == "PPL"
    assert routine_repo.selected == "PPL"
    assert routine_repo.routines[0].weeks == workspace.cycles


def test_save_routine_as_requires_a_name(workspace):
    assert workspace.save_routine_as("  ").text == "Please enter a routine name."


def test_save_routine_as_rejects_duplicate_name(workspace):
    workspace.save_routine_as("PPL")

    message = workspace.save_routine_as("ppl")

    assert message.text == "A routine with this name already exists."
    assert len(workspace.routines) == 1


def test_save_routine_failure_rolls_back(workspace, routine_repo):
    routine_repo.fail_save = True

    message = workspace.save_routine_as("PPL")

    assert message.text == "Failed to save routine"
    assert workspace.routines == []
    assert workspace.selected_routine_name == ""


def test_save_current_routine_overwrites_selected(workspace, routine_repo):
    workspace.save_routine_as("PPL")
    workspace.add_day()

    message = workspace.save_current_routine()

    assert message.text == 'Routine "PPL" updated successfully!'
    assert len(routine_repo.routines) == 1
    assert len(routine_repo.routines[0].weeks[0].days) == 3


def test_save_current_routine_without_selection_needs_name(workspace):
    assert workspace.save_current_routine().text == "Please enter a routine name."
    assert workspace.save_current_routine("Upper").type == "success"


def test_rename_routine(workspace, routine_repo):
    workspace.save_routine_as("PPL")
    workspace.save_routine_as("Upper Lower")

    assert workspace.rename_routine("ppl").text == (
        "A routine with this name already exists."
    )
    message = workspace.rename_routine("Upper/Lower")

    assert message.text == 'Routine renamed from "Upper Lower" to "Upper/Lower"!'
    assert [r.name for r in routine_repo.routines] == ["PPL", "Upper/Lower"]
    assert routine_repo.selected == "Upper/Lower"


def test_rename_routine_to_own_name_with_new_case(workspace):
    workspace.save_routine_as("PPL")

    assert workspace.rename_routine("ppl").type == "success"


def test_delete_routine_clears_selection(workspace, routine_repo):
    workspace.save_routine_as("PPL")

    message = workspace.delete_routine()

    assert message.text == "Routine deleted successfully!"
    assert workspace.routines == []
    assert routine_repo.selected == ""


def test_select_routine_loads_deep_copy(workspace):
    workspace.save_routine_as("PPL")
    workspace.new_routine()

    workspace.select_routine("PPL")

    assert len(workspace.days) == 2
    workspace.days[0].exercises[0].sets = 10
    assert workspace.routines[0].weeks[0].days[0].exercises[0].sets == 3


def test_select_unknown_routine(workspace):
    assert workspace.select_routine("Nope").is_error


def test_select_blank_routine_clears_selection_and_message(workspace, routine_repo):
    workspace.save_routine_as("PPL")
    assert workspace.message.type == "success"

    message = workspace.select_routine("")

    assert message.type == ""
    assert message.text == ""
    assert workspace.selected_routine_name == ""
    assert routine_repo.selected == ""


# ----------------------- Import / export -----------------------------


def test_import_json_replaces_cycles(workspace, cycle_repo):
    text = json.dumps({"weeks": [{"name": "W1", "days": [{"name": "D1"}]}]})

    message = workspace.import_json(text)

    assert message.text == "Workout plan loaded successfully!"
    assert [c.name for c in workspace.cycles] == ["W1"]
    assert cycle_repo.cycles[0].days[0].name == "D1"


def test_import_json_error_leaves_cycles_alone(workspace):
    before = [c.model_copy(deep=True) for c in workspace.cycles]

    message = workspace.import_json("{oops")

    assert message.text == PARSE_ERROR
    assert workspace.cycles == before


def test_export_json_round_trips(workspace):
    exported = workspace.export_json()

    assert json.loads(exported)["weeks"][0]["name"] == "Micro Cycle 1"


# ----------------------- Engine -----------------------------


def test_engine_reads_current_cycle(workspace):
    workspace.cycles.append(Cycle(name="Arms", days=[Day(name="Arms")]))
    workspace.select_cycle(1)

    assert workspace.engine().weekly_volume().volume == {}
    workspace.select_cycle(0)
    assert workspace.engine().weekly_volume().volume == {"Quads": 6, "Glutes": 3}


def test_build_workspace_wires_dynamo_repositories(monkeypatch):
    from liftload.repositories.catalog import DynamoCatalogRepository
    from liftload.services.workspace import build_workspace
    from liftload.utils import db

    table = object()
    monkeypatch.setattr(db, "get_table", lambda: table)

    ws = build_workspace()

    assert isinstance(ws.catalog_repo, DynamoCatalogRepository)
    assert ws.cycle_repo._table is table
    assert ws.routine_repo._table is table
