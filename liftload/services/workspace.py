from datetime import datetime
from typing import Any, Callable, List, Optional, TypeVar

from pydantic import ValidationError

from liftload.engine import StressEngine
from liftload.models import (
    AppMessage,
    Cycle,
    Day,
    ExerciseDefinition,
    PerformedExercise,
    SavedRoutine,
)
from liftload.repositories.catalog import CatalogRepository, DynamoCatalogRepository
from liftload.repositories.cycles import CycleRepository, DynamoCycleRepository
from liftload.repositories.errors import RepoError
from liftload.repositories.routines import DynamoRoutineRepository, RoutineRepository
from liftload.settings import settings
from liftload.utils import dates
from liftload.utils.log import logger
from liftload.utils.seed_data import build_default_catalog, build_default_cycles
from liftload.utils.transfer import ImportFormatError, export_cycles, parse_import

T = TypeVar("T")

EXERCISE_FIELDS_ERROR = (
    "Please fill in all required fields (name, category, and at least one muscle)."
)


def _move(items: List[T], source: int, target: int) -> bool:
    """
    Move ``items[source]`` so it lands before the item at ``target``.

    ``target`` is counted before removal, so ``len(items)`` means the end.
    Returns False for a no-op drop (own slot or the slot right after it).
    """
    if target in (source, source + 1):
        return False
    item = items.pop(source)
    if source < target:
        target -= 1
    items.insert(max(0, min(target, len(items))), item)
    return True


def _empty_cycle(number: int) -> Cycle:
    return Cycle(name=f"Micro Cycle {number}", days=[Day(name="Day 1")])


def build_workspace() -> "PlannerWorkspace":
    """Workspace wired to the DynamoDB-backed store."""
    return PlannerWorkspace(
        catalog_repo=DynamoCatalogRepository(),
        cycle_repo=DynamoCycleRepository(),
        routine_repo=DynamoRoutineRepository(),
    )


class PlannerWorkspace:
    """
    Routine-building state: catalog, micro-cycles and saved routines.

    Every operation returns the AppMessage it produced. Storage failures are
    caught here, per collection, and reported as error messages; they never
    propagate to the caller.
    """

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        cycle_repo: CycleRepository,
        routine_repo: RoutineRepository,
    ):
        self.catalog_repo = catalog_repo
        self.cycle_repo = cycle_repo
        self.routine_repo = routine_repo

        self.catalog: List[ExerciseDefinition] = build_default_catalog()
        self.cycles: List[Cycle] = build_default_cycles()
        self.routines: List[SavedRoutine] = []
        self.selected_routine_name = ""
        self.current_cycle_index = 0
        self.message = AppMessage()

    # ----------------------- Messages -----------------------------

    def _success(self, text: str) -> AppMessage:
        self.message = AppMessage(type="success", text=text)
        return self.message

    def _error(self, text: str) -> AppMessage:
        logger.warning(text)
        self.message = AppMessage(type="error", text=text)
        return self.message

    def current_message(self, now: Optional[datetime] = None) -> AppMessage:
        """The latest message, or a blank one once it has expired."""
        now = now or dates.now()
        if self.message.is_expired(now, settings.MESSAGE_TTL_SECONDS):
            return AppMessage()
        return self.message

    def clear_message(self) -> None:
        self.message = AppMessage()

    # ----------------------- Persistence -----------------------------

    def _try_save(self, save: Callable[[], None], failure_text: str) -> bool:
        try:
            save()
        except RepoError:
            logger.exception(failure_text)
            self._error(failure_text)
            return False
        return True

    def _save_catalog(self) -> bool:
        return self._try_save(
            lambda: self.catalog_repo.save_catalog(self.catalog),
            "Failed to save exercises",
        )

    def _save_cycles(self) -> bool:
        return self._try_save(
            lambda: self.cycle_repo.save_cycles(self.cycles),
            "Failed to save cycles",
        )

    def _save_routines(self) -> bool:
        return self._try_save(
            lambda: self.routine_repo.save_routines(self.routines),
            "Failed to save routines",
        )

    def _save_selection(self) -> bool:
        return self._try_save(
            lambda: self.routine_repo.save_selected_routine_name(
                self.selected_routine_name
            ),
            "Failed to save selected routine",
        )

    def _cycles_changed(self, message: AppMessage) -> AppMessage:
        if not self._save_cycles():
            return self.message
        return message

    # ----------------------- Load -----------------------------

    def _load(self, load: Callable[[], T], what: str) -> Optional[T]:
        try:
            return load()
        except RepoError:
            logger.exception(f"Failed to load {what}")
            return None

    def load(self) -> AppMessage:
        """
        Load every collection. Catalog and cycles fall back to the built-in
        defaults when nothing is stored or the store cannot be read.
        """
        catalog = self._load(self.catalog_repo.load_catalog, "exercises")
        cycles = self._load(self.cycle_repo.load_cycles, "cycles")
        routines = self._load(self.routine_repo.load_routines, "routines")
        selected = self._load(
            self.routine_repo.load_selected_routine_name, "selected routine"
        )

        self.catalog = catalog or build_default_catalog()
        self.cycles = cycles or build_default_cycles()
        self.routines = routines or []
        self.selected_routine_name = ""
        self.current_cycle_index = 0

        if selected:
            routine = self._find_routine(selected)
            if routine is not None:
                self.cycles = [c.model_copy(deep=True) for c in routine.weeks] or [
                    _empty_cycle(1)
                ]
                self.selected_routine_name = routine.name
                logger.info(f"Auto-loaded routine: {routine.name}")
            else:
                logger.info(f"Selected routine {selected} no longer exists")

        if None in (catalog, cycles, routines, selected):
            return self._error("Failed to load data from database")

        self.clear_message()
        return self.message

    # ----------------------- Catalog -----------------------------

    def _find_exercise_index(self, name: str) -> Optional[int]:
        for i, definition in enumerate(self.catalog):
            if definition.name == name:
                return i
        return None

    def _exercise_name_taken(self, name: str, ignore: Optional[int] = None) -> bool:
        folded = name.strip().lower()
        return any(
            d.key == folded for i, d in enumerate(self.catalog) if i != ignore
        )

    def _as_definition(self, data: Any) -> Optional[ExerciseDefinition]:
        if isinstance(data, ExerciseDefinition):
            return data
        try:
            return ExerciseDefinition.model_validate(data)
        except ValidationError as e:
            logger.debug(f"Invalid exercise definition: {e}")
            return None

    def add_exercise(self, data: ExerciseDefinition | dict) -> AppMessage:
        definition = self._as_definition(data)
        if definition is None:
            return self._error(EXERCISE_FIELDS_ERROR)

        if self._exercise_name_taken(definition.name):
            return self._error("An exercise with this name already exists.")

        self.catalog.append(definition)
        logger.info(f"Added exercise {definition.name}")

        if not self._save_catalog():
            return self.message
        return self._success(f'Exercise "{definition.name}" added successfully!')

    def edit_exercise(self, name: str, data: ExerciseDefinition | dict) -> AppMessage:
        position = self._find_exercise_index(name)
        if position is None:
            return self._error(f'Exercise "{name}" not found.')

        definition = self._as_definition(data)
        if definition is None:
            return self._error(EXERCISE_FIELDS_ERROR)

        if self._exercise_name_taken(definition.name, ignore=position):
            return self._error("An exercise with this name already exists.")

        self.catalog[position] = definition
        logger.info(f"Edited exercise {name} -> {definition.name}")

        if not self._save_catalog():
            return self.message
        return self._success(f'Exercise "{definition.name}" updated successfully!')

    def delete_exercise(self, name: str) -> AppMessage:
        position = self._find_exercise_index(name)
        if position is None:
            return self._error(f'Exercise "{name}" not found.')

        del self.catalog[position]
        logger.info(f"Deleted exercise {name}")

        if not self._save_catalog():
            return self.message
        return self._success(f'Exercise "{name}" deleted successfully!')

    # ----------------------- Micro cycles -----------------------------

    @property
    def current_cycle(self) -> Cycle:
        return self.cycles[self.current_cycle_index]

    @property
    def days(self) -> List[Day]:
        return self.current_cycle.days

    def _valid_cycle(self, index: int) -> bool:
        return 0 <= index < len(self.cycles)

    def select_cycle(self, index: int) -> AppMessage:
        if not self._valid_cycle(index):
            return self._error("Micro cycle not found.")
        self.current_cycle_index = index
        self.clear_message()
        return self.message

    def add_cycle(self) -> AppMessage:
        cycle = _empty_cycle(len(self.cycles) + 1)
        self.cycles.append(cycle)
        return self._cycles_changed(self._success(f'Added "{cycle.name}".'))

    def delete_cycle(self, index: int) -> AppMessage:
        if len(self.cycles) <= 1:
            return self._error("You must have at least one micro cycle.")
        if not self._valid_cycle(index):
            return self._error("Micro cycle not found.")

        removed = self.cycles.pop(index)
        if self.current_cycle_index >= len(self.cycles):
            self.current_cycle_index = len(self.cycles) - 1
        elif index < self.current_cycle_index:
            self.current_cycle_index -= 1

        return self._cycles_changed(self._success(f'Deleted "{removed.name}".'))

    def copy_cycle(self, index: int) -> AppMessage:
        if not self._valid_cycle(index):
            return self._error("Micro cycle not found.")

        source = self.cycles[index]
        copied = source.model_copy(deep=True)
        copied.name = f"{source.name} (Copy)"
        self.cycles.append(copied)

        return self._cycles_changed(
            self._success(f'Micro Cycle "{source.name}" copied successfully!')
        )

    # ----------------------- Days -----------------------------

    def _valid_day(self, index: int) -> bool:
        return 0 <= index < len(self.days)

    def add_day(self) -> AppMessage:
        day = Day(name=f"Day {len(self.days) + 1}")
        self.days.append(day)
        return self._cycles_changed(self._success(f'Added "{day.name}".'))

    def delete_day(self, index: int) -> AppMessage:
        if len(self.days) <= 1:
            return self._error("You must have at least one day.")
        if not self._valid_day(index):
            return self._error("Day not found.")

        removed = self.days.pop(index)
        return self._cycles_changed(self._success(f'Deleted "{removed.name}".'))

    def copy_day(self, index: int) -> AppMessage:
        if not self._valid_day(index):
            return self._error("Day not found.")

        source = self.days[index]
        copied = source.model_copy(deep=True)
        copied.name = f"{source.name} (Copy)"
        self.days.append(copied)

        return self._cycles_changed(
            self._success(f'Day "{source.name}" copied successfully!')
        )

    def rename_day(self, index: int, name: str) -> AppMessage:
        if not name.strip():
            return self._error("Day name cannot be empty.")
        if not self._valid_day(index):
            return self._error("Day not found.")

        try:
            self.days[index] = Day(name=name, exercises=self.days[index].exercises)
        except ValidationError:
            return self._error("Day name is too long.")
        return self._cycles_changed(self._success(f'Day renamed to "{name.strip()}".'))

    def move_day(self, source: int, target: int) -> AppMessage:
        if not self._valid_day(source) or not 0 <= target <= len(self.days):
            return self._error("Day not found.")

        if not _move(self.days, source, target):
            self.clear_message()
            return self.message
        return self._cycles_changed(self._success("Days reordered."))

    # ----------------------- Exercise entries -----------------------------

    def _valid_entry(self, day_index: int, entry_index: int) -> bool:
        return (
            self._valid_day(day_index)
            and 0 <= entry_index < len(self.days[day_index].exercises)
        )

    def add_exercise_entry(self, day_index: int, name: str = "") -> AppMessage:
        if not self._valid_day(day_index):
            return self._error("Day not found.")

        self.days[day_index].exercises.append(PerformedExercise(name=name))
        return self._cycles_changed(self._success("Exercise added."))

    def update_exercise_entry(
        self, day_index: int, entry_index: int, **changes: Any
    ) -> AppMessage:
        """Apply field changes (``sets=4``, ``intensity_type="rpe"`` ...)."""
        if not self._valid_entry(day_index, entry_index):
            return self._error("Exercise not found.")

        exercises = self.days[day_index].exercises
        current = exercises[entry_index]
        try:
            updated = PerformedExercise.model_validate(
                {**current.model_dump(), **changes}
            )
        except ValidationError as e:
            logger.debug(f"Rejected exercise update {changes}: {e}")
            return self._error("Invalid exercise values.")

        exercises[entry_index] = updated
        return self._cycles_changed(self._success("Exercise updated."))

    def delete_exercise_entry(self, day_index: int, entry_index: int) -> AppMessage:
        if not self._valid_entry(day_index, entry_index):
            return self._error("Exercise not found.")

        del self.days[day_index].exercises[entry_index]
        return self._cycles_changed(self._success("Exercise removed."))

    def copy_exercise_entry(self, day_index: int, entry_index: int) -> AppMessage:
        if not self._valid_entry(day_index, entry_index):
            return self._error("Exercise not found.")

        exercises = self.days[day_index].exercises
        exercises.insert(entry_index + 1, exercises[entry_index].model_copy(deep=True))
        return self._cycles_changed(self._success("Exercise copied successfully!"))

    def toggle_superset(self, day_index: int, entry_index: int) -> AppMessage:
        if not self._valid_entry(day_index, entry_index):
            return self._error("Exercise not found.")

        entry = self.days[day_index].exercises[entry_index]
        entry.superset = not entry.superset
        return self._cycles_changed(self._success("Superset updated."))

    def move_exercise_entry(
        self, source_day: int, source_index: int, target_day: int, target_index: int
    ) -> AppMessage:
        """
        Drag an entry to another slot, possibly on another day. Moving an
        entry to another day changes when its stimulus lands in the decay views.
        """
        if not self._valid_entry(source_day, source_index):
            return self._error("Exercise not found.")
        if not self._valid_day(target_day):
            return self._error("Day not found.")

        source_list = self.days[source_day].exercises
        target_list = self.days[target_day].exercises

        if source_day == target_day:
            if not 0 <= target_index <= len(source_list):
                return self._error("Exercise not found.")
            if not _move(source_list, source_index, target_index):
                self.clear_message()
                return self.message
        else:
            if not 0 <= target_index <= len(target_list):
                return self._error("Exercise not found.")
            target_list.insert(target_index, source_list.pop(source_index))

        return self._cycles_changed(self._success("Exercise moved."))

    # ----------------------- Routines -----------------------------

    def _find_routine(self, name: str) -> Optional[SavedRoutine]:
        for routine in self.routines:
            if routine.name == name:
                return routine
        return None

    def _routine_name_taken(self, name: str, ignore: str = "") -> bool:
        folded = name.lower()
        return any(
            r.name.lower() == folded and r.name != ignore for r in self.routines
        )

    def _snapshot(self, name: str) -> SavedRoutine:
        return SavedRoutine(
            name=name, weeks=[c.model_copy(deep=True) for c in self.cycles]
        )

    def new_routine(self) -> AppMessage:
        self.selected_routine_name = ""
        self.cycles = [_empty_cycle(1)]
        self.current_cycle_index = 0

        if not (self._save_selection() and self._save_cycles()):
            return self.message
        return self._success(
            "New routine created! Start adding exercises to build your workout."
        )

    def save_current_routine(self, name: Optional[str] = None) -> AppMessage:
        """Overwrite the selected routine, or save as ``name`` when none is selected."""
        if not self.selected_routine_name:
            return self.save_routine_as(name or "")

        routine = self._snapshot(self.selected_routine_name)
        try:
            self.routine_repo.update_routine(routine)
        except RepoError:
            logger.exception(f"Failed to update routine {routine.name}")
            return self._error("Failed to update routine")

        self.routines = [
            routine if r.name == routine.name else r for r in self.routines
        ]
        return self._success(f'Routine "{routine.name}" updated successfully!')

    def save_routine_as(self, name: str) -> AppMessage:
        name = name.strip()
        if not name:
            return self._error("Please enter a routine name.")
        if self._routine_name_taken(name):
            return self._error("A routine with this name already exists.")

        try:
            routine = self._snapshot(name)
        except ValidationError:
            return self._error("Routine name is too long.")

        previous_routines = list(self.routines)
        previous_selection = self.selected_routine_name

        self.routines.append(routine)
        self.selected_routine_name = routine.name

        try:
            self.routine_repo.save_routines(self.routines)
            self.routine_repo.save_selected_routine_name(routine.name)
        except RepoError:
            logger.exception(f"Failed to save routine {routine.name}")
            self.routines = previous_routines
            self.selected_routine_name = previous_selection
            return self._error("Failed to save routine")

        return self._success(f'Routine "{routine.name}" saved and selected!')

    def rename_routine(self, new_name: str) -> AppMessage:
        old_name = self.selected_routine_name
        if not old_name:
            return self._error("No routine selected.")

        new_name = new_name.strip()
        if not new_name:
            return self._error("Please enter a routine name.")
        if self._routine_name_taken(new_name, ignore=old_name):
            return self._error("A routine with this name already exists.")

        previous_routines = list(self.routines)
        try:
            self.routines = [
                r.model_copy(update={"name": new_name}) if r.name == old_name else r
                for r in self.routines
            ]
            self.selected_routine_name = new_name
            self.routine_repo.save_routines(self.routines)
            self.routine_repo.save_selected_routine_name(new_name)
        except RepoError:
            logger.exception(f"Failed to rename routine {old_name}")
            self.routines = previous_routines
            self.selected_routine_name = old_name
            return self._error("Failed to rename routine")

        return self._success(f'Routine renamed from "{old_name}" to "{new_name}"!')

    def delete_routine(self) -> AppMessage:
        name = self.selected_routine_name
        if not name:
            return self._error("No routine selected.")

        self.routines = [r for r in self.routines if r.name != name]
        self.selected_routine_name = ""

        if not (self._save_routines() and self._save_selection()):
            return self.message
        return self._success("Routine deleted successfully!")

    def select_routine(self, name: str) -> AppMessage:
        """Load a saved routine's weeks into the working cycles."""
        if not name:
            self.clear_message()
            self.selected_routine_name = ""
            self._save_selection()
            return self.message

        routine = self._find_routine(name)
        if routine is None:
            return self._error(f'Routine "{name}" not found.')

        self.cycles = [c.model_copy(deep=True) for c in routine.weeks] or [
            _empty_cycle(1)
        ]
        self.current_cycle_index = 0
        self.selected_routine_name = routine.name

        if not (self._save_selection() and self._save_cycles()):
            return self.message
        return self._success(f'Routine "{routine.name}" loaded.')

    # ----------------------- Import / export -----------------------------

    def import_json(self, text: str) -> AppMessage:
        try:
            cycles = parse_import(text)
        except ImportFormatError as e:
            return self._error(e.message)

        if not cycles:
            return self._error("The file contains no micro cycles.")

        self.cycles = cycles
        self.current_cycle_index = 0
        return self._cycles_changed(
            self._success("Workout plan loaded successfully!")
        )

    def export_json(self) -> str:
        return export_cycles(self.cycles)

    # ----------------------- Engine -----------------------------

    def engine(self, use_felt_sets: Optional[bool] = None) -> StressEngine:
        """A stress engine over the current micro cycle."""
        return StressEngine(self.catalog, self.days, use_felt_sets=use_felt_sets)
