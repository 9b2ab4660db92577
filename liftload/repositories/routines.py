from typing import List, Protocol

from pydantic import ValidationError

from liftload.models import SavedRoutine
from liftload.repositories.base import DynamoRepository
from liftload.repositories.errors import RepoError, RoutineRepoError
from liftload.utils.log import logger

COLLECTION = "routines"
SELECTED_COLLECTION = "selected_routine"


class RoutineRepository(Protocol):
    def load_routines(self) -> List[SavedRoutine]: ...
    def save_routines(self, routines: List[SavedRoutine]) -> None: ...
    def update_routine(self, routine: SavedRoutine) -> None: ...
    def load_selected_routine_name(self) -> str: ...
    def save_selected_routine_name(self, name: str) -> None: ...


class DynamoRoutineRepository(DynamoRepository[SavedRoutine]):
    """
    Implementation of RoutineRepository, including the selected routine name.
    """

    def _to_model(self, item: dict) -> SavedRoutine:
        return SavedRoutine.model_validate(item)

    # ----------------------- Routines -----------------------------

    def load_routines(self) -> List[SavedRoutine]:
        try:
            document = self._load_document(COLLECTION)
        except RepoError as e:
            raise RoutineRepoError("Failed to load routines") from e

        if document is None:
            return []

        try:
            return [self._to_model(item) for item in document]
        except (TypeError, ValidationError) as e:
            logger.error(f"_to_model failed for routines: {e}")
            raise RoutineRepoError("Stored routines are invalid") from e

    def save_routines(self, routines: List[SavedRoutine]) -> None:
        logger.debug(f"Saving {len(routines)} routines")

        try:
            self._save_document(COLLECTION, [r.to_item() for r in routines])
        except RepoError as e:
            logger.error(f"Failed to save routines: {e}")
            raise RoutineRepoError("Failed to save routines") from e

    def update_routine(self, routine: SavedRoutine) -> None:
        """
        Replace the stored routine with the same name, or append it.
        """
        logger.debug(f"Updating routine {routine.name}")

        routines = self.load_routines()
        for i, existing in enumerate(routines):
            if existing.name == routine.name:
                routines[i] = routine
                break
        else:
            routines.append(routine)

        self.save_routines(routines)

    # ----------------------- Selection -----------------------------

    def load_selected_routine_name(self) -> str:
        try:
            document = self._load_document(SELECTED_COLLECTION)
        except RepoError as e:
            raise RoutineRepoError("Failed to load selected routine name") from e

        if not isinstance(document, str):
            return ""
        return document

    def save_selected_routine_name(self, name: str) -> None:
        try:
            self._save_document(SELECTED_COLLECTION, name)
        except RepoError as e:
            logger.error(f"Failed to save selected routine name: {e}")
            raise RoutineRepoError("Failed to save selected routine name") from e
