from typing import List, Protocol

from pydantic import ValidationError

from liftload.models import ExerciseDefinition
from liftload.repositories.base import DynamoRepository
from liftload.repositories.errors import CatalogRepoError, RepoError
from liftload.utils.log import logger

COLLECTION = "exercises"


class CatalogRepository(Protocol):
    def load_catalog(self) -> List[ExerciseDefinition]: ...
    def save_catalog(self, exercises: List[ExerciseDefinition]) -> None: ...


class DynamoCatalogRepository(DynamoRepository[ExerciseDefinition]):
    """
    Implementation of CatalogRepository
    """

    def _to_model(self, item: dict) -> ExerciseDefinition:
        return ExerciseDefinition.model_validate(item)

    def load_catalog(self) -> List[ExerciseDefinition]:
        """
        Return the stored catalog, or an empty list if none was saved yet.
        """
        try:
            document = self._load_document(COLLECTION)
        except RepoError as e:
            raise CatalogRepoError("Failed to load exercise catalog") from e

        if document is None:
            return []

        try:
            exercises = [self._to_model(item) for item in document]
        except (TypeError, ValidationError) as e:
            logger.error(f"_to_model failed for catalog: {e}")
            raise CatalogRepoError("Stored exercise catalog is invalid") from e

        logger.debug(f"Loaded {len(exercises)} exercises")
        return exercises

    def save_catalog(self, exercises: List[ExerciseDefinition]) -> None:
        logger.debug(f"Saving {len(exercises)} exercises")

        try:
            self._save_document(COLLECTION, [e.to_item() for e in exercises])
        except RepoError as e:
            logger.error(f"Failed to save catalog: {e}")
            raise CatalogRepoError("Failed to save exercise catalog") from e
