from typing import List, Protocol

from pydantic import ValidationError

from liftload.models import Cycle
from liftload.repositories.base import DynamoRepository
from liftload.repositories.errors import CycleRepoError, RepoError
from liftload.utils.log import logger

COLLECTION = "cycles"


class CycleRepository(Protocol):
    def load_cycles(self) -> List[Cycle]: ...
    def save_cycles(self, cycles: List[Cycle]) -> None: ...


class DynamoCycleRepository(DynamoRepository[Cycle]):
    """
    Implementation of CycleRepository. Holds the working micro-cycles.
    """

    def _to_model(self, item: dict) -> Cycle:
        return Cycle.model_validate(item)

    def load_cycles(self) -> List[Cycle]:
        try:
            document = self._load_document(COLLECTION)
        except RepoError as e:
            raise CycleRepoError("Failed to load micro cycles") from e

        if document is None:
            return []

        try:
            return [self._to_model(item) for item in document]
        except (TypeError, ValidationError) as e:
            logger.error(f"_to_model failed for cycles: {e}")
            raise CycleRepoError("Stored micro cycles are invalid") from e

    def save_cycles(self, cycles: List[Cycle]) -> None:
        logger.debug(f"Saving {len(cycles)} micro cycles")

        try:
            self._save_document(COLLECTION, [c.to_item() for c in cycles])
        except RepoError as e:
            logger.error(f"Failed to save cycles: {e}")
            raise CycleRepoError("Failed to save micro cycles") from e
