from typing import Iterable, Optional

from liftload.models import ExerciseDefinition
from liftload.utils.log import logger


class CatalogIndex:
    """
    Name lookup over an exercise catalog.

    Resolution order: exact name, then case-insensitive, then
    whitespace-trimmed case-insensitive. Saved routines can hold names that
    drifted from later catalog edits, so the looser tiers keep them counting.
    When several entries collide under a looser tier the first one in
    catalog order wins.
    """

    def __init__(self, catalog: Iterable[ExerciseDefinition]):
        self._exact: dict[str, ExerciseDefinition] = {}
        self._folded: dict[str, ExerciseDefinition] = {}
        self._trimmed: dict[str, ExerciseDefinition] = {}

        for definition in catalog:
            self._exact.setdefault(definition.name, definition)
            self._folded.setdefault(definition.name.lower(), definition)
            self._trimmed.setdefault(definition.name.strip().lower(), definition)

    def __len__(self) -> int:
        return len(self._exact)

    def resolve(self, name: str) -> Optional[ExerciseDefinition]:
        found = self._exact.get(name)
        if found is None:
            found = self._folded.get(name.lower())
        if found is None:
            found = self._trimmed.get(name.strip().lower())

        if found is None:
            logger.debug(f"Exercise not found in catalog: {name!r}")
        return found


def resolve_exercise(
    name: str, catalog: Iterable[ExerciseDefinition]
) -> Optional[ExerciseDefinition]:
    """One-off lookup. Build a CatalogIndex when resolving many names."""
    return CatalogIndex(catalog).resolve(name)
