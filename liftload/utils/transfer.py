"""
JSON import and export of micro-cycles.

Two import shapes are accepted: a bare list of days (older exports, loaded
as one micro-cycle) and ``{"weeks": [...]}``. Loose values are coerced
with fallbacks; anything structurally wrong is rejected as a whole.
"""

import json
import math
from pathlib import Path
from typing import Any, List, Optional, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from liftload.models import Cycle, Day, PerformedExercise
from liftload.utils.log import logger
from liftload.utils.taxonomy import INTENSITY_TYPES, SET_TYPES

EXPORT_FILENAME = "workout-plan.json"
PARSE_ERROR = "Error parsing JSON file. Please check the format."
SHAPE_ERROR = "Invalid JSON format. Expected an array of days or weeks."
DEFAULT_SETS = 3


class ImportFormatError(ValueError):
    """An import document that cannot be loaded. ``message`` is user-facing."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


def _parse_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class ImportedExercise(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = ""
    sets: int = DEFAULT_SETS
    set_type: str = Field(default="Regular", alias="setType")
    intensity_type: str = Field(default="rir", alias="intensityType")
    rir: Optional[int] = None
    rpe: Optional[int] = None
    percentage: Optional[int] = None
    superset: bool = False

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        return v.strip() if isinstance(v, str) else ""

    @field_validator("sets", mode="before")
    @classmethod
    def coerce_sets(cls, v):
        number = _parse_number(v)
        if number is None or number < 1:
            return DEFAULT_SETS
        return int(number)

    @field_validator("set_type", mode="before")
    @classmethod
    def coerce_set_type(cls, v):
        return v if v in SET_TYPES else "Regular"

    @field_validator("intensity_type", mode="before")
    @classmethod
    def coerce_intensity_type(cls, v):
        return v if v in INTENSITY_TYPES else "rir"

    @field_validator("rir", "rpe", "percentage", mode="before")
    @classmethod
    def coerce_intensity(cls, v):
        number = _parse_number(v)
        return None if number is None else int(round(number))

    @field_validator("superset", mode="before")
    @classmethod
    def coerce_superset(cls, v):
        return bool(v)

    def to_model(self) -> PerformedExercise:
        limits = {"rir": (0, 10), "rpe": (1, 10), "percentage": (1, 100)}
        intensity = {}
        for field, (low, high) in limits.items():
            value = getattr(self, field)
            # out-of-range values fall back to the default for the active type
            if value is not None and low <= value <= high:
                intensity[field] = value

        return PerformedExercise(
            name=self.name,
            sets=self.sets,
            set_type=self.set_type,
            intensity_type=self.intensity_type,
            superset=self.superset,
            **intensity,
        )


class ImportedDay(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    exercises: List[ImportedExercise] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        if isinstance(v, str) and v.strip():
            return v
        return None

    @field_validator("exercises", mode="before")
    @classmethod
    def coerce_exercises(cls, v):
        return v if isinstance(v, list) else []

    def to_model(self, position: int) -> Day:
        return Day(
            name=self.name or f"Day {position + 1}",
            exercises=[e.to_model() for e in self.exercises],
        )


class ImportedWeek(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    days: List[ImportedDay] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        if isinstance(v, str) and v.strip():
            return v
        return None

    @field_validator("days", mode="before")
    @classmethod
    def coerce_days(cls, v):
        return v if isinstance(v, list) else []

    def to_model(self, position: int) -> Cycle:
        return Cycle(
            name=self.name or f"Week {position + 1}",
            days=[d.to_model(i) for i, d in enumerate(self.days)],
        )


_days_adapter = TypeAdapter(List[ImportedDay])
_weeks_adapter = TypeAdapter(List[ImportedWeek])


def parse_import(text: str) -> List[Cycle]:
    """
    Parse an import document into micro-cycles.

    Raises ImportFormatError; nothing is partially loaded.
    """
    try:
        document = json.loads(text)
    except (TypeError, ValueError) as e:
        logger.warning(f"Import is not valid JSON: {e}")
        raise ImportFormatError(PARSE_ERROR, details=str(e)) from e

    try:
        if isinstance(document, list):
            days = _days_adapter.validate_python(document)
            logger.debug(f"Importing legacy day list with {len(days)} days")
            return [
                Cycle(
                    name="Micro Cycle 1",
                    days=[d.to_model(i) for i, d in enumerate(days)],
                )
            ]

        if isinstance(document, dict) and isinstance(document.get("weeks"), list):
            weeks = _weeks_adapter.validate_python(document["weeks"])
            logger.debug(f"Importing {len(weeks)} weeks")
            return [w.to_model(i) for i, w in enumerate(weeks)]
    except ValidationError as e:
        logger.warning(f"Import failed validation: {e}")
        raise ImportFormatError(PARSE_ERROR, details=str(e)) from e

    logger.warning(f"Import has unsupported root: {type(document).__name__}")
    raise ImportFormatError(SHAPE_ERROR)


def export_cycles(cycles: Sequence[Cycle]) -> str:
    """Pretty-printed ``{"weeks": [...]}`` document."""
    return json.dumps({"weeks": [c.to_item() for c in cycles]}, indent=2)


def write_export(cycles: Sequence[Cycle], directory: Path | str = ".") -> Path:
    path = Path(directory) / EXPORT_FILENAME
    path.write_text(export_cycles(cycles), encoding="utf-8")
    logger.info(f"Exported {len(cycles)} micro cycles to {path}")
    return path
