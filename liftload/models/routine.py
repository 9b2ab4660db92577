from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    model_validator,
)

from liftload.utils import dates
from liftload.utils.taxonomy import INTENSITY_DEFAULTS

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]
# Blank while the user has not picked an exercise yet.
ExerciseRefStr = Annotated[str, StringConstraints(max_length=100)]

SetType = Literal["Regular", "Dropset", "Myo-rep", "Myo-rep match"]
IntensityType = Literal["rir", "rpe", "percentage"]
MessageType = Literal["success", "error", ""]


class PerformedExercise(BaseModel):
    """One exercise entry inside a day. References the catalog by name."""

    model_config = ConfigDict(populate_by_name=True)

    name: ExerciseRefStr = ""
    sets: int = Field(default=3, ge=1)
    set_type: SetType = Field(default="Regular", alias="setType")
    intensity_type: IntensityType = Field(default="rir", alias="intensityType")
    rir: Optional[int] = Field(default=None, ge=0, le=10)
    rpe: Optional[int] = Field(default=None, ge=1, le=10)
    percentage: Optional[int] = Field(default=None, ge=1, le=100)
    superset: bool = False

    @model_validator(mode="after")
    def fill_active_intensity(self) -> "PerformedExercise":
        if getattr(self, self.intensity_type) is None:
            setattr(self, self.intensity_type, INTENSITY_DEFAULTS[self.intensity_type])
        return self

    @property
    def intensity_value(self) -> int:
        """The value of whichever intensity unit is active for this entry."""
        return getattr(self, self.intensity_type)

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Day(BaseModel):
    name: NameStr
    exercises: list[PerformedExercise] = Field(default_factory=list)


class Cycle(BaseModel):
    """A micro-cycle. Day order is the time axis for stress decay."""

    name: NameStr
    days: list[Day] = Field(default_factory=list)

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class SavedRoutine(BaseModel):
    name: NameStr
    weeks: list[Cycle] = Field(default_factory=list)

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class AppMessage(BaseModel):
    """A transient, user-visible status line."""

    type: MessageType = ""
    text: str = ""
    created_at: datetime = Field(default_factory=dates.now)

    @property
    def is_error(self) -> bool:
        return self.type == "error"

    def is_expired(self, now: datetime, ttl_seconds: int) -> bool:
        return dates.seconds_between(self.created_at, now) >= ttl_seconds
