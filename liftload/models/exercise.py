from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

MuscleGroup = Literal[
    "Chest",
    "Front Delts",
    "Side Delts",
    "Rear Delts",
    "Biceps",
    "Triceps",
    "Forearms",
    "Traps",
    "Upper Back",
    "Lower Back",
    "Core",
    "Glutes",
    "Quads",
    "Hamstrings",
    "Calves",
]

ExerciseCategory = Literal[
    "Push",
    "Pull",
    "Legs",
    "Arms",
    "Core",
    "Full Body",
    "Uncategorized",
]

Contribution = Annotated[float, Field(gt=0, le=1.2)]


class ExerciseDefinition(BaseModel):
    """
    A catalog entry: which muscles an exercise trains and how hard.

    Contributions are not normalised; a compound lift may credit
    several muscles at full weight.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: NameStr
    category: ExerciseCategory = "Uncategorized"
    muscles: dict[MuscleGroup, Contribution] = Field(min_length=1)
    # SFR: 1 = baseline, 2 = high fatigue, 0.5 = low fatigue
    stimulus_fatigue: Optional[float] = Field(
        default=None, gt=0, alias="stimulusFatigue"
    )

    @field_validator("category", mode="before")
    @classmethod
    def blank_category_is_uncategorized(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return "Uncategorized"
        return v

    @property
    def key(self) -> str:
        """Case-folded name used for uniqueness checks."""
        return self.name.lower()

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
