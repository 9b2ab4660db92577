from typing import Literal

from pydantic import BaseModel, Field, model_validator

RecoveryLabel = Literal["Very Fast", "Fast", "Moderate", "Slow", "Very Slow"]


class VolumeRange(BaseModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)

    @model_validator(mode="after")
    def check_order(self) -> "VolumeRange":
        if self.min > self.max:
            raise ValueError(f"Range min {self.min} is above max {self.max}")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class MuscleVolumeLandmarks(BaseModel):
    """Weekly set landmarks for one muscle (MV, MEV, MAV, MRV)."""

    model_config = {"frozen": True}

    maintenance_volume: float = Field(ge=0)
    minimum_effective_volume: float = Field(ge=0)
    maximum_adaptive_volume: VolumeRange
    maximum_recoverable_volume: VolumeRange
    frequency: VolumeRange


class MuscleDecayProfile(BaseModel):
    """Fraction of accumulated stress a muscle sheds per elapsed day."""

    model_config = {"frozen": True}

    decay_rate: float = Field(gt=0, lt=1)
    recovery: RecoveryLabel = "Moderate"

    @property
    def retention(self) -> float:
        return 1 - self.decay_rate
