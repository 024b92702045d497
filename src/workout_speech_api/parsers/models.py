"""
Parser Models

Pydantic models for the structured output of the speech parsers.
Fields a pattern did not detect stay None and are dropped on serialization,
so "not stated" never reads as zero.
"""

import uuid
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


WeightUnit = Literal["lbs", "kg"]
DistanceUnit = Literal["miles", "km", "meters"]


def generate_id() -> str:
    """Opaque identifier for a parsed exercise."""
    return str(uuid.uuid4())


class ParsedExercise(BaseModel):
    """One exercise mention recognized in a transcript"""
    id: str = Field(default_factory=generate_id)
    name: str = Field(..., min_length=1, description="Canonical display name")
    sets: Optional[int] = Field(default=None, ge=1)
    reps: Optional[str] = Field(
        default=None,
        description="Rep count as spoken, or a comma-joined list like '25, 20, 15'",
    )
    weight: Optional[float] = Field(default=None, ge=0)
    unit: Optional[WeightUnit] = None
    # Minutes in both cases that set it: length of a run for cardio,
    # block length for EMOM. The unit is not tracked separately.
    duration: Optional[int] = Field(default=None, description="Pattern-dependent minutes")
    distance: Optional[float] = Field(default=None, ge=0)
    distance_unit: Optional[DistanceUnit] = Field(default=None, alias="distanceUnit")

    class Config:
        populate_by_name = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, omitting fields that were not detected."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ParsedWorkoutData(BaseModel):
    """Aggregate result of parsing one workout transcript"""
    exercises: List[ParsedExercise] = Field(default_factory=list)
    duration: Optional[int] = Field(default=None, description="Total session minutes")
    feeling: Optional[str] = None
    rpe: Optional[float] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = None
    confidence: float = Field(default=0.1, ge=0, le=1)

    def needs_review(self, threshold: float) -> bool:
        """True when confidence is too low for the result to be auto-accepted."""
        return self.confidence <= threshold

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude_none=True, exclude={"exercises"})
        data["exercises"] = [exercise.to_dict() for exercise in self.exercises]
        return data


class FeelingResult(BaseModel):
    """Mood label and inferred RPE from a short post-session utterance"""
    feeling: str = "okay"
    rpe: Optional[float] = Field(default=None, ge=1, le=10)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
