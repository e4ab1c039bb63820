"""
Exercise weight API schemas.

Pydantic models for current-weight request/response validation.
"""

import datetime

from pydantic import BaseModel, Field


# Request schemas
class ExerciseWeightSet(BaseModel):
    """Schema for setting an absolute weight."""

    weight: float = Field(
        ..., ge=0, le=1000,
        description="New working weight (kg)",
    )


class ExerciseWeightAdjust(BaseModel):
    """Schema for a relative weight change (quick +/- buttons)."""

    delta: float = Field(
        ..., ge=-1000, le=1000,
        description="Amount to add (negative to subtract); the result never drops below 0",
    )


# Response schemas
class ExerciseWeightResponse(BaseModel):
    """Schema for a stored exercise weight."""

    id: int
    user_id: str
    exercise_name: str = Field(..., description="Canonical exercise name")
    current_weight: float
    last_updated: datetime.datetime

    class Config:
        from_attributes = True


class WeightsResponse(BaseModel):
    """Current weights keyed by canonical exercise name (0 when never set)."""

    weights: dict[str, float]


class TrainingDayExercise(BaseModel):
    exercise_name: str
    current_weight: float


class TrainingDayResponse(BaseModel):
    """One day of the split with the user's current weights."""

    day_id: str
    display_name: str
    focus: str
    exercises: list[TrainingDayExercise]


class TrainingDaySummary(BaseModel):
    day_id: str
    display_name: str
    focus: str
    exercise_count: int
