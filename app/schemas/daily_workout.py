"""
Workout calendar API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WorkoutToggle(BaseModel):
    """Optional body for a toggle request."""

    workout_type: Optional[str] = Field(
        None, max_length=50,
        description="Training day logged, e.g. upper_a",
    )


class CalendarMonthResponse(BaseModel):
    """Worked-out dates for one month, as stored."""

    year: int
    month: int
    workout_dates: list[datetime.date]
    workouts_count: int
    current_streak: int = Field(..., description="Consecutive workout days up to today")
