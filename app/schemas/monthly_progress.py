"""
Monthly progress API schemas.

The year table has one row per exercise and twelve month cells.  A cell's
``weight`` is ``None`` when nothing was recorded that month; ``0.0`` is a
real recorded weight.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MonthCell(BaseModel):
    """Best weight for one month plus its change against the previous recorded month."""

    month: int = Field(..., ge=1, le=12)
    weight: Optional[float] = Field(None, description="Best recorded weight, None if absent")
    delta: Optional[float] = Field(None, description="Change against the previous month with data")
    trend: Optional[str] = Field(None, description="One of: increase, decrease, neutral")


class ExerciseProgressRow(BaseModel):
    exercise_name: str
    months: list[MonthCell]


class YearProgressResponse(BaseModel):
    """Jan-Dec progress table for one year."""

    year: int
    month_keys: list[str] = Field(..., description="YYYY-MM keys for the twelve columns")
    exercises: list[ExerciseProgressRow]


# Request schemas
class MonthlyProgressCreate(BaseModel):
    """Schema for a manually entered monthly best."""

    max_weight: float = Field(..., ge=0, le=1000, description="Best weight for the month (kg)")


# Response schemas
class MonthlyProgressResponse(BaseModel):
    id: int
    user_id: str
    year: int
    month: int
    exercise_name: str
    max_weight: float
    auto_saved: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
