"""
Daily workout database model.

Defines the daily_workouts table for the attendance calendar.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.timestamps import timestamp_field


class DailyWorkout(SQLModel, table=True):
    """
    Whether the user trained on a given date.

    One entry per user per day.  Un-marking a day sets ``worked_out`` to
    False instead of deleting the row, so only the flag carries meaning.
    """
    __tablename__ = "daily_workouts"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_workout_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=64, nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    worked_out: bool = Field(default=False, nullable=False)
    workout_type: Optional[str] = Field(default=None, max_length=50)

    # Timestamps
    created_at: datetime.datetime = timestamp_field()
    updated_at: datetime.datetime = timestamp_field()


CONFLICT_COLUMNS = ("user_id", "date")
