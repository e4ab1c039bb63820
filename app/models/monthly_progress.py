"""
Monthly progress database model.

Defines the monthly_progress table: the dated history written by the
monthly snapshot job (and by manual entries).
"""

import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.exercise_weight import EXERCISE_NAME_MAX_LENGTH
from app.models.timestamps import timestamp_field


class MonthlyProgress(SQLModel, table=True):
    """
    Best weight for one exercise in one calendar month.

    Unique per (user, year, month, exercise).  That tuple is the conflict
    target of every write, so re-running a snapshot overwrites instead of
    duplicating.
    """
    __tablename__ = "monthly_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "year", "month", "exercise_name",
                         name="uq_monthly_progress_user_period_exercise"),
        CheckConstraint("month BETWEEN 1 AND 12", name="ck_monthly_progress_month"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=64, nullable=False, index=True)
    year: int = Field(nullable=False, index=True)
    month: int = Field(nullable=False, ge=1, le=12)
    exercise_name: str = Field(max_length=EXERCISE_NAME_MAX_LENGTH, nullable=False)
    max_weight: float = Field(nullable=False)

    # True when written by the snapshot job, False for manual entries
    auto_saved: bool = Field(default=False)

    # Timestamps
    created_at: datetime.datetime = timestamp_field()
    updated_at: datetime.datetime = timestamp_field()


CONFLICT_COLUMNS = ("user_id", "year", "month", "exercise_name")
