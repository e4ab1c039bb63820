"""
Exercise weight database model.

Defines the exercise_weights table: the weight a user currently trains with,
per exercise.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.timestamps import timestamp_field

EXERCISE_NAME_MAX_LENGTH = 100


class ExerciseWeight(SQLModel, table=True):
    """
    Current working weight for one exercise.

    One row per user per canonical exercise name (enforced by unique
    constraint, which is also the upsert conflict target).  Rows are only
    ever upserted, never deleted.
    """
    __tablename__ = "exercise_weights"
    __table_args__ = (
        UniqueConstraint("user_id", "exercise_name", name="uq_exercise_weight_user_exercise"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=64, nullable=False, index=True)
    exercise_name: str = Field(max_length=EXERCISE_NAME_MAX_LENGTH, nullable=False)
    current_weight: float = Field(default=0.0, nullable=False)

    # Timestamps
    last_updated: datetime.datetime = timestamp_field()
    created_at: datetime.datetime = timestamp_field()


CONFLICT_COLUMNS = ("user_id", "exercise_name")
