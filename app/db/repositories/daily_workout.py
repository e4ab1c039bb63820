"""
Daily workout repository.

Handles database operations for DailyWorkout model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.db.upsert import upsert_rows
from app.models.daily_workout import CONFLICT_COLUMNS, DailyWorkout
from app.models.timestamps import utc_now


class DailyWorkoutRepository:
    """Repository for DailyWorkout database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user_and_date(self, user_id: str, date: datetime.date) -> Optional[DailyWorkout]:
        """Get a single entry for a user on a specific date."""
        statement = select(DailyWorkout).where(
            DailyWorkout.user_id == user_id,
            DailyWorkout.date == date,
        )
        return self.session.exec(statement).first()

    def get_worked_out_dates(self, user_id: str, start: datetime.date, end: datetime.date) -> list[datetime.date]:
        """Dates flagged as worked out within a date range (inclusive)."""
        statement = (
            select(DailyWorkout.date)
            .where(
                DailyWorkout.user_id == user_id,
                DailyWorkout.worked_out == True,  # noqa: E712
                DailyWorkout.date >= start,
                DailyWorkout.date <= end,
            )
            .order_by(DailyWorkout.date)
        )
        return list(self.session.exec(statement).all())

    def get_all_worked_out_dates(self, user_id: str) -> list[datetime.date]:
        """Every worked-out date of a user, most recent first."""
        statement = (
            select(DailyWorkout.date)
            .where(DailyWorkout.user_id == user_id, DailyWorkout.worked_out == True)  # noqa: E712
            .order_by(DailyWorkout.date.desc())
        )
        return list(self.session.exec(statement).all())

    def set_worked_out(self, user_id: str, date: datetime.date, worked_out: bool,
                       workout_type: Optional[str] = None) -> None:
        """Upsert the flag keyed by (user_id, date).  Rows are never deleted."""
        now = utc_now()
        row = {
            "user_id": user_id,
            "date": date,
            "worked_out": worked_out,
            "workout_type": workout_type,
            "created_at": now,
            "updated_at": now,
        }
        upsert_rows(self.session, DailyWorkout, [row], CONFLICT_COLUMNS,
                    update_columns=("worked_out", "workout_type", "updated_at"))
        self.session.commit()
