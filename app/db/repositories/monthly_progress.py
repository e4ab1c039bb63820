"""
Monthly progress repository.

Handles database operations for MonthlyProgress model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.db.upsert import upsert_rows
from app.models.monthly_progress import CONFLICT_COLUMNS, MonthlyProgress
from app.models.timestamps import utc_now

_UPDATE_COLUMNS = ("max_weight", "auto_saved", "updated_at")


class MonthlyProgressRepository:
    """Repository for MonthlyProgress database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_key(self, user_id: str, year: int, month: int, exercise_name: str) -> Optional[MonthlyProgress]:
        statement = select(MonthlyProgress).where(
            MonthlyProgress.user_id == user_id,
            MonthlyProgress.year == year,
            MonthlyProgress.month == month,
            MonthlyProgress.exercise_name == exercise_name,
        )
        return self.session.exec(statement).first()

    def get_by_user_and_year(self, user_id: str, year: int) -> list[MonthlyProgress]:
        """All records of one user for one year, ordered by month."""
        statement = (
            select(MonthlyProgress)
            .where(MonthlyProgress.user_id == user_id, MonthlyProgress.year == year)
            .order_by(MonthlyProgress.month, MonthlyProgress.exercise_name)
        )
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: str) -> list[MonthlyProgress]:
        statement = (
            select(MonthlyProgress)
            .where(MonthlyProgress.user_id == user_id)
            .order_by(MonthlyProgress.year, MonthlyProgress.month)
        )
        return list(self.session.exec(statement).all())

    def upsert_many(self, rows: list[dict], overwrite: bool = True) -> int:
        """Upsert records keyed by (user_id, year, month, exercise_name) in one statement.

        Each row needs the key columns plus ``max_weight`` and ``auto_saved``.
        Nothing is committed if the statement fails.
        """
        now = utc_now()
        stamped = [{**row, "created_at": now, "updated_at": now} for row in rows]
        count = upsert_rows(self.session, MonthlyProgress, stamped, CONFLICT_COLUMNS,
                            update_columns=_UPDATE_COLUMNS, overwrite=overwrite)
        self.session.commit()
        return count
