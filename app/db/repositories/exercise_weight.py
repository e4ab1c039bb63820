"""
Exercise weight repository.

Handles database operations for ExerciseWeight model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.db.upsert import upsert_rows
from app.models.exercise_weight import CONFLICT_COLUMNS, ExerciseWeight
from app.models.timestamps import utc_now


class ExerciseWeightRepository:
    """Repository for ExerciseWeight database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user_and_exercise(self, user_id: str, exercise_name: str) -> Optional[ExerciseWeight]:
        statement = select(ExerciseWeight).where(
            ExerciseWeight.user_id == user_id,
            ExerciseWeight.exercise_name == exercise_name,
        )
        return self.session.exec(statement).first()

    def get_by_user_and_exercises(self, user_id: str, exercise_names: list[str]) -> list[ExerciseWeight]:
        """Point lookup of several exercises for one user."""
        if not exercise_names:
            return []
        statement = select(ExerciseWeight).where(
            ExerciseWeight.user_id == user_id,
            ExerciseWeight.exercise_name.in_(exercise_names),
        )
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: str) -> list[ExerciseWeight]:
        statement = (
            select(ExerciseWeight)
            .where(ExerciseWeight.user_id == user_id)
            .order_by(ExerciseWeight.exercise_name)
        )
        return list(self.session.exec(statement).all())

    def get_all(self) -> list[ExerciseWeight]:
        """Every user's current weights (snapshot source)."""
        statement = select(ExerciseWeight).order_by(ExerciseWeight.user_id, ExerciseWeight.exercise_name)
        return list(self.session.exec(statement).all())

    def upsert(self, user_id: str, exercise_name: str, weight: float) -> ExerciseWeight:
        """Insert or overwrite the weight keyed by (user_id, exercise_name)."""
        now = utc_now()
        row = {
            "user_id": user_id,
            "exercise_name": exercise_name,
            "current_weight": weight,
            "last_updated": now,
            "created_at": now,
        }
        upsert_rows(self.session, ExerciseWeight, [row], CONFLICT_COLUMNS,
                    update_columns=("current_weight", "last_updated"))
        self.session.commit()

        entry = self.get_by_user_and_exercise(user_id, exercise_name)
        return entry
