"""
Monthly progress service.

Reads the monthly history and builds the year table.  Manual monthly
entries are written with the same conflict key the snapshot job uses.
"""

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.monthly_progress import MonthlyProgressRepository
from app.models.monthly_progress import MonthlyProgress
from app.schemas.monthly_progress import YearProgressResponse
from app.services.exercise_weight_service import canonical_name_or_422
from app.tracking.canonical import canonicalize
from app.tracking.progress import build_year_table


class ProgressService:
    """Service for monthly progress business logic."""

    def __init__(self, session: Session):
        self.repository = MonthlyProgressRepository(session)

    def get_year_table(self, user_id: str, year: int) -> YearProgressResponse:
        records = self.repository.get_by_user_and_year(user_id, year)
        return build_year_table(records, year)

    def record_manual(self, user_id: str, year: int, month: int, exercise_name: str,
                      max_weight: float) -> MonthlyProgress:
        """Store a manually entered monthly best (``auto_saved = False``)."""
        if not 1 <= month <= 12:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Month must be between 1 and 12, got {month}",
            )
        name = canonical_name_or_422(exercise_name)
        self.repository.upsert_many([{
            "user_id": user_id,
            "year": year,
            "month": month,
            "exercise_name": name,
            "max_weight": max_weight,
            "auto_saved": False,
        }])
        return self.repository.get_by_key(user_id, year, month, name)

    def best_weights(self, user_id: str) -> dict[str, float]:
        """Highest monthly record ever stored, per canonical exercise."""
        best: dict[str, float] = {}
        for record in self.repository.get_all_by_user(user_id):
            name = canonicalize(record.exercise_name)
            best[name] = max(best.get(name, record.max_weight), record.max_weight)
        return best
