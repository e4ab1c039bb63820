"""
Dashboard service.

Aggregates the calendar and progress data into the home screen counters.
"""

import datetime

from sqlmodel import Session

from app.schemas.dashboard import DashboardStats
from app.services.calendar_service import CalendarService
from app.services.exercise_weight_service import ExerciseWeightService
from app.services.progress_service import ProgressService
from app.tracking.streak import current_streak, longest_streak


class DashboardService:
    """Service for dashboard statistics."""

    def __init__(self, session: Session):
        self.calendar = CalendarService(session)
        self.weights = ExerciseWeightService(session)
        self.progress = ProgressService(session)

    def get_stats(self, user_id: str, as_of: datetime.date) -> DashboardStats:
        dates = self.calendar.all_dates(user_id)
        this_month = [d for d in dates if d.year == as_of.year and d.month == as_of.month]

        return DashboardStats(
            as_of=as_of,
            workouts_this_month=len(this_month),
            current_streak=current_streak(dates, as_of),
            longest_streak=longest_streak(dates),
            total_sessions=len(dates),
            personal_records=self._count_personal_records(user_id),
        )

    def _count_personal_records(self, user_id: str) -> int:
        """Exercises whose current weight beats every stored monthly record."""
        best = self.progress.best_weights(user_id)
        current = self.weights.get_all(user_id)
        return sum(1 for name, weight in current.items() if name in best and weight > best[name])
