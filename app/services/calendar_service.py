"""
Workout calendar service.

Attendance is a boolean per day.  Toggling never deletes rows: a day that
is switched off keeps its row with ``worked_out = False``.  After every
toggle the month is read back from the store, so callers always see what
was actually persisted.
"""

import calendar
import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.daily_workout import DailyWorkoutRepository
from app.schemas.daily_workout import CalendarMonthResponse
from app.tracking.streak import current_streak, longest_streak

logger = logging.getLogger(__name__)


def month_bounds(year: int, month: int) -> tuple[datetime.date, datetime.date]:
    """First and last day of a month (leap years included)."""
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Year must be between {datetime.MINYEAR} and {datetime.MAXYEAR}, got {year}",
        )
    if not 1 <= month <= 12:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Month must be between 1 and 12, got {month}",
        )
    last_day = calendar.monthrange(year, month)[1]
    return datetime.date(year, month, 1), datetime.date(year, month, last_day)


class CalendarService:
    """Service for the workout attendance calendar."""

    def __init__(self, session: Session):
        self.repository = DailyWorkoutRepository(session)

    def get_month(self, user_id: str, year: int, month: int) -> set[datetime.date]:
        """Dates in the month flagged as worked out."""
        start, end = month_bounds(year, month)
        return set(self.repository.get_worked_out_dates(user_id, start, end))

    def toggle(self, user_id: str, date: datetime.date,
               workout_type: Optional[str] = None) -> set[datetime.date]:
        """Flip the worked-out flag for *date* and return the month as stored."""
        entry = self.repository.get_by_user_and_date(user_id, date)
        if entry and entry.worked_out:
            self.repository.set_worked_out(user_id, date, False, entry.workout_type)
            logger.info("Workout removed for %s", date)
        else:
            self.repository.set_worked_out(user_id, date, True, workout_type)
            logger.info("Workout logged for %s", date)
        return self.get_month(user_id, date.year, date.month)

    def all_dates(self, user_id: str) -> list[datetime.date]:
        return self.repository.get_all_worked_out_dates(user_id)

    def current_streak(self, user_id: str, as_of: datetime.date) -> int:
        return current_streak(self.all_dates(user_id), as_of)

    def longest_streak(self, user_id: str) -> int:
        return longest_streak(self.all_dates(user_id))

    def month_response(self, user_id: str, year: int, month: int,
                       as_of: Optional[datetime.date] = None,
                       dates: Optional[set[datetime.date]] = None) -> CalendarMonthResponse:
        if dates is None:
            dates = self.get_month(user_id, year, month)
        return CalendarMonthResponse(
            year=year,
            month=month,
            workout_dates=sorted(dates),
            workouts_count=len(dates),
            current_streak=self.current_streak(user_id, as_of or datetime.date.today()),
        )
