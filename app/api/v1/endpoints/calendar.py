"""
Workout calendar endpoints.

Month view and day toggling.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.daily_workout import CalendarMonthResponse, WorkoutToggle
from app.services.calendar_service import CalendarService

router = APIRouter()


@router.get("/{year}/{month}", summary="Get worked-out days for a month.", response_model=CalendarMonthResponse, )
def get_month(month: int, year: int = Path(..., ge=1900, le=9999),
              as_of: Optional[datetime.date] = Query(None, description="Streak reference date (defaults to today)"),
              db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    service = CalendarService(db)
    return service.month_response(user_id, year, month, as_of)


@router.post("/{date}/toggle", summary="Toggle the worked-out flag for a date.",
             response_model=CalendarMonthResponse, )
def toggle_day(date: datetime.date, data: Optional[WorkoutToggle] = None,
               as_of: Optional[datetime.date] = Query(None, description="Streak reference date (defaults to today)"),
               db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    """Marks the day if it was a rest day, un-marks it otherwise.

    Returns the affected month as read back from the store.
    """
    service = CalendarService(db)
    dates = service.toggle(user_id, date, data.workout_type if data else None)
    return service.month_response(user_id, date.year, date.month, as_of, dates=dates)
