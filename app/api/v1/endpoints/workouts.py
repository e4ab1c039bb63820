"""
Training split endpoints.

The fixed 4-day upper/lower split with the user's current weights.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.exercise_weight import TrainingDayResponse, TrainingDaySummary
from app.services.exercise_weight_service import ExerciseWeightService

router = APIRouter()


@router.get("", summary="List the training days of the split.", response_model=list[TrainingDaySummary], )
def list_training_days(user_id: str = Depends(get_current_user_id)):
    return ExerciseWeightService.list_training_days()


@router.get("/{day_id}", summary="Get a training day with current weights.", response_model=TrainingDayResponse, )
def get_training_day(day_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    service = ExerciseWeightService(db)
    return service.get_training_day(user_id, day_id)
