"""
Exercise weight endpoints.

Read and update current working weights.  Names in paths and queries may
use any known spelling; responses always use the canonical name.
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.exercise_weight import (
    ExerciseWeightAdjust,
    ExerciseWeightResponse,
    ExerciseWeightSet,
    WeightsResponse,
)
from app.services.exercise_weight_service import ExerciseWeightService

router = APIRouter()


@router.get("", summary="Get current weights for exercises.", response_model=WeightsResponse, )
def get_weights(exercise: List[str] = Query([], description="Exercise names; all stored weights when omitted"),
                db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    service = ExerciseWeightService(db)
    if exercise:
        return WeightsResponse(weights=service.get_weights(user_id, exercise))
    return WeightsResponse(weights=service.get_all(user_id))


@router.put("/{exercise_name}", summary="Set the current weight for an exercise.",
            response_model=ExerciseWeightResponse, )
def set_weight(exercise_name: str, data: ExerciseWeightSet, db: Session = Depends(get_db),
               user_id: str = Depends(get_current_user_id), ):
    service = ExerciseWeightService(db)
    return service.set_weight(user_id, exercise_name, data.weight)


@router.post("/{exercise_name}/adjust", summary="Adjust the current weight by a relative amount.",
             response_model=ExerciseWeightResponse, )
def adjust_weight(exercise_name: str, data: ExerciseWeightAdjust, db: Session = Depends(get_db),
                  user_id: str = Depends(get_current_user_id), ):
    """Quick +/- adjustment; the stored weight never drops below zero."""
    service = ExerciseWeightService(db)
    return service.adjust_weight(user_id, exercise_name, data.delta)
