"""
Exercise weight service.

Business logic for current working weights.  Every exercise name is
canonicalized before it touches the store or becomes a result key.
"""

import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.exercise_weight import ExerciseWeightRepository
from app.models.exercise_weight import EXERCISE_NAME_MAX_LENGTH, ExerciseWeight
from app.schemas.exercise_weight import (
    TrainingDayExercise,
    TrainingDayResponse,
    TrainingDaySummary,
)
from app.tracking.canonical import TRAINING_SPLIT, canonicalize, get_day

logger = logging.getLogger(__name__)


def canonical_name_or_422(exercise_name: str) -> str:
    """Canonical form of a name about to be stored; 422 if it is blank or too long."""
    name = canonicalize(exercise_name).strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Exercise name cannot be empty",
        )
    if len(name) > EXERCISE_NAME_MAX_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Exercise name cannot be longer than {EXERCISE_NAME_MAX_LENGTH} characters",
        )
    return name


class ExerciseWeightService:
    """Service for exercise weight business logic."""

    def __init__(self, session: Session):
        self.repository = ExerciseWeightRepository(session)

    def get_weights(self, user_id: str, exercise_names: list[str]) -> dict[str, float]:
        """Current weight per canonical name; exercises never set default to 0."""
        canonical = list(dict.fromkeys(canonicalize(name).strip() for name in exercise_names))
        stored = {
            entry.exercise_name: entry.current_weight
            for entry in self.repository.get_by_user_and_exercises(user_id, canonical)
        }
        return {name: stored.get(name, 0.0) for name in canonical}

    def get_all(self, user_id: str) -> dict[str, float]:
        return {entry.exercise_name: entry.current_weight for entry in self.repository.get_all_by_user(user_id)}

    def set_weight(self, user_id: str, exercise_name: str, weight: float) -> ExerciseWeight:
        """Upsert the weight for the canonical form of *exercise_name*."""
        if weight < 0:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Weight cannot be negative",
            )
        name = canonical_name_or_422(exercise_name)
        entry = self.repository.upsert(user_id, name, weight)
        logger.info("Weight for %s set to %s", name, weight)
        return entry

    def adjust_weight(self, user_id: str, exercise_name: str, delta: float) -> ExerciseWeight:
        """Add *delta* to the current weight, never going below zero."""
        name = canonical_name_or_422(exercise_name)
        current = self.get_weights(user_id, [name])[name]
        return self.set_weight(user_id, name, max(0.0, current + delta))

    # ------------------------------------------------------------------
    # Training split
    # ------------------------------------------------------------------

    @staticmethod
    def list_training_days() -> list[TrainingDaySummary]:
        return [
            TrainingDaySummary(
                day_id=day.day_id,
                display_name=day.display_name,
                focus=day.focus,
                exercise_count=len(day.exercises),
            )
            for day in TRAINING_SPLIT.values()
        ]

    def get_training_day(self, user_id: str, day_id: str) -> TrainingDayResponse:
        day = get_day(day_id)
        if not day:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown training day '{day_id}'",
            )
        weights = self.get_weights(user_id, list(day.exercises))
        return TrainingDayResponse(
            day_id=day.day_id,
            display_name=day.display_name,
            focus=day.focus,
            exercises=[
                TrainingDayExercise(exercise_name=name, current_weight=weights[name])
                for name in day.canonical_exercises
            ],
        )
