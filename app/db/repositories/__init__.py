"""Database repositories."""

from app.db.repositories.exercise_weight import ExerciseWeightRepository
from app.db.repositories.monthly_progress import MonthlyProgressRepository
from app.db.repositories.daily_workout import DailyWorkoutRepository
from app.db.repositories.user_setting import UserSettingRepository

__all__ = [
    "ExerciseWeightRepository",
    "MonthlyProgressRepository",
    "DailyWorkoutRepository",
    "UserSettingRepository",
]
