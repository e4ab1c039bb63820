"""SQLModel database models."""

from app.models.exercise_weight import ExerciseWeight
from app.models.monthly_progress import MonthlyProgress
from app.models.daily_workout import DailyWorkout
from app.models.user_setting import UserSetting

__all__ = [
    "ExerciseWeight",
    "MonthlyProgress",
    "DailyWorkout",
    "UserSetting",
]
