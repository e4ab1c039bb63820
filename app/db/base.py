"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.exercise_weight import ExerciseWeight  # noqa: F401
from app.models.monthly_progress import MonthlyProgress  # noqa: F401
from app.models.daily_workout import DailyWorkout  # noqa: F401
from app.models.user_setting import UserSetting  # noqa: F401
