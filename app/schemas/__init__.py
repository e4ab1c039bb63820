"""Pydantic schemas for request/response validation."""

from app.schemas.exercise_weight import (
    ExerciseWeightSet,
    ExerciseWeightAdjust,
    ExerciseWeightResponse,
    WeightsResponse,
    TrainingDayExercise,
    TrainingDayResponse,
    TrainingDaySummary,
)
from app.schemas.monthly_progress import (
    MonthCell,
    ExerciseProgressRow,
    YearProgressResponse,
    MonthlyProgressCreate,
    MonthlyProgressResponse,
)
from app.schemas.daily_workout import WorkoutToggle, CalendarMonthResponse
from app.schemas.snapshot import SnapshotResult, SnapshotErrorResponse
from app.schemas.user_setting import ThemeUpdate, ThemeResponse
from app.schemas.dashboard import DashboardStats

__all__ = [
    "ExerciseWeightSet",
    "ExerciseWeightAdjust",
    "ExerciseWeightResponse",
    "WeightsResponse",
    "TrainingDayExercise",
    "TrainingDayResponse",
    "TrainingDaySummary",
    "MonthCell",
    "ExerciseProgressRow",
    "YearProgressResponse",
    "MonthlyProgressCreate",
    "MonthlyProgressResponse",
    "WorkoutToggle",
    "CalendarMonthResponse",
    "SnapshotResult",
    "SnapshotErrorResponse",
    "ThemeUpdate",
    "ThemeResponse",
    "DashboardStats",
]
