"""Business logic services."""

from app.services.exercise_weight_service import ExerciseWeightService
from app.services.calendar_service import CalendarService
from app.services.progress_service import ProgressService
from app.services.snapshot_service import SnapshotService
from app.services.settings_service import SettingsService
from app.services.dashboard_service import DashboardService

__all__ = [
    "ExerciseWeightService",
    "CalendarService",
    "ProgressService",
    "SnapshotService",
    "SettingsService",
    "DashboardService",
]
