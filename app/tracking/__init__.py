"""Workout tracking core: name canonicalization, streaks, progress tables, snapshots."""

from app.tracking.canonical import canonicalize
from app.tracking.progress import build_year_table
from app.tracking.snapshot import snapshot_period
from app.tracking.streak import current_streak, longest_streak

__all__ = [
    "canonicalize",
    "build_year_table",
    "snapshot_period",
    "current_streak",
    "longest_streak",
]
