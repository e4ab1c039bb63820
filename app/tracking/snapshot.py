"""
Monthly snapshot period and record preparation.

The snapshot job runs at the start of a month and stores the month that
just finished.  "Now" is read in a fixed reference timezone so a run just
after midnight on the 1st still sees the new month there, whatever the
server clock says.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable
from typing import Optional, Protocol
from zoneinfo import ZoneInfo

from app.tracking.canonical import canonicalize


class WeightEntry(Protocol):
    """Anything shaped like an ``ExerciseWeight`` row."""

    user_id: str
    exercise_name: str
    current_weight: float


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return ``(year, month)`` of the calendar month before the given one."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def snapshot_period(now: Optional[datetime.datetime] = None,
                    timezone: str = "Europe/Amsterdam") -> tuple[int, int]:
    """The ``(year, month)`` a snapshot taken at *now* should be filed under.

    Naive datetimes are taken as UTC.
    """
    now = now or datetime.datetime.now(datetime.timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)
    local = now.astimezone(ZoneInfo(timezone))
    return previous_month(local.year, local.month)


def build_snapshot_records(weights: Iterable[WeightEntry], year: int, month: int) -> list[dict]:
    """One ``monthly_progress`` row per (user, canonical exercise).

    Two current-weight rows can collapse onto the same canonical name for
    legacy data; the heavier one is kept because a single upsert statement
    may not touch the same key twice.
    """
    best: dict[tuple[str, str], float] = {}
    for entry in weights:
        key = (entry.user_id, canonicalize(entry.exercise_name))
        weight = float(entry.current_weight)
        if key not in best or weight > best[key]:
            best[key] = weight

    return [
        {
            "user_id": user_id,
            "year": year,
            "month": month,
            "exercise_name": exercise_name,
            "max_weight": weight,
            "auto_saved": True,
        }
        for (user_id, exercise_name), weight in best.items()
    ]
