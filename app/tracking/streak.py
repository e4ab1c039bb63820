"""
Workout streaks.

Both functions take the set of dates flagged ``worked_out = True``.  A date
that is missing from the set counts as a rest day, whether the row is absent
in the store or explicitly set to ``False``.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable

_ONE_DAY = datetime.timedelta(days=1)


def current_streak(worked_dates: Iterable[datetime.date], as_of: datetime.date) -> int:
    """Count consecutive workout days ending at *as_of*.

    The walk goes backwards one calendar day at a time and stops at the first
    rest day.  If *as_of* itself has not been logged yet the walk starts the
    day before, so an open "today" does not reset the streak.  Dates after
    *as_of* are ignored.
    """
    days = {d for d in worked_dates if d <= as_of}
    if not days:
        return 0

    cursor = as_of if as_of in days else as_of - _ONE_DAY
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= _ONE_DAY
    return streak


def longest_streak(worked_dates: Iterable[datetime.date]) -> int:
    """Length of the longest run of consecutive workout days."""
    best = 0
    run = 0
    previous = None
    for day in sorted(set(worked_dates)):
        run = run + 1 if previous is not None and day - previous == _ONE_DAY else 1
        best = max(best, run)
        previous = day
    return best
