"""
Monthly progress aggregation.

Turns the raw ``monthly_progress`` history of one user into a year table:
one row per exercise, twelve month columns, each holding the best weight
recorded that month.

A month without any record is *absent* (``None``).  That is not the same as
a recorded weight of ``0.0`` and the two are never merged.

Month-over-month deltas compare a month with the closest earlier month of
the same year that has data.  They are display hints only and are never
stored.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from typing import Optional, Protocol

from app.schemas.monthly_progress import ExerciseProgressRow, MonthCell, YearProgressResponse
from app.tracking.canonical import canonicalize, preferred_exercise_order

MONTHS = range(1, 13)

TREND_INCREASE = "increase"
TREND_DECREASE = "decrease"
TREND_NEUTRAL = "neutral"


class ProgressEntry(Protocol):
    """Anything shaped like a ``MonthlyProgress`` row."""

    year: int
    month: int
    exercise_name: str
    max_weight: Optional[float]


# ======================================================================
# Building blocks
# ======================================================================


def aggregate_year(records: Iterable[ProgressEntry], year: int) -> dict[str, dict[int, float]]:
    """Best weight per canonical exercise and month for *year*.

    Names are canonicalized again so legacy rows written before
    canonicalization land on the right exercise.
    """
    best: dict[str, dict[int, float]] = defaultdict(dict)
    for record in records:
        if record.year != year or record.max_weight is None:
            continue
        exercise = canonicalize(record.exercise_name)
        weight = float(record.max_weight)
        previous = best[exercise].get(record.month)
        best[exercise][record.month] = weight if previous is None else max(previous, weight)
    return dict(best)


def order_exercises(names: Iterable[str]) -> list[str]:
    """Split order first, anything else alphabetically after it."""
    names = set(names)
    preferred = [name for name in preferred_exercise_order() if name in names]
    rest = sorted(names.difference(preferred), key=str.lower)
    return preferred + rest


def compute_deltas(weights: dict[int, float]) -> dict[int, float]:
    """Delta against the previous month that has data, keyed by month."""
    deltas: dict[int, float] = {}
    previous: Optional[float] = None
    for month in MONTHS:
        weight = weights.get(month)
        if weight is None:
            continue
        if previous is not None:
            deltas[month] = weight - previous
        previous = weight
    return deltas


def classify_delta(delta: Optional[float]) -> Optional[str]:
    if delta is None:
        return None
    if delta > 0:
        return TREND_INCREASE
    if delta < 0:
        return TREND_DECREASE
    return TREND_NEUTRAL


def month_key(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


# ======================================================================
# Year table
# ======================================================================


def build_year_table(records: Iterable[ProgressEntry], year: int) -> YearProgressResponse:
    """Build the Jan-Dec progress table for *year*."""
    aggregated = aggregate_year(records, year)

    rows = []
    for exercise in order_exercises(aggregated):
        weights = aggregated[exercise]
        deltas = compute_deltas(weights)
        cells = [
            MonthCell(
                month=month,
                weight=weights.get(month),
                delta=deltas.get(month),
                trend=classify_delta(deltas.get(month)),
            )
            for month in MONTHS
        ]
        rows.append(ExerciseProgressRow(exercise_name=exercise, months=cells))

    return YearProgressResponse(
        year=year,
        month_keys=[month_key(year, month) for month in MONTHS],
        exercises=rows,
    )
