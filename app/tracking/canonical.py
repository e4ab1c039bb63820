"""
Exercise name canonicalization and the fixed training split.

Exercise names have been typed in many ways over time ("Pulldown Lat",
"RDLs", "Russian Twists", ...).  Everything that is stored or aggregated
goes through :func:`canonicalize` first so that one exercise always ends up
under one display name.

The lookup is keyed by the trimmed, lower-cased input.  Unknown names are
returned untouched, which makes the function total.  It is also idempotent:
every canonical display name, lower-cased, is either not a key of the table
or maps to itself (see :func:`check_idempotent`).
"""

from __future__ import annotations

from dataclasses import dataclass

# ======================================================================
# Lookup table
# ======================================================================

CANONICAL_NAMES: dict[str, str] = {
    # Pulldowns
    "pulldown lat": "Lat Pulldown",
    "pulldown beneden": "Lat Pulldown",
    "lat pulldown": "Lat Pulldown",
    "pulldown": "Lat Pulldown",
    # Flyes
    "flys": "Pec Flyes",
    "pec flys": "Pec Flyes",
    # Cable row
    "row cable": "Cable Row",
    "cable row": "Cable Row",
    # RDL variants are tracked as Back Extension
    "rdl": "Back Extension",
    "rdls": "Back Extension",
    "romanian deadlift": "Back Extension",
    "romanian deadlifts": "Back Extension",
    # Russian twists are tracked as Torso Rotation
    "russian twist": "Torso Rotation",
    "russian twists": "Torso Rotation",
    # Legacy combined names
    "squats/legpress": "Legpress",
    "lat raises cable": "Lateral Raises Cable",
}


def canonicalize(raw: str) -> str:
    """Map a free-text exercise name onto its canonical display name.

    >>> canonicalize("  RDLs ")
    'Back Extension'
    >>> canonicalize("Bicep Curl")
    'Bicep Curl'
    """
    return CANONICAL_NAMES.get(raw.strip().lower(), raw)


def check_idempotent(table: dict[str, str] = CANONICAL_NAMES) -> list[str]:
    """Return the canonical outputs that would be rewritten a second time.

    An empty list means ``canonicalize(canonicalize(s)) == canonicalize(s)``
    holds for every input.
    """
    offenders = []
    for canonical in set(table.values()):
        key = canonical.strip().lower()
        if key in table and table[key] != canonical:
            offenders.append(canonical)
    return sorted(offenders)


# ======================================================================
# Training split
# ======================================================================


@dataclass(frozen=True)
class TrainingDay:
    """One day of the 4-day upper/lower split.

    ``exercises`` keeps the names as they were originally written on the
    day cards; callers canonicalize them when reading or writing weights.
    """

    day_id: str
    display_name: str
    focus: str
    exercises: tuple[str, ...]

    @property
    def canonical_exercises(self) -> list[str]:
        return [canonicalize(name) for name in self.exercises]


TRAINING_SPLIT: dict[str, TrainingDay] = {}


def register_day(day: TrainingDay) -> None:
    """Register a training day in the split."""
    TRAINING_SPLIT[day.day_id] = day


def get_day(day_id: str) -> TrainingDay | None:
    """Look up a training day by its ID.  Returns ``None`` if not found."""
    return TRAINING_SPLIT.get(day_id)


_DAYS: list[TrainingDay] = [
    TrainingDay(
        day_id="upper_a",
        display_name="Upper A",
        focus="Chest focus",
        exercises=("Incline Smith", "Flys", "Shoulder Press", "Pulldown Lat",
                   "Row Cable", "Bicep Curl", "Tricep Overhead"),
    ),
    TrainingDay(
        day_id="upper_b",
        display_name="Upper B",
        focus="Back focus",
        exercises=("Pulldown Beneden", "Wide Row", "Chest Press", "Flys",
                   "Lat Raises Cable", "Preacher Curl", "Tricep Pushdown"),
    ),
    TrainingDay(
        day_id="lower_a",
        display_name="Lower A",
        focus="Quad focus",
        exercises=("Squats/Legpress", "Leg Extensions", "Leg Curls",
                   "Bulgarians", "Calf Raises"),
    ),
    TrainingDay(
        day_id="lower_b",
        display_name="Lower B",
        focus="Posterior chain and core",
        exercises=("RDLs", "Leg Curls", "Leg Extensions",
                   "Weighted Crunch", "Russian Twists"),
    ),
]

for _day in _DAYS:
    register_day(_day)


def preferred_exercise_order() -> list[str]:
    """Canonical exercise names in split order, first occurrence wins."""
    order: list[str] = []
    for day in TRAINING_SPLIT.values():
        for name in day.canonical_exercises:
            if name not in order:
                order.append(name)
    return order
