"""Tests for exercise name canonicalization and the training split."""

import pytest

from app.tracking.canonical import (
    CANONICAL_NAMES,
    TRAINING_SPLIT,
    canonicalize,
    check_idempotent,
    get_day,
    preferred_exercise_order,
)


# ======================================================================
# canonicalize
# ======================================================================


class TestCanonicalize:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Pulldown Lat", "Lat Pulldown"),
            ("Pulldown Beneden", "Lat Pulldown"),
            ("pulldown", "Lat Pulldown"),
            ("Flys", "Pec Flyes"),
            ("PEC FLYS", "Pec Flyes"),
            ("Row Cable", "Cable Row"),
            ("cable row", "Cable Row"),
            (" RDLs ", "Back Extension"),
            ("rdl", "Back Extension"),
            ("Romanian Deadlift", "Back Extension"),
            ("romanian deadlifts", "Back Extension"),
            ("Russian Twists", "Torso Rotation"),
            ("russian twist", "Torso Rotation"),
            ("Squats/Legpress", "Legpress"),
            ("Lat Raises Cable", "Lateral Raises Cable"),
        ],
    )
    def test_known_variants(self, raw, expected):
        assert canonicalize(raw) == expected

    def test_every_key_ignores_case_and_whitespace(self):
        for key, canonical in CANONICAL_NAMES.items():
            assert canonicalize(f"  {key.upper()}\t") == canonical

    @pytest.mark.parametrize(
        "raw",
        ["Bicep Curl", "Incline Smith", "deadlift", "  Bicep Curl  ", "", "Lat Pulldowns"],
    )
    def test_unknown_names_returned_unchanged(self, raw):
        """No match returns the input exactly as given, whitespace included."""
        assert canonicalize(raw) == raw

    def test_canonical_names_are_fixed_points(self):
        for canonical in set(CANONICAL_NAMES.values()):
            assert canonicalize(canonical) == canonical

    @pytest.mark.parametrize(
        "raw",
        list(CANONICAL_NAMES) + ["Bicep Curl", " rdls", "Weighted Crunch", "squats", ""],
    )
    def test_idempotent(self, raw):
        once = canonicalize(raw)
        assert canonicalize(once) == once

    def test_table_has_no_idempotence_offenders(self):
        assert check_idempotent() == []

    def test_check_idempotent_flags_rewriting_table(self):
        table = {"curl": "Bicep Curl", "bicep curl": "Biceps Curl"}
        assert check_idempotent(table) == ["Bicep Curl"]


# ======================================================================
# Training split
# ======================================================================


class TestTrainingSplit:
    def test_four_days(self):
        assert list(TRAINING_SPLIT) == ["upper_a", "upper_b", "lower_a", "lower_b"]

    def test_get_day(self):
        day = get_day("lower_b")
        assert day is not None
        assert day.display_name == "Lower B"
        assert day.exercises[0] == "RDLs"

    def test_unknown_day_returns_none(self):
        assert get_day("push") is None

    def test_canonical_exercises_of_day(self):
        assert get_day("lower_b").canonical_exercises == [
            "Back Extension", "Leg Curls", "Leg Extensions", "Weighted Crunch", "Torso Rotation",
        ]

    def test_preferred_order_is_deduplicated_split_order(self):
        order = preferred_exercise_order()
        assert len(order) == len(set(order)) == 20
        assert order[:5] == ["Incline Smith", "Pec Flyes", "Shoulder Press", "Lat Pulldown", "Cable Row"]
        assert order[-3:] == ["Back Extension", "Weighted Crunch", "Torso Rotation"]

    def test_preferred_order_is_canonical(self):
        for name in preferred_exercise_order():
            assert canonicalize(name) == name
