"""Tests for snapshot period computation and record preparation."""

import datetime
from types import SimpleNamespace

import pytest

from app.tracking.snapshot import build_snapshot_records, previous_month, snapshot_period

UTC = datetime.timezone.utc


class TestPreviousMonth:
    @pytest.mark.parametrize(
        "year, month, expected",
        [(2025, 1, (2024, 12)), (2025, 3, (2025, 2)), (2024, 12, (2024, 11))],
    )
    def test_previous_month(self, year, month, expected):
        assert previous_month(year, month) == expected


class TestSnapshotPeriod:
    def test_january_first_rolls_back_a_year(self):
        now = datetime.datetime(2025, 1, 1, 9, 0, tzinfo=UTC)
        assert snapshot_period(now) == (2024, 12)

    def test_march_first(self):
        now = datetime.datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
        assert snapshot_period(now) == (2025, 2)

    def test_reference_timezone_decides_the_month(self):
        """23:30 UTC on Feb 28 is already March 1st in Amsterdam."""
        now = datetime.datetime(2025, 2, 28, 23, 30, tzinfo=UTC)
        assert snapshot_period(now, "Europe/Amsterdam") == (2025, 2)
        assert snapshot_period(now, "UTC") == (2025, 1)

    def test_new_year_in_reference_timezone(self):
        now = datetime.datetime(2024, 12, 31, 23, 30, tzinfo=UTC)
        assert snapshot_period(now, "Europe/Amsterdam") == (2024, 12)

    def test_naive_datetime_is_utc(self):
        assert snapshot_period(datetime.datetime(2025, 3, 1, 12, 0), "UTC") == (2025, 2)

    def test_defaults_to_now(self):
        year, month = snapshot_period()
        assert 1 <= month <= 12
        assert year >= 2024


class TestBuildSnapshotRecords:
    def _weight(self, user_id, name, weight):
        return SimpleNamespace(user_id=user_id, exercise_name=name, current_weight=weight)

    def test_one_record_per_weight_row(self):
        records = build_snapshot_records(
            [self._weight("u1", "Legpress", 120), self._weight("u2", "Legpress", 90)], 2024, 9,
        )
        assert sorted((r["user_id"], r["max_weight"]) for r in records) == [("u1", 120.0), ("u2", 90.0)]
        assert all(r["year"] == 2024 and r["month"] == 9 and r["auto_saved"] for r in records)

    def test_names_canonicalized(self):
        records = build_snapshot_records([self._weight("u1", "rdls", 80)], 2024, 9)
        assert records[0]["exercise_name"] == "Back Extension"

    def test_collapsed_names_keep_heaviest(self):
        records = build_snapshot_records(
            [self._weight("u1", "Flys", 15), self._weight("u1", "Pec Flys", 20)], 2024, 9,
        )
        assert len(records) == 1
        assert records[0]["exercise_name"] == "Pec Flyes"
        assert records[0]["max_weight"] == 20.0

    def test_empty(self):
        assert build_snapshot_records([], 2024, 9) == []
