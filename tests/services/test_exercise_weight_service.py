"""Tests for the exercise weight service against an in-memory database."""

import datetime

import pytest
from fastapi import HTTPException
from sqlmodel import select

from app.models.exercise_weight import ExerciseWeight
from app.services.exercise_weight_service import ExerciseWeightService

OTHER = "other-user"


@pytest.fixture
def service(session):
    return ExerciseWeightService(session)


class TestGetWeights:
    def test_unknown_exercises_default_to_zero(self, service, user_id):
        assert service.get_weights(user_id, ["RDLs", "Bicep Curl"]) == {
            "Back Extension": 0.0,
            "Bicep Curl": 0.0,
        }

    def test_keys_are_canonical_and_deduplicated(self, service, user_id):
        service.set_weight(user_id, "Flys", 15)
        assert service.get_weights(user_id, ["Flys", "pec flys", "Pec Flyes"]) == {"Pec Flyes": 15.0}

    def test_users_are_isolated(self, service, user_id):
        service.set_weight(user_id, "Legpress", 120)
        assert service.get_weights(OTHER, ["Legpress"]) == {"Legpress": 0.0}


class TestSetWeight:
    def test_stores_canonical_name(self, service, session, user_id):
        entry = service.set_weight(user_id, " rdls ", 80)
        assert entry.exercise_name == "Back Extension"
        assert entry.current_weight == 80.0
        assert service.get_weights(user_id, ["Romanian Deadlift"]) == {"Back Extension": 80.0}

    def test_second_write_overwrites(self, service, session, user_id):
        service.set_weight(user_id, "Flys", 15)
        service.set_weight(user_id, "PEC FLYS", 17.5)

        rows = session.exec(select(ExerciseWeight).where(ExerciseWeight.user_id == user_id)).all()
        assert len(rows) == 1
        assert rows[0].exercise_name == "Pec Flyes"
        assert rows[0].current_weight == 17.5

    def test_negative_weight_rejected(self, service, user_id):
        with pytest.raises(HTTPException) as exc_info:
            service.set_weight(user_id, "Legpress", -5)
        assert exc_info.value.status_code == 422

    def test_blank_name_rejected(self, service, user_id):
        with pytest.raises(HTTPException) as exc_info:
            service.set_weight(user_id, "   ", 10)
        assert exc_info.value.status_code == 422

    def test_overlong_name_rejected(self, service, user_id):
        with pytest.raises(HTTPException) as exc_info:
            service.set_weight(user_id, "x" * 101, 10)
        assert exc_info.value.status_code == 422

    def test_name_at_column_limit_accepted(self, service, user_id):
        assert service.set_weight(user_id, "x" * 100, 10).current_weight == 10.0

    def test_timestamps_written(self, service, user_id):
        entry = service.set_weight(user_id, "Legpress", 120)
        assert entry.last_updated is not None
        assert entry.created_at is not None

    def test_default_timestamps_are_utc_aware(self):
        entry = ExerciseWeight(user_id="u", exercise_name="Legpress", current_weight=1)
        assert entry.created_at.tzinfo == datetime.timezone.utc
        assert entry.last_updated.tzinfo == datetime.timezone.utc


class TestAdjustWeight:
    def test_relative_increase(self, service, user_id):
        service.set_weight(user_id, "Chest Press", 60)
        assert service.adjust_weight(user_id, "chest press", 2.5).current_weight == 62.5

    def test_starts_from_zero(self, service, user_id):
        assert service.adjust_weight(user_id, "Wide Row", 5).current_weight == 5.0

    def test_clamped_at_zero(self, service, user_id):
        service.set_weight(user_id, "Calf Raises", 10)
        assert service.adjust_weight(user_id, "Calf Raises", -15).current_weight == 0.0


class TestTrainingDays:
    def test_list(self):
        days = ExerciseWeightService.list_training_days()
        assert [d.day_id for d in days] == ["upper_a", "upper_b", "lower_a", "lower_b"]
        assert days[0].exercise_count == 7

    def test_day_with_weights(self, service, user_id):
        service.set_weight(user_id, "RDLs", 80)
        day = service.get_training_day(user_id, "lower_b")

        weights = {e.exercise_name: e.current_weight for e in day.exercises}
        assert weights["Back Extension"] == 80.0
        assert weights["Torso Rotation"] == 0.0
        assert len(day.exercises) == 5

    def test_unknown_day(self, service, user_id):
        with pytest.raises(HTTPException) as exc_info:
            service.get_training_day(user_id, "arms")
        assert exc_info.value.status_code == 404
