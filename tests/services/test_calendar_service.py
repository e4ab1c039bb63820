"""Tests for the workout calendar service."""

import datetime

import pytest
from fastapi import HTTPException

from app.db.repositories.daily_workout import DailyWorkoutRepository
from app.services.calendar_service import CalendarService, month_bounds


@pytest.fixture
def service(session):
    return CalendarService(session)


class TestMonthBounds:
    def test_leap_february(self):
        assert month_bounds(2024, 2) == (datetime.date(2024, 2, 1), datetime.date(2024, 2, 29))

    def test_common_february(self):
        assert month_bounds(2023, 2)[1] == datetime.date(2023, 2, 28)

    def test_december(self):
        assert month_bounds(2024, 12) == (datetime.date(2024, 12, 1), datetime.date(2024, 12, 31))

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(HTTPException) as exc_info:
            month_bounds(2024, month)
        assert exc_info.value.status_code == 422

    @pytest.mark.parametrize("year", [0, 10000])
    def test_invalid_year(self, year):
        with pytest.raises(HTTPException) as exc_info:
            month_bounds(year, 1)
        assert exc_info.value.status_code == 422


class TestToggle:
    def test_absent_day_becomes_workout(self, service, user_id):
        dates = service.toggle(user_id, datetime.date(2024, 9, 15))
        assert dates == {datetime.date(2024, 9, 15)}

    def test_toggle_twice_clears_but_keeps_row(self, service, session, user_id):
        day = datetime.date(2024, 9, 15)
        service.toggle(user_id, day)
        dates = service.toggle(user_id, day)

        assert day not in dates
        assert service.get_month(user_id, 2024, 9) == set()

        row = DailyWorkoutRepository(session).get_by_user_and_date(user_id, day)
        assert row is not None
        assert row.worked_out is False

    def test_toggle_back_on_after_false(self, service, user_id):
        day = datetime.date(2024, 9, 15)
        service.toggle(user_id, day)
        service.toggle(user_id, day)
        assert service.toggle(user_id, day) == {day}

    def test_workout_type_stored(self, service, session, user_id):
        day = datetime.date(2024, 9, 16)
        service.toggle(user_id, day, "upper_a")
        assert DailyWorkoutRepository(session).get_by_user_and_date(user_id, day).workout_type == "upper_a"

    def test_returns_whole_month(self, service, user_id):
        service.toggle(user_id, datetime.date(2024, 9, 1))
        dates = service.toggle(user_id, datetime.date(2024, 9, 30))
        assert dates == {datetime.date(2024, 9, 1), datetime.date(2024, 9, 30)}


class TestGetMonth:
    def test_range_is_inclusive_and_leap_aware(self, service, user_id):
        for day in [datetime.date(2024, 1, 31), datetime.date(2024, 2, 1), datetime.date(2024, 2, 29),
                    datetime.date(2024, 3, 1)]:
            service.toggle(user_id, day)

        assert service.get_month(user_id, 2024, 2) == {datetime.date(2024, 2, 1), datetime.date(2024, 2, 29)}

    def test_users_are_isolated(self, service, user_id):
        service.toggle(user_id, datetime.date(2024, 9, 15))
        assert service.get_month("someone-else", 2024, 9) == set()


class TestStreaks:
    def test_streak_from_store(self, service, user_id):
        today = datetime.date(2024, 9, 20)
        for offset in (0, 1, 2, 3, 4, 6):
            service.toggle(user_id, today - datetime.timedelta(days=offset))
        # day six explicitly switched off
        service.toggle(user_id, today - datetime.timedelta(days=5))
        service.toggle(user_id, today - datetime.timedelta(days=5))

        assert service.current_streak(user_id, today) == 5
        assert service.longest_streak(user_id) == 5

    def test_month_response(self, service, user_id):
        service.toggle(user_id, datetime.date(2024, 9, 19))
        service.toggle(user_id, datetime.date(2024, 9, 20))

        response = service.month_response(user_id, 2024, 9, as_of=datetime.date(2024, 9, 20))
        assert response.workouts_count == 2
        assert response.workout_dates == [datetime.date(2024, 9, 19), datetime.date(2024, 9, 20)]
        assert response.current_streak == 2
