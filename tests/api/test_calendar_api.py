"""API tests for the workout calendar and dashboard."""


class TestCalendarApi:
    def test_toggle_on_and_off(self, client, auth_headers):
        response = client.post("/api/v1/calendar/2024-09-15/toggle", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["workout_dates"] == ["2024-09-15"]

        response = client.post("/api/v1/calendar/2024-09-15/toggle", headers=auth_headers)
        assert response.json()["workout_dates"] == []

        response = client.get("/api/v1/calendar/2024/9", headers=auth_headers)
        assert "2024-09-15" not in response.json()["workout_dates"]
        assert response.json()["workouts_count"] == 0

    def test_toggle_with_workout_type(self, client, auth_headers):
        response = client.post("/api/v1/calendar/2024-09-16/toggle", json={"workout_type": "lower_a"},
                               headers=auth_headers)
        assert response.json()["workouts_count"] == 1

    def test_month_streak(self, client, auth_headers):
        for day in ("2024-09-18", "2024-09-19", "2024-09-20"):
            client.post(f"/api/v1/calendar/{day}/toggle", headers=auth_headers)

        response = client.get("/api/v1/calendar/2024/9", params={"as_of": "2024-09-20"}, headers=auth_headers)
        assert response.json()["current_streak"] == 3

    def test_invalid_month(self, client, auth_headers):
        assert client.get("/api/v1/calendar/2024/13", headers=auth_headers).status_code == 422

    def test_year_out_of_range(self, client, auth_headers):
        assert client.get("/api/v1/calendar/0/1", headers=auth_headers).status_code == 422
        assert client.get("/api/v1/calendar/10000/1", headers=auth_headers).status_code == 422

    def test_invalid_date(self, client, auth_headers):
        assert client.post("/api/v1/calendar/2024-02-30/toggle", headers=auth_headers).status_code == 422


class TestDashboardApi:
    def test_empty(self, client, auth_headers):
        response = client.get("/api/v1/dashboard", params={"as_of": "2024-09-20"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "as_of": "2024-09-20",
            "workouts_this_month": 0,
            "current_streak": 0,
            "longest_streak": 0,
            "total_sessions": 0,
            "personal_records": 0,
        }
