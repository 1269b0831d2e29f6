"""Tests for lifestyle endpoints."""

from datetime import date
from uuid import uuid4

from fastapi.testclient import TestClient

from lifestyle_tracker.api.app import create_app
from lifestyle_tracker.domain.lifestyle import MealType, PlanItem, PlanKind

HEADERS = {"X-Api-Token": "api-token"}


def test_health_needs_no_token(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requests_without_token_are_rejected(container) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/lifestyle/diet", params={"userId": str(uuid4())})
    wrong = client.get(
        "/lifestyle/diet",
        params={"userId": str(uuid4())},
        headers={"X-Api-Token": "nope"},
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401


def test_bearer_token_is_accepted(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/lifestyle/diet",
        params={"userId": str(uuid4())},
        headers={"Authorization": "Bearer api-token"},
    )

    assert response.status_code == 200
    assert response.json() == []


def test_create_and_list_diet_logs(container) -> None:
    client = TestClient(create_app(container))
    user_id = str(uuid4())

    created = client.post(
        "/lifestyle/diet",
        json={
            "userId": user_id,
            "mealType": "breakfast",
            "description": "Oatmeal",
            "calories": 320,
            "logDate": "2024-01-08",
        },
        headers=HEADERS,
    )
    listed = client.get(
        "/lifestyle/diet",
        params={"userId": user_id, "date": "2024-01-08"},
        headers=HEADERS,
    )

    assert created.status_code == 201
    body = created.json()
    assert body["mealType"] == "breakfast"
    assert body["userId"] == user_id
    assert body["timestamp"].startswith("2024-01-08T00:00:00")
    assert [log["id"] for log in listed.json()] == [body["id"]]


def test_create_diet_log_rejects_unknown_meal_type(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/lifestyle/diet",
        json={
            "userId": str(uuid4()),
            "mealType": "brunch",
            "description": "Eggs",
            "calories": 300,
            "logDate": "2024-01-08",
        },
        headers=HEADERS,
    )

    assert response.status_code == 422


def test_create_exercise_log_rejects_negative_duration(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/lifestyle/exercise",
        json={
            "userId": str(uuid4()),
            "activityType": "running",
            "description": "Run",
            "durationMinutes": -5,
            "caloriesBurned": 100,
            "logDate": "2024-01-08",
        },
        headers=HEADERS,
    )

    assert response.status_code == 422


def test_delete_missing_exercise_log_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.delete(
        f"/lifestyle/exercise/{uuid4()}",
        params={"userId": str(uuid4())},
        headers=HEADERS,
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "Exercise log not found"}


def test_delete_diet_log(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    log = container.log_service.create_diet_log(
        user_id, MealType.LUNCH, "Soup", 300, date(2024, 1, 8)
    )

    response = client.delete(
        f"/lifestyle/diet/{log.id}", params={"userId": str(user_id)}, headers=HEADERS
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Diet log deleted successfully"}
    assert container.log_service.list_diet_logs(user_id) == []


def test_daily_summary(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    container.log_service.create_diet_log(
        user_id, MealType.LUNCH, "Soup", 300, date(2024, 1, 8)
    )

    response = client.get(
        "/lifestyle/summary",
        params={"userId": str(user_id), "date": "2024-01-08"},
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json() == {
        "date": "2024-01-08",
        "caloriesIn": 300,
        "caloriesOut": 0,
        "netCalories": 300,
        "exerciseMinutes": 0,
        "mealCount": 1,
        "workoutCount": 0,
    }


def test_weekly_summary(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/lifestyle/summary/weekly", params={"userId": str(uuid4())}, headers=HEADERS
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totalCaloriesIn"] == 0
    assert data["avgExercisePerDay"] == 0


def test_diet_plan_lifecycle(container) -> None:
    client = TestClient(create_app(container))
    user_id = str(uuid4())

    created = client.post(
        "/lifestyle/diet-plans",
        json={
            "userId": user_id,
            "planName": "Week one",
            "items": [
                {"dayOfWeek": 1, "mealType": "breakfast", "description": "Oatmeal"},
            ],
        },
        headers=HEADERS,
    )
    plan_id = created.json()["id"]
    updated = client.put(
        f"/lifestyle/diet-plans/{plan_id}",
        json={"userId": user_id, "planName": "Week two"},
        headers=HEADERS,
    )
    listed = client.get(
        "/lifestyle/diet-plans", params={"userId": user_id}, headers=HEADERS
    )
    deleted = client.delete(
        f"/lifestyle/diet-plans/{plan_id}", params={"userId": user_id}, headers=HEADERS
    )
    fetched = client.get(
        f"/lifestyle/diet-plans/{plan_id}", params={"userId": user_id}, headers=HEADERS
    )

    assert created.status_code == 201
    assert created.json()["items"][0]["mealType"] == "breakfast"
    assert updated.json()["planName"] == "Week two"
    assert updated.json()["items"][0]["description"] == "Oatmeal"
    assert [plan["id"] for plan in listed.json()] == [plan_id]
    assert deleted.json() == {"message": "Diet plan deleted successfully"}
    assert fetched.status_code == 404
    assert fetched.json() == {"detail": "Diet plan not found"}


def test_plan_item_day_of_week_is_validated(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/lifestyle/exercise-plans",
        json={
            "userId": str(uuid4()),
            "planName": "Moves",
            "items": [{"dayOfWeek": 7, "activityType": "yoga", "description": "Yoga"}],
        },
        headers=HEADERS,
    )

    assert response.status_code == 422


def test_apply_exercise_plan(container) -> None:
    client = TestClient(create_app(container))
    user_id = str(uuid4())
    created = client.post(
        "/lifestyle/exercise-plans",
        json={
            "userId": user_id,
            "planName": "Moves",
            "items": [
                {
                    "dayOfWeek": 1,
                    "activityType": "running",
                    "description": "Run",
                    "durationMinutes": 30,
                    "caloriesBurned": 300,
                    "intensity": "high",
                },
            ],
        },
        headers=HEADERS,
    )
    plan_id = created.json()["id"]

    response = client.post(
        f"/lifestyle/exercise-plans/{plan_id}/apply",
        json={"userId": user_id, "startDate": "2024-01-08"},
        headers=HEADERS,
    )
    logs = client.get(
        "/lifestyle/exercise", params={"userId": user_id}, headers=HEADERS
    ).json()

    assert response.status_code == 200
    assert response.json() == {"created": 1, "skipped": 0, "deleted": 0}
    assert logs[0]["intensity"] == "high"
    assert logs[0]["timestamp"].startswith("2024-01-08")


def test_diet_plan_compliance_report(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    plan = container.plan_service.create_plan(
        user_id,
        PlanKind.DIET,
        "Plan",
        None,
        [
            PlanItem(
                day_of_week=1,
                description="Oatmeal",
                meal_type=MealType.BREAKFAST,
                calories=300,
            ),
            PlanItem(day_of_week=2, description="Soup", meal_type=MealType.LUNCH),
        ],
    )
    container.log_service.create_diet_log(
        user_id, MealType.BREAKFAST, "Oatmeal", 320, date(2024, 1, 8)
    )

    response = client.get(
        f"/lifestyle/diet-plans/{plan.id}/compliance",
        params={
            "userId": str(user_id),
            "startDate": "2024-01-08",
            "endDate": "2024-01-09",
        },
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json() == {
        "planId": str(plan.id),
        "period": {"startDate": "2024-01-08", "endDate": "2024-01-09"},
        "overallCompliance": 0.5,
        "dailyBreakdown": [
            {
                "date": "2024-01-08",
                "planned": 1,
                "actual": 1,
                "matched": 1,
                "compliance": 1.0,
                "details": [
                    {
                        "planned": {
                            "mealType": "breakfast",
                            "description": "Oatmeal",
                            "calories": 300,
                        },
                        "actual": {
                            "mealType": "breakfast",
                            "description": "Oatmeal",
                            "calories": 320,
                        },
                        "matched": True,
                    }
                ],
            },
            {
                "date": "2024-01-09",
                "planned": 1,
                "actual": 0,
                "matched": 0,
                "compliance": 0.0,
                "details": [
                    {
                        "planned": {
                            "mealType": "lunch",
                            "description": "Soup",
                            "calories": None,
                        },
                        "actual": None,
                        "matched": False,
                    }
                ],
            },
        ],
    }


def test_compliance_for_unknown_plan_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        f"/lifestyle/exercise-plans/{uuid4()}/compliance",
        params={"userId": str(uuid4())},
        headers=HEADERS,
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "Exercise plan not found"}


def test_compliance_with_inverted_period_returns_400(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    plan = container.plan_service.create_plan(
        user_id, PlanKind.DIET, "Plan", None, []
    )

    response = client.get(
        f"/lifestyle/diet-plans/{plan.id}/compliance",
        params={
            "userId": str(user_id),
            "startDate": "2024-01-09",
            "endDate": "2024-01-08",
        },
        headers=HEADERS,
    )

    assert response.status_code == 400
    assert "after" in response.json()["detail"]


def test_compliance_on_last_representable_day(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    plan = container.plan_service.create_plan(
        user_id, PlanKind.DIET, "Plan", None, []
    )

    response = client.get(
        f"/lifestyle/diet-plans/{plan.id}/compliance",
        params={
            "userId": str(user_id),
            "startDate": "9999-12-31",
            "endDate": "9999-12-31",
        },
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["period"] == {
        "startDate": "9999-12-31",
        "endDate": "9999-12-31",
    }


def test_compliance_period_past_max_date_returns_400(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    plan = container.plan_service.create_plan(
        user_id, PlanKind.DIET, "Plan", None, []
    )

    response = client.get(
        f"/lifestyle/diet-plans/{plan.id}/compliance",
        params={"userId": str(user_id), "startDate": "9999-12-30"},
        headers=HEADERS,
    )

    assert response.status_code == 400


def test_compliance_period_longer_than_a_year_returns_400(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    plan = container.plan_service.create_plan(
        user_id, PlanKind.EXERCISE, "Plan", None, []
    )

    response = client.get(
        f"/lifestyle/exercise-plans/{plan.id}/compliance",
        params={
            "userId": str(user_id),
            "startDate": "0001-01-01",
            "endDate": "9999-12-31",
        },
        headers=HEADERS,
    )

    assert response.status_code == 400
    assert "longer than" in response.json()["detail"]


def test_summary_on_last_representable_day(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/lifestyle/summary",
        params={"userId": str(uuid4()), "date": "9999-12-31"},
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["date"] == "9999-12-31"


def test_apply_plan_past_max_date_returns_400(container) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    plan = container.plan_service.create_plan(
        user_id, PlanKind.DIET, "Plan", None, []
    )

    response = client.post(
        f"/lifestyle/diet-plans/{plan.id}/apply",
        json={"userId": str(user_id), "startDate": "9999-12-30"},
        headers=HEADERS,
    )

    assert response.status_code == 400
