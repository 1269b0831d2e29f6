"""Lifestyle API endpoints: logs, summaries, plans and compliance."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from lifestyle_tracker.api.auth import require_api_token
from lifestyle_tracker.api.lifestyle_models import (
    ApplyPlanRequest,
    DietLogCreate,
    DietPlanCreate,
    DietPlanUpdate,
    ExerciseLogCreate,
    ExercisePlanCreate,
    ExercisePlanUpdate,
)
from lifestyle_tracker.api.serializers import (
    serialize_apply_result,
    serialize_compliance_report,
    serialize_daily_summary,
    serialize_diet_log,
    serialize_exercise_log,
    serialize_plan,
    serialize_weekly_summary,
)
from lifestyle_tracker.containers import AppContainer
from lifestyle_tracker.domain.lifestyle import PlanItem, PlanKind

router = APIRouter(
    prefix="/lifestyle",
    tags=["lifestyle"],
    dependencies=[Depends(require_api_token)],
)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("/diet", status_code=status.HTTP_201_CREATED)
async def create_diet_log(body: DietLogCreate, request: Request) -> dict[str, object]:
    """Add a diet log entry."""
    log = _container(request).log_service.create_diet_log(
        user_id=body.user_id,
        meal_type=body.meal_type,
        description=body.description,
        calories=body.calories,
        log_date=body.log_date,
        notes=body.notes,
    )
    return serialize_diet_log(log)


@router.get("/diet")
async def list_diet_logs(
    request: Request,
    user_id: UUID = Query(alias="userId"),
    day: date | None = Query(default=None, alias="date"),
) -> list[dict[str, object]]:
    """List diet logs, optionally for one date."""
    logs = _container(request).log_service.list_diet_logs(user_id, day)
    return [serialize_diet_log(log) for log in logs]


@router.delete("/diet/{log_id}")
async def remove_diet_log(
    log_id: UUID, request: Request, user_id: UUID = Query(alias="userId")
) -> dict[str, str]:
    """Delete a diet log."""
    _container(request).log_service.remove_diet_log(user_id, log_id)
    return {"message": "Diet log deleted successfully"}


@router.post("/exercise", status_code=status.HTTP_201_CREATED)
async def create_exercise_log(
    body: ExerciseLogCreate, request: Request
) -> dict[str, object]:
    """Add an exercise log entry."""
    log = _container(request).log_service.create_exercise_log(
        user_id=body.user_id,
        activity_type=body.activity_type,
        description=body.description,
        duration_minutes=body.duration_minutes,
        calories_burned=body.calories_burned,
        log_date=body.log_date,
        intensity=body.intensity,
        notes=body.notes,
    )
    return serialize_exercise_log(log)


@router.get("/exercise")
async def list_exercise_logs(
    request: Request,
    user_id: UUID = Query(alias="userId"),
    day: date | None = Query(default=None, alias="date"),
) -> list[dict[str, object]]:
    """List exercise logs, optionally for one date."""
    logs = _container(request).log_service.list_exercise_logs(user_id, day)
    return [serialize_exercise_log(log) for log in logs]


@router.delete("/exercise/{log_id}")
async def remove_exercise_log(
    log_id: UUID, request: Request, user_id: UUID = Query(alias="userId")
) -> dict[str, str]:
    """Delete an exercise log."""
    _container(request).log_service.remove_exercise_log(user_id, log_id)
    return {"message": "Exercise log deleted successfully"}


@router.get("/summary")
async def daily_summary(
    request: Request,
    user_id: UUID = Query(alias="userId"),
    day: date = Query(alias="date"),
) -> dict[str, object]:
    """Return calorie and exercise totals for a date."""
    summary = _container(request).log_service.get_daily_summary(user_id, day)
    return serialize_daily_summary(summary)


@router.get("/summary/weekly")
async def weekly_summary(
    request: Request, user_id: UUID = Query(alias="userId")
) -> dict[str, object]:
    """Return totals for the last 7 days."""
    summary = _container(request).log_service.get_weekly_summary(user_id)
    return serialize_weekly_summary(summary)


@router.post("/diet-plans", status_code=status.HTTP_201_CREATED)
async def create_diet_plan(body: DietPlanCreate, request: Request) -> dict[str, object]:
    """Create a weekly diet plan."""
    plan = _container(request).plan_service.create_plan(
        user_id=body.user_id,
        kind=PlanKind.DIET,
        name=body.plan_name,
        description=body.description,
        items=[item.to_item() for item in body.items],
    )
    return serialize_plan(plan)


@router.post("/exercise-plans", status_code=status.HTTP_201_CREATED)
async def create_exercise_plan(
    body: ExercisePlanCreate, request: Request
) -> dict[str, object]:
    """Create a weekly exercise plan."""
    plan = _container(request).plan_service.create_plan(
        user_id=body.user_id,
        kind=PlanKind.EXERCISE,
        name=body.plan_name,
        description=body.description,
        items=[item.to_item() for item in body.items],
    )
    return serialize_plan(plan)


@router.get("/diet-plans")
async def list_diet_plans(
    request: Request, user_id: UUID = Query(alias="userId")
) -> list[dict[str, object]]:
    """List a user's diet plans."""
    return _list_plans(request, user_id, PlanKind.DIET)


@router.get("/exercise-plans")
async def list_exercise_plans(
    request: Request, user_id: UUID = Query(alias="userId")
) -> list[dict[str, object]]:
    """List a user's exercise plans."""
    return _list_plans(request, user_id, PlanKind.EXERCISE)


@router.get("/diet-plans/{plan_id}")
async def get_diet_plan(
    plan_id: UUID, request: Request, user_id: UUID = Query(alias="userId")
) -> dict[str, object]:
    """Return a diet plan."""
    plan = _container(request).plan_service.get_plan(user_id, PlanKind.DIET, plan_id)
    return serialize_plan(plan)


@router.get("/exercise-plans/{plan_id}")
async def get_exercise_plan(
    plan_id: UUID, request: Request, user_id: UUID = Query(alias="userId")
) -> dict[str, object]:
    """Return an exercise plan."""
    plan = _container(request).plan_service.get_plan(
        user_id, PlanKind.EXERCISE, plan_id
    )
    return serialize_plan(plan)


@router.put("/diet-plans/{plan_id}")
async def update_diet_plan(
    plan_id: UUID, body: DietPlanUpdate, request: Request
) -> dict[str, object]:
    """Update a diet plan."""
    items = [item.to_item() for item in body.items] if body.items is not None else None
    return _update_plan(request, PlanKind.DIET, plan_id, body, items)


@router.put("/exercise-plans/{plan_id}")
async def update_exercise_plan(
    plan_id: UUID, body: ExercisePlanUpdate, request: Request
) -> dict[str, object]:
    """Update an exercise plan."""
    items = [item.to_item() for item in body.items] if body.items is not None else None
    return _update_plan(request, PlanKind.EXERCISE, plan_id, body, items)


@router.delete("/diet-plans/{plan_id}")
async def delete_diet_plan(
    plan_id: UUID, request: Request, user_id: UUID = Query(alias="userId")
) -> dict[str, str]:
    """Delete a diet plan."""
    _container(request).plan_service.delete_plan(user_id, PlanKind.DIET, plan_id)
    return {"message": "Diet plan deleted successfully"}


@router.delete("/exercise-plans/{plan_id}")
async def delete_exercise_plan(
    plan_id: UUID, request: Request, user_id: UUID = Query(alias="userId")
) -> dict[str, str]:
    """Delete an exercise plan."""
    _container(request).plan_service.delete_plan(user_id, PlanKind.EXERCISE, plan_id)
    return {"message": "Exercise plan deleted successfully"}


@router.post("/diet-plans/{plan_id}/apply")
async def apply_diet_plan(
    plan_id: UUID, body: ApplyPlanRequest, request: Request
) -> dict[str, object]:
    """Create a week of diet logs from a plan."""
    return _apply_plan(request, PlanKind.DIET, plan_id, body)


@router.post("/exercise-plans/{plan_id}/apply")
async def apply_exercise_plan(
    plan_id: UUID, body: ApplyPlanRequest, request: Request
) -> dict[str, object]:
    """Create a week of exercise logs from a plan."""
    return _apply_plan(request, PlanKind.EXERCISE, plan_id, body)


@router.get("/diet-plans/{plan_id}/compliance")
async def diet_plan_compliance(  # noqa: PLR0913
    plan_id: UUID,
    request: Request,
    user_id: UUID = Query(alias="userId"),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
) -> dict[str, object]:
    """Compare a diet plan against logged meals."""
    report = _container(request).compliance_service.get_plan_compliance(
        user_id, PlanKind.DIET, plan_id, start_date, end_date
    )
    return serialize_compliance_report(report)


@router.get("/exercise-plans/{plan_id}/compliance")
async def exercise_plan_compliance(  # noqa: PLR0913
    plan_id: UUID,
    request: Request,
    user_id: UUID = Query(alias="userId"),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
) -> dict[str, object]:
    """Compare an exercise plan against logged activities."""
    report = _container(request).compliance_service.get_plan_compliance(
        user_id, PlanKind.EXERCISE, plan_id, start_date, end_date
    )
    return serialize_compliance_report(report)


def _list_plans(
    request: Request, user_id: UUID, kind: PlanKind
) -> list[dict[str, object]]:
    plans = _container(request).plan_service.list_plans(user_id, kind)
    return [serialize_plan(plan) for plan in plans]


def _update_plan(
    request: Request,
    kind: PlanKind,
    plan_id: UUID,
    body: DietPlanUpdate | ExercisePlanUpdate,
    items: list[PlanItem] | None,
) -> dict[str, object]:
    plan = _container(request).plan_service.update_plan(
        user_id=body.user_id,
        kind=kind,
        plan_id=plan_id,
        name=body.plan_name,
        description=body.description,
        items=items,
    )
    return serialize_plan(plan)


def _apply_plan(
    request: Request, kind: PlanKind, plan_id: UUID, body: ApplyPlanRequest
) -> dict[str, object]:
    result = _container(request).plan_service.apply_plan(
        user_id=body.user_id,
        kind=kind,
        plan_id=plan_id,
        start_date=body.start_date,
        overwrite_existing=body.overwrite_existing,
    )
    return serialize_apply_result(result)
