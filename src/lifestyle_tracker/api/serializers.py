"""JSON serialization for lifestyle API responses."""

from lifestyle_tracker.domain.compliance import (
    ActualEntry,
    ComplianceDetail,
    ComplianceReport,
    DailyCompliance,
    PlanEntry,
)
from lifestyle_tracker.domain.lifestyle import (
    ApplyResult,
    DailySummary,
    DietLog,
    EntryKind,
    ExerciseLog,
    LifestylePlan,
    PlanItem,
    PlanKind,
    WeeklySummary,
)


def serialize_diet_log(log: DietLog) -> dict[str, object]:
    """Serialize a diet log."""
    return {
        "id": str(log.id),
        "mealType": log.meal_type.value,
        "description": log.description,
        "calories": log.calories,
        "notes": log.notes,
        "timestamp": log.logged_at.isoformat(),
        "userId": str(log.user_id),
    }


def serialize_exercise_log(log: ExerciseLog) -> dict[str, object]:
    """Serialize an exercise log."""
    return {
        "id": str(log.id),
        "activityType": log.activity_type.value,
        "description": log.description,
        "durationMinutes": log.duration_minutes,
        "caloriesBurned": log.calories_burned,
        "intensity": log.intensity.value if log.intensity else None,
        "notes": log.notes,
        "timestamp": log.logged_at.isoformat(),
        "userId": str(log.user_id),
    }


def serialize_daily_summary(summary: DailySummary) -> dict[str, object]:
    """Serialize a daily summary."""
    return {
        "date": summary.day.isoformat(),
        "caloriesIn": summary.calories_in,
        "caloriesOut": summary.calories_out,
        "netCalories": summary.net_calories,
        "exerciseMinutes": summary.exercise_minutes,
        "mealCount": summary.meal_count,
        "workoutCount": summary.workout_count,
    }


def serialize_weekly_summary(summary: WeeklySummary) -> dict[str, object]:
    """Serialize a weekly summary."""
    return {
        "weekStart": summary.week_start.isoformat(),
        "weekEnd": summary.week_end.isoformat(),
        "totalCaloriesIn": summary.total_calories_in,
        "totalCaloriesOut": summary.total_calories_out,
        "avgCaloriesPerDay": summary.avg_calories_per_day,
        "totalExerciseMinutes": summary.total_exercise_minutes,
        "avgExercisePerDay": summary.avg_exercise_per_day,
    }


def serialize_plan(plan: LifestylePlan) -> dict[str, object]:
    """Serialize a weekly plan with its items."""
    return {
        "id": str(plan.id),
        "userId": str(plan.user_id),
        "kind": plan.kind.value,
        "planName": plan.name,
        "description": plan.description,
        "items": [_serialize_plan_item(plan.kind, item) for item in plan.items],
        "createdAt": plan.created_at.isoformat() if plan.created_at else None,
    }


def _serialize_plan_item(kind: PlanKind, item: PlanItem) -> dict[str, object]:
    payload: dict[str, object] = {
        "dayOfWeek": item.day_of_week,
        "description": item.description,
    }
    match kind:
        case PlanKind.DIET:
            payload["mealType"] = item.meal_type.value if item.meal_type else None
            payload["calories"] = item.calories
        case PlanKind.EXERCISE:
            payload["activityType"] = (
                item.activity_type.value if item.activity_type else None
            )
            payload["durationMinutes"] = item.duration_minutes
            payload["caloriesBurned"] = item.calories_burned
            payload["intensity"] = item.intensity.value if item.intensity else None
    payload["notes"] = item.notes
    return payload


def serialize_apply_result(result: ApplyResult) -> dict[str, object]:
    """Serialize the outcome of applying a plan."""
    return {
        "created": result.created,
        "skipped": result.skipped,
        "deleted": result.deleted,
    }


def serialize_compliance_report(report: ComplianceReport) -> dict[str, object]:
    """Serialize a compliance report."""
    return {
        "planId": report.plan_id,
        "period": {
            "startDate": report.start_date.isoformat(),
            "endDate": report.end_date.isoformat(),
        },
        "overallCompliance": report.overall_compliance,
        "dailyBreakdown": [_serialize_day(day) for day in report.daily_breakdown],
    }


def _serialize_day(day: DailyCompliance) -> dict[str, object]:
    return {
        "date": day.date.isoformat(),
        "planned": day.planned,
        "actual": day.actual,
        "matched": day.matched,
        "compliance": day.compliance,
        "details": [_serialize_detail(detail) for detail in day.details],
    }


def _serialize_detail(detail: ComplianceDetail) -> dict[str, object]:
    return {
        "planned": _serialize_entry(detail.planned),
        "actual": _serialize_entry(detail.actual) if detail.actual else None,
        "matched": detail.matched,
    }


def _serialize_entry(entry: PlanEntry | ActualEntry) -> dict[str, object]:
    match entry.kind:
        case EntryKind.MEAL:
            return {
                "mealType": entry.meal_type.value if entry.meal_type else None,
                "description": entry.description,
                "calories": entry.calories,
            }
        case EntryKind.ACTIVITY:
            return {
                "activityType": (
                    entry.activity_type.value if entry.activity_type else None
                ),
                "description": entry.description,
                "caloriesBurned": entry.calories_burned,
                "durationMinutes": entry.duration_minutes,
            }
