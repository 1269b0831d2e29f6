"""Pydantic models for lifestyle API request bodies."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from lifestyle_tracker.domain.lifestyle import (
    ActivityType,
    Intensity,
    MealType,
    PlanItem,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class DietLogCreate(_CamelModel):
    """Diet log creation payload."""

    user_id: UUID = Field(alias="userId")
    meal_type: MealType = Field(alias="mealType")
    description: str = Field(min_length=1)
    calories: int = Field(ge=0)
    log_date: date = Field(alias="logDate")
    notes: str | None = None


class ExerciseLogCreate(_CamelModel):
    """Exercise log creation payload."""

    user_id: UUID = Field(alias="userId")
    activity_type: ActivityType = Field(alias="activityType")
    description: str = Field(min_length=1)
    duration_minutes: int = Field(ge=0, alias="durationMinutes")
    calories_burned: int = Field(ge=0, alias="caloriesBurned")
    log_date: date = Field(alias="logDate")
    intensity: Intensity | None = None
    notes: str | None = None


class DietPlanItemIn(_CamelModel):
    """One meal of a weekly diet plan."""

    day_of_week: int = Field(ge=0, le=6, alias="dayOfWeek")
    meal_type: MealType = Field(alias="mealType")
    description: str = Field(min_length=1)
    calories: int | None = Field(default=None, ge=0)
    notes: str | None = None

    def to_item(self) -> PlanItem:
        """Convert to a domain plan item."""
        return PlanItem(
            day_of_week=self.day_of_week,
            description=self.description,
            meal_type=self.meal_type,
            calories=self.calories,
            notes=self.notes,
        )


class ExercisePlanItemIn(_CamelModel):
    """One workout of a weekly exercise plan."""

    day_of_week: int = Field(ge=0, le=6, alias="dayOfWeek")
    activity_type: ActivityType = Field(alias="activityType")
    description: str = Field(min_length=1)
    duration_minutes: int | None = Field(default=None, ge=0, alias="durationMinutes")
    calories_burned: int | None = Field(default=None, ge=0, alias="caloriesBurned")
    intensity: Intensity | None = None
    notes: str | None = None

    def to_item(self) -> PlanItem:
        """Convert to a domain plan item."""
        return PlanItem(
            day_of_week=self.day_of_week,
            description=self.description,
            activity_type=self.activity_type,
            duration_minutes=self.duration_minutes,
            calories_burned=self.calories_burned,
            intensity=self.intensity,
            notes=self.notes,
        )


class DietPlanCreate(_CamelModel):
    """Diet plan creation payload."""

    user_id: UUID = Field(alias="userId")
    plan_name: str = Field(min_length=1, alias="planName")
    description: str | None = None
    items: list[DietPlanItemIn]


class DietPlanUpdate(_CamelModel):
    """Diet plan update payload; omitted fields are kept."""

    user_id: UUID = Field(alias="userId")
    plan_name: str | None = Field(default=None, min_length=1, alias="planName")
    description: str | None = None
    items: list[DietPlanItemIn] | None = None


class ExercisePlanCreate(_CamelModel):
    """Exercise plan creation payload."""

    user_id: UUID = Field(alias="userId")
    plan_name: str = Field(min_length=1, alias="planName")
    description: str | None = None
    items: list[ExercisePlanItemIn]


class ExercisePlanUpdate(_CamelModel):
    """Exercise plan update payload; omitted fields are kept."""

    user_id: UUID = Field(alias="userId")
    plan_name: str | None = Field(default=None, min_length=1, alias="planName")
    description: str | None = None
    items: list[ExercisePlanItemIn] | None = None


class ApplyPlanRequest(_CamelModel):
    """Payload for materialising a plan into a week of logs."""

    user_id: UUID = Field(alias="userId")
    start_date: date = Field(alias="startDate")
    overwrite_existing: bool = Field(default=False, alias="overwriteExisting")
