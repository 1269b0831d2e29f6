"""Supabase-backed lifestyle plan repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from lifestyle_tracker.domain.lifestyle import (
    ActivityType,
    Intensity,
    LifestylePlan,
    MealType,
    PlanItem,
    PlanKind,
)
from lifestyle_tracker.services.plans import PlanRepository

_COLUMNS = "id, user_id, kind, plan_name, description, items_json, created_at"


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase implementation for weekly plans."""

    client: Client

    def create_plan(
        self,
        user_id: UUID,
        kind: PlanKind,
        name: str,
        description: str | None,
        items: list[PlanItem],
    ) -> LifestylePlan:
        """Create a plan row and return it."""
        response = (
            self.client.table("lifestyle_plans")
            .insert(
                {
                    "user_id": str(user_id),
                    "kind": kind.value,
                    "plan_name": name,
                    "description": description,
                    "items_json": [_item_to_json(item) for item in items],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create plan")
        return _parse_row(response.data[0])

    def get_plan(self, plan_id: UUID) -> LifestylePlan | None:
        """Return a plan by id, if present."""
        response = (
            self.client.table("lifestyle_plans")
            .select(_COLUMNS)
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_plans(self, user_id: UUID, kind: PlanKind) -> list[LifestylePlan]:
        """Return a user's plans of one kind, newest first."""
        response = (
            self.client.table("lifestyle_plans")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("kind", kind.value)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def update_plan(
        self,
        plan_id: UUID,
        name: str,
        description: str | None,
        items: list[PlanItem],
    ) -> LifestylePlan:
        """Update plan fields and return the stored row."""
        response = (
            self.client.table("lifestyle_plans")
            .update(
                {
                    "plan_name": name,
                    "description": description,
                    "items_json": [_item_to_json(item) for item in items],
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(plan_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update plan")
        return _parse_row(response.data[0])

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete a plan row."""
        self.client.table("lifestyle_plans").delete().eq("id", str(plan_id)).execute()


def _item_to_json(item: PlanItem) -> dict[str, object]:
    return {
        "day_of_week": item.day_of_week,
        "description": item.description,
        "meal_type": item.meal_type.value if item.meal_type else None,
        "calories": item.calories,
        "activity_type": item.activity_type.value if item.activity_type else None,
        "duration_minutes": item.duration_minutes,
        "calories_burned": item.calories_burned,
        "intensity": item.intensity.value if item.intensity else None,
        "notes": item.notes,
    }


def _item_from_json(raw: dict[str, object]) -> PlanItem:
    meal_type = raw.get("meal_type")
    activity_type = raw.get("activity_type")
    intensity = raw.get("intensity")
    return PlanItem(
        day_of_week=int(raw.get("day_of_week") or 0),
        description=str(raw.get("description") or ""),
        meal_type=MealType(str(meal_type)) if meal_type else None,
        calories=_optional_int(raw.get("calories")),
        activity_type=ActivityType(str(activity_type)) if activity_type else None,
        duration_minutes=_optional_int(raw.get("duration_minutes")),
        calories_burned=_optional_int(raw.get("calories_burned")),
        intensity=Intensity(str(intensity)) if intensity else None,
        notes=raw.get("notes"),
    )


def _optional_int(value: object) -> int | None:
    if isinstance(value, int | float):
        return int(value)
    return None


def _parse_row(row: dict[str, object]) -> LifestylePlan:
    created_raw = row.get("created_at")
    items_raw = row.get("items_json") or []
    return LifestylePlan(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        kind=PlanKind(str(row["kind"])),
        name=str(row.get("plan_name") or ""),
        description=row.get("description"),
        items=[_item_from_json(item) for item in items_raw if isinstance(item, dict)],
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
