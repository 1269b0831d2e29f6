"""Supabase repository for diet logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from lifestyle_tracker.domain.lifestyle import DietLog, MealType
from lifestyle_tracker.services.logs import DietLogRepository

_COLUMNS = "id, user_id, meal_type, food_items, calories, logged_at, notes"


@dataclass
class SupabaseDietLogRepository(DietLogRepository):
    """Supabase implementation for diet log persistence."""

    client: Client

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_type: MealType,
        description: str,
        calories: int,
        logged_at: datetime,
        notes: str | None,
    ) -> DietLog:
        """Insert a diet log row and return it."""
        response = (
            self.client.table("diet_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "meal_type": meal_type.value,
                    "food_items": description,
                    "calories": calories,
                    "logged_at": logged_at.isoformat(),
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create diet log in Supabase")
        return _parse_row(response.data[0])

    def get_log(self, log_id: UUID) -> DietLog | None:
        """Return a diet log by id."""
        response = (
            self.client.table("diet_logs")
            .select(_COLUMNS)
            .eq("id", str(log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_logs(self, user_id: UUID, start: datetime, end: datetime) -> list[DietLog]:
        """Return diet logs in the time range, oldest first."""
        response = (
            self.client.table("diet_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_log(self, log_id: UUID) -> None:
        """Delete a diet log row."""
        self.client.table("diet_logs").delete().eq("id", str(log_id)).execute()


def _parse_row(row: dict[str, object]) -> DietLog:
    return DietLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        meal_type=MealType(str(row["meal_type"])),
        description=str(row.get("food_items") or ""),
        calories=int(row.get("calories") or 0),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        notes=row.get("notes"),
    )
