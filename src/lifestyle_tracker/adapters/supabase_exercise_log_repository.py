"""Supabase repository for exercise logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from lifestyle_tracker.domain.lifestyle import ActivityType, ExerciseLog, Intensity
from lifestyle_tracker.services.logs import ExerciseLogRepository

_COLUMNS = (
    "id, user_id, exercise_type, description, duration_minutes, "
    "calories_burned, intensity, logged_at, notes"
)


@dataclass
class SupabaseExerciseLogRepository(ExerciseLogRepository):
    """Supabase implementation for exercise log persistence."""

    client: Client

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        activity_type: ActivityType,
        description: str,
        duration_minutes: int,
        calories_burned: int,
        logged_at: datetime,
        intensity: Intensity | None,
        notes: str | None,
    ) -> ExerciseLog:
        """Insert an exercise log row and return it."""
        response = (
            self.client.table("exercise_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "exercise_type": activity_type.value,
                    "description": description,
                    "duration_minutes": duration_minutes,
                    "calories_burned": calories_burned,
                    "intensity": intensity.value if intensity else None,
                    "logged_at": logged_at.isoformat(),
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise log in Supabase")
        return _parse_row(response.data[0])

    def get_log(self, log_id: UUID) -> ExerciseLog | None:
        """Return an exercise log by id."""
        response = (
            self.client.table("exercise_logs")
            .select(_COLUMNS)
            .eq("id", str(log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[ExerciseLog]:
        """Return exercise logs in the time range, oldest first."""
        response = (
            self.client.table("exercise_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_log(self, log_id: UUID) -> None:
        """Delete an exercise log row."""
        self.client.table("exercise_logs").delete().eq("id", str(log_id)).execute()


def _parse_row(row: dict[str, object]) -> ExerciseLog:
    intensity_raw = row.get("intensity")
    return ExerciseLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        activity_type=ActivityType(str(row["exercise_type"])),
        description=str(row.get("description") or ""),
        duration_minutes=int(row.get("duration_minutes") or 0),
        calories_burned=int(row.get("calories_burned") or 0),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        intensity=Intensity(str(intensity_raw)) if intensity_raw else None,
        notes=row.get("notes"),
    )
