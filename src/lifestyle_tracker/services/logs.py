"""Diet and exercise logging service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID

from lifestyle_tracker.domain.errors import NotFoundError
from lifestyle_tracker.domain.lifestyle import (
    ActivityType,
    DailySummary,
    DietLog,
    ExerciseLog,
    Intensity,
    MealType,
    WeeklySummary,
)

WEEK_DAYS = 7


class DietLogRepository(Protocol):
    """Persistence interface for diet logs."""

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_type: MealType,
        description: str,
        calories: int,
        logged_at: datetime,
        notes: str | None,
    ) -> DietLog:
        """Create a diet log and return it."""

    def get_log(self, log_id: UUID) -> DietLog | None:
        """Return a diet log by id, if present."""

    def list_logs(self, user_id: UUID, start: datetime, end: datetime) -> list[DietLog]:
        """Return diet logs in ``[start, end)`` ordered by ``logged_at``."""

    def delete_log(self, log_id: UUID) -> None:
        """Delete a diet log."""


class ExerciseLogRepository(Protocol):
    """Persistence interface for exercise logs."""

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
        """Create an exercise log and return it."""

    def get_log(self, log_id: UUID) -> ExerciseLog | None:
        """Return an exercise log by id, if present."""

    def list_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[ExerciseLog]:
        """Return exercise logs in ``[start, end)`` ordered by ``logged_at``."""

    def delete_log(self, log_id: UUID) -> None:
        """Delete an exercise log."""


@dataclass
class LogService:
    """Service for diet and exercise logs and their summaries."""

    diet_repository: DietLogRepository
    exercise_repository: ExerciseLogRepository

    def create_diet_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_type: MealType,
        description: str,
        calories: int,
        log_date: date,
        notes: str | None = None,
    ) -> DietLog:
        """Persist a meal eaten on ``log_date``."""
        return self.diet_repository.create_log(
            user_id=user_id,
            meal_type=meal_type,
            description=description,
            calories=calories,
            logged_at=_start_of_day(log_date),
            notes=notes,
        )

    def list_diet_logs(self, user_id: UUID, day: date | None = None) -> list[DietLog]:
        """Return diet logs, newest first, optionally for a single day."""
        start, end = _bounds(day)
        logs = self.diet_repository.list_logs(user_id, start, end)
        return sorted(logs, key=lambda log: log.logged_at, reverse=True)

    def list_diet_logs_between(
        self, user_id: UUID, start_date: date, end_date: date
    ) -> list[DietLog]:
        """Return diet logs for an inclusive date range, oldest first."""
        return self.diet_repository.list_logs(
            user_id,
            _start_of_day(start_date),
            _end_of_day(end_date),
        )

    def remove_diet_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete a user's diet log."""
        log = self.diet_repository.get_log(log_id)
        if log is None or log.user_id != user_id:
            raise NotFoundError("Diet log not found")
        self.diet_repository.delete_log(log_id)

    def create_exercise_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        activity_type: ActivityType,
        description: str,
        duration_minutes: int,
        calories_burned: int,
        log_date: date,
        intensity: Intensity | None = None,
        notes: str | None = None,
    ) -> ExerciseLog:
        """Persist an activity performed on ``log_date``."""
        return self.exercise_repository.create_log(
            user_id=user_id,
            activity_type=activity_type,
            description=description,
            duration_minutes=duration_minutes,
            calories_burned=calories_burned,
            logged_at=_start_of_day(log_date),
            intensity=intensity,
            notes=notes,
        )

    def list_exercise_logs(
        self, user_id: UUID, day: date | None = None
    ) -> list[ExerciseLog]:
        """Return exercise logs, newest first, optionally for a single day."""
        start, end = _bounds(day)
        logs = self.exercise_repository.list_logs(user_id, start, end)
        return sorted(logs, key=lambda log: log.logged_at, reverse=True)

    def list_exercise_logs_between(
        self, user_id: UUID, start_date: date, end_date: date
    ) -> list[ExerciseLog]:
        """Return exercise logs for an inclusive date range, oldest first."""
        return self.exercise_repository.list_logs(
            user_id,
            _start_of_day(start_date),
            _end_of_day(end_date),
        )

    def remove_exercise_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete a user's exercise log."""
        log = self.exercise_repository.get_log(log_id)
        if log is None or log.user_id != user_id:
            raise NotFoundError("Exercise log not found")
        self.exercise_repository.delete_log(log_id)

    def get_daily_summary(self, user_id: UUID, day: date) -> DailySummary:
        """Return calorie and exercise totals for a day."""
        diet_logs = self.list_diet_logs_between(user_id, day, day)
        exercise_logs = self.list_exercise_logs_between(user_id, day, day)
        calories_in = sum(log.calories for log in diet_logs)
        calories_out = sum(log.calories_burned for log in exercise_logs)
        return DailySummary(
            day=day,
            calories_in=calories_in,
            calories_out=calories_out,
            net_calories=calories_in - calories_out,
            exercise_minutes=sum(log.duration_minutes for log in exercise_logs),
            meal_count=len(diet_logs),
            workout_count=len(exercise_logs),
        )

    def get_weekly_summary(
        self, user_id: UUID, today: date | None = None
    ) -> WeeklySummary:
        """Return totals and daily averages for the 7 days ending today."""
        week_end = today or datetime.now(tz=UTC).date()
        week_start = week_end - timedelta(days=WEEK_DAYS - 1)
        diet_logs = self.list_diet_logs_between(user_id, week_start, week_end)
        exercise_logs = self.list_exercise_logs_between(user_id, week_start, week_end)
        total_in = sum(log.calories for log in diet_logs)
        total_minutes = sum(log.duration_minutes for log in exercise_logs)
        return WeeklySummary(
            week_start=week_start,
            week_end=week_end,
            total_calories_in=total_in,
            total_calories_out=sum(log.calories_burned for log in exercise_logs),
            avg_calories_per_day=total_in / WEEK_DAYS,
            total_exercise_minutes=total_minutes,
            avg_exercise_per_day=total_minutes / WEEK_DAYS,
        )


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


def _end_of_day(day: date) -> datetime:
    if day == date.max:
        return datetime.max.replace(tzinfo=UTC)
    return _start_of_day(day + timedelta(days=1))


def _bounds(day: date | None) -> tuple[datetime, datetime]:
    if day is None:
        return datetime.min.replace(tzinfo=UTC), datetime.max.replace(tzinfo=UTC)
    return _start_of_day(day), _end_of_day(day)
