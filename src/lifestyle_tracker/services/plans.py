"""Weekly diet and exercise plan service."""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from lifestyle_tracker.domain.compliance import PlanEntry
from lifestyle_tracker.domain.errors import InvalidRangeError, NotFoundError
from lifestyle_tracker.domain.lifestyle import (
    ActivityType,
    ApplyResult,
    LifestylePlan,
    MealType,
    PlanItem,
    PlanKind,
)
from lifestyle_tracker.services.logs import WEEK_DAYS, LogService

_logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Persistence interface for lifestyle plans."""

    def create_plan(
        self,
        user_id: UUID,
        kind: PlanKind,
        name: str,
        description: str | None,
        items: list[PlanItem],
    ) -> LifestylePlan:
        """Create a plan and return it."""

    def get_plan(self, plan_id: UUID) -> LifestylePlan | None:
        """Return a plan by id, if present."""

    def list_plans(self, user_id: UUID, kind: PlanKind) -> list[LifestylePlan]:
        """Return a user's plans of one kind."""

    def update_plan(
        self,
        plan_id: UUID,
        name: str,
        description: str | None,
        items: list[PlanItem],
    ) -> LifestylePlan:
        """Replace a plan's name, description and items."""

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete a plan."""


@dataclass
class PlanService:
    """Application service for weekly plans."""

    repository: PlanRepository
    log_service: LogService

    def create_plan(
        self,
        user_id: UUID,
        kind: PlanKind,
        name: str,
        description: str | None,
        items: list[PlanItem],
    ) -> LifestylePlan:
        """Create a weekly plan for a user."""
        return self.repository.create_plan(user_id, kind, name, description, items)

    def list_plans(self, user_id: UUID, kind: PlanKind) -> list[LifestylePlan]:
        """Return a user's plans of one kind."""
        return self.repository.list_plans(user_id, kind)

    def get_plan(self, user_id: UUID, kind: PlanKind, plan_id: UUID) -> LifestylePlan:
        """Return a plan, raising ``NotFoundError`` unless the user owns it."""
        plan = self.repository.get_plan(plan_id)
        if plan is None or plan.user_id != user_id or plan.kind != kind:
            raise NotFoundError(f"{kind.value.capitalize()} plan not found")
        return plan

    def update_plan(  # noqa: PLR0913
        self,
        user_id: UUID,
        kind: PlanKind,
        plan_id: UUID,
        name: str | None = None,
        description: str | None = None,
        items: list[PlanItem] | None = None,
    ) -> LifestylePlan:
        """Update the fields that were provided."""
        plan = self.get_plan(user_id, kind, plan_id)
        return self.repository.update_plan(
            plan_id,
            name=name if name is not None else plan.name,
            description=description if description is not None else plan.description,
            items=items if items is not None else plan.items,
        )

    def delete_plan(self, user_id: UUID, kind: PlanKind, plan_id: UUID) -> None:
        """Delete a user's plan."""
        self.get_plan(user_id, kind, plan_id)
        self.repository.delete_plan(plan_id)

    def apply_plan(  # noqa: PLR0913
        self,
        user_id: UUID,
        kind: PlanKind,
        plan_id: UUID,
        start_date: date,
        overwrite_existing: bool = False,
    ) -> ApplyResult:
        """Create logs for the week starting at ``start_date`` from a plan.

        Without ``overwrite_existing`` an item is skipped when a log with the
        same description already exists on its date, so applying twice does
        not duplicate logs.
        """
        plan = self.get_plan(user_id, kind, plan_id)
        try:
            end_date = start_date + timedelta(days=WEEK_DAYS - 1)
        except OverflowError as exc:
            raise InvalidRangeError(
                "Plan week falls outside the supported dates"
            ) from exc
        existing = self._existing_logs(user_id, kind, start_date, end_date)

        deleted = 0
        if overwrite_existing:
            for log_id, _key in existing:
                self._remove_log(user_id, kind, log_id)
                deleted += 1
            existing = []
            _logger.info(
                "Cleared %s %s logs for plan_id=%s week=%s..%s before applying",
                deleted,
                kind.value,
                plan.id,
                start_date,
                end_date,
            )

        remaining = Counter(key for _log_id, key in existing)
        created = 0
        skipped = 0
        for day, item in _dated_items(plan, start_date, end_date):
            key = (day, item.description)
            if remaining[key] > 0:
                remaining[key] -= 1
                skipped += 1
                continue
            self._create_log(user_id, kind, day, item)
            created += 1
        return ApplyResult(created=created, skipped=skipped, deleted=deleted)

    def _existing_logs(
        self, user_id: UUID, kind: PlanKind, start_date: date, end_date: date
    ) -> list[tuple[UUID, tuple[date, str]]]:
        match kind:
            case PlanKind.DIET:
                logs = self.log_service.list_diet_logs_between(
                    user_id, start_date, end_date
                )
            case PlanKind.EXERCISE:
                logs = self.log_service.list_exercise_logs_between(
                    user_id, start_date, end_date
                )
        return [(log.id, (log.logged_at.date(), log.description)) for log in logs]

    def _remove_log(self, user_id: UUID, kind: PlanKind, log_id: UUID) -> None:
        match kind:
            case PlanKind.DIET:
                self.log_service.remove_diet_log(user_id, log_id)
            case PlanKind.EXERCISE:
                self.log_service.remove_exercise_log(user_id, log_id)

    def _create_log(
        self, user_id: UUID, kind: PlanKind, day: date, item: PlanItem
    ) -> None:
        match kind:
            case PlanKind.DIET:
                self.log_service.create_diet_log(
                    user_id=user_id,
                    meal_type=item.meal_type or MealType.SNACK,
                    description=item.description,
                    calories=item.calories or 0,
                    log_date=day,
                    notes=item.notes,
                )
            case PlanKind.EXERCISE:
                self.log_service.create_exercise_log(
                    user_id=user_id,
                    activity_type=item.activity_type or ActivityType.OTHER,
                    description=item.description,
                    duration_minutes=item.duration_minutes or 0,
                    calories_burned=item.calories_burned or 0,
                    log_date=day,
                    intensity=item.intensity,
                    notes=item.notes,
                )


def day_of_week(day: date) -> int:
    """Return the Sunday-based weekday index (Sunday = 0) for a date."""
    return (day.weekday() + 1) % WEEK_DAYS


def expand_plan_entries(
    plan: LifestylePlan, start_date: date, end_date: date
) -> list[PlanEntry]:
    """Turn a weekly plan template into dated entries for a date range."""
    entry_kind = plan.kind.entry_kind
    return [
        PlanEntry(
            date=day,
            kind=entry_kind,
            description=item.description,
            meal_type=item.meal_type,
            calories=item.calories,
            activity_type=item.activity_type,
            calories_burned=item.calories_burned,
            duration_minutes=item.duration_minutes,
        )
        for day, item in _dated_items(plan, start_date, end_date)
    ]


def _dated_items(
    plan: LifestylePlan, start_date: date, end_date: date
) -> list[tuple[date, PlanItem]]:
    dated: list[tuple[date, PlanItem]] = []
    for offset in range((end_date - start_date).days + 1):
        day = start_date + timedelta(days=offset)
        weekday = day_of_week(day)
        dated.extend((day, item) for item in plan.items if item.day_of_week == weekday)
    return dated
