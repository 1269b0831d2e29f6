"""Plan compliance: reconcile planned entries against logged ones."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from uuid import UUID

from lifestyle_tracker.domain.compliance import (
    EMPTY_DAY_COMPLIANCE,
    ActualEntry,
    ComplianceDetail,
    ComplianceReport,
    DailyCompliance,
    PlanEntry,
)
from lifestyle_tracker.domain.errors import InvalidRangeError
from lifestyle_tracker.domain.lifestyle import (
    DietLog,
    EntryKind,
    ExerciseLog,
    PlanKind,
)
from lifestyle_tracker.services.logs import WEEK_DAYS, LogService
from lifestyle_tracker.services.plans import PlanService, expand_plan_entries

_logger = logging.getLogger(__name__)

MAX_PERIOD_DAYS = 366


def aggregate_compliance(
    plan_id: str,
    planned: list[PlanEntry],
    actual: list[ActualEntry],
    start_date: date,
    end_date: date,
) -> ComplianceReport:
    """Compute per-day and overall compliance for an inclusive period.

    Each planned entry is matched to at most one logged entry from the same
    day with the same kind and exactly equal description; a logged entry is
    consumed by the first planned entry it satisfies. Entries dated outside
    the period are ignored, as are logged entries no plan entry asked for.
    """
    if start_date > end_date:
        raise InvalidRangeError(f"startDate {start_date} is after endDate {end_date}")

    planned_by_day: dict[date, list[PlanEntry]] = defaultdict(list)
    for entry in planned:
        if start_date <= entry.date <= end_date:
            planned_by_day[entry.date].append(entry)
    actual_by_day: dict[date, list[ActualEntry]] = defaultdict(list)
    for entry in actual:
        if start_date <= entry.day <= end_date:
            actual_by_day[entry.day].append(entry)

    daily: list[DailyCompliance] = []
    total_planned = 0
    total_matched = 0
    for offset in range((end_date - start_date).days + 1):
        day = start_date + timedelta(days=offset)
        row = _aggregate_day(day, planned_by_day[day], actual_by_day[day])
        total_planned += row.planned
        total_matched += row.matched
        daily.append(row)

    return ComplianceReport(
        plan_id=plan_id,
        start_date=start_date,
        end_date=end_date,
        overall_compliance=_ratio(total_matched, total_planned),
        daily_breakdown=daily,
    )


def _aggregate_day(
    day: date, planned: list[PlanEntry], actual: list[ActualEntry]
) -> DailyCompliance:
    pool = list(actual)
    details = []
    for entry in planned:
        candidate = _take_match(entry, pool)
        details.append(
            ComplianceDetail(
                planned=entry, actual=candidate, matched=candidate is not None
            )
        )
    matched = sum(1 for detail in details if detail.matched)
    return DailyCompliance(
        date=day,
        planned=len(planned),
        actual=len(actual),
        matched=matched,
        compliance=_ratio(matched, len(planned)),
        details=details,
    )


def _take_match(entry: PlanEntry, pool: list[ActualEntry]) -> ActualEntry | None:
    for index, candidate in enumerate(pool):
        if candidate.kind == entry.kind and candidate.description == entry.description:
            return pool.pop(index)
    return None


def _ratio(matched: int, planned: int) -> float:
    if planned == 0:
        return EMPTY_DAY_COMPLIANCE
    return matched / planned


def resolve_period(
    start_date: date | None, end_date: date | None, today: date
) -> tuple[date, date]:
    """Fill in a missing bound of a requested period.

    With neither bound the period is the Monday-to-Sunday week containing
    ``today``; with one bound it spans 7 days from that bound. Periods
    longer than ``MAX_PERIOD_DAYS`` are rejected.
    """
    try:
        if start_date is None and end_date is None:
            start_date = today - timedelta(days=today.weekday())
            end_date = start_date + timedelta(days=WEEK_DAYS - 1)
        elif start_date is None:
            start_date = end_date - timedelta(days=WEEK_DAYS - 1)
        elif end_date is None:
            end_date = start_date + timedelta(days=WEEK_DAYS - 1)
    except OverflowError as exc:
        raise InvalidRangeError("Period falls outside the supported dates") from exc
    if start_date > end_date:
        raise InvalidRangeError(f"startDate {start_date} is after endDate {end_date}")
    if (end_date - start_date).days + 1 > MAX_PERIOD_DAYS:
        raise InvalidRangeError(f"Period is longer than {MAX_PERIOD_DAYS} days")
    return start_date, end_date


@dataclass
class ComplianceService:
    """Builds compliance reports for stored plans."""

    plan_service: PlanService
    log_service: LogService

    def get_plan_compliance(  # noqa: PLR0913
        self,
        user_id: UUID,
        kind: PlanKind,
        plan_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
        today: date | None = None,
    ) -> ComplianceReport:
        """Return the compliance report of a user's plan over a period."""
        plan = self.plan_service.get_plan(user_id, kind, plan_id)
        start, end = resolve_period(
            start_date, end_date, today or datetime.now(tz=UTC).date()
        )
        planned = expand_plan_entries(plan, start, end)
        actual = self._actual_entries(user_id, kind, start, end)
        report = aggregate_compliance(str(plan.id), planned, actual, start, end)
        _logger.info(
            "Plan compliance: plan_id=%s period=%s..%s planned=%s overall=%.2f",
            plan.id,
            start,
            end,
            len(planned),
            report.overall_compliance,
        )
        return report

    def _actual_entries(
        self, user_id: UUID, kind: PlanKind, start: date, end: date
    ) -> list[ActualEntry]:
        match kind:
            case PlanKind.DIET:
                return [
                    _diet_entry(log)
                    for log in self.log_service.list_diet_logs_between(
                        user_id, start, end
                    )
                ]
            case PlanKind.EXERCISE:
                return [
                    _exercise_entry(log)
                    for log in self.log_service.list_exercise_logs_between(
                        user_id, start, end
                    )
                ]


def _diet_entry(log: DietLog) -> ActualEntry:
    return ActualEntry(
        logged_at=log.logged_at,
        kind=EntryKind.MEAL,
        description=log.description,
        meal_type=log.meal_type,
        calories=log.calories,
    )


def _exercise_entry(log: ExerciseLog) -> ActualEntry:
    return ActualEntry(
        logged_at=log.logged_at,
        kind=EntryKind.ACTIVITY,
        description=log.description,
        activity_type=log.activity_type,
        calories_burned=log.calories_burned,
        duration_minutes=log.duration_minutes,
    )
