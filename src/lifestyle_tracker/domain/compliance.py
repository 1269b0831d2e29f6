"""Domain models for plan compliance reports."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from lifestyle_tracker.domain.lifestyle import ActivityType, EntryKind, MealType

EMPTY_DAY_COMPLIANCE = 1.0


@dataclass(frozen=True)
class PlanEntry:
    """A planned meal or activity on a calendar date."""

    date: date
    kind: EntryKind
    description: str
    meal_type: MealType | None = None
    calories: int | None = None
    activity_type: ActivityType | None = None
    calories_burned: int | None = None
    duration_minutes: int | None = None


@dataclass(frozen=True)
class ActualEntry:
    """A logged meal or activity."""

    logged_at: datetime
    kind: EntryKind
    description: str
    meal_type: MealType | None = None
    calories: int | None = None
    activity_type: ActivityType | None = None
    calories_burned: int | None = None
    duration_minutes: int | None = None

    @property
    def day(self) -> date:
        """UTC calendar date the entry was logged on."""
        if self.logged_at.tzinfo is None:
            return self.logged_at.date()
        return self.logged_at.astimezone(UTC).date()


@dataclass(frozen=True)
class ComplianceDetail:
    """A planned entry paired with the logged entry that satisfied it."""

    planned: PlanEntry
    actual: ActualEntry | None
    matched: bool


@dataclass(frozen=True)
class DailyCompliance:
    """Compliance counts for one calendar date."""

    date: date
    planned: int
    actual: int
    matched: int
    compliance: float
    details: list[ComplianceDetail]


@dataclass(frozen=True)
class ComplianceReport:
    """Compliance of a plan over an inclusive date range."""

    plan_id: str
    start_date: date
    end_date: date
    overall_compliance: float
    daily_breakdown: list[DailyCompliance]
