"""Domain models for diet and exercise tracking."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class MealType(str, Enum):
    """Meal slot for a diet log or plan item."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class ActivityType(str, Enum):
    """Kind of physical activity."""

    WALKING = "walking"
    RUNNING = "running"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    YOGA = "yoga"
    GYM = "gym"
    SPORTS = "sports"
    OTHER = "other"


class Intensity(str, Enum):
    """Perceived exercise intensity."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class EntryKind(str, Enum):
    """Kind of a planned or logged entry."""

    MEAL = "meal"
    ACTIVITY = "activity"


class PlanKind(str, Enum):
    """Kind of a lifestyle plan."""

    DIET = "diet"
    EXERCISE = "exercise"

    @property
    def entry_kind(self) -> EntryKind:
        """Return the entry kind produced by plans of this kind."""
        match self:
            case PlanKind.DIET:
                return EntryKind.MEAL
            case PlanKind.EXERCISE:
                return EntryKind.ACTIVITY


@dataclass(frozen=True)
class DietLog:
    """A logged meal."""

    id: UUID
    user_id: UUID
    meal_type: MealType
    description: str
    calories: int
    logged_at: datetime
    notes: str | None = None


@dataclass(frozen=True)
class ExerciseLog:
    """A logged activity."""

    id: UUID
    user_id: UUID
    activity_type: ActivityType
    description: str
    duration_minutes: int
    calories_burned: int
    logged_at: datetime
    intensity: Intensity | None = None
    notes: str | None = None


@dataclass(frozen=True)
class PlanItem:
    """One weekly template entry of a plan.

    ``day_of_week`` counts from Sunday (0) to Saturday (6). Diet items carry
    ``meal_type``/``calories``; exercise items carry ``activity_type``,
    ``duration_minutes``, ``calories_burned`` and ``intensity``.
    """

    day_of_week: int
    description: str
    meal_type: MealType | None = None
    calories: int | None = None
    activity_type: ActivityType | None = None
    duration_minutes: int | None = None
    calories_burned: int | None = None
    intensity: Intensity | None = None
    notes: str | None = None


@dataclass(frozen=True)
class LifestylePlan:
    """A named weekly diet or exercise plan owned by a user."""

    id: UUID
    user_id: UUID
    kind: PlanKind
    name: str
    description: str | None
    items: list[PlanItem]
    created_at: datetime | None = None


@dataclass(frozen=True)
class DailySummary:
    """Calorie and activity totals for one day."""

    day: date
    calories_in: int
    calories_out: int
    net_calories: int
    exercise_minutes: int
    meal_count: int
    workout_count: int


@dataclass(frozen=True)
class WeeklySummary:
    """Calorie and activity totals for a 7-day window."""

    week_start: date
    week_end: date
    total_calories_in: int
    total_calories_out: int
    avg_calories_per_day: float
    total_exercise_minutes: int
    avg_exercise_per_day: float


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of materialising a plan into logs."""

    created: int
    skipped: int
    deleted: int
