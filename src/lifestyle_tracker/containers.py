"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from lifestyle_tracker.adapters.lifestyle_api_client import HttpxLifestyleApiClient
from lifestyle_tracker.adapters.supabase_diet_log_repository import (
    SupabaseDietLogRepository,
)
from lifestyle_tracker.adapters.supabase_exercise_log_repository import (
    SupabaseExerciseLogRepository,
)
from lifestyle_tracker.adapters.supabase_plan_repository import SupabasePlanRepository
from lifestyle_tracker.config import Settings
from lifestyle_tracker.services.compliance import ComplianceService
from lifestyle_tracker.services.logs import LogService
from lifestyle_tracker.services.plans import PlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    log_service: LogService
    plan_service: PlanService
    compliance_service: ComplianceService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    log_service = LogService(
        diet_repository=SupabaseDietLogRepository(supabase_client),
        exercise_repository=SupabaseExerciseLogRepository(supabase_client),
    )
    plan_service = PlanService(
        repository=SupabasePlanRepository(supabase_client),
        log_service=log_service,
    )
    compliance_service = ComplianceService(
        plan_service=plan_service,
        log_service=log_service,
    )

    return AppContainer(
        settings=resolved_settings,
        log_service=log_service,
        plan_service=plan_service,
        compliance_service=compliance_service,
    )


def build_api_client(settings: Settings | None = None) -> HttpxLifestyleApiClient:
    """Create an API client pointed at the configured base URL."""
    resolved_settings = settings or Settings()
    return HttpxLifestyleApiClient.create(resolved_settings.api_base_url)
