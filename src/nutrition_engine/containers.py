"""Dependency container wiring for the engine services."""

from dataclasses import dataclass

from nutrition_engine.app_logging import configure_logging
from nutrition_engine.config import Settings
from nutrition_engine.services.food_log import FoodLogRepository, FoodLogService
from nutrition_engine.services.profile import ProfileRepository, ProfileService
from nutrition_engine.services.status import StatusService
from nutrition_engine.services.summary import SummaryService


@dataclass
class EngineContainer:
    """Holds the services used by each display surface."""

    settings: Settings
    profile_service: ProfileService
    food_log_service: FoodLogService
    status_service: StatusService
    summary_service: SummaryService


def build_container(
    profile_repository: ProfileRepository,
    food_log_repository: FoodLogRepository,
    settings: Settings | None = None,
) -> EngineContainer:
    """Create the default container around the storage collaborators."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings)
    return EngineContainer(
        settings=resolved_settings,
        profile_service=ProfileService(profile_repository, resolved_settings),
        food_log_service=FoodLogService(food_log_repository),
        status_service=StatusService(),
        summary_service=SummaryService(food_log_repository),
    )
