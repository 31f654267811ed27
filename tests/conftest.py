"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest

from nutrition_engine.config import Settings
from nutrition_engine.domain.food_log import LoggedItem, MealSlot, WeightConversion
from nutrition_engine.domain.nutrients import NutrientProfile
from nutrition_engine.domain.profile import BiometricProfile, WeightGoal
from nutrition_engine.services.food_log import FoodLogRepository
from nutrition_engine.services.profile import ProfileRepository


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, BiometricProfile] = field(default_factory=dict)
    goals: dict[UUID, WeightGoal] = field(default_factory=dict)
    saved: list[tuple[UUID, float | None, float | None]] = field(default_factory=list)
    profile_reads: int = 0

    def get_profile(self, user_id: UUID) -> BiometricProfile | None:
        self.profile_reads += 1
        return self.profiles.get(user_id)

    def get_weight_goal(self, user_id: UUID) -> WeightGoal | None:
        return self.goals.get(user_id)

    def save_measurements(
        self, user_id: UUID, height_cm: float | None, weight_kg: float | None
    ) -> None:
        self.saved.append((user_id, height_cm, weight_kg))


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    days: dict[tuple[UUID, date], list[LoggedItem]] = field(default_factory=dict)
    replaced: list[LoggedItem] = field(default_factory=list)

    def add(self, user_id: UUID, day: date, item: LoggedItem) -> None:
        self.days.setdefault((user_id, day), []).append(item)

    def list_items(self, user_id: UUID, day: date) -> list[LoggedItem]:
        return list(self.days.get((user_id, day), []))

    def get_item(self, item_id: str) -> LoggedItem | None:
        for items in self.days.values():
            for item in items:
                if item.id == item_id:
                    return item
        return None

    def replace_item(self, item: LoggedItem) -> None:
        self.replaced.append(item)
        for items in self.days.values():
            for index, existing in enumerate(items):
                if existing.id == item.id:
                    items[index] = item


def make_item(
    name: str = "Oatmeal",
    quantity: float = 100,
    meal_slot: MealSlot = MealSlot.BREAKFAST,
    item_id: str | None = None,
    weight_conversion: WeightConversion | None = None,
    **nutrients: float,
) -> LoggedItem:
    """Build a logged item with the given nutrient amounts."""
    return LoggedItem(
        id=item_id,
        name=name,
        quantity=quantity,
        unit="g",
        meal_slot=meal_slot,
        nutrients=NutrientProfile(**nutrients),
        weight_conversion=weight_conversion,
    )


@pytest.fixture(autouse=True)
def _reset_engine_logger():
    yield
    logger = logging.getLogger("nutrition_engine")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_calorie_target=2000,
        log_level="INFO",
        debug=False,
        environment="test",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()
