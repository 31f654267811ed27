"""Food log calculations for the logging surface."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrition_engine.domain.food_log import LoggedItem, MealSlot
from nutrition_engine.domain.nutrients import NutrientProfile
from nutrition_engine.engine.aggregation import aggregate, aggregate_by_meal
from nutrition_engine.engine.rescaling import rescale, rescale_by_multiplier
from nutrition_engine.errors import InvalidQuantityError

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Storage interface for logged food items."""

    def list_items(self, user_id: UUID, day: date) -> list[LoggedItem]:
        """Return items logged on a day."""

    def get_item(self, item_id: str) -> LoggedItem | None:
        """Return a logged item by id."""

    def replace_item(self, item: LoggedItem) -> None:
        """Store an item in place of the one with the same id."""


@dataclass
class FoodLogService:
    """Service that totals and edits a day's food log."""

    repository: FoodLogRepository

    def day_totals(self, user_id: UUID, day: date) -> NutrientProfile:
        """Return nutrient totals for the day."""
        return aggregate(self.repository.list_items(user_id, day))

    def meal_totals(self, user_id: UUID, day: date) -> dict[MealSlot, NutrientProfile]:
        """Return nutrient totals per meal slot for the day."""
        return aggregate_by_meal(self.repository.list_items(user_id, day))

    def change_quantity(self, item_id: str, quantity: float) -> LoggedItem | None:
        """Rescale an item to a new quantity and store it.

        The stored item is left untouched when the quantity is invalid.
        """
        item = self.repository.get_item(item_id)
        if item is None:
            return None
        try:
            updated = rescale(item, quantity)
        except InvalidQuantityError:
            _logger.warning("Rejected quantity %r for item %s", quantity, item_id)
            raise
        if updated is not item:
            self.repository.replace_item(updated)
        return updated

    def apply_multiplier(self, item_id: str, multiplier: float) -> LoggedItem | None:
        """Multiply an item's portion (for example 0.5x or 2x) and store it."""
        item = self.repository.get_item(item_id)
        if item is None:
            return None
        try:
            updated = rescale_by_multiplier(item, multiplier)
        except InvalidQuantityError:
            _logger.warning("Rejected multiplier %r for item %s", multiplier, item_id)
            raise
        if updated is not item:
            self.repository.replace_item(updated)
        return updated
