"""Domain models for logged food items."""

from dataclasses import dataclass, field
from enum import Enum

from nutrition_engine.domain.nutrients import NutrientProfile


class MealSlot(Enum):
    """Meal a logged item belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"


@dataclass(frozen=True)
class WeightConversion:
    """Display weights for a logged quantity."""

    grams: float = 0.0
    ounces: float = 0.0
    pounds: float = 0.0


@dataclass(frozen=True)
class LoggedItem:
    """A food logged for a day.

    Quantity and nutrients describe the same portion and only change together
    through the rescaler.
    """

    name: str
    quantity: float
    unit: str
    meal_slot: MealSlot
    nutrients: NutrientProfile = field(default_factory=NutrientProfile)
    weight_conversion: WeightConversion | None = None
    id: str | None = None
