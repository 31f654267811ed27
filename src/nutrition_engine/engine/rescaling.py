"""Proportional rescaling of logged items."""

import math
from dataclasses import replace
from types import MappingProxyType

from nutrition_engine.domain.food_log import LoggedItem, WeightConversion
from nutrition_engine.domain.nutrients import NUTRIENT_KEYS, NutrientProfile
from nutrition_engine.engine.rounding import round_half_up
from nutrition_engine.errors import InvalidQuantityError

QUICK_MULTIPLIERS: tuple[float, ...] = (0.5, 1.5, 2.0)

QUANTITY_PRECISION = 1

_WHOLE = (
    "calories",
    "sodium",
    "potassium",
    "calcium",
    "magnesium",
    "phosphorus",
    "selenium",
    "vitamin_a",
    "vitamin_k",
    "folate",
    "biotin",
    "omega3",
    "omega6",
    "cholesterol",
)
_HUNDREDTHS = ("creatine",)

# Decimal places kept per nutrient after rescaling; everything else keeps one.
NUTRIENT_PRECISION: MappingProxyType = MappingProxyType(
    {
        key: 0 if key in _WHOLE else 2 if key in _HUNDREDTHS else 1
        for key in NUTRIENT_KEYS
    }
)

WEIGHT_CONVERSION_PRECISION: MappingProxyType = MappingProxyType(
    {"grams": 0, "ounces": 1, "pounds": 2}
)


def rescale(item: LoggedItem, new_quantity: float) -> LoggedItem:
    """Return a copy of item with nutrients scaled to new_quantity."""
    _require_positive(new_quantity)
    _require_positive(item.quantity)
    if new_quantity == item.quantity:
        return item
    return _apply_ratio(item, new_quantity / item.quantity, new_quantity)


def rescale_by_multiplier(item: LoggedItem, multiplier: float) -> LoggedItem:
    """Return a copy of item with quantity and nutrients multiplied."""
    _require_positive(multiplier)
    _require_positive(item.quantity)
    if multiplier == 1:
        return item
    return _apply_ratio(item, multiplier, item.quantity * multiplier)


def scale_nutrients(nutrients: NutrientProfile, ratio: float) -> NutrientProfile:
    """Scale a profile by ratio and round each nutrient to its precision."""
    return NutrientProfile(
        **{
            key: round_half_up(nutrients.get(key) * ratio, NUTRIENT_PRECISION[key])
            for key in NUTRIENT_KEYS
        }
    )


def _apply_ratio(item: LoggedItem, ratio: float, new_quantity: float) -> LoggedItem:
    weight_conversion = item.weight_conversion
    if weight_conversion is not None:
        weight_conversion = WeightConversion(
            **{
                name: round_half_up(getattr(weight_conversion, name) * ratio, digits)
                for name, digits in WEIGHT_CONVERSION_PRECISION.items()
            }
        )
    quantity = round_half_up(new_quantity, QUANTITY_PRECISION)
    if quantity <= 0:
        raise InvalidQuantityError(new_quantity)
    return replace(
        item,
        quantity=quantity,
        nutrients=scale_nutrients(item.nutrients, ratio),
        weight_conversion=weight_conversion,
    )


def _require_positive(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidQuantityError(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidQuantityError(value)
