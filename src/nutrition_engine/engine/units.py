"""Conversions between metric and US customary units."""

import logging
import math

from nutrition_engine.engine.rounding import round_whole
from nutrition_engine.errors import InvalidQuantityError, OutOfRangeError

CM_PER_INCH = 2.54
LBS_PER_KG = 2.20462
INCHES_PER_FOOT = 12

HEIGHT_RANGE_CM = (50.0, 300.0)
WEIGHT_RANGE_KG = (20.0, 500.0)

# Amount of the unit on the left that makes one of the unit on the right.
_UNIT_CONVERSIONS: dict[str, dict[str, float]] = {
    "g": {
        "kg": 1000,
        "oz": 28.35,
        "lb": 453.6,
        "cup": 240,
        "tbsp": 15,
        "tsp": 5,
    },
    "ml": {
        "l": 1000,
        "cup": 240,
        "fl oz": 29.57,
        "tbsp": 15,
        "tsp": 5,
    },
}

_logger = logging.getLogger(__name__)


def feet_inches_to_cm(
    feet: float | None, inches: float | None, *, validate: bool = True
) -> float | None:
    """Convert feet and inches to centimeters.

    Returns None when neither part is given. A missing part counts as 0.
    """
    feet_value = feet or 0
    inches_value = inches or 0
    if not feet_value and not inches_value:
        return None
    cm = (feet_value * INCHES_PER_FOOT + inches_value) * CM_PER_INCH
    if validate:
        validate_height_cm(cm)
    return cm


def cm_to_feet_inches(cm: float | None) -> tuple[int, int] | None:
    """Convert centimeters to whole feet and inches."""
    if not cm:
        return None
    total_inches = round_whole(cm / CM_PER_INCH)
    feet, inches = divmod(total_inches, INCHES_PER_FOOT)
    return feet, inches


def lbs_to_kg(lbs: float | None, *, validate: bool = True) -> float | None:
    """Convert pounds to kilograms at full precision."""
    if not lbs:
        return None
    kg = lbs / LBS_PER_KG
    if validate:
        validate_weight_kg(kg)
    return kg


def kg_to_lbs(kg: float | None) -> int | None:
    """Convert kilograms to whole pounds."""
    if not kg:
        return None
    return round_whole(kg * LBS_PER_KG)


def validate_height_cm(cm: float) -> float:
    """Raise OutOfRangeError unless the height is plausible."""
    low, high = HEIGHT_RANGE_CM
    if cm < low or cm > high:
        raise OutOfRangeError("height_cm", cm, low, high)
    return cm


def validate_weight_kg(kg: float) -> float:
    """Raise OutOfRangeError unless the weight is plausible."""
    low, high = WEIGHT_RANGE_KG
    if kg < low or kg > high:
        raise OutOfRangeError("weight_kg", kg, low, high)
    return kg


def quantity_conversion_factor(
    from_unit: str, to_unit: str, quantity: float, base_quantity: float
) -> float:
    """Return the ratio of a logged quantity to a reference quantity.

    ``quantity`` is in ``from_unit`` and ``base_quantity`` in ``to_unit``.
    Unknown unit pairs fall back to a 1:1 unit ratio.
    """
    if not math.isfinite(base_quantity) or base_quantity <= 0:
        raise InvalidQuantityError(base_quantity)
    source = from_unit.lower().strip()
    target = to_unit.lower().strip()
    if source == target:
        return quantity / base_quantity

    per_target = _UNIT_CONVERSIONS.get(target, {}).get(source)
    if per_target:
        return quantity / (base_quantity / per_target)

    per_source = _UNIT_CONVERSIONS.get(source, {}).get(target)
    if per_source:
        return quantity / (base_quantity * per_source)

    _logger.warning(
        "No conversion found from %s to %s, using 1:1 ratio", source, target
    )
    return quantity / base_quantity
