"""Nutrient status classification against recommended values."""

from nutrition_engine.domain.reference import NutrientStatus, RecommendedValueEntry
from nutrition_engine.domain.summaries import NutrientProgress

UPPER_LIMIT_WARNING_RATIO = 0.8
LOWER_LIMIT_WARNING_RATIO = 0.7


def classify(current: float, target: float, is_upper_limit: bool) -> NutrientStatus:
    """Classify a nutrient amount against its target.

    Upper-limit nutrients are over limit only when strictly above the target.
    """
    if target == 0:
        return NutrientStatus.WARNING if current > 0 else NutrientStatus.ON_TRACK
    if is_upper_limit:
        if current > target:
            return NutrientStatus.OVER_LIMIT
        if current > target * UPPER_LIMIT_WARNING_RATIO:
            return NutrientStatus.WARNING
        return NutrientStatus.GOOD
    if current >= target:
        return NutrientStatus.GOOD
    if current >= target * LOWER_LIMIT_WARNING_RATIO:
        return NutrientStatus.WARNING
    return NutrientStatus.DEFICIENT


def classify_entry(current: float, entry: RecommendedValueEntry) -> NutrientStatus:
    """Classify against a recommended value table entry."""
    return classify(current, entry.target, entry.is_upper_limit)


def progress(current: float, target: float) -> NutrientProgress:
    """Return percent-to-goal figures; a zero target reports 0%."""
    if target > 0:
        percent = current / target * 100
        over_percent = (current - target) / target * 100 if current > target else 0.0
    else:
        percent = 0.0
        over_percent = 0.0
    return NutrientProgress(
        current=current,
        target=target,
        percent=percent,
        percent_capped=min(percent, 100.0),
        over_percent=over_percent,
        remaining=max(target - current, 0.0),
    )
