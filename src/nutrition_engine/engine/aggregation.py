"""Nutrient totals across logged items."""

from collections.abc import Iterable, Mapping
from datetime import date

from nutrition_engine.domain.food_log import LoggedItem, MealSlot
from nutrition_engine.domain.nutrients import NutrientProfile
from nutrition_engine.domain.summaries import PeriodSummary


def aggregate(items: Iterable[LoggedItem]) -> NutrientProfile:
    """Sum nutrient profiles of all items; empty input yields zeros."""
    return NutrientProfile.total(item.nutrients for item in items)


def aggregate_by_meal(items: Iterable[LoggedItem]) -> dict[MealSlot, NutrientProfile]:
    """Return totals for every meal slot, including empty ones."""
    by_slot: dict[MealSlot, list[NutrientProfile]] = {slot: [] for slot in MealSlot}
    for item in items:
        by_slot[item.meal_slot].append(item.nutrients)
    return {slot: NutrientProfile.total(profiles) for slot, profiles in by_slot.items()}


def summarize_period(
    days: Mapping[date, Iterable[LoggedItem]], start: date | None = None
) -> PeriodSummary:
    """Summarize several days of logs.

    Averages are taken over days with at least one logged item.
    """
    logged: list[NutrientProfile] = []
    counts = {slot: 0 for slot in MealSlot}
    days_logged = 0
    for items in days.values():
        day_items = list(items)
        if not day_items:
            continue
        days_logged += 1
        for item in day_items:
            logged.append(item.nutrients)
            counts[item.meal_slot] += 1

    totals = NutrientProfile.total(logged)

    if days_logged:
        daily_average = totals.scaled(1.0 / days_logged)
    else:
        daily_average = NutrientProfile.zero()

    return PeriodSummary(
        start=start if start is not None else min(days, default=None),
        days=len(days),
        days_logged=days_logged,
        totals=totals,
        daily_average=daily_average,
        meal_slot_counts=counts,
    )
