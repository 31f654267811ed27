"""Tests for nutrient aggregation."""

from datetime import date
from itertools import permutations

from nutrition_engine.domain.food_log import MealSlot
from nutrition_engine.domain.nutrients import NUTRIENT_KEYS, NutrientProfile
from nutrition_engine.engine.aggregation import (
    aggregate,
    aggregate_by_meal,
    summarize_period,
)
from tests.conftest import make_item


def _sample_items():
    return [
        make_item("Eggs", meal_slot=MealSlot.BREAKFAST, calories=140, protein=12.5),
        make_item(
            "Salad", meal_slot=MealSlot.LUNCH, calories=80.25, fiber=4, sodium=300
        ),
        make_item("Salmon", meal_slot=MealSlot.DINNER, calories=412, omega3=1750.5),
        make_item("Almonds", meal_slot=MealSlot.SNACKS, calories=164, fat=14.25),
    ]


def test_empty_input_yields_zero_profile() -> None:
    total = aggregate([])

    assert total == NutrientProfile.zero()
    assert set(total.as_dict()) == set(NUTRIENT_KEYS)


def test_aggregate_sums_every_nutrient() -> None:
    total = aggregate(_sample_items())

    assert total.calories == 796.25
    assert total.protein == 12.5
    assert total.sodium == 300
    assert total.omega3 == 1750.5
    assert total.vitamin_c == 0


def test_aggregate_is_order_independent() -> None:
    items = _sample_items()
    expected = aggregate(items)

    for ordering in permutations(items):
        assert aggregate(ordering) == expected


def test_aggregate_accepts_generators() -> None:
    items = _sample_items()

    assert aggregate(item for item in items) == aggregate(items)


def test_meal_totals_cover_every_slot() -> None:
    items = _sample_items()[:2]

    totals = aggregate_by_meal(items)

    assert set(totals) == set(MealSlot)
    assert totals[MealSlot.BREAKFAST].calories == 140
    assert totals[MealSlot.DINNER] == NutrientProfile.zero()
    assert aggregate_by_meal([])[MealSlot.SNACKS] == NutrientProfile.zero()


def test_meal_totals_add_up_to_day_total() -> None:
    items = _sample_items()

    by_meal = aggregate_by_meal(items)
    combined = NutrientProfile.zero()
    for profile in by_meal.values():
        combined = combined + profile

    assert combined == aggregate(items)


def test_period_summary_averages_over_logged_days() -> None:
    items = _sample_items()
    days = {
        date(2024, 3, 4): items[:2],
        date(2024, 3, 5): [],
        date(2024, 3, 6): items[2:],
    }

    summary = summarize_period(days)

    assert summary.start == date(2024, 3, 4)
    assert summary.days == 3
    assert summary.days_logged == 2
    assert summary.totals.calories == 796.25
    assert summary.daily_average.calories == 398.125
    assert summary.meal_slot_counts[MealSlot.LUNCH] == 1
    assert summary.meal_slot_counts[MealSlot.SNACKS] == 1


def test_period_summary_without_logs() -> None:
    summary = summarize_period({})

    assert summary.start is None
    assert summary.days_logged == 0
    assert summary.daily_average == NutrientProfile.zero()


def _decimal_items():
    return [
        make_item("Tea", meal_slot=MealSlot.SNACKS, protein=0.1, sodium=0.7),
        make_item("Rice", meal_slot=MealSlot.SNACKS, protein=0.2, sodium=1.1),
        make_item("Broth", meal_slot=MealSlot.SNACKS, protein=0.3, sodium=2.3),
        make_item("Apple", meal_slot=MealSlot.SNACKS, protein=0.3, sodium=0.1),
    ]


def test_decimal_amounts_total_the_same_in_any_order() -> None:
    items = _decimal_items()

    totals = {aggregate(ordering) for ordering in permutations(items)}

    assert len(totals) == 1
    assert totals.pop().protein == 0.9


def test_meal_totals_with_decimal_amounts_ignore_order() -> None:
    items = _decimal_items()

    snacks = {
        aggregate_by_meal(ordering)[MealSlot.SNACKS]
        for ordering in permutations(items)
    }

    assert snacks == {aggregate(items)}


def test_period_totals_with_decimal_amounts_ignore_order() -> None:
    items = _decimal_items()
    day_one, day_two = date(2024, 3, 4), date(2024, 3, 5)

    totals = set()
    for ordering in permutations(items):
        days = {day_one: list(ordering[:2]), day_two: list(ordering[2:])}
        totals.add(summarize_period(days).totals)
        reversed_days = {day_two: list(ordering[2:]), day_one: list(ordering[:2])}
        totals.add(summarize_period(reversed_days).totals)

    assert totals == {aggregate(items)}
