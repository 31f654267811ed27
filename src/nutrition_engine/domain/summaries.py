"""Derived summaries for display surfaces."""

from dataclasses import dataclass
from datetime import date

from nutrition_engine.domain.food_log import MealSlot
from nutrition_engine.domain.nutrients import NutrientProfile
from nutrition_engine.domain.reference import NutrientStatus, RecommendedValueEntry


@dataclass(frozen=True)
class NutrientProgress:
    """Progress of a current amount toward a target."""

    current: float
    target: float
    percent: float
    percent_capped: float
    over_percent: float
    remaining: float


@dataclass(frozen=True)
class NutrientReport:
    """Status and progress for one nutrient."""

    entry: RecommendedValueEntry
    current: float
    status: NutrientStatus
    progress: NutrientProgress


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregated nutrients over a range of days."""

    start: date | None
    days: int
    days_logged: int
    totals: NutrientProfile
    daily_average: NutrientProfile
    meal_slot_counts: dict[MealSlot, int]
