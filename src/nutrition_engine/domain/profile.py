"""Domain models for biometric profiles and calorie targets."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Sex(Enum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"


@dataclass(frozen=True)
class BiometricProfile:
    """Biometric inputs owned by the user record; fields may be unset."""

    sex: Sex | None = None
    birth_date: date | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: ActivityLevel | None = None


@dataclass(frozen=True)
class WeightGoal:
    """Target weight in pounds and the weeks allowed to reach it."""

    target_weight_lbs: float | None = None
    timeframe_weeks: int | None = None


@dataclass(frozen=True)
class EnergyEstimate:
    """Basal and total daily energy expenditure in kcal."""

    age: int
    bmr: float
    tdee: float


@dataclass(frozen=True)
class CalorieTargets:
    """Calorie targets resolved from a weight goal."""

    maintenance_calories: int
    suggested_calories: int
    weekly_weight_change: float
    total_weight_change: float


@dataclass(frozen=True)
class BmiReading:
    """Body mass index with its category label."""

    value: float
    category: str
