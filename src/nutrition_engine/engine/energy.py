"""Energy requirement estimation using evidence-based formulas.

Uses:
- Mifflin-St Jeor equation for Basal Metabolic Rate (BMR)
- Activity multipliers for Total Daily Energy Expenditure (TDEE)

Multipliers run from 1.15 (sedentary) to 1.75 (extra active).

References:
- Mifflin MD, St Jeor ST, et al. (1990). "A new predictive equation for
  resting energy expenditure in healthy individuals." Am J Clin Nutr.
"""

import math
from datetime import date

from nutrition_engine.domain.profile import (
    ActivityLevel,
    BiometricProfile,
    BmiReading,
    EnergyEstimate,
    Sex,
)
from nutrition_engine.engine.rounding import round_half_up
from nutrition_engine.errors import IncompleteProfileError

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.15,
    ActivityLevel.LIGHTLY_ACTIVE: 1.30,
    ActivityLevel.MODERATELY_ACTIVE: 1.45,
    ActivityLevel.VERY_ACTIVE: 1.60,
    ActivityLevel.EXTRA_ACTIVE: 1.75,
}

DAYS_PER_YEAR = 365.25

_REQUIRED_FIELDS = ("weight_kg", "height_cm", "birth_date", "sex", "activity_level")

_BMI_CATEGORIES = (
    (18.5, "Underweight"),
    (25.0, "Normal"),
    (30.0, "Overweight"),
)


def age_on(birth_date: date, as_of: date) -> int:
    """Return whole years elapsed between birth_date and as_of."""
    return math.floor((as_of - birth_date).days / DAYS_PER_YEAR)


def calculate_bmr(weight_kg: float, height_cm: float, age: int, sex: Sex) -> float:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161
    """
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex is Sex.MALE:
        bmr += 5
    else:
        bmr -= 161
    return bmr


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Calculate Total Daily Energy Expenditure.

    TDEE = BMR × activity multiplier
    """
    return bmr * ACTIVITY_MULTIPLIERS[activity_level]


def estimate_energy(profile: BiometricProfile, as_of: date) -> EnergyEstimate:
    """Estimate BMR and TDEE for a profile.

    Raises IncompleteProfileError naming every missing field.
    """
    missing = tuple(name for name in _REQUIRED_FIELDS if getattr(profile, name) is None)
    if missing:
        raise IncompleteProfileError(missing)
    age = age_on(profile.birth_date, as_of)
    bmr = calculate_bmr(profile.weight_kg, profile.height_cm, age, profile.sex)
    return EnergyEstimate(
        age=age,
        bmr=bmr,
        tdee=calculate_tdee(bmr, profile.activity_level),
    )


def calculate_bmi(
    height_cm: float | None, weight_kg: float | None
) -> BmiReading | None:
    """Return BMI rounded to one decimal, or None without height and weight."""
    if not height_cm or not weight_kg:
        return None
    height_m = height_cm / 100
    value = round_half_up(weight_kg / (height_m * height_m), 1)
    return BmiReading(value=value, category=bmi_category(value))


def bmi_category(bmi: float) -> str:
    """Return the category label for a BMI value."""
    for upper, label in _BMI_CATEGORIES:
        if bmi < upper:
            return label
    return "Obese"
