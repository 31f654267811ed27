"""Goal-based daily calorie targets."""

import math

from nutrition_engine.domain.profile import CalorieTargets, Sex
from nutrition_engine.engine.rounding import round_whole

CALORIES_PER_POUND = 3500
DAYS_PER_WEEK = 7
MAX_WEEKLY_CHANGE_LBS = 2.0
MIN_TIMEFRAME_WEEKS = 1
MAX_TIMEFRAME_WEEKS = 52

MINIMUM_CALORIES: dict[Sex, int] = {
    Sex.MALE: 1500,
    Sex.FEMALE: 1200,
}


def resolve_goal_calories(
    tdee: float | None,
    current_weight_lbs: float | None,
    goal_weight_lbs: float | None,
    timeframe_weeks: int | None,
    sex: Sex | None,
) -> CalorieTargets | None:
    """Resolve a safe daily calorie target for a weight goal.

    Returns None when any input is missing or the timeframe is outside
    1-52 weeks. The weekly pace is capped at 2 lbs in either direction and
    the result never drops below the sex-specific minimum.
    """
    if (
        tdee is None
        or current_weight_lbs is None
        or goal_weight_lbs is None
        or timeframe_weeks is None
        or sex is None
    ):
        return None
    if not MIN_TIMEFRAME_WEEKS <= timeframe_weeks <= MAX_TIMEFRAME_WEEKS:
        return None

    # Positive for weight loss, negative for gain.
    weekly_change = (current_weight_lbs - goal_weight_lbs) / timeframe_weeks
    safe_weekly_change = math.copysign(
        min(abs(weekly_change), MAX_WEEKLY_CHANGE_LBS), weekly_change
    )
    if weekly_change == 0:
        safe_weekly_change = 0.0

    daily_adjustment = safe_weekly_change * CALORIES_PER_POUND / DAYS_PER_WEEK
    suggested = round_whole(tdee - daily_adjustment)

    return CalorieTargets(
        maintenance_calories=round_whole(tdee),
        suggested_calories=max(suggested, MINIMUM_CALORIES[sex]),
        weekly_weight_change=safe_weekly_change,
        total_weight_change=weekly_change * timeframe_weeks,
    )
