"""Recommended daily values and nutrient status levels."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class NutrientStatus(Enum):
    """Status of a nutrient amount relative to its recommended value."""

    DEFICIENT = "deficient"
    ON_TRACK = "on_track"
    GOOD = "good"
    WARNING = "warning"
    OVER_LIMIT = "over_limit"


@dataclass(frozen=True)
class RecommendedValueEntry:
    """Reference target for one nutrient.

    Upper-limit nutrients (sodium, sugar, saturated and trans fat,
    cholesterol) are better kept under the target; all others should reach it.
    """

    nutrient_key: str
    target: float
    unit: str
    is_upper_limit: bool = False


def _entries(*entries: RecommendedValueEntry) -> MappingProxyType:
    return MappingProxyType({entry.nutrient_key: entry for entry in entries})


# Adult reference values for a 2000 kcal diet.
RECOMMENDED_DAILY_VALUES: MappingProxyType = _entries(
    RecommendedValueEntry("calories", 2000, "kcal"),
    RecommendedValueEntry("protein", 50, "g"),
    RecommendedValueEntry("carbs", 300, "g"),
    RecommendedValueEntry("fat", 67, "g"),
    RecommendedValueEntry("fiber", 25, "g"),
    RecommendedValueEntry("sugar", 50, "g", is_upper_limit=True),
    RecommendedValueEntry("saturated_fat", 22, "g", is_upper_limit=True),
    RecommendedValueEntry("monounsaturated_fat", 0, "g"),
    RecommendedValueEntry("polyunsaturated_fat", 0, "g"),
    RecommendedValueEntry("trans_fat", 0, "g", is_upper_limit=True),
    RecommendedValueEntry("omega3", 1600, "mg"),
    RecommendedValueEntry("omega6", 0, "mg"),
    RecommendedValueEntry("sodium", 2300, "mg", is_upper_limit=True),
    RecommendedValueEntry("potassium", 3500, "mg"),
    RecommendedValueEntry("calcium", 1000, "mg"),
    RecommendedValueEntry("magnesium", 400, "mg"),
    RecommendedValueEntry("phosphorus", 700, "mg"),
    RecommendedValueEntry("iron", 8, "mg"),
    RecommendedValueEntry("zinc", 11, "mg"),
    RecommendedValueEntry("selenium", 55, "mcg"),
    RecommendedValueEntry("vitamin_a", 900, "mcg"),
    RecommendedValueEntry("vitamin_c", 90, "mg"),
    RecommendedValueEntry("vitamin_d", 15, "mcg"),
    RecommendedValueEntry("vitamin_e", 15, "mg"),
    RecommendedValueEntry("vitamin_k", 120, "mcg"),
    RecommendedValueEntry("thiamin", 1.2, "mg"),
    RecommendedValueEntry("riboflavin", 1.3, "mg"),
    RecommendedValueEntry("niacin", 16, "mg"),
    RecommendedValueEntry("vitamin_b6", 1.3, "mg"),
    RecommendedValueEntry("folate", 400, "mcg"),
    RecommendedValueEntry("vitamin_b12", 2.4, "mcg"),
    RecommendedValueEntry("biotin", 30, "mcg"),
    RecommendedValueEntry("pantothenic_acid", 5, "mg"),
    RecommendedValueEntry("cholesterol", 300, "mg", is_upper_limit=True),
    RecommendedValueEntry("creatine", 3, "g"),
)
