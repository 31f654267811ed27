"""Nutrient profile domain model."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, fields, replace


@dataclass(frozen=True)
class NutrientProfile:
    """Amounts for every tracked nutrient.

    Units are nutrient specific: kcal for calories; grams for macronutrients,
    fat subtypes and creatine; mg or mcg for minerals and vitamins (see the
    recommended daily value table). A nutrient that was not supplied is 0.
    """

    # Macronutrients
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0

    # Fat breakdown
    saturated_fat: float = 0.0
    monounsaturated_fat: float = 0.0
    polyunsaturated_fat: float = 0.0
    trans_fat: float = 0.0
    omega3: float = 0.0
    omega6: float = 0.0

    # Minerals
    sodium: float = 0.0
    potassium: float = 0.0
    calcium: float = 0.0
    magnesium: float = 0.0
    phosphorus: float = 0.0
    iron: float = 0.0
    zinc: float = 0.0
    selenium: float = 0.0

    # Vitamins
    vitamin_a: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    vitamin_e: float = 0.0
    vitamin_k: float = 0.0
    thiamin: float = 0.0
    riboflavin: float = 0.0
    niacin: float = 0.0
    vitamin_b6: float = 0.0
    folate: float = 0.0
    vitamin_b12: float = 0.0
    biotin: float = 0.0
    pantothenic_acid: float = 0.0

    # Other compounds
    cholesterol: float = 0.0
    creatine: float = 0.0

    def __post_init__(self) -> None:
        for key in NUTRIENT_KEYS:
            value = getattr(self, key)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Nutrient {key} must be a non-negative number")

    @classmethod
    def zero(cls) -> "NutrientProfile":
        """Return a profile with every nutrient at 0."""
        return cls()

    @classmethod
    def from_mapping(cls, values: Mapping[str, float | None]) -> "NutrientProfile":
        """Build a profile from a key mapping; unknown keys are ignored."""
        known = {
            key: float(value)
            for key, value in values.items()
            if key in _KEY_SET and value is not None
        }
        return cls(**known)

    @classmethod
    def total(cls, profiles: Iterable["NutrientProfile"]) -> "NutrientProfile":
        """Sum profiles key by key with math.fsum.

        The sums are correctly rounded, so the result does not depend on the
        order of profiles.
        """
        profiles = list(profiles)
        return cls(
            **{
                key: math.fsum(getattr(profile, key) for profile in profiles)
                for key in NUTRIENT_KEYS
            }
        )

    def get(self, key: str) -> float:
        """Return the amount for a nutrient key."""
        if key not in _KEY_SET:
            raise KeyError(key)
        return getattr(self, key)

    def as_dict(self) -> dict[str, float]:
        """Return the amounts keyed by nutrient, in declaration order."""
        return asdict(self)

    def scaled(self, ratio: float) -> "NutrientProfile":
        """Return every amount multiplied by ratio, unrounded."""
        return replace(
            self, **{key: getattr(self, key) * ratio for key in NUTRIENT_KEYS}
        )

    def __add__(self, other: "NutrientProfile") -> "NutrientProfile":
        if not isinstance(other, NutrientProfile):
            return NotImplemented
        return NutrientProfile(
            **{key: getattr(self, key) + getattr(other, key) for key in NUTRIENT_KEYS}
        )


NUTRIENT_KEYS: tuple[str, ...] = tuple(field.name for field in fields(NutrientProfile))
_KEY_SET = frozenset(NUTRIENT_KEYS)
