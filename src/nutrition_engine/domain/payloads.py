"""Pydantic models for nutrient payloads returned by external services."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nutrition_engine.domain.food_log import LoggedItem, MealSlot, WeightConversion
from nutrition_engine.domain.nutrients import NUTRIENT_KEYS, NutrientProfile

_ALIASES = {
    "saturated_fat": "saturatedFat",
    "monounsaturated_fat": "monounsaturatedFat",
    "polyunsaturated_fat": "polyunsaturatedFat",
    "trans_fat": "transFat",
    "vitamin_a": "vitaminA",
    "vitamin_c": "vitaminC",
    "vitamin_d": "vitaminD",
    "vitamin_e": "vitaminE",
    "vitamin_k": "vitaminK",
    "vitamin_b6": "vitaminB6",
    "vitamin_b12": "vitaminB12",
    "pantothenic_acid": "pantothenicAcid",
}


def _nutrient_alias(name: str) -> str:
    return _ALIASES.get(name, name)


class NutrientPayload(BaseModel):
    """Nutrition block as sent by the store and inference services."""

    model_config = ConfigDict(
        alias_generator=_nutrient_alias,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    fiber: float = Field(default=0.0, ge=0)
    sugar: float = Field(default=0.0, ge=0)
    saturated_fat: float = Field(default=0.0, ge=0)
    monounsaturated_fat: float = Field(default=0.0, ge=0)
    polyunsaturated_fat: float = Field(default=0.0, ge=0)
    trans_fat: float = Field(default=0.0, ge=0)
    omega3: float = Field(default=0.0, ge=0)
    omega6: float = Field(default=0.0, ge=0)
    sodium: float = Field(default=0.0, ge=0)
    potassium: float = Field(default=0.0, ge=0)
    calcium: float = Field(default=0.0, ge=0)
    magnesium: float = Field(default=0.0, ge=0)
    phosphorus: float = Field(default=0.0, ge=0)
    iron: float = Field(default=0.0, ge=0)
    zinc: float = Field(default=0.0, ge=0)
    selenium: float = Field(default=0.0, ge=0)
    vitamin_a: float = Field(default=0.0, ge=0)
    vitamin_c: float = Field(default=0.0, ge=0)
    vitamin_d: float = Field(default=0.0, ge=0)
    vitamin_e: float = Field(default=0.0, ge=0)
    vitamin_k: float = Field(default=0.0, ge=0)
    thiamin: float = Field(default=0.0, ge=0)
    riboflavin: float = Field(default=0.0, ge=0)
    niacin: float = Field(default=0.0, ge=0)
    vitamin_b6: float = Field(default=0.0, ge=0)
    folate: float = Field(default=0.0, ge=0)
    vitamin_b12: float = Field(default=0.0, ge=0)
    biotin: float = Field(default=0.0, ge=0)
    pantothenic_acid: float = Field(default=0.0, ge=0)
    cholesterol: float = Field(default=0.0, ge=0)
    creatine: float = Field(default=0.0, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def null_is_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    def to_profile(self) -> NutrientProfile:
        """Convert to a domain nutrient profile."""
        return NutrientProfile(**{key: getattr(self, key) for key in NUTRIENT_KEYS})


class WeightConversionPayload(BaseModel):
    """Weight sub-fields attached to an analyzed food."""

    model_config = ConfigDict(allow_inf_nan=False)

    grams: float = Field(default=0.0, ge=0)
    ounces: float = Field(default=0.0, ge=0)
    pounds: float = Field(default=0.0, ge=0)


class AnalyzedFoodPayload(BaseModel):
    """Single food returned by food identification."""

    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", allow_inf_nan=False
    )

    id: str | None = None
    name: str
    quantity: float = Field(gt=0)
    unit: str
    meal_type: MealSlot = Field(alias="mealType")
    nutrition: NutrientPayload = Field(default_factory=NutrientPayload)
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    weight_conversion: WeightConversionPayload | None = Field(
        default=None, alias="weightConversion"
    )

    def to_logged_item(self) -> LoggedItem:
        """Convert to a logged item ready for aggregation."""
        weight_conversion = None
        if self.weight_conversion is not None:
            weight_conversion = WeightConversion(
                grams=self.weight_conversion.grams,
                ounces=self.weight_conversion.ounces,
                pounds=self.weight_conversion.pounds,
            )
        return LoggedItem(
            id=self.id,
            name=self.name,
            quantity=self.quantity,
            unit=self.unit,
            meal_slot=self.meal_type,
            nutrients=self.nutrition.to_profile(),
            weight_conversion=weight_conversion,
        )
