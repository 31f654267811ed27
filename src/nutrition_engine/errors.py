"""Error types raised by the nutrition engine."""


class NutritionEngineError(ValueError):
    """Base class for invalid or incomplete input to the engine."""


class IncompleteProfileError(NutritionEngineError):
    """Raised when required biometric fields are missing."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(f"Profile is missing required fields: {', '.join(missing)}")


class OutOfRangeError(NutritionEngineError):
    """Raised when a converted height or weight is outside plausible bounds."""

    def __init__(self, field: str, value: float, low: float, high: float) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"Invalid {field}: {value:.1f}. Must be between {low:g}-{high:g}."
        )


class InvalidQuantityError(NutritionEngineError):
    """Raised when a quantity or multiplier is non-positive or not finite."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Quantity must be a positive finite number, got {value!r}")
