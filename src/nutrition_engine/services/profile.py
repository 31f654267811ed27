"""Profile calculations for the profile editing surface."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrition_engine.config import Settings
from nutrition_engine.domain.profile import (
    BiometricProfile,
    BmiReading,
    CalorieTargets,
    EnergyEstimate,
    WeightGoal,
)
from nutrition_engine.engine.energy import calculate_bmi, estimate_energy
from nutrition_engine.engine.goals import resolve_goal_calories
from nutrition_engine.engine.units import (
    LBS_PER_KG,
    cm_to_feet_inches,
    feet_inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)
from nutrition_engine.errors import IncompleteProfileError, OutOfRangeError

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Storage interface for biometric data."""

    def get_profile(self, user_id: UUID) -> BiometricProfile | None:
        """Return the user's biometric profile, if any."""

    def get_weight_goal(self, user_id: UUID) -> WeightGoal | None:
        """Return the user's weight goal, if set."""

    def save_measurements(
        self, user_id: UUID, height_cm: float | None, weight_kg: float | None
    ) -> None:
        """Persist metric height and weight."""


@dataclass(frozen=True)
class DisplayMeasurements:
    """Height and weight in US units for the edit form."""

    feet: int | None
    inches: int | None
    weight_lbs: int | None


@dataclass
class ProfileService:
    """Service computing energy needs and calorie targets for a user."""

    repository: ProfileRepository
    settings: Settings

    def update_measurements(
        self,
        user_id: UUID,
        feet: float | None,
        inches: float | None,
        weight_lbs: float | None,
    ) -> None:
        """Convert US measurements to metric and persist them.

        Raises OutOfRangeError without writing when either value is implausible.
        """
        try:
            height_cm = feet_inches_to_cm(feet, inches)
            weight_kg = lbs_to_kg(weight_lbs)
        except OutOfRangeError as exc:
            _logger.warning("Rejected measurements for user %s: %s", user_id, exc)
            raise
        self.repository.save_measurements(user_id, height_cm, weight_kg)

    def display_measurements(self, user_id: UUID) -> DisplayMeasurements:
        """Return stored measurements in feet, inches and pounds."""
        profile = self.repository.get_profile(user_id) or BiometricProfile()
        height = cm_to_feet_inches(profile.height_cm)
        feet, inches = height if height is not None else (None, None)
        return DisplayMeasurements(
            feet=feet, inches=inches, weight_lbs=kg_to_lbs(profile.weight_kg)
        )

    def energy(self, user_id: UUID, as_of: date | None = None) -> EnergyEstimate | None:
        """Return BMR and TDEE, or None when the profile is incomplete."""
        profile = self.repository.get_profile(user_id) or BiometricProfile()
        return self._estimate(user_id, profile, as_of)

    def calorie_targets(
        self, user_id: UUID, as_of: date | None = None
    ) -> CalorieTargets | None:
        """Return goal-based calorie targets, or None when unavailable."""
        profile = self.repository.get_profile(user_id) or BiometricProfile()
        estimate = self._estimate(user_id, profile, as_of)
        if estimate is None:
            return None
        goal = self.repository.get_weight_goal(user_id) or WeightGoal()
        current_lbs = profile.weight_kg * LBS_PER_KG if profile.weight_kg else None
        return resolve_goal_calories(
            tdee=estimate.tdee,
            current_weight_lbs=current_lbs,
            goal_weight_lbs=goal.target_weight_lbs,
            timeframe_weeks=goal.timeframe_weeks,
            sex=profile.sex,
        )

    def daily_calorie_target(self, user_id: UUID, as_of: date | None = None) -> int:
        """Return the suggested calorie target or the configured default."""
        targets = self.calorie_targets(user_id, as_of)
        if targets is None:
            return self.settings.default_calorie_target
        return targets.suggested_calories

    def bmi(self, user_id: UUID) -> BmiReading | None:
        """Return the user's BMI, if height and weight are known."""
        profile = self.repository.get_profile(user_id) or BiometricProfile()
        return calculate_bmi(profile.height_cm, profile.weight_kg)

    def _estimate(
        self, user_id: UUID, profile: BiometricProfile, as_of: date | None
    ) -> EnergyEstimate | None:
        try:
            return estimate_energy(profile, as_of or date.today())
        except IncompleteProfileError as exc:
            if self.settings.debug:
                _logger.info("Energy estimate unavailable for %s: %s", user_id, exc)
            return None
