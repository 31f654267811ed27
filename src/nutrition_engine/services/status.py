"""Nutrient status reports for the display surface."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from nutrition_engine.domain.nutrients import NUTRIENT_KEYS, NutrientProfile
from nutrition_engine.domain.reference import (
    RECOMMENDED_DAILY_VALUES,
    NutrientStatus,
    RecommendedValueEntry,
)
from nutrition_engine.domain.summaries import NutrientReport
from nutrition_engine.engine.classification import classify_entry, progress


@dataclass
class StatusService:
    """Service that classifies nutrient totals against reference values."""

    table: Mapping[str, RecommendedValueEntry] = field(
        default_factory=lambda: RECOMMENDED_DAILY_VALUES
    )

    def entry(
        self, key: str, calorie_target: float | None = None
    ) -> RecommendedValueEntry:
        """Return the reference entry, with an optional personal calorie target."""
        entry = self.table[key]
        if key == "calories" and calorie_target is not None:
            return replace(entry, target=calorie_target)
        return entry

    def status_for(
        self, key: str, current: float, calorie_target: float | None = None
    ) -> NutrientStatus:
        """Return the status of one nutrient amount."""
        return classify_entry(current, self.entry(key, calorie_target))

    def report(
        self, totals: NutrientProfile, calorie_target: float | None = None
    ) -> list[NutrientReport]:
        """Return a report for every nutrient in the table, in profile order."""
        reports = []
        for key in NUTRIENT_KEYS:
            if key not in self.table:
                continue
            entry = self.entry(key, calorie_target)
            current = totals.get(key)
            reports.append(
                NutrientReport(
                    entry=entry,
                    current=current,
                    status=classify_entry(current, entry),
                    progress=progress(current, entry.target),
                )
            )
        return reports
