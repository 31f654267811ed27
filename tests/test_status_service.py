"""Tests for the status service."""

import pytest

from nutrition_engine.domain.nutrients import NUTRIENT_KEYS, NutrientProfile
from nutrition_engine.domain.reference import NutrientStatus, RecommendedValueEntry
from nutrition_engine.services.status import StatusService


def test_report_covers_every_nutrient_in_order() -> None:
    service = StatusService()

    reports = service.report(NutrientProfile(calories=1500, sodium=2500, fiber=30))

    assert [report.entry.nutrient_key for report in reports] == list(NUTRIENT_KEYS)
    by_key = {report.entry.nutrient_key: report for report in reports}
    assert by_key["calories"].status is NutrientStatus.WARNING
    assert by_key["sodium"].status is NutrientStatus.OVER_LIMIT
    assert by_key["fiber"].status is NutrientStatus.GOOD
    assert by_key["omega6"].status is NutrientStatus.ON_TRACK
    assert by_key["protein"].status is NutrientStatus.DEFICIENT
    assert by_key["fiber"].progress.over_percent == pytest.approx(20)


def test_report_uses_personal_calorie_target() -> None:
    service = StatusService()

    reports = service.report(NutrientProfile(calories=1500), calorie_target=1500)

    assert reports[0].entry.target == 1500
    assert reports[0].status is NutrientStatus.GOOD
    assert reports[0].progress.percent == 100


def test_status_for_single_nutrient() -> None:
    service = StatusService()

    assert service.status_for("cholesterol", 250) is NutrientStatus.WARNING
    assert service.status_for("calories", 1900, calorie_target=2500) is (
        NutrientStatus.WARNING
    )


def test_custom_table_skips_missing_entries() -> None:
    service = StatusService(
        table={"iron": RecommendedValueEntry("iron", 18, "mg")}
    )

    reports = service.report(NutrientProfile(iron=9))

    assert len(reports) == 1
    assert reports[0].status is NutrientStatus.DEFICIENT
