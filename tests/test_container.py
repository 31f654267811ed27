"""Tests for container wiring."""

import logging

from nutrition_engine.config import Settings
from nutrition_engine.containers import build_container


def test_build_container_creates_services(
    profile_repository, food_log_repository, settings
) -> None:
    container = build_container(profile_repository, food_log_repository, settings)

    assert container.settings is settings
    assert container.profile_service.repository is profile_repository
    assert container.food_log_service.repository is food_log_repository
    assert container.summary_service.repository is food_log_repository
    assert container.status_service is not None


def test_build_container_configures_logging(
    profile_repository, food_log_repository
) -> None:
    build_container(
        profile_repository, food_log_repository, Settings(log_level="ERROR")
    )

    assert logging.getLogger("nutrition_engine").level == logging.ERROR
