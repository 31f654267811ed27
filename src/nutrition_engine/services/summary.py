"""Multi-day nutrition summaries."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from nutrition_engine.domain.summaries import PeriodSummary
from nutrition_engine.engine.aggregation import summarize_period
from nutrition_engine.services.food_log import FoodLogRepository


@dataclass
class SummaryService:
    """Service for period totals and daily averages."""

    repository: FoodLogRepository

    def period(self, user_id: UUID, start: date, days: int) -> PeriodSummary:
        """Return totals and averages for days starting at start."""
        logs = {
            start + timedelta(days=offset): self.repository.list_items(
                user_id, start + timedelta(days=offset)
            )
            for offset in range(days)
        }
        return summarize_period(logs, start=start)

    def last_days(self, user_id: UUID, today: date, days: int = 7) -> PeriodSummary:
        """Return the summary for the trailing days ending today."""
        return self.period(user_id, today - timedelta(days=days - 1), days)

    def week(self, user_id: UUID, today: date) -> PeriodSummary:
        """Return the week-to-date summary, weeks starting Monday."""
        start = today - timedelta(days=today.weekday())
        return self.period(user_id, start, 7)
