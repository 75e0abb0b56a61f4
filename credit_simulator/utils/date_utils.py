"""Date manipulation utilities"""

from dataclasses import dataclass
from datetime import date, timedelta

DEFAULT_INTERVAL_DAYS = 30


def due_date_for_period(reference: date, period: int, interval_days: int = DEFAULT_INTERVAL_DAYS) -> date:
    """Due date of a schedule period: reference + interval_days x period"""
    return reference + timedelta(days=interval_days * period)


@dataclass(frozen=True)
class DueDateSchedule:
    """Stamps due dates from an explicit reference date (never the clock)"""

    reference: date
    interval_days: int = DEFAULT_INTERVAL_DAYS

    def __call__(self, period: int) -> date:
        return due_date_for_period(self.reference, period, self.interval_days)
