"""
Sources of "today" for date arithmetic.

Expiry checks compare calendar dates, so the day boundary depends on the
timezone the application runs in. Services take a clock instead of calling
``date.today()`` so the boundary is explicit and tests can pin the date.
"""
from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

from app.config import settings


class SystemClock:
    """Wall clock in the configured application timezone"""

    def __init__(self, timezone: Optional[str] = None):
        self.tz = ZoneInfo(timezone or settings.APP_TIMEZONE)

    def today(self) -> date:
        return datetime.now(self.tz).date()

    def now(self) -> datetime:
        """Naive local time, comparable with the DateTime columns"""
        return datetime.now(self.tz).replace(tzinfo=None)


class FixedClock:
    """Clock that always reports the same day"""

    def __init__(self, fixed_date: date, fixed_time: time = time(9, 0)):
        self.fixed_date = fixed_date
        self.fixed_time = fixed_time

    def today(self) -> date:
        return self.fixed_date

    def now(self) -> datetime:
        return datetime.combine(self.fixed_date, self.fixed_time)


def get_clock() -> SystemClock:
    """FastAPI dependency; overridden in tests"""
    return SystemClock()
