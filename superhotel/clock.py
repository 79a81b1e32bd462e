from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def today(self) -> date:
        ...


class SystemClock:
    """Reads the current date from the system clock in the given timezone."""

    def __init__(self, tz: timezone = timezone.utc):
        self.tz = tz

    def today(self) -> date:
        return datetime.now(self.tz).date()


class FixedClock:
    """Always reports the same date. Used by tests and replays."""

    def __init__(self, current: date):
        self.current = current

    def today(self) -> date:
        return self.current
