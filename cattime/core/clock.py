# cattime/core/clock.py
# Server clock used by the business rules; swapped for a FixedClock in tests.
from datetime import date, datetime, time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current

    def set(self, now: datetime) -> None:
        self.current = now


def today(clock: Clock) -> date:
    return clock.now().date()


def time_of_day(clock: Clock) -> time:
    """Current time of day truncated to whole seconds."""
    return clock.now().time().replace(microsecond=0)


_system_clock = SystemClock()

def get_clock() -> Clock:
    return _system_clock
