"""Unit-aware duration values.

``datetime.timedelta`` forgets the unit it was built from, so ``timedelta(hours=48)``
and ``timedelta(days=2)`` compare equal.  Selectors need to reject durations
expressed in sub-day units regardless of magnitude, so durations are carried
as ``Period`` values that remember their unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

_SECONDS_PER_DAY = 86_400


@dataclass(frozen=True)
class Period:
    """An integer count of a fixed calendar unit."""

    value: int

    unit: ClassVar[str] = "period"
    seconds_per_unit: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if type(self) is Period:
            raise TypeError("Period is abstract; use Week, Day, Hour, Minute or Second")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{self.unit} count must be an integer, got {self.value!r}")

    @property
    def is_sub_day(self) -> bool:
        return self.seconds_per_unit < _SECONDS_PER_DAY

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.value * self.seconds_per_unit)

    def __str__(self) -> str:
        suffix = "" if abs(self.value) == 1 else "s"
        return f"{self.value} {self.unit}{suffix}"


class Week(Period):
    unit = "week"
    seconds_per_unit = 7 * _SECONDS_PER_DAY


class Day(Period):
    unit = "day"
    seconds_per_unit = _SECONDS_PER_DAY


class Hour(Period):
    unit = "hour"
    seconds_per_unit = 3_600


class Minute(Period):
    unit = "minute"
    seconds_per_unit = 60


class Second(Period):
    unit = "second"
    seconds_per_unit = 1


def as_period(value: Period | timedelta) -> Period:
    """Coerce *value* into a ``Period``.

    A ``timedelta`` holding a whole number of days becomes ``Day(n)``; one with
    any sub-day remainder becomes ``Second(n)``.
    """
    if isinstance(value, Period):
        return value
    if isinstance(value, timedelta):
        if value.microseconds:
            raise TypeError(f"Sub-second durations are not supported: {value!r}")
        if value.seconds == 0:
            return Day(value.days)
        return Second(value.days * _SECONDS_PER_DAY + value.seconds)
    raise TypeError(f"Expected a Period or timedelta, got {type(value).__name__}")
