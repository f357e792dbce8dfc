"""Date spans: uniform-stride date ranges and interval normalization."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Union, overload

from holdoutdates.errors import DateRangeError, EmptyDateRangeError

ONE_DAY = timedelta(days=1)


def _check_date(value: object, name: str) -> None:
    # datetime subclasses date; day granularity only
    if isinstance(value, datetime) or not isinstance(value, date):
        raise TypeError(f"{name} must be a datetime.date, got {type(value).__name__}")


@dataclass(frozen=True)
class DateRange(Sequence[date]):
    """A finite, inclusive, strictly ascending run of dates with a fixed step.

    ``stop`` is snapped down onto the step grid, so ``last`` is always a member.
    """

    start: date
    stop: date
    step: timedelta = field(default=ONE_DAY)

    def __post_init__(self) -> None:
        _check_date(self.start, "start")
        _check_date(self.stop, "stop")
        if self.step < ONE_DAY or self.step % ONE_DAY:
            raise DateRangeError(
                f"step must be a positive whole number of days, got {self.step}",
                self.step,
            )
        if self.start > self.stop:
            raise EmptyDateRangeError(
                f"Date range is empty: start {self.start} is after stop {self.stop}",
                (self.start, self.stop),
            )
        snapped = self.start + ((self.stop - self.start) // self.step) * self.step
        object.__setattr__(self, "stop", snapped)

    @property
    def first(self) -> date:
        return self.start

    @property
    def last(self) -> date:
        return self.stop

    def __len__(self) -> int:
        return (self.stop - self.start) // self.step + 1

    @overload
    def __getitem__(self, index: int) -> date: ...

    @overload
    def __getitem__(self, index: slice) -> list[date]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("DateRange index out of range")
        return self.start + index * self.step

    def __iter__(self) -> Iterator[date]:
        for i in range(len(self)):
            yield self.start + i * self.step

    def __contains__(self, value: object) -> bool:
        if isinstance(value, datetime) or not isinstance(value, date):
            return False
        if not self.start <= value <= self.stop:
            return False
        return (value - self.start) % self.step == timedelta(0)

    def __str__(self) -> str:
        return f"{self.start}:{self.step.days}d:{self.stop}"


@dataclass(frozen=True)
class DateInterval:
    """Date bounds with independent inclusive/exclusive flags on each end."""

    first: date
    last: date
    first_inclusive: bool = True
    last_inclusive: bool = True

    def __post_init__(self) -> None:
        _check_date(self.first, "first")
        _check_date(self.last, "last")

    def __str__(self) -> str:
        left = "[" if self.first_inclusive else "("
        right = "]" if self.last_inclusive else ")"
        return f"{left}{self.first}, {self.last}{right}"


DateSpanLike = Union[DateRange, DateInterval, Sequence[date]]


def interval_to_date_range(interval: DateInterval) -> DateRange:
    """Turn *interval* into a daily ``DateRange`` honouring endpoint inclusivity.

    An exclusive start moves the first date forward one day, an exclusive end
    moves the last date back one day.  Raises ``EmptyDateRangeError`` when the
    result would be inverted, e.g. ``(2021-01-01, 2021-01-01]``.
    """
    try:
        first = interval.first if interval.first_inclusive else interval.first + ONE_DAY
        last = interval.last if interval.last_inclusive else interval.last - ONE_DAY
    except OverflowError:
        # exclusive bound at date.max / date.min
        first, last = date.max, date.min
    if first > last:
        raise EmptyDateRangeError(
            f"Interval {interval} contains no dates",
            interval,
        )
    return DateRange(first, last, ONE_DAY)


def _sequence_to_date_range(dates: Sequence[date]) -> DateRange:
    values = list(dates)
    if not values:
        raise EmptyDateRangeError("Date sequence is empty", values)
    for value in values:
        _check_date(value, "dates")
    if len(values) == 1:
        return DateRange(values[0], values[0], ONE_DAY)

    step = values[1] - values[0]
    if step <= timedelta(0):
        raise DateRangeError(
            f"Dates must be strictly ascending: {values[0]} then {values[1]}",
            values[1],
        )
    for prev, curr in zip(values[1:], values[2:]):
        if curr - prev != step:
            raise DateRangeError(
                f"Dates must have a uniform stride of {step.days} days; "
                f"found {curr - prev} between {prev} and {curr}",
                curr,
            )
    return DateRange(values[0], values[-1], step)


def to_date_range(dates: DateSpanLike) -> DateRange:
    """Normalize any accepted span representation into a ``DateRange``.

    Accepts a ``DateRange`` (returned as-is), a ``DateInterval``, or an explicit
    ascending sequence of dates with a uniform whole-day stride.
    """
    if isinstance(dates, DateRange):
        return dates
    if isinstance(dates, DateInterval):
        return interval_to_date_range(dates)
    if isinstance(dates, (str, bytes)):
        raise TypeError("Expected dates, got a string")
    if isinstance(dates, Iterable):
        return _sequence_to_date_range(list(dates))
    raise TypeError(f"Cannot build a date range from {type(dates).__name__}")
