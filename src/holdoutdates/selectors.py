"""Holdout selection strategies.

A selector only describes *how* holdout dates are chosen; ``partition`` applies
it to a date span.  The set of strategies is closed:

1. **NoneSelector**: no holdout, every date is validation.
2. **PeriodicSelector**: a ``stride``-long window once every ``period``,
   starting ``offset`` after the first date.
3. **RandomSelector**: ``holdout_blocks`` contiguous blocks of ``block_size``
   dates drawn without replacement, optionally weighted, from a seeded RNG.

All arguments are validated at construction time.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

from holdoutdates.errors import SelectorConfigError
from holdoutdates.periods import Day, Period, as_period


@dataclass(frozen=True)
class NoneSelector:
    """Assign all dates to the validation set and select no holdout dates."""


@dataclass(frozen=True, init=False)
class PeriodicSelector:
    """Take a ``stride``-sized holdout window once per ``period`` from start + ``offset``.

    ``PeriodicSelector(Week(1), Day(2), Day(1))`` holds out the second and third
    day of each week counted from the first date of the span.
    """

    period: Period
    stride: Period
    offset: Period

    def __init__(
        self,
        period: Period | timedelta,
        stride: Period | timedelta = Day(1),
        offset: Period | timedelta = Day(0),
    ) -> None:
        period = as_period(period)
        stride = as_period(stride)
        offset = as_period(offset)

        if period.to_timedelta() < timedelta(days=2):
            raise SelectorConfigError(f"period must be at least 2 days, got {period}", period)
        if stride.to_timedelta() < timedelta(days=1):
            raise SelectorConfigError(f"stride must be at least 1 day, got {stride}", stride)
        if offset.to_timedelta() < timedelta(0):
            raise SelectorConfigError(f"offset cannot be negative, got {offset}", offset)

        sub_day = [p for p in (period, stride, offset) if p.is_sub_day]
        if sub_day:
            msg = (
                "period, stride and offset must be expressed in days or weeks, "
                f"got {', '.join(str(p) for p in sub_day)}"
            )
            raise SelectorConfigError(msg, sub_day[0])

        if stride.to_timedelta() + offset.to_timedelta() > period.to_timedelta():
            raise SelectorConfigError(
                f"Cannot take a {stride} stride with offset {offset} within a {period} period",
                (period, stride, offset),
            )

        object.__setattr__(self, "period", period)
        object.__setattr__(self, "stride", stride)
        object.__setattr__(self, "offset", offset)


def _check_int(value: object, name: str, minimum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if minimum is not None and value < minimum:
        raise SelectorConfigError(f"{name} must be at least {minimum}, got {value}", value)
    return int(value)


@dataclass(frozen=True, init=False)
class RandomSelector:
    """Hold out ``holdout_blocks`` random contiguous blocks of ``block_size`` dates.

    Blocks are drawn without replacement from an RNG seeded with ``seed`` and
    created fresh for every partition, so results are reproducible.  When
    ``block_weights`` is given (one non-negative weight per block) blocks are
    drawn proportionally to their weight.
    """

    holdout_blocks: int
    block_size: int
    seed: int
    block_weights: tuple[float, ...] | None = None

    def __init__(
        self,
        holdout_blocks: int,
        block_size: int,
        seed: int,
        block_weights: Sequence[float] | None = None,
    ) -> None:
        holdout_blocks = _check_int(holdout_blocks, "holdout_blocks", minimum=0)
        block_size = _check_int(block_size, "block_size", minimum=1)
        seed = _check_int(seed, "seed", minimum=0)

        weights = None
        if block_weights is not None:
            weights = tuple(float(w) for w in block_weights)
            bad = [w for w in weights if not math.isfinite(w) or w < 0]
            if bad:
                raise SelectorConfigError(
                    f"block_weights must be finite and non-negative, got {bad[0]}",
                    bad[0],
                )

        object.__setattr__(self, "holdout_blocks", holdout_blocks)
        object.__setattr__(self, "block_size", block_size)
        object.__setattr__(self, "seed", seed)
        object.__setattr__(self, "block_weights", weights)

    @classmethod
    def daily(
        cls,
        holdout_blocks: int,
        seed: int,
        block_weights: Sequence[float] | None = None,
    ) -> RandomSelector:
        """Draw ``holdout_blocks`` single days (``block_size=1``)."""
        return cls(holdout_blocks, 1, seed, block_weights)


Selector = Union[NoneSelector, PeriodicSelector, RandomSelector]
