"""Split a date span into disjoint validation and holdout sets.

``partition`` normalizes the span, asks the selector for its holdout dates and
hands both to ``build_date_sets``, which guarantees the two results are
disjoint, sorted and together cover the span.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import NamedTuple

import structlog

from holdoutdates.dates import DateRange, DateSpanLike, to_date_range
from holdoutdates.errors import InfeasibleHoldoutError
from holdoutdates.sampling import make_rng, sample_without_replacement
from holdoutdates.selectors import NoneSelector, PeriodicSelector, RandomSelector, Selector

logger = structlog.get_logger(__name__)


class PartitionResult(NamedTuple):
    """Validation and holdout dates, each sorted ascending."""

    validation: tuple[date, ...]
    holdout: tuple[date, ...]


def partition(dates: DateSpanLike, selector: Selector) -> PartitionResult:
    """Partition *dates* into disjoint ``validation`` and ``holdout`` sets.

    Parameters
    ----------
    dates:
        A ``DateInterval``, a ``DateRange`` or an explicit ascending sequence of
        dates with a uniform stride.
    selector:
        One of ``NoneSelector``, ``PeriodicSelector`` or ``RandomSelector``.

    Returns
    -------
    PartitionResult
        Named pair ``(validation, holdout)``.
    """
    span = to_date_range(dates)

    if isinstance(selector, NoneSelector):
        holdout: list[date] = []
    elif isinstance(selector, PeriodicSelector):
        holdout = periodic_holdout(span, selector)
    elif isinstance(selector, RandomSelector):
        holdout = random_holdout(span, selector)
    else:
        raise TypeError(f"Unsupported selector: {type(selector).__name__}")

    result = build_date_sets(span, holdout)
    logger.debug(
        "partitioned_dates",
        selector=type(selector).__name__,
        span=str(span),
        validation=len(result.validation),
        holdout=len(result.holdout),
    )
    return result


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def _dates_between(span: DateRange, first: int, last: int) -> list[date]:
    """Span-stride dates with ordinals in ``[first, last]`` that are members of *span*.

    Empty when ``first > last``.
    """
    out: list[date] = []
    for ordinal in range(first, last + 1, span.step.days):
        current = date.fromordinal(ordinal)
        if current in span:
            out.append(current)
    return out


def periodic_holdout(span: DateRange, selector: PeriodicSelector) -> list[date]:
    """Holdout dates for a ``PeriodicSelector``.

    Walks forward from ``span.first + offset`` in ``period`` jumps, taking the
    ``stride``-long window at each stop, then whatever remains from the final
    cursor to the end of the span.
    """
    # day ordinals, so the cursor can run past date.max
    period = selector.period.to_timedelta().days
    stride = selector.stride.to_timedelta().days
    end = span.last.toordinal()

    holdout: list[date] = []
    cursor = span.first.toordinal() + selector.offset.to_timedelta().days
    while cursor + stride <= end:
        holdout.extend(_dates_between(span, cursor, cursor + stride - span.step.days))
        cursor += period

    # tail of the final, possibly partial period; empty once cursor passes end
    holdout.extend(_dates_between(span, cursor, end))
    return holdout


def date_blocks(span: DateRange, block_size: int) -> list[list[date]]:
    """Chop *span* into contiguous blocks of *block_size* dates; the last may be shorter."""
    all_dates = list(span)
    return [all_dates[i:i + block_size] for i in range(0, len(all_dates), block_size)]


def random_holdout(span: DateRange, selector: RandomSelector) -> list[date]:
    """Holdout dates for a ``RandomSelector``: the flattened sampled blocks."""
    blocks = date_blocks(span, selector.block_size)

    if selector.holdout_blocks > len(blocks):
        raise InfeasibleHoldoutError(
            f"Number of holdout blocks {selector.holdout_blocks} exceeds total "
            f"number of date blocks {len(blocks)}",
            selector.holdout_blocks,
        )

    chosen = sample_without_replacement(
        make_rng(selector.seed),
        blocks,
        selector.holdout_blocks,
        selector.block_weights,
    )
    return [d for block in chosen for d in block]


# ---------------------------------------------------------------------------
# Set construction
# ---------------------------------------------------------------------------


def build_date_sets(all_dates: Iterable[date], holdout_dates: Iterable[date] | date) -> PartitionResult:
    """Build the sorted ``(validation, holdout)`` pair.

    ``validation`` is every date of *all_dates* not in *holdout_dates*.
    ``holdout`` keeps *holdout_dates* as given, only sorted.  A bare ``date``
    is accepted in place of a list of holdout dates.
    """
    if isinstance(holdout_dates, date):
        holdout_dates = [holdout_dates]
    holdout = sorted(holdout_dates)

    held = set(holdout)
    if len(held) != len(holdout):
        logger.warning(
            "duplicate_holdout_dates",
            holdout=len(holdout),
            distinct=len(held),
        )

    validation = sorted(d for d in set(all_dates) if d not in held)
    return PartitionResult(validation=tuple(validation), holdout=tuple(holdout))

