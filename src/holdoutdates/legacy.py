"""Deprecated call shapes, translated onto the current API."""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from datetime import date

from holdoutdates.dates import DateInterval
from holdoutdates.partition import PartitionResult, partition
from holdoutdates.selectors import RandomSelector, Selector


def partition_dates(start_date: date, end_date: date, selector: Selector) -> PartitionResult:
    """Deprecated: use ``partition(DateInterval(start_date, end_date), selector)``."""
    warnings.warn(
        "partition_dates(start_date, end_date, selector) is deprecated; "
        "use partition(DateInterval(start_date, end_date), selector)",
        DeprecationWarning,
        stacklevel=2,
    )
    return partition(DateInterval(start_date, end_date), selector)


def seeded_random_selector(
    seed: int,
    holdout_blocks: int,
    block_size: int = 1,
    block_weights: Sequence[float] | None = None,
) -> RandomSelector:
    """Deprecated seed-first argument order for ``RandomSelector``."""
    warnings.warn(
        "seeded_random_selector(seed, holdout_blocks, ...) is deprecated; "
        "use RandomSelector(holdout_blocks, block_size, seed, block_weights)",
        DeprecationWarning,
        stacklevel=2,
    )
    return RandomSelector(holdout_blocks, block_size, seed, block_weights)
