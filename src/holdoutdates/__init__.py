"""Partition date spans into disjoint validation and holdout sets."""

from holdoutdates.dates import (
    DateInterval,
    DateRange,
    interval_to_date_range,
    to_date_range,
)
from holdoutdates.errors import (
    DateRangeError,
    DateSelectionError,
    EmptyDateRangeError,
    InfeasibleHoldoutError,
    SelectorConfigError,
)
from holdoutdates.partition import PartitionResult, build_date_sets, partition
from holdoutdates.periods import Day, Hour, Minute, Period, Second, Week
from holdoutdates.selectors import NoneSelector, PeriodicSelector, RandomSelector, Selector

__all__ = [
    # dates
    "DateInterval",
    "DateRange",
    "interval_to_date_range",
    "to_date_range",
    # periods
    "Period",
    "Week",
    "Day",
    "Hour",
    "Minute",
    "Second",
    # selectors
    "Selector",
    "NoneSelector",
    "PeriodicSelector",
    "RandomSelector",
    # partition
    "PartitionResult",
    "partition",
    "build_date_sets",
    # errors
    "DateSelectionError",
    "SelectorConfigError",
    "InfeasibleHoldoutError",
    "DateRangeError",
    "EmptyDateRangeError",
]
