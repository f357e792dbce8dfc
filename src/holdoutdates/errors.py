"""Exceptions raised while building date spans, selectors and partitions."""

from __future__ import annotations

from typing import Any


class DateSelectionError(ValueError):
    """Base class for every holdout-selection failure.

    ``value`` carries the offending input so callers can report it.
    """

    def __init__(self, msg: str, value: Any = None) -> None:
        super().__init__(msg)
        self.value = value


class SelectorConfigError(DateSelectionError):
    """A selector was constructed with an invalid configuration."""


class InfeasibleHoldoutError(DateSelectionError):
    """The requested holdout cannot be drawn from the given date span."""


class DateRangeError(DateSelectionError):
    """Dates could not be normalized into a uniform-stride span."""


class EmptyDateRangeError(DateRangeError):
    """The normalized span contains no dates (inverted bounds)."""
