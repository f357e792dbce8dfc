"""Shared fixtures for holdout partition tests."""

from __future__ import annotations

from datetime import date

import pytest
import structlog

from holdoutdates.dates import DateInterval, DateRange


@pytest.fixture(autouse=True)
def _reset_structlog():
    """The CLI configures structlog globally; undo it after every test."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def three_weeks() -> DateRange:
    """21 days starting on Monday 2021-01-04."""
    return DateRange(date(2021, 1, 4), date(2021, 1, 24))


@pytest.fixture()
def four_weeks() -> DateInterval:
    """February 2021: 28 days starting on a Monday."""
    return DateInterval(date(2021, 2, 1), date(2021, 2, 28))


@pytest.fixture()
def ten_days() -> DateRange:
    return DateRange(date(2021, 1, 1), date(2021, 1, 10))
