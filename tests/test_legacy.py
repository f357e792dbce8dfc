"""Tests for deprecated call shapes."""

from __future__ import annotations

from datetime import date

import pytest

from holdoutdates.dates import DateInterval
from holdoutdates.legacy import partition_dates, seeded_random_selector
from holdoutdates.partition import partition
from holdoutdates.periods import Day, Week
from holdoutdates.selectors import PeriodicSelector, RandomSelector


class TestLegacy:
    def test_partition_dates_matches_interval_form(self):
        selector = PeriodicSelector(Week(1), Day(2), Day(1))
        with pytest.warns(DeprecationWarning, match="partition_dates"):
            old = partition_dates(date(2021, 1, 4), date(2021, 1, 24), selector)
        new = partition(DateInterval(date(2021, 1, 4), date(2021, 1, 24)), selector)
        assert old == new

    def test_seed_first_random_selector(self):
        with pytest.warns(DeprecationWarning, match="seeded_random_selector"):
            selector = seeded_random_selector(42, 2, 7)
        assert selector == RandomSelector(2, 7, 42)
