"""Tests for seeded sampling without replacement."""

from __future__ import annotations

import numpy as np
import pytest

from holdoutdates.errors import InfeasibleHoldoutError
from holdoutdates.sampling import make_rng, sample_without_replacement

_ITEMS = ["a", "b", "c", "d", "e"]


class TestSampleWithoutReplacement:
    def test_draws_distinct_items(self):
        drawn = sample_without_replacement(make_rng(1), _ITEMS, 3)
        assert len(drawn) == 3
        assert len(set(drawn)) == 3
        assert set(drawn) <= set(_ITEMS)

    def test_same_seed_same_draw(self):
        a = sample_without_replacement(make_rng(42), _ITEMS, 2)
        b = sample_without_replacement(make_rng(42), _ITEMS, 2)
        assert a == b

    def test_does_not_touch_global_state(self):
        np.random.seed(0)
        expected = np.random.random()
        np.random.seed(0)
        sample_without_replacement(make_rng(3), _ITEMS, 2)
        assert np.random.random() == expected

    def test_draw_everything(self):
        drawn = sample_without_replacement(make_rng(5), _ITEMS, len(_ITEMS))
        assert sorted(drawn) == _ITEMS

    def test_zero_count(self):
        assert sample_without_replacement(make_rng(5), _ITEMS, 0) == []

    def test_zero_weight_never_drawn(self):
        weights = [0, 1, 1, 1, 1]
        for seed in range(200):
            drawn = sample_without_replacement(make_rng(seed), _ITEMS, 4, weights)
            assert "a" not in drawn

    def test_count_exceeds_population(self):
        with pytest.raises(InfeasibleHoldoutError, match="Cannot draw 6"):
            sample_without_replacement(make_rng(1), _ITEMS, 6)

    def test_misaligned_weights(self):
        with pytest.raises(InfeasibleHoldoutError, match="align one-to-one"):
            sample_without_replacement(make_rng(1), _ITEMS, 1, [1, 2])

    def test_too_few_positive_weights(self):
        with pytest.raises(InfeasibleHoldoutError, match="positive weight"):
            sample_without_replacement(make_rng(1), _ITEMS, 2, [0, 0, 0, 0, 1])

    def test_negative_count(self):
        with pytest.raises(ValueError, match="negative"):
            sample_without_replacement(make_rng(1), _ITEMS, -1)

    def test_misaligned_weights_with_zero_count(self):
        with pytest.raises(InfeasibleHoldoutError, match="align one-to-one"):
            sample_without_replacement(make_rng(1), _ITEMS, 0, [1, 2])
