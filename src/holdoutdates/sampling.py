"""Seeded sampling without replacement."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from holdoutdates.errors import InfeasibleHoldoutError

T = TypeVar("T")


def make_rng(seed: int) -> np.random.Generator:
    """Return a fresh generator; never touches numpy's global random state."""
    return np.random.default_rng(seed)


def sample_without_replacement(
    rng: np.random.Generator,
    items: Sequence[T],
    count: int,
    weights: Sequence[float] | None = None,
) -> list[T]:
    """Draw *count* distinct items from *items*.

    With *weights* the chance of drawing an item is proportional to its weight
    among the items not yet drawn.  Items with zero weight are never drawn.
    """
    n = len(items)
    if count < 0:
        raise ValueError(f"count cannot be negative, got {count}")
    if count > n:
        raise InfeasibleHoldoutError(
            f"Cannot draw {count} items without replacement from {n}",
            count,
        )
    if weights is not None and len(weights) != n:
        raise InfeasibleHoldoutError(
            f"Got {len(weights)} weights for {n} items; weights must align one-to-one",
            len(weights),
        )
    if count == 0:
        return []

    p = None
    if weights is not None:
        w = np.asarray(weights, dtype=float)
        positive = int(np.count_nonzero(w > 0))
        if positive < count:
            raise InfeasibleHoldoutError(
                f"Only {positive} items have a positive weight, cannot draw {count}",
                count,
            )
        p = w / w.sum()

    indices = rng.choice(n, size=count, replace=False, p=p)
    return [items[int(i)] for i in indices]
