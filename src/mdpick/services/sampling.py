"""Random selection of documents."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from mdpick.core.exceptions import SampleSizeError

T = TypeVar("T")


def select_random(items: Sequence[T], k: int, rng: random.Random) -> list[T]:
    """Select ``k`` distinct items with a prefix-limited Fisher-Yates shuffle.

    For each ``i`` in ``0..k`` the item at ``i`` is swapped with one drawn
    uniformly from ``[i, n)``; the first ``k`` positions are returned. The
    input sequence is left untouched.

    Args:
        items: Candidates to choose from.
        k: Number of items to select.
        rng: Random source; pass a seeded ``random.Random`` for repeatable picks.

    Returns:
        List of ``k`` items, each from ``items`` and none repeated.

    Raises:
        SampleSizeError: If ``k`` is negative or larger than ``len(items)``.
    """
    pool = list(items)
    n = len(pool)
    if k < 0 or k > n:
        raise SampleSizeError(k, n)

    for i in range(k):
        j = rng.randrange(i, n)
        pool[i], pool[j] = pool[j], pool[i]

    return pool[:k]
