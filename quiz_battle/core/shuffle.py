"""Question-order shuffling."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def shuffle_questions(items: Iterable[T], rng: random.Random) -> list[T]:
    """Return a Fisher-Yates permutation of ``items`` drawn from ``rng``.

    The input is copied first, so callers can pass an immutable bank.
    """
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
