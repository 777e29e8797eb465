"""Random helpers shared by all question generators."""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def random_int(min_value: int, max_value: int) -> int:
    """Return a uniformly distributed integer in [min_value, max_value], both inclusive."""
    if min_value > max_value:
        raise ValueError(f"Empty range: {min_value} > {max_value}")
    return random.randint(min_value, max_value)


def shuffle(sequence: Sequence[T]) -> list[T]:
    """
    Return a new list with the elements of ``sequence`` in random order.

    Fisher-Yates over a copy; the caller's sequence is never modified.
    """
    items = list(sequence)
    for i in range(len(items) - 1, 0, -1):
        j = random_int(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def choice(sequence: Sequence[T]) -> T:
    """Pick one element uniformly at random."""
    if not sequence:
        raise ValueError("Cannot choose from an empty sequence")
    return sequence[random_int(0, len(sequence) - 1)]
