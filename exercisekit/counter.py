"""Counting how often each value has been seen."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable


class ValueCounter:
    """Counts the number of times each hashable value has been seen."""

    def __init__(self) -> None:
        self._values: Counter[Hashable] = Counter()

    def count(self, value: Hashable) -> None:
        """Record one occurrence of ``value``."""
        self._values[value] += 1

    def times_seen(self, value: Hashable) -> int:
        """Return how many times ``value`` has been counted."""
        return self._values[value]


def main(argv: list[str] | None = None) -> int:
    """Count some integers and strings and report the tallies."""
    ctr = ValueCounter()
    for value in (13, 14, 16, 14, 14, 11):
        ctr.count(value)
    for i in range(10, 20):
        print(f"saw {ctr.times_seen(i)} values equal to {i}")

    strctr = ValueCounter()
    for fruit in ("apple", "orange", "apple"):
        strctr.count(fruit)
    print(f"got {strctr.times_seen('apple')} apples")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())