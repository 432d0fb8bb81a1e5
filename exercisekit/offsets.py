"""Differences between list elements at a wrapping offset."""

from __future__ import annotations

from collections.abc import Sequence


def offset_differences(offset: int, values: Sequence[int]) -> list[int]:
    """Return ``values[(n + offset) % len] - values[n]`` for every index ``n``."""
    if not values:
        return []
    shift = offset % len(values)
    rotated = list(values[shift:]) + list(values[:shift])
    return [later - current for current, later in zip(values, rotated)]