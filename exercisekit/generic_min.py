"""Minimum of two comparable values."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def min_of(left: T, right: T) -> T:
    """Return the smaller of two values, preferring ``left`` when they are equal."""
    return right if left > right else left