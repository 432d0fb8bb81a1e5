"""Fibonacci numbers."""

from __future__ import annotations

import argparse


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def main(argv: list[str] | None = None) -> int:
    """Print a Fibonacci number (the 20th by default)."""
    parser = argparse.ArgumentParser(description="Print a Fibonacci number.")
    parser.add_argument("n", nargs="?", type=int, default=20, help="index in the sequence")
    args = parser.parse_args(argv)
    try:
        value = fib(args.n)
    except ValueError as error:
        parser.error(str(error))
    print(f"fib({args.n}) = {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())