"""Length of the Collatz sequence starting at a given number."""

from __future__ import annotations

import argparse


def collatz_length(n: int) -> int:
    """Return the number of terms in the Collatz sequence beginning at ``n``."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def main(argv: list[str] | None = None) -> int:
    """Print the Collatz sequence length for a number (11 by default)."""
    parser = argparse.ArgumentParser(description="Print the length of a Collatz sequence.")
    parser.add_argument("n", nargs="?", type=int, default=11, help="starting number")
    args = parser.parse_args(argv)
    print(f"Length: {collatz_length(args.n)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())