"""Matrix transposition."""

from __future__ import annotations

from collections.abc import Sequence


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix given as a list of rows."""
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows of the matrix must have the same length")
    return [list(column) for column in zip(*rows)]


def main(argv: list[str] | None = None) -> int:
    """Print a sample matrix and its transpose."""
    matrix = [
        [101, 102, 103],
        [201, 202, 203],
        [301, 302, 303],
    ]
    print(f"matrix = {matrix}")
    print(f"transposed = {transpose(matrix)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())