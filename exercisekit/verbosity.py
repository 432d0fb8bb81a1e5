"""Loggers that write to standard error and filter by verbosity."""

from __future__ import annotations

import abc
import sys
from dataclasses import dataclass, field


class Logger(abc.ABC):
    """Something that accepts log messages."""

    @abc.abstractmethod
    def log(self, verbosity: int, message: str) -> None:
        """Log ``message`` at the given verbosity level."""


class StderrLogger(Logger):
    """Writes every message to standard error."""

    def log(self, verbosity: int, message: str) -> None:
        print(f"verbosity={verbosity}: {message}", file=sys.stderr)


@dataclass
class VerbosityFilter(Logger):
    """Passes on only messages up to ``max_verbosity``."""

    max_verbosity: int
    inner: Logger = field(default_factory=StderrLogger)

    def log(self, verbosity: int, message: str) -> None:
        if verbosity <= self.max_verbosity:
            self.inner.log(verbosity, message)


def main(argv: list[str] | None = None) -> int:
    """Log two messages through a filter that lets only one through."""
    logger = VerbosityFilter(max_verbosity=3)
    logger.log(5, "FYI")
    logger.log(2, "Uhoh")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())