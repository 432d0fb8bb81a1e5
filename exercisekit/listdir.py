"""Iterating over the names in a directory, including ``.`` and ``..``."""

from __future__ import annotations

import os
from typing import AnyStr, Generic, Iterator, Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class DirectoryIterator(Generic[AnyStr]):
    """Yields the entry names of a directory, starting with ``.`` and ``..``.

    The directory is opened when the iterator is created; use it as a context
    manager or call :meth:`close` to release it early.
    """

    def __init__(self, path: PathArg) -> None:
        try:
            fspath = os.fspath(path)
        except TypeError as exc:
            raise ValueError(f"Invalid path: {exc}") from exc
        self.path = fspath
        try:
            self._entries = os.scandir(fspath)
        except ValueError as exc:
            raise ValueError(f"Invalid path: {exc}") from exc
        except OSError as exc:
            raise OSError(exc.errno, f"Could not open {fspath!r}", fspath) from exc
        specials = (b".", b"..") if isinstance(fspath, bytes) else (".", "..")
        self._specials = iter(specials)
        self._closed = False

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        if self._closed:
            raise StopIteration
        for name in self._specials:
            return name
        try:
            return next(self._entries).name
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        """Release the directory handle; further iteration yields nothing."""
        if not self._closed:
            self._closed = True
            self._entries.close()

    def __enter__(self) -> "DirectoryIterator[AnyStr]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """List the entries of the current directory."""
    try:
        with DirectoryIterator(".") as entries:
            files = list(entries)
    except (OSError, ValueError) as exc:
        print(exc)
        return 1
    print(f"files: {files}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())