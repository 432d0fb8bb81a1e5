"""A readable stream that applies a rotation cipher to ASCII letters."""

from __future__ import annotations

import io
import string
from functools import lru_cache
from typing import BinaryIO


@lru_cache(maxsize=None)
def _table(rot: int) -> bytes:
    shift = rot % 26
    lower = string.ascii_lowercase
    upper = string.ascii_uppercase
    source = (lower + upper).encode("ascii")
    target = (lower[shift:] + lower[:shift] + upper[shift:] + upper[:shift]).encode("ascii")
    return bytes.maketrans(source, target)


def rotate(data: bytes, rot: int) -> bytes:
    """Rotate every ASCII letter in ``data`` by ``rot`` places, keeping its case."""
    return bytes(data).translate(_table(rot))


class RotDecoder(io.RawIOBase):
    """Wraps a binary stream and rotates the ASCII letters read from it."""

    def __init__(self, source: BinaryIO, rot: int) -> None:
        super().__init__()
        self._source = source
        self.rot = rot

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:
        data = self._source.read(len(buffer))
        if data is None:
            return None
        size = len(data)
        memoryview(buffer).cast("B")[:size] = rotate(data, self.rot)
        return size