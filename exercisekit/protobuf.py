"""A minimal parser for protobuf wire-format messages."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field as dataclass_field
from typing import Protocol, TypeVar, Union


class ProtobufError(ValueError):
    """Raised when data is not a valid message."""


class WireType(enum.IntEnum):
    """A wire type as seen on the wire."""

    VARINT = 0
    LEN = 2

    @classmethod
    def from_value(cls, value: int) -> "WireType":
        try:
            return cls(value)
        except ValueError:
            raise ProtobufError(f"Invalid wire type: {value}") from None


@dataclass(frozen=True)
class Field:
    """A field number with its value, typed by its wire type."""

    field_num: int
    wire_type: WireType
    value: Union[int, bytes]

    def as_str(self) -> str:
        if self.wire_type is not WireType.LEN:
            raise ProtobufError("Expected string to be a `Len` field")
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ProtobufError("Invalid string") from exc

    def as_bytes(self) -> bytes:
        if self.wire_type is not WireType.LEN:
            raise ProtobufError("Expected bytes to be a `Len` field")
        return self.value

    def as_u64(self) -> int:
        if self.wire_type is not WireType.VARINT:
            raise ProtobufError("Expected `u64` to be a `Varint` field")
        return self.value


_MAX_VARINT_BYTES = 7


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a varint, returning its value and the remaining bytes."""
    data = bytes(data)
    for i, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        if not byte & 0x80:
            value = 0
            for b in reversed(data[: i + 1]):
                value = (value << 7) | (b & 0x7F)
            return value, data[i + 1 :]
    if len(data) < _MAX_VARINT_BYTES:
        raise ProtobufError("Not enough bytes for varint")
    raise ProtobufError("Too many bytes for varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into its field number and wire type."""
    return tag >> 3, WireType.from_value(tag & 0x7)


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
        return Field(field_num, wire_type, value), remainder
    length, remainder = parse_varint(remainder)
    if len(remainder) < length:
        raise ProtobufError("Unexpected EOF")
    return Field(field_num, wire_type, remainder[:length]), remainder[length:]


class ProtoMessage(Protocol):
    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=ProtoMessage)


def parse_message(data: bytes, message_type: type[M]) -> M:
    """Parse all of ``data`` into a new ``message_type`` instance."""
    result = message_type()
    remainder = bytes(data)
    while remainder:
        parsed, remainder = parse_field(remainder)
        result.add_field(parsed)
    return result


@dataclass
class PhoneNumber:
    number: str = ""
    kind: str = ""

    def add_field(self, field: Field) -> None:
        if field.field_num == 1:
            self.number = field.as_str()
        elif field.field_num == 2:
            self.kind = field.as_str()


@dataclass
class Person:
    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = dataclass_field(default_factory=list)

    def add_field(self, field: Field) -> None:
        if field.field_num == 1:
            self.name = field.as_str()
        elif field.field_num == 2:
            self.id = field.as_u64()
        elif field.field_num == 3:
            self.phone.append(parse_message(field.as_bytes(), PhoneNumber))