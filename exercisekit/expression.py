"""Evaluation of arithmetic expressions held as trees."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class Operation(enum.Enum):
    """An operation to perform on two subexpressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Value:
    """A literal integer value."""

    value: int


@dataclass(frozen=True)
class Op:
    """An operation applied to two subexpressions."""

    op: Operation
    left: "Expression"
    right: "Expression"


Expression = Union[Op, Value]


class DivideByZeroError(ZeroDivisionError):
    """Raised when an expression divides by zero."""

    def __init__(self, message: str = "Cannot divide by zero!") -> None:
        super().__init__(message)


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: Expression) -> int:
    """Evaluate ``expression``; integer division truncates toward zero."""
    match expression:
        case Value(value=value):
            return value
        case Op(op=op, left=left, right=right):
            lhs = evaluate(left)
            rhs = evaluate(right)
            match op:
                case Operation.ADD:
                    return lhs + rhs
                case Operation.SUB:
                    return lhs - rhs
                case Operation.MUL:
                    return lhs * rhs
                case Operation.DIV:
                    if rhs == 0:
                        raise DivideByZeroError()
                    return _truncating_divide(lhs, rhs)
            raise TypeError(f"unknown operation: {op!r}")
    raise TypeError(f"not an expression: {expression!r}")