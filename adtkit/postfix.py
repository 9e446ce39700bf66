"""Evaluation of postfix expressions on a stack of string tokens."""

from __future__ import annotations

import re
from enum import Enum, auto

from adtkit.stack import Stack

_SYMBOL = re.compile(r"\+|\*|-|/|:")


class Operation(Enum):
    """Arithmetic operations understood by :func:`execute_operation`."""

    PLUS = auto()
    MINUS = auto()
    DIVIDE = auto()
    MULTIPLY = auto()
    ELEVATE = auto()


def is_symbol(token: str) -> bool:
    """Return whether ``token`` is one of the operator symbols ``+ * - / :``."""
    return _SYMBOL.fullmatch(token) is not None


def operation_for(symbol: str) -> Operation:
    """Map an operator symbol to its operation; unknown symbols mean ELEVATE."""
    if symbol == "+":
        return Operation.PLUS
    if symbol == "-":
        return Operation.MINUS
    if symbol in (":", "/"):
        return Operation.DIVIDE
    if symbol == "*":
        return Operation.MULTIPLY
    return Operation.ELEVATE


def _truncating_division(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def execute_operation(symbol: str, first_operand: str, second_operand: str) -> str:
    """Apply ``symbol`` to two integer operands given as strings.

    Sums, differences and products are returned as absolute values; division
    truncates toward zero. The result is returned as a string.
    """
    first = int(first_operand)
    second = int(second_operand)
    operation = operation_for(symbol)
    if operation is Operation.PLUS:
        result = abs(first + second)
    elif operation is Operation.MINUS:
        result = abs(first - second)
    elif operation is Operation.MULTIPLY:
        result = abs(first * second)
    elif operation is Operation.DIVIDE:
        result = _truncating_division(first, second)
    else:
        result = first ** (max(second, 0) + 1)
    return str(result)


class PostfixStack(Stack):
    """A stack that evaluates an operator as soon as it is pushed."""

    def push(self, value: str) -> None:
        """Push ``value``; an operator replaces itself and two operands with the result."""
        super().push(value)
        if is_symbol(value):
            symbol = self.pop()
            first_operand = self.pop()
            second_operand = self.pop()
            self.push(execute_operation(symbol, first_operand, second_operand))