# Operations.py
"""Operator registry: precedence and arithmetic for the four binary operators.

The table is built once at import time and is read-only afterwards.
"""

from types import MappingProxyType

from . import error as E
from .Nodes import BinOp


def _add(left_value, right_value):
    return left_value + right_value


def _subtract(left_value, right_value):
    return left_value - right_value


def _multiply(left_value, right_value):
    return left_value * right_value


def _divide(left_value, right_value):
    if right_value == 0:
        raise E.DivisionByZero()
    return left_value / right_value


class Operation:
    """Descriptor for one operator symbol."""
    __slots__ = ("symbol", "name", "precedence", "function")

    def __init__(self, symbol, name, precedence, function):
        self.symbol = symbol
        self.name = name
        self.precedence = precedence
        self.function = function

    def apply(self, left, right):
        """Combine two nodes into a new BinOp node for this operator."""
        return BinOp(left, self, right)

    def compute(self, left_value, right_value):
        return self.function(left_value, right_value)

    def __repr__(self):
        return f"Operation({self.symbol!r}, {self.name}, precedence={self.precedence})"


Addition = Operation("+", "Addition", 1, _add)
Subtraction = Operation("-", "Subtraction", 1, _subtract)
Multiplication = Operation("*", "Multiplication", 2, _multiply)
Division = Operation("/", "Division", 2, _divide)

OPERATIONS = MappingProxyType({
    "+": Addition,
    "-": Subtraction,
    "*": Multiplication,
    "/": Division,
})


def lookup(symbol):
    """Return the Operation for symbol, or None if it is not an operator."""
    return OPERATIONS.get(symbol)


def isOperator(symbol):
    return symbol in OPERATIONS
