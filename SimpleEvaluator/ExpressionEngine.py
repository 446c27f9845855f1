# ExpressionEngine.py
"""
Core evaluation engine.

Pipeline
--------
1) Scan: a single left-to-right pass classifies characters into numbers,
   the variable, operators and parentheses.
2) Shunting-yard: operands and pending operators live on two stacks; an
   incoming operator first reduces every stacked operator of greater or
   equal precedence (left associativity), ')' reduces back to its '('.
3) Materialize: the one remaining node is reduced to a Decimal, with the
   caller's value substituted for the variable when one was seen.
"""

import logging
from decimal import MAX_PREC, Decimal, Context, InvalidOperation, Overflow, localcontext

from . import Operations
from . import error as E
from .Nodes import Number, Variable

logger = logging.getLogger(__name__)

OPEN_PARENTHESIS = "("
CLOSE_PARENTHESIS = ")"
DIGITS = "0123456789"

DEFAULT_PRECISION = 50
DEFAULT_MAX_NESTING_DEPTH = 256


def isDigit(character):
    return character in DIGITS


def to_decimal(value):
    """Normalize a caller supplied value to a finite Decimal (via str, like Number)."""
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation:
            raise E.FormatError(f"Invalid variable value: {value!r}")

    # NaN and Infinity parse, but are not numbers an expression can use
    if not value.is_finite():
        raise E.FormatError(f"Invalid variable value: {value!r}")
    return value


def check_positive(name, value, maximum=None):
    """Return value, or raise ValueError if it is not an integer in 1..maximum."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{name} must not exceed {maximum}, got {value!r}")
    return value


class Evaluator:
    """Two-stack evaluator for + - * / expressions with one optional variable.

    An instance keeps its stacks between calls and resets them at the start
    of every evaluate(); it must not be shared between threads. Use the
    module level evaluate() for an isolated instance per call.

    precision and max_nesting_depth are fixed at construction; the engine
    never reads settings on its own.
    """

    def __init__(self, precision=DEFAULT_PRECISION, max_nesting_depth=DEFAULT_MAX_NESTING_DEPTH):
        self.precision = check_positive("precision", precision, MAX_PREC)
        self.max_nesting_depth = check_positive("max_nesting_depth", max_nesting_depth)

        self.operand_stack = []
        self.operator_stack = []
        self.variable = None
        self.nesting_depth = 0

    def reset(self):
        self.operand_stack.clear()
        self.operator_stack.clear()
        self.variable = None
        self.nesting_depth = 0

    def evaluate(self, expression, variable_value=0):
        """Evaluate expression and return a Decimal.

        Empty or whitespace-only input returns 0 without parsing.
        variable_value is only used when the expression names a variable.
        """
        if not expression or expression.isspace():
            return Decimal(0)

        self.reset()
        logger.debug("Evaluating %r", expression)

        try:
            with localcontext(Context(prec=self.precision)):
                root = self.parse(expression)

                if self.variable is None:
                    result = root.evaluate()
                else:
                    logger.debug("Substituting %s = %s", self.variable.name, variable_value)
                    result = root.evaluate(to_decimal(variable_value))

        # Known numeric overflow
        except Overflow:
            raise E.CalculationError(
                message="Number too large (Arithmetic overflow).",
                code="3026",
                equation=expression
            )
        # Attach the source expression to our own errors
        except E.MathError as e:
            e.equation = expression
            raise e

        return result

    def parse(self, expression):
        """Scan expression and return the root node of its expression tree."""
        position = 0

        while position < len(expression):
            current_char = expression[position]

            if current_char == " ":
                position += 1

            elif isDigit(current_char):
                position = self.read_operand(expression, position)

            elif current_char.isalpha():
                position = self.read_parameter(expression, position)

            elif Operations.isOperator(current_char):
                current_operation = Operations.lookup(current_char)
                self.reduce(current_operation.precedence)
                self.operator_stack.append(current_operation)
                position += 1

            elif current_char == OPEN_PARENTHESIS:
                self.nesting_depth += 1
                if self.nesting_depth > self.max_nesting_depth:
                    raise E.NestingTooDeep(
                        f"More than {self.max_nesting_depth} nested parentheses at position {position}")
                self.operator_stack.append(OPEN_PARENTHESIS)
                position += 1

            elif current_char == CLOSE_PARENTHESIS:
                self.reduce()
                if not self.operator_stack:
                    raise E.UnbalancedParenthesis(f"Missing '(' for ')' at position {position}", code="3010")
                self.operator_stack.pop()
                self.nesting_depth -= 1
                position += 1

            else:
                raise E.InvalidCharacter(current_char, position)

        # Drain whatever is still pending
        self.reduce()
        if self.operator_stack:
            raise E.UnbalancedParenthesis("Missing closing parenthesis ')'", code="3009")

        if len(self.operand_stack) != 1:
            raise E.MalformedExpression(
                f"Expected one result, found {len(self.operand_stack)} operands")

        return self.operand_stack.pop()

    def reduce(self, min_precedence=None):
        """Apply stacked operators until '(' (or an empty stack) is on top.

        With min_precedence, stop as soon as the top operator binds looser
        than min_precedence.
        """
        while self.operator_stack and self.operator_stack[-1] != OPEN_PARENTHESIS:
            top = self.operator_stack[-1]
            if min_precedence is not None and top.precedence < min_precedence:
                break
            self.apply_top()

    def apply_top(self):
        operation = self.operator_stack.pop()

        if len(self.operand_stack) < 2:
            raise E.MalformedExpression(f"Missing operand for '{operation.symbol}'")

        right = self.operand_stack.pop()
        left = self.operand_stack.pop()
        self.operand_stack.append(operation.apply(left, right))

    def read_operand(self, expression, position):
        """Push the numeric literal starting at position; return the next position."""
        start = position
        while position < len(expression) and (isDigit(expression[position]) or expression[position] == "."):
            position += 1

        literal = expression[start:position]
        try:
            self.operand_stack.append(Number(Decimal(literal)))
        except InvalidOperation:
            raise E.FormatError(f"Invalid number: {literal}")

        return position

    def read_parameter(self, expression, position):
        """Push the variable named at position; return the next position."""
        start = position
        while position < len(expression) and expression[position].isalpha():
            position += 1

        name = expression[start:position]

        # Only one variable is supported; every occurrence shares one node
        if self.variable is None:
            self.variable = Variable(name)
        elif self.variable.name != name:
            raise E.MultipleVariables(
                f"Multiple variables found: '{self.variable.name}' and '{name}'")

        self.operand_stack.append(self.variable)
        return position


def evaluate(expression, variable_value=0):
    """Evaluate expression on a fresh Evaluator (no state shared between calls)."""
    return Evaluator().evaluate(expression, variable_value)
