"""
Evaluator for + - * / expressions with parentheses and one optional variable.

    >>> from SimpleEvaluator import evaluate
    >>> evaluate("(2+3)*4")
    Decimal('20')
    >>> evaluate("x*x", 4)
    Decimal('16')
"""

from .ExpressionEngine import Evaluator, evaluate
from .error import (
    MathError,
    FormatError,
    InvalidCharacter,
    MalformedExpression,
    UnbalancedParenthesis,
    MultipleVariables,
    NestingTooDeep,
    CalculationError,
    DivisionByZero,
)

__all__ = [
    'Evaluator', 'evaluate',
    'MathError', 'FormatError', 'InvalidCharacter', 'MalformedExpression',
    'UnbalancedParenthesis', 'MultipleVariables', 'NestingTooDeep',
    'CalculationError', 'DivisionByZero',
]
