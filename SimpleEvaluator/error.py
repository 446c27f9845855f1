# error.py
"""Error types raised by the expression engine.

Every error carries a four digit code (see ERROR_MESSAGES) and, once it
leaves the Evaluator, the expression that caused it.
"""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class FormatError(MathError):
    """A numeric literal (or the supplied variable value) is not a valid decimal."""
    def __init__(self, message, code="3008", equation=None):
        super().__init__(message, code=code, equation=equation)


class InvalidCharacter(MathError):
    """A character outside the accepted alphabet was found during the scan."""
    def __init__(self, character, position, equation=None):
        super().__init__(f"Encountered invalid character {character!r} at position {position}",
                         code="3011", equation=equation)
        self.character = character
        self.position = position


class MalformedExpression(MathError):
    def __init__(self, message, code="3012", equation=None):
        super().__init__(message, code=code, equation=equation)


class UnbalancedParenthesis(MalformedExpression):
    def __init__(self, message, code="3009", equation=None):
        super().__init__(message, code=code, equation=equation)


class MultipleVariables(MalformedExpression):
    def __init__(self, message, code="3002", equation=None):
        super().__init__(message, code=code, equation=equation)


class NestingTooDeep(MalformedExpression):
    def __init__(self, message, code="3032", equation=None):
        super().__init__(message, code=code, equation=equation)


class CalculationError(MathError):
    pass


class DivisionByZero(CalculationError):
    def __init__(self, message="Division by zero", code="3003", equation=None):
        super().__init__(message, code=code, equation=equation)


Error_Dictionary = {

    "3": "Calculator Error",
    "5": "Configuration Error",
    "9": "Unexpected Error",

}

# Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number

ERROR_MESSAGES = {
    "3002": "Multiple Variables in problem: ",  # + Given Problem
    "3003": "Division by Zero",
    "3008": "Invalid number: ",  # + literal
    "3009": "Missing ')'. ",
    "3010": "Missing '('. ",
    "3011": "Invalid character: ",  # + character
    "3012": "Invalid equation: ",  # + Equation
    "3026": "Number too big.",
    "3032": "Too many nested parentheses.",

    "9999": "Unexpected Error: "  # + error
}
