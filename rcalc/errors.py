"""Exceptions raised by the evaluation pipeline.

Each stage has its own branch (LexerError, ParseError, EvalError) under a
common CalcError, and every concrete error carries an ErrorKind tag so
callers can tell them apart without matching on the message.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_NUMBER = 'InvalidNumber'
    UNKNOWN_CHARACTER = 'UnknownCharacter'
    UNMATCHED_PARENTHESES = 'UnmatchedParentheses'
    INVALID_EXPRESSION = 'InvalidExpression'
    DIVISION_BY_ZERO = 'DivisionByZero'
    MODULO_BY_ZERO = 'ModuloByZero'
    POWER_CONVERSION_FAILED = 'PowerConversionFailed'
    ARITHMETIC_OVERFLOW = 'ArithmeticOverflow'


class CalcError(Exception):
    """Base class for calculator errors."""
    kind: ErrorKind


class LexerError(CalcError):
    """Raised for errors during tokenization."""
    pass


class ParseError(CalcError):
    """Raised when infix to postfix conversion fails."""
    pass


class EvalError(CalcError):
    """Raised for errors during postfix evaluation."""
    pass


class InvalidNumberError(LexerError):
    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, literal: str):
        super().__init__(f"Invalid number: {literal!r}")
        self.literal = literal


class UnknownCharacterError(LexerError):
    kind = ErrorKind.UNKNOWN_CHARACTER

    def __init__(self, char: str):
        super().__init__(f"Unknown character: [{char}]")
        self.char = char


class UnmatchedParenthesesError(ParseError):
    kind = ErrorKind.UNMATCHED_PARENTHESES

    def __init__(self):
        super().__init__("Unmatched parentheses")


class InvalidExpressionError(EvalError):
    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self):
        super().__init__("Invalid expression")


class DivisionByZeroError(EvalError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self):
        super().__init__("Division by zero")


class ModuloByZeroError(EvalError):
    kind = ErrorKind.MODULO_BY_ZERO

    def __init__(self):
        super().__init__("Modulo by zero")


class PowerConversionError(EvalError):
    kind = ErrorKind.POWER_CONVERSION_FAILED

    def __init__(self, detail: str = "result out of range"):
        super().__init__(f"Power {detail}")


class ArithmeticOverflowError(EvalError):
    kind = ErrorKind.ARITHMETIC_OVERFLOW

    def __init__(self, op: str):
        super().__init__(f"Result of '{op}' out of range")
        self.op = op
