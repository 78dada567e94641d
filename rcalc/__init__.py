"""rcalc - decimal arithmetic expression evaluator.

            +------------+     +--------------+     +----------------+
 [text] >>> | tokenize() | >>> | to_postfix() | >>> | eval_postfix() | >>> [Decimal]
            +------------+     +--------------+     +----------------+
"""

from .errors import (
    ArithmeticOverflowError,
    CalcError,
    DivisionByZeroError,
    ErrorKind,
    EvalError,
    InvalidExpressionError,
    InvalidNumberError,
    LexerError,
    ModuloByZeroError,
    ParseError,
    PowerConversionError,
    UnknownCharacterError,
    UnmatchedParenthesesError,
)
from .evaluator import eval_postfix, evaluate, format_result
from .lexer import render_tokens, tokenize
from .postfix import to_postfix
from .tokens import Token, TokenType

__version__ = '0.1.0'

__all__ = [
    'ArithmeticOverflowError',
    'CalcError',
    'DivisionByZeroError',
    'ErrorKind',
    'EvalError',
    'InvalidExpressionError',
    'InvalidNumberError',
    'LexerError',
    'ModuloByZeroError',
    'ParseError',
    'PowerConversionError',
    'Token',
    'TokenType',
    'UnknownCharacterError',
    'UnmatchedParenthesesError',
    'eval_postfix',
    'evaluate',
    'format_result',
    'render_tokens',
    'to_postfix',
    'tokenize',
]
