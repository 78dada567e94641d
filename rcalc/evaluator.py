"""Postfix evaluation and the evaluate() entry point."""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation, Overflow, getcontext, localcontext
from typing import Callable, Dict, List, Optional, Sequence

from .errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InvalidExpressionError,
    ModuloByZeroError,
    PowerConversionError,
)
from .lexer import tokenize
from .postfix import to_postfix
from .tokens import SYMBOLS, Token, TokenType

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 28


def _divide(a: Decimal, b: Decimal) -> Decimal:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _modulo(a: Decimal, b: Decimal) -> Decimal:
    if b == 0:
        raise ModuloByZeroError()
    return a % b


def _power(a: Decimal, b: Decimal) -> Decimal:
    """a ** b computed in floating point.

    Fractional and negative exponents have no exact decimal answer, so this
    is the one operator that is not exact.
    """
    base = float(a)
    exponent = float(b)
    if not (math.isfinite(base) and math.isfinite(exponent)):
        raise PowerConversionError("operand cannot be converted to float")
    try:
        result = math.pow(base, exponent)
    except (OverflowError, ValueError):
        # OverflowError for huge results, ValueError for domain errors such
        # as a negative base with a fractional exponent.
        raise PowerConversionError() from None
    if not math.isfinite(result):
        raise PowerConversionError()
    value = Decimal(repr(result))
    if result.is_integer():
        value = value.to_integral_value()
    # Whole-number digits past the precision would only be float noise
    if value.adjusted() >= getcontext().prec:
        raise PowerConversionError()
    return +value


_BINARY_OPS: Dict[str, Callable[[Decimal, Decimal], Decimal]] = {
    TokenType.ADD: lambda a, b: a + b,
    TokenType.SUBTRACT: lambda a, b: a - b,
    TokenType.MULTIPLY: lambda a, b: a * b,
    TokenType.DIVIDE: _divide,
    TokenType.MODULO: _modulo,
    TokenType.POWER: _power,
}


def eval_postfix(tokens: Sequence[Token], precision: int = DEFAULT_PRECISION) -> Decimal:
    """Evaluate a list of tokens in reverse Polish order.

    Only the top of the final stack is returned; any values below it are
    left unchecked.
    """
    stack: List[Decimal] = []

    with localcontext() as ctx:
        ctx.prec = precision
        for token in tokens:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue
            if len(stack) < 2:
                raise InvalidExpressionError()
            b = stack.pop()
            a = stack.pop()
            op = _BINARY_OPS.get(token.type)
            if op is None:
                raise InvalidExpressionError()
            try:
                stack.append(op(a, b))
            except (Overflow, InvalidOperation):
                raise ArithmeticOverflowError(SYMBOLS[token.type]) from None

    if not stack:
        raise InvalidExpressionError()
    if len(stack) > 1:
        logger.debug(f"Ignoring {len(stack) - 1} leftover operand(s)")
    return stack.pop()


def evaluate(expression: str, precision: Optional[int] = None) -> Decimal:
    """Tokenize, convert and evaluate an infix expression.

    Raises a CalcError subclass from whichever stage fails first.
    """
    tokens = tokenize(expression)
    postfix = to_postfix(tokens)
    return eval_postfix(postfix, DEFAULT_PRECISION if precision is None else precision)


def format_result(value: Decimal) -> str:
    """Render a result in positional notation, keeping its scale."""
    return format(value, 'f')
