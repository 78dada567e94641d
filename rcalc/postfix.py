"""Infix to postfix conversion using the shunting yard algorithm."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import UnmatchedParenthesesError
from .lexer import render_tokens
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


def to_postfix(tokens: Sequence[Token]) -> List[Token]:
    """Convert a list of infix tokens to reverse Polish order.

    Operators of equal precedence are popped before the new one is pushed,
    so every operator, '**' included, groups left to right. A ')' without a
    matching '(' just empties the operator stack; only a '(' left over at
    the end is reported.
    """
    # Output, in reverse Polish order
    out: List[Token] = []
    # Operator stack
    stack: List[Token] = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            out.append(token)
        elif token.type == TokenType.LPAREN:
            stack.append(token)
        elif token.type == TokenType.RPAREN:
            while stack:
                top = stack.pop()
                if top.type == TokenType.LPAREN:
                    break
                out.append(top)
        else:
            while (stack
                   and stack[-1].type != TokenType.LPAREN
                   and stack[-1].precedence >= token.precedence):
                out.append(stack.pop())
            stack.append(token)

    while stack:
        top = stack.pop()
        if top.type == TokenType.LPAREN:
            raise UnmatchedParenthesesError()
        out.append(top)

    logger.debug(f"Postfix: {render_tokens(out)}")
    return out
