"""Token kinds and the Token value produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional


class TokenType:
    """Enumeration of token types."""
    NUMBER = 'NUMBER'
    ADD = 'ADD'
    SUBTRACT = 'SUBTRACT'
    MULTIPLY = 'MULTIPLY'
    DIVIDE = 'DIVIDE'
    MODULO = 'MODULO'
    POWER = 'POWER'
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'


# Binary operators and their precedence. Higher number = binds tighter.
PRECEDENCE: Dict[str, int] = {
    TokenType.ADD: 1,
    TokenType.SUBTRACT: 1,
    TokenType.MULTIPLY: 2,
    TokenType.DIVIDE: 2,
    TokenType.MODULO: 2,
    TokenType.POWER: 3,
}

SYMBOLS: Dict[str, str] = {
    TokenType.ADD: '+',
    TokenType.SUBTRACT: '-',
    TokenType.MULTIPLY: '*',
    TokenType.DIVIDE: '/',
    TokenType.MODULO: '%',
    TokenType.POWER: '**',
    TokenType.LPAREN: '(',
    TokenType.RPAREN: ')',
}


@dataclass(frozen=True)
class Token:
    """A single lexical token. Only NUMBER tokens carry a value."""
    type: str
    value: Optional[Decimal] = None

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.type, 0)

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return format(self.value, "f")
        return SYMBOLS[self.type]

    def __repr__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"Token({self.type}, {self.value!r})"
        return f"Token({self.type})"


def number(value: Decimal) -> Token:
    return Token(TokenType.NUMBER, value)


# Operator and parenthesis tokens hold no value, so one shared instance each.
ADD = Token(TokenType.ADD)
SUBTRACT = Token(TokenType.SUBTRACT)
MULTIPLY = Token(TokenType.MULTIPLY)
DIVIDE = Token(TokenType.DIVIDE)
MODULO = Token(TokenType.MODULO)
POWER = Token(TokenType.POWER)
LPAREN = Token(TokenType.LPAREN)
RPAREN = Token(TokenType.RPAREN)
