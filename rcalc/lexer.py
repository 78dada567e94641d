"""Tokenizer: turns an expression string into a list of tokens."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List

from .errors import InvalidNumberError, UnknownCharacterError
from .tokens import (
    ADD, DIVIDE, LPAREN, MODULO, MULTIPLY, POWER, RPAREN, SUBTRACT,
    Token, number,
)

logger = logging.getLogger(__name__)

_NUMBER_CHARS = set('0123456789.')
_WHITESPACE = set(' \t\n\r')

# '*' is handled separately because of '**'. Full-width CJK brackets are
# accepted as aliases of the ASCII ones.
_SINGLE_CHAR_TOKENS: Dict[str, Token] = {
    '+': ADD,
    '-': SUBTRACT,
    '/': DIVIDE,
    '%': MODULO,
    '(': LPAREN,
    '（': LPAREN,
    ')': RPAREN,
    '）': RPAREN,
}


class Lexer:
    """Tokenizer for calculator expressions.

    Digits and '.' accumulate into a pending number which is flushed when an
    operator or parenthesis is seen, or at end of input. Whitespace is
    skipped and does not end a number.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.len = len(text)
        self._pending: List[str] = []

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < self.len else ''

    def _advance(self) -> str:
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def _flush_number(self, tokens: List[Token]) -> None:
        if not self._pending:
            return
        raw = ''.join(self._pending)
        self._pending.clear()
        try:
            value = Decimal(raw)
        except InvalidOperation:
            raise InvalidNumberError(raw) from None
        tokens.append(number(value))

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        while self.pos < self.len:
            ch = self._advance()
            if ch in _NUMBER_CHARS:
                self._pending.append(ch)
            elif ch in _WHITESPACE:
                continue
            elif ch == '*':
                self._flush_number(tokens)
                if self._peek() == '*':
                    self._advance()
                    tokens.append(POWER)
                else:
                    tokens.append(MULTIPLY)
            elif ch in _SINGLE_CHAR_TOKENS:
                self._flush_number(tokens)
                tokens.append(_SINGLE_CHAR_TOKENS[ch])
            else:
                raise UnknownCharacterError(ch)
        self._flush_number(tokens)
        logger.debug(f"Tokenized {self.text!r} into {len(tokens)} tokens")
        return tokens


def tokenize(text: str) -> List[Token]:
    """Convert a string into a list of tokens."""
    return Lexer(text).tokenize()


def render_tokens(tokens: Iterable[Token]) -> str:
    """Canonical text for a token sequence; tokenize() reads it back unchanged."""
    return ' '.join(str(token) for token in tokens)
