"""Tokenizer for JabaScript source lines.

The lexer turns one line of source text into a flat list of tokens. It is
a plain function with no state kept between calls, so tokenizing the same
text twice always yields equal token lists.
"""

from __future__ import annotations

from typing import List

from .errors import LexError
from .tokens import OPERATORS, Token, TokenKind


def is_digit(c: str) -> bool:
    return c.isdecimal()


def is_letter(c: str) -> bool:
    return c.isalpha()


def tokenize(source: str) -> List[Token]:
    """Convert source text into a list of tokens ending with an EOF token.

    Whitespace other than newlines is skipped. A run of newlines becomes a
    single NEWLINE token so that blank lines never produce empty
    statements. Any character that does not start a number, an identifier
    or an operator raises LexError.
    """
    tokens: List[Token] = []
    i = 0
    length = len(source)
    while i < length:
        c = source[i]
        # Skip whitespace, but newlines are significant
        if c.isspace() and c != '\n':
            i += 1
            continue
        if c == '\n':
            while i < length and source[i] == '\n':
                i += 1
            tokens.append(Token(TokenKind.NEWLINE))
            continue
        if is_digit(c):
            start = i
            while i < length and is_digit(source[i]):
                i += 1
            tokens.append(Token(TokenKind.INTEGER, source[start:i]))
            continue
        if is_letter(c):
            start = i
            while i < length and (is_letter(source[i]) or is_digit(source[i]) or source[i] == '_'):
                i += 1
            tokens.append(Token(TokenKind.IDENTIFIER, source[start:i]))
            continue
        kind = OPERATORS.get(c)
        if kind is not None:
            tokens.append(Token(kind, c))
            i += 1
            continue
        raise LexError(f"invalid token {c!r}")
    tokens.append(Token(TokenKind.EOF))
    return tokens
