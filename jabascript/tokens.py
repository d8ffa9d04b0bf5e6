"""Token vocabulary shared by the lexer and the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    PLUS = '+'
    MINUS = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'
    PIPE = '|'
    LPAREN = '('
    RPAREN = ')'
    ASSIGNMENT = '='
    TERNARY_START = '?'
    TERNARY_SEP = ':'
    INTEGER = 'integer'
    IDENTIFIER = 'identifier'
    NEWLINE = 'newline'
    EOF = 'end of input'
    INVALID = 'invalid'

    def __str__(self) -> str:
        return self.value


# Single-character operators and punctuation, keyed by their source text.
OPERATORS = {
    kind.value: kind
    for kind in (
        TokenKind.DIV, TokenKind.MUL, TokenKind.MOD, TokenKind.MINUS,
        TokenKind.PLUS, TokenKind.ASSIGNMENT, TokenKind.LPAREN,
        TokenKind.RPAREN, TokenKind.TERNARY_START, TokenKind.TERNARY_SEP,
        TokenKind.PIPE,
    )
}

# Binary operators, in the two precedence groups the parser knows about.
ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
MULTIPLICATIVE = (TokenKind.MUL, TokenKind.DIV, TokenKind.MOD)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ''

    def __str__(self) -> str:
        if self.text:
            return f"({self.kind} {self.text})"
        return f"({self.kind})"
