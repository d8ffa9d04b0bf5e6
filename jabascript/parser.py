"""Recursive-descent parser for JabaScript.

The parser consumes the token list produced by :func:`jabascript.lexer.tokenize`
and builds a single expression tree per line. Grammar, from lowest to
highest binding strength::

    program    := assignment NEWLINE EOF
    assignment := IDENT '=' assignment | ternary
    ternary    := add ( '?' assignment ':' assignment )?
    add        := mul ( ('+' | '-') mul )*
    mul        := call ( ('*' | '/' | '%') call )*
    call       := unary ( '(' add* ')' )*
    unary      := '-'? atom
    atom       := INTEGER | IDENT | '(' assignment ')' | '|' IDENT* '|' assignment

Assignment is only recognised when an identifier is directly followed by
``=``. Once an operator, ``=``, ``?``/``:`` or an argument list has been
started, reaching the end of the line is reported as a ParseError instead
of silently ending the expression.
"""

from __future__ import annotations

from typing import List, Sequence

from .ast import (
    Assignment, Binary, FunctionCall, FunctionDefinition, Identifier,
    IntegerLiteral, Node, Ternary, Unary,
)
from .errors import ParseError
from .lexer import tokenize
from .tokens import ADDITIVE, MULTIPLICATIVE, Token, TokenKind


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return Token(TokenKind.EOF)

    def consume(self) -> Token:
        token = self.peek()
        self.pos += 1
        return token

    def match(self, *kinds: TokenKind) -> bool:
        return self.peek().kind in kinds

    def require(self, kind: TokenKind) -> Token:
        token = self.peek()
        if token.kind is not kind:
            raise ParseError(f"expected token {kind} found {token.kind}")
        return self.consume()

    def at_line_end(self) -> bool:
        return self.match(TokenKind.NEWLINE, TokenKind.EOF)

    def expect_operand(self):
        if self.at_line_end():
            raise ParseError("unexpected end of line, expected expression")

    def parse_program(self) -> Node:
        expr = self.parse_assignment()
        self.require(TokenKind.NEWLINE)
        if not self.match(TokenKind.EOF):
            raise ParseError("multiple expressions per line are not supported")
        return expr

    def parse_assignment(self) -> Node:
        if self.match(TokenKind.IDENTIFIER) and self.peek(1).kind is TokenKind.ASSIGNMENT:
            name = self.consume().text
            self.consume()  # '='
            self.expect_operand()
            return Assignment(name, self.parse_assignment())
        return self.parse_ternary()

    def parse_ternary(self) -> Node:
        condition = self.parse_add()
        if not self.match(TokenKind.TERNARY_START):
            return condition
        self.consume()
        self.expect_operand()
        then_branch = self.parse_assignment()
        self.require(TokenKind.TERNARY_SEP)
        self.expect_operand()
        else_branch = self.parse_assignment()
        return Ternary(condition, then_branch, else_branch)

    def parse_add(self) -> Node:
        node = self.parse_mul()
        while self.match(*ADDITIVE):
            op_token = self.consume()
            self.expect_operand()
            right = self.parse_mul()
            node = Binary(op_token.text, node, right)
        return node

    def parse_mul(self) -> Node:
        node = self.parse_call()
        while self.match(*MULTIPLICATIVE):
            op_token = self.consume()
            self.expect_operand()
            right = self.parse_call()
            node = Binary(op_token.text, node, right)
        return node

    def parse_call(self) -> Node:
        node = self.parse_unary()
        # each parenthesised group applies to the previous result: f(1)(2)
        while self.match(TokenKind.LPAREN):
            self.consume()
            args: List[Node] = []
            while not self.match(TokenKind.RPAREN):
                self.expect_operand()
                args.append(self.parse_add())
            self.consume()
            node = FunctionCall(node, tuple(args))
        return node

    def parse_unary(self) -> Node:
        if self.match(TokenKind.MINUS):
            self.consume()
            return Unary(-1, self.parse_atom())
        return self.parse_atom()

    def parse_atom(self) -> Node:
        token = self.peek()
        if token.kind is TokenKind.INTEGER:
            self.consume()
            return IntegerLiteral(int(token.text))
        if token.kind is TokenKind.IDENTIFIER:
            self.consume()
            return Identifier(token.text)
        if token.kind is TokenKind.LPAREN:
            self.consume()
            inner = self.parse_assignment()
            self.require(TokenKind.RPAREN)
            return inner
        if token.kind is TokenKind.PIPE:
            self.consume()
            params: List[str] = []
            while self.match(TokenKind.IDENTIFIER):
                params.append(self.consume().text)
            self.require(TokenKind.PIPE)
            self.expect_operand()
            body = self.parse_assignment()
            return FunctionDefinition(tuple(params), body)
        raise ParseError(f"unexpected token {token.kind}")


def parse(tokens: Sequence[Token]) -> Node:
    """Parse a token list into a single expression tree."""
    return Parser(tokens).parse_program()


def parse_line(source: str) -> Node:
    """Tokenize and parse one line of source text."""
    return parse(tokenize(source))
