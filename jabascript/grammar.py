"""Declarative JabaScript front end built on Lark.

This module expresses the same grammar as :mod:`jabascript.parser` for
Lark's LALR parser and transforms the resulting parse tree into the same
expression node classes. For any valid line, :func:`parse_with_lark` and
:func:`jabascript.parser.parse_line` return equal trees.

Two places in the grammar are ambiguous for an LALR parser: a ``-`` or a
``(`` that follows an argument inside a call (``f(a -1)``, ``f(a (b))``).
Lark resolves such shift/reduce conflicts by shifting, which continues the
current argument exactly like the recursive-descent parser does.
"""

from __future__ import annotations

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedInput

from .ast import (
    Assignment, Binary, FunctionCall, FunctionDefinition, Identifier,
    IntegerLiteral, Node, Ternary, Unary,
)
from .errors import LexError, ParseError


JABA_GRAMMAR = r"""
    start: assign _NL

    ?assign: NAME "=" assign              -> assignment
           | ternary

    ?ternary: add "?" assign ":" assign   -> conditional
            | add

    ?add: mul
        | add PLUS mul                    -> binary
        | add MINUS mul                   -> binary

    ?mul: apply
        | mul MULOP apply                 -> binary

    ?apply: unary
          | apply "(" arguments ")"       -> call
    arguments: add*

    ?unary: MINUS atom                    -> negate
          | atom

    ?atom: INT                            -> integer
         | NAME                           -> identifier
         | "(" assign ")"
         | "|" params "|" assign          -> function
    params: NAME*

    PLUS: "+"
    MINUS: "-"
    MULOP: "*" | "/" | "%"
    INT: /\d+/
    NAME: /[^\W\d_]\w*/
    _NL: /\n+/

    WS_INLINE: /[^\S\n]+/
    %ignore WS_INLINE
"""


JABA_PARSER = Lark(
    JABA_GRAMMAR,
    parser='lalr',
    lexer='basic',
    maybe_placeholders=False,
)


@v_args(inline=True)
class ASTTransformer(Transformer):
    """Transforms the raw parse tree into expression nodes."""

    def start(self, expr):
        return expr

    def assignment(self, name, value):
        return Assignment(str(name), value)

    def conditional(self, condition, then_branch, else_branch):
        return Ternary(condition, then_branch, else_branch)

    def binary(self, left, op, right):
        return Binary(str(op), left, right)

    def call(self, callee, args):
        return FunctionCall(callee, args)

    def arguments(self, *args):
        return tuple(args)

    def negate(self, _minus, operand):
        return Unary(-1, operand)

    def integer(self, token):
        return IntegerLiteral(int(token))

    def identifier(self, token):
        return Identifier(str(token))

    def function(self, params, body):
        return FunctionDefinition(params, body)

    def params(self, *names):
        return tuple(str(name) for name in names)


def parse_with_lark(source: str) -> Node:
    """Parse one line of source text with the Lark grammar."""
    try:
        tree = JABA_PARSER.parse(source)
    except UnexpectedCharacters as e:
        raise LexError(f"invalid token {e.char!r}") from e
    except UnexpectedInput as e:
        raise ParseError(f"unexpected input at column {getattr(e, 'column', '?')}") from e
    return ASTTransformer().transform(tree)
