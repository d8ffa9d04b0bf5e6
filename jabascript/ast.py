"""Expression tree definitions for the JabaScript language.

A line of JabaScript parses into exactly one expression. The node classes
below are frozen dataclasses, so trees are immutable and two trees built
from the same source compare equal. Each node renders itself as a compact
s-expression through ``str()``; the interpreter uses that rendering in
debug traces and to name the callee in arity errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Node:
    """Base class for all expression nodes."""
    pass


@dataclass(frozen=True)
class IntegerLiteral(Node):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Identifier(Node):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Unary(Node):
    sign: int  # +1 or -1
    operand: Node

    def __str__(self) -> str:
        if self.sign == -1:
            return f"-{self.operand}"
        return str(self.operand)


@dataclass(frozen=True)
class Binary(Node):
    op: str  # one of + - * / %
    left: Node
    right: Node

    def __str__(self) -> str:
        return f"({self.op} {self.left} {self.right})"


@dataclass(frozen=True)
class Ternary(Node):
    condition: Node
    then_branch: Node
    else_branch: Node

    def __str__(self) -> str:
        return f"(? {self.condition} {self.then_branch} {self.else_branch})"


@dataclass(frozen=True)
class Assignment(Node):
    name: str
    value: Node

    def __str__(self) -> str:
        return f"(= {self.name} {self.value})"


@dataclass(frozen=True)
class FunctionDefinition(Node):
    params: Tuple[str, ...]
    body: Node

    def __str__(self) -> str:
        return f"(fn |{' '.join(self.params)}| {self.body})"


@dataclass(frozen=True)
class FunctionCall(Node):
    callee: Node
    args: Tuple[Node, ...]

    def __str__(self) -> str:
        if not self.args:
            return f"(call {self.callee})"
        return f"(call {self.callee} {' '.join(str(a) for a in self.args)})"
