"""Runtime values for the JabaScript interpreter.

JabaScript has exactly three kinds of runtime value:

* integers, represented directly as Python ``int``;
* functions, a :class:`FunctionVal` wrapping an uncaptured function literal;
* closures, a :class:`ClosureVal` pairing a function literal with a frozen
  snapshot of the bindings that were active when it was returned from a
  call.

Only integers take part in arithmetic; functions and closures are the only
callable values.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Union

from .ast import FunctionDefinition


FUNCTION_PLACEHOLDER = '[Function]'


@dataclass(frozen=True)
class FunctionVal:
    definition: FunctionDefinition

    def __repr__(self) -> str:
        return '<function>'


@dataclass(frozen=True, eq=False)
class ClosureVal:
    """A function literal plus the bindings it captured.

    ``captured`` is a read-only mapping; calling the closure copies it into
    a fresh frame and never writes back.
    """
    definition: FunctionDefinition
    captured: Mapping[str, Any]

    @classmethod
    def capture(cls, definition: FunctionDefinition, frame: Mapping[str, Any]) -> 'ClosureVal':
        return cls(definition, MappingProxyType(dict(frame)))

    def __repr__(self) -> str:
        return '<closure>'


Value = Union[int, FunctionVal, ClosureVal]


def is_integer(value: Any) -> bool:
    # bool is a subclass of int but never a JabaScript value
    return isinstance(value, int) and not isinstance(value, bool)


def is_callable(value: Any) -> bool:
    return isinstance(value, (FunctionVal, ClosureVal))


def type_name(value: Any) -> str:
    if is_integer(value):
        return 'Integer'
    if isinstance(value, FunctionVal):
        return 'Function'
    if isinstance(value, ClosureVal):
        return 'Closure'
    return type(value).__name__


def to_string(value: Any) -> str:
    """Render a value for display.

    Functions and closures are opaque: they never show their parameters,
    body or captured bindings.
    """
    if is_integer(value):
        return str(value)
    if is_callable(value):
        return FUNCTION_PLACEHOLDER
    raise TypeError(f"not a JabaScript value: {value!r}")
