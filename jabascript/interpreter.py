"""Tree-walking evaluator for the JabaScript language.

This module ties the pipeline together: a line of source text is
tokenized, parsed into a single expression tree and evaluated against an
:class:`~jabascript.environment.Environment`. The environment is passed
explicitly to every evaluation, so independent sessions never share state.

Function calls follow a manual frame discipline. A call builds a fresh
flat frame (parameters, then captured bindings, then the caller's frame
for anything still missing), swaps it in for the duration of the body and
restores the caller's frame afterwards, even when the body fails. A call
whose body produces a bare function wraps it into a closure that snapshots
the callee's frame; that is what makes currying work::

    adder = |a| |b| a + b
    adder(3)(4)            # 7
"""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, Tuple

from .ast import (
    Assignment, Binary, FunctionCall, FunctionDefinition, Identifier,
    IntegerLiteral, Node, Ternary, Unary,
)
from .environment import MAX_CALL_DEPTH, Environment
from .errors import (
    ArityMismatch, DivisionByZero, EvalError, JabaError, NotCallable,
    ParseError, TypeMismatch,
)
from .grammar import parse_with_lark
from .lexer import tokenize
from .parser import parse
from .types import ClosureVal, FunctionVal, Value, is_integer, to_string, type_name


# Evaluated once per session, before any user input.
PRELUDE = (
    "rand = |seed| |x| (1664525 * (x + seed) + 1013904223) % 4294967296\n",
    "fibonacci = |n| n - 1 ? n ? fibonacci(n - 1) + fibonacci(n - 2) : 0 : 1\n",
)

# Generous per-call allowance of Python frames, so that MAX_CALL_DEPTH is
# always hit before Python's own recursion limit.
FRAMES_PER_CALL = 40

# Host limits are process-wide, so they are raised once on import.
if sys.getrecursionlimit() < MAX_CALL_DEPTH * FRAMES_PER_CALL:
    sys.setrecursionlimit(MAX_CALL_DEPTH * FRAMES_PER_CALL)
# Integers are unbounded, and so is their decimal form.
sys.set_int_max_str_digits(0)


def truncating_divmod(a: int, b: int) -> Tuple[int, int]:
    """Integer division and remainder rounding toward zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


class Interpreter:
    """Evaluates JabaScript lines against a session environment."""
    def __init__(self, env: Optional[Environment] = None, prelude: bool = True,
                 debug_level: int = 0, debug_file: Optional[str] = None,
                 parser: str = 'descent'):
        self.env = env if env is not None else Environment()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_file else None
        self.parser = parser
        if prelude:
            self.load_prelude()

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def load_prelude(self):
        for line in PRELUDE:
            self.run_line(line)

    # Public API
    def parse_line(self, source: str) -> Node:
        if self.parser == 'lark':
            expr = parse_with_lark(source)
        else:
            tokens = tokenize(source)
            if self.debug_level >= 1:
                self.debug(f"tokens: {' '.join(str(t) for t in tokens)}")
            expr = parse(tokens)
        if self.debug_level >= 1:
            self.debug(f"expression: {expr}")
        return expr

    def run_line(self, source: str) -> Value:
        """Tokenize, parse and evaluate one line, raising JabaError on failure."""
        try:
            expr = self.parse_line(source)
        except RecursionError:
            raise ParseError("expression nested too deeply")
        return self.run_tree(expr)

    def run_tree(self, expr: Node) -> Value:
        """Evaluate an already parsed expression in the session environment."""
        try:
            return self.evaluate(expr, self.env)
        except RecursionError:
            raise EvalError("expression nested too deeply")

    def evaluate_line(self, source: str) -> Tuple[str, Optional[str]]:
        """Evaluate one line and return ``(display, error)``.

        Exactly one of the two is meaningful: on success ``error`` is None,
        on failure ``display`` is empty and ``error`` describes the problem.
        """
        try:
            value = self.run_line(source)
        except JabaError as e:
            return '', e.describe()
        return to_string(value), None

    def evaluate(self, node: Node, env: Environment) -> Value:
        if isinstance(node, IntegerLiteral):
            return node.value
        if isinstance(node, Identifier):
            return env.get(node.name)
        if isinstance(node, Unary):
            operand = self.evaluate(node.operand, env)
            if node.sign == 1:
                return operand
            if not is_integer(operand):
                raise TypeMismatch(f"cannot negate non-integer {type_name(operand)}")
            return -operand
        if isinstance(node, Binary):
            left = self.evaluate(node.left, env)
            if not is_integer(left):
                raise TypeMismatch(f"{node.op} cannot be applied to expression of type {type_name(left)}")
            right = self.evaluate(node.right, env)
            if not is_integer(right):
                raise TypeMismatch(f"{node.op} cannot be applied to expression of type {type_name(right)}")
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, Ternary):
            cond = self.evaluate(node.condition, env)
            if not is_integer(cond):
                raise TypeMismatch("cannot evaluate condition on non-integer value")
            if self.debug_level >= 3:
                self.debug(f"condition {node.condition} -> {cond}")
            if cond != 0:
                return self.evaluate(node.then_branch, env)
            return self.evaluate(node.else_branch, env)
        if isinstance(node, Assignment):
            value = self.evaluate(node.value, env)
            env.set(node.name, value)
            if self.debug_level >= 3:
                self.debug(f"assign {node.name} = {to_string(value)}")
            return value
        if isinstance(node, FunctionDefinition):
            return FunctionVal(node)
        if isinstance(node, FunctionCall):
            return self.call_function(node, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def call_function(self, node: FunctionCall, env: Environment) -> Value:
        func = self.evaluate(node.callee, env)
        if isinstance(func, ClosureVal):
            definition, captured = func.definition, func.captured
        elif isinstance(func, FunctionVal):
            definition, captured = func.definition, {}
        else:
            raise NotCallable("expression does not evaluate to a function")

        if len(node.args) != len(definition.params):
            raise ArityMismatch(str(node.callee), len(definition.params), len(node.args))

        env.enter_call()
        try:
            # arguments are evaluated in the caller's frame
            frame: Dict[str, Value] = {}
            for name, arg in zip(definition.params, node.args):
                frame[name] = self.evaluate(arg, env)
            for name, value in captured.items():
                frame.setdefault(name, value)
            for name, value in env.values.items():
                frame.setdefault(name, value)
            if self.debug_level >= 2:
                self.debug(f"call {node.callee} depth {env.call_depth}")
            with env.call_frame(frame):
                result = self.evaluate(definition.body, env)
                if isinstance(result, FunctionVal):
                    result = ClosureVal.capture(result.definition, env.values)
            if self.debug_level >= 2:
                self.debug(f"return {to_string(result)} from {node.callee}")
            return result
        finally:
            env.exit_call()

    def apply_binary_op(self, op: str, a: int, b: int) -> int:
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '*':
            return a * b
        if op == '/':
            if b == 0:
                raise DivisionByZero("division by zero")
            return truncating_divmod(a, b)[0]
        if op == '%':
            if b == 0:
                raise DivisionByZero("modulo by zero")
            return truncating_divmod(a, b)[1]
        raise TypeMismatch(f"unknown operator {op}")


def evaluate_line(text: str, env: Environment) -> Tuple[str, Optional[str]]:
    """Evaluate one line of source against ``env`` without loading the prelude."""
    return Interpreter(env, prelude=False).evaluate_line(text)


def run_lines(lines: List[str], env: Optional[Environment] = None) -> List[Value]:
    """Run several lines in one session, returning every result."""
    interpreter = Interpreter(env)
    return [interpreter.run_line(line) for line in lines]
