# JabaScript language package
# This package provides a lexer, parser and tree-walking interpreter for JabaScript.
from .environment import Environment
from .errors import JabaError
from .interpreter import Interpreter, evaluate_line, run_lines

__all__ = [
    'Environment',
    'Interpreter',
    'JabaError',
    'evaluate_line',
    'run_lines',
]
