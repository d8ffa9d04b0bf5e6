"""Exception types used to report JabaScript lex, parse and runtime errors."""


class JabaError(Exception):
    """Base class for every error a line of JabaScript can produce."""
    kind = 'Error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def describe(self) -> str:
        return f"{self.kind}: {self.message}"


class LexError(JabaError):
    kind = 'LexError'


class ParseError(JabaError):
    kind = 'ParseError'


class EvalError(JabaError):
    """Raised while evaluating an expression tree."""
    kind = 'RuntimeError'


class UndefinedVariable(EvalError):
    def __init__(self, name: str):
        super().__init__(f"undefined variable {name}")
        self.name = name


class NotCallable(EvalError):
    pass


class ArityMismatch(EvalError):
    def __init__(self, callee: str, expected: int, actual: int):
        super().__init__(
            f"incorrect number of arguments for {callee}, expected {expected} got {actual}"
        )
        self.callee = callee
        self.expected = expected
        self.actual = actual


class TypeMismatch(EvalError):
    pass


class DivisionByZero(EvalError):
    pass


class StackOverflow(EvalError):
    pass
