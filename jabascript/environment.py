from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from jabascript.errors import StackOverflow, UndefinedVariable
from jabascript.types import Value


MAX_CALL_DEPTH = 500


class Environment:
    """Session state: one flat frame of bindings and a call-depth counter.

    There is no parent chain. During a function call the active frame is
    swapped for the call's own frame and swapped back when the call ends.
    """
    def __init__(self):
        self.values: Dict[str, Value] = {}
        self.call_depth = 0

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise UndefinedVariable(name)

    def set(self, name: str, value: Value):
        self.values[name] = value

    def bindings(self) -> List[Tuple[str, Value]]:
        return sorted(self.values.items())

    @contextmanager
    def call_frame(self, frame: Dict[str, Value]) -> Iterator[Dict[str, Value]]:
        """Make ``frame`` the active frame, restoring the caller's on exit."""
        saved = self.values
        self.values = frame
        try:
            yield frame
        finally:
            self.values = saved

    def enter_call(self):
        self.call_depth += 1
        if self.call_depth > MAX_CALL_DEPTH:
            # reset so the session stays usable once the error is reported
            self.call_depth = 0
            raise StackOverflow(f"max stack size {MAX_CALL_DEPTH} exceeded")

    def exit_call(self):
        # Frames unwinding past an overflow reset leave the counter negative.
        self.call_depth -= 1
