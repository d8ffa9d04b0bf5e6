"""Interactive mode for the JabaScript interpreter. Uses cmd as backend."""

import cmd

from .types import to_string


HELP_TEXT = """Documentation:
  - Functions:
    - Fn definition: adder = |a b| a + b
    - Fn calling:    adder(1 2)
    - Currying:      add = |a| |b| a + b, then add(1)(2)
  - Basic arithmetic:
    - 1 + b, 8 % 3, (a + 2) * 3, etc
  - Conditionals:
    - n ? 1 : 0   (any nonzero integer is true)
  - Data types:
    - Integer
    - Function
Commands:
  - exit
  - debug
    - Toggles token and expression tracing
  - vars
    - Lists every variable in the session"""


class Shell(cmd.Cmd):
    """JabaScript interpreter shell."""
    intro = "JabaScript interpreter\nType 'help' for more information."
    prompt = "> "

    def __init__(self, interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter

    def default(self, line):
        """Evaluates a line of JabaScript and prints the result."""
        display, error = self.interpreter.evaluate_line(line + "\n")
        if error is not None:
            print(f"ERROR: {error}")
        else:
            print(display)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_help(self, arg):
        """Prints a short language summary."""
        if arg:
            return self.default(self.lastcmd)
        print(HELP_TEXT)

    def do_debug(self, arg):
        """Toggles debug tracing."""
        if arg:
            return self.default(self.lastcmd)
        self.interpreter.debug_level = 0 if self.interpreter.debug_level else 1
        print(f"debug {'on' if self.interpreter.debug_level else 'off'}")

    def do_vars(self, arg):
        """Lists session variables."""
        if arg:
            return self.default(self.lastcmd)
        for name, value in self.interpreter.env.bindings():
            print(f"{name}: {to_string(value)}")

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(self.lastcmd)
        print("bye")
        return True
