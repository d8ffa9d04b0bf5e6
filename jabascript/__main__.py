"""CLI entry point for the JabaScript interpreter.

Usage:
    python -m jabascript [-v|-vv|-vvv] [--no-prelude] [--parser lark]
    python -m jabascript [-v...] <program_file>
    python -m jabascript [-v...] --emit-ast <program_file>
    python -m jabascript [-v...] --ast <ast_json_file>

Options:
  -v              Increase debug verbosity (can be repeated)
  --debug-file    Write the debug trace to a file instead of stdout
  --no-prelude    Do not define rand and fibonacci at startup
  --parser        Front end used to parse source lines (descent or lark)
  --emit-ast      Parse the given file and emit an AST JSON file
  --ast           Execute a previously emitted AST JSON file

Without a program file the interpreter starts an interactive shell. A
program file is evaluated one non-blank line at a time and every result is
printed.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_from_obj, ast_to_obj
from .errors import JabaError
from .interpreter import Interpreter
from .shell import Shell
from .types import to_string


def read_lines(path: Path) -> list[str]:
    with open(path, 'r', encoding='utf-8') as f:
        return [line if line.endswith('\n') else line + '\n' for line in f if line.strip()]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="JabaScript interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', metavar='PATH', help='write debug output to PATH')
    parser.add_argument('--no-prelude', action='store_true', help='start without the rand and fibonacci definitions')
    parser.add_argument('--parser', choices=('descent', 'lark'), default='descent', help='source front end')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to execute line by line')
    args = parser.parse_args(argv)

    interpreter = Interpreter(
        prelude=not args.no_prelude,
        debug_level=args.v,
        debug_file=args.debug_file,
        parser=args.parser,
    )
    try:
        # Emit AST mode
        if args.emit_ast:
            program_file = Path(args.emit_ast)
            if not program_file.exists():
                print(f"Error: file {program_file} not found", file=sys.stderr)
                sys.exit(1)
            try:
                trees = [interpreter.parse_line(line) for line in read_lines(program_file)]
            except JabaError as e:
                print(f"ERROR: {e.describe()}", file=sys.stderr)
                sys.exit(1)
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump([ast_to_obj(tree) for tree in trees], out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(1)
            try:
                with open(ast_path, 'r', encoding='utf-8') as f:
                    trees = [ast_from_obj(obj) for obj in json.load(f)]
            except (KeyError, TypeError, ValueError) as e:
                print(f"Error: malformed AST file {ast_path}: {e!r}", file=sys.stderr)
                sys.exit(1)
            try:
                for tree in trees:
                    print(to_string(interpreter.run_tree(tree)))
            except JabaError as e:
                print(f"ERROR: {e.describe()}", file=sys.stderr)
                sys.exit(1)
            return

        if not args.program:
            Shell(interpreter).cmdloop()
            return

        program_file = Path(args.program)
        if not program_file.exists():
            print(f"Error: file {program_file} not found", file=sys.stderr)
            sys.exit(1)
        for line in read_lines(program_file):
            display, error = interpreter.evaluate_line(line)
            if error is not None:
                print(f"ERROR: {error}", file=sys.stderr)
                sys.exit(1)
            print(display)
    finally:
        interpreter.close()


if __name__ == '__main__':
    main()
