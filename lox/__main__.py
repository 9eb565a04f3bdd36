"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv] [script]
    python -m lox [-v...] --emit-ast <script>
    python -m lox [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .lox file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a script an interactive prompt is started; type `:q` or send EOF
to leave it. Debug information is written to `debug.txt` in the current
directory when verbosity is greater than zero.

Exit status is 65 after a lexical or syntax error, 70 after a runtime
error and 66 when the input file does not exist.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import program_from_obj, program_to_obj
from .diagnostics import ErrorReporter
from .interpreter import Interpreter, run_source
from .parser import parse_program
from .scanner import scan_tokens

EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


def _read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(EX_NOINPUT)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _exit_status(reporter: ErrorReporter) -> int:
    if reporter.had_error:
        return EX_DATAERR
    if reporter.had_runtime_error:
        return EX_SOFTWARE
    return 0


def run_prompt(interpreter: Interpreter) -> None:
    """Read-eval-print loop; globals persist between lines."""
    reporter = interpreter.reporter
    while True:
        try:
            line = input('> ')
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip() in (':q', ':quit'):
            break
        if not line.strip():
            continue
        run_source(line, interpreter)
        # Errors do not end the session
        reporter.reset()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='Lox script (.lox) to execute; omit for a prompt')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = _read_source(program_file)
        reporter = ErrorReporter()
        statements = parse_program(scan_tokens(source, reporter), reporter)
        if reporter.had_error:
            sys.exit(EX_DATAERR)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    interpreter = Interpreter(debug_level=args.v)
    try:
        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(EX_NOINPUT)
            with open(ast_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            try:
                statements = program_from_obj(data)
            except (KeyError, TypeError, ValueError) as e:
                print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
                sys.exit(EX_DATAERR)
            interpreter.interpret(statements)
            status = _exit_status(interpreter.reporter)
        elif args.script:
            source = _read_source(Path(args.script))
            status = _exit_status(run_source(source, interpreter))
        else:
            run_prompt(interpreter)
            status = 0
    finally:
        interpreter.close()
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
