#!/usr/bin/env python3
"""
Command line for the Ember interpreter.

Usage:
    python -m ember FILE      run a script
    python -m ember           start an interactive prompt

Diagnostics are written to stderr. Running a script exits with status 1 when
anything was reported.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ember import __version__
from ember.config import get_log_level
from ember.interpreter import Interpreter

PROMPT = "ember> "


def _print_new_diagnostics(interpreter: Interpreter, start: int) -> None:
    for diagnostic in interpreter.diagnostics[start:]:
        print(diagnostic.format(), file=sys.stderr)


def run_file(path: Path) -> int:
    if not path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    interpreter = Interpreter(base_dir=path.parent)
    try:
        interpreter.run_file(path)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_new_diagnostics(interpreter, 0)
    return 1 if interpreter.reporter.has_errors() else 0


def repl() -> int:
    interpreter = Interpreter(base_dir=Path.cwd())
    print(f"Ember {__version__}")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            continue

        if not line.strip():
            continue
        start = interpreter.reporter.error_count
        result = interpreter.eval(line, "<repl>")
        _print_new_diagnostics(interpreter, start)
        if result is not None:
            print(result.inspect())


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ember",
        description="Run Ember scripts or start an interactive prompt",
    )
    parser.add_argument('file', nargs='?', help='Ember source file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log at DEBUG level (overrides EMBER_LOG_LEVEL)')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file is None:
        return repl()
    return run_file(Path(args.file))


if __name__ == '__main__':
    sys.exit(main())
