"""Command line entry point: run a script file or an interactive prompt."""

from __future__ import annotations

import sys

from .errors import ErrorReporter
from .interpreter import Interpreter
from .lexer import tokenize
from .parser import parse

EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_SOFTWARE_ERROR = 70
EXIT_IO_ERROR = 74

_STATEMENT_PREFIXES = ("var ", "fun ", "if ", "while ", "for ", "print ")


def run(source: str, reporter: ErrorReporter | None = None) -> ErrorReporter:
    """Lex, parse and execute ``source``; return the reporter holding any errors."""
    if reporter is None:
        reporter = ErrorReporter()
    tokens = tokenize(source, reporter)
    if reporter.had_error:
        return reporter
    statements = parse(tokens, reporter)
    if reporter.had_error:
        return reporter
    Interpreter(reporter=reporter).interpret(statements)
    return reporter


def run_file(path: str) -> int:
    """Run the script at ``path`` and return the process exit code."""
    try:
        with open(path, encoding="utf-8") as handle:
            source = handle.read()
    except OSError:
        sys.stderr.write(f"MegaladonError: Could not open file '{path}'.\n")
        return EXIT_IO_ERROR
    reporter = run(source)
    if reporter.had_error:
        return EXIT_DATA_ERROR
    if reporter.had_runtime_error:
        return EXIT_SOFTWARE_ERROR
    return 0


def _prepare_line(line: str) -> str:
    is_expression = not line.startswith(_STATEMENT_PREFIXES)
    if ";" in line:
        return line
    if is_expression:
        return f"print ({line});"
    return line + ";"


def run_prompt() -> None:
    """Read lines from standard input and run each one until EOF or ``exit()``."""
    out = sys.stdout
    out.write("Megaladon REPL\n")
    out.write("Type 'exit()' to quit.\n")
    while True:
        out.write(">>> ")
        out.flush()
        line = sys.stdin.readline()
        if not line:
            break
        if line.endswith("\n"):
            line = line[:-1]
        if line == "exit()":
            break
        run(_prepare_line(line))


def main(argv: list[str] | None = None) -> int:
    """Run a script given on the command line, or start the prompt."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        sys.stdout.write("Usage: megaladon [script]\n")
        return EXIT_USAGE
    if args:
        return run_file(args[0])
    run_prompt()
    return 0


if __name__ == "__main__":
    sys.exit(main())