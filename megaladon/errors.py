"""Error types and the reporter that records and prints errors."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from .tokens import Token, TokenType


def format_message(token: Token, message: str) -> str:
    """Render an error message pointing at ``token``."""
    text = f"[line {token.line}] Error"
    if token.type is TokenType.EOF:
        text += " at end"
    elif token.lexeme:
        text += f" at '{token.lexeme}'"
    return f"{text}: {message}"


class MegaladonError(Exception):
    """An error raised while running a program."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        self.message = message
        if token is None:
            self.token = Token(TokenType.EOF, "", None, 0)
            super().__init__(message)
        else:
            self.token = token
            super().__init__(format_message(token, message))


class ParseError(Exception):
    """A syntax error at a given token."""

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message


@dataclass
class ErrorReporter:
    """Prints errors and remembers whether any occurred."""

    stream: TextIO | None = None
    had_error: bool = False
    had_runtime_error: bool = False

    def _write(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stderr
        out.write(text + "\n")
        out.flush()

    def report(self, line: int, where: str, message: str) -> None:
        """Report an error at a source line."""
        self._write(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def report_token(self, token: Token, message: str) -> None:
        """Report an error located at a token."""
        self._write(format_message(token, message))
        self.had_error = True

    def reset(self) -> None:
        """Forget all previously reported errors."""
        self.had_error = False
        self.had_runtime_error = False