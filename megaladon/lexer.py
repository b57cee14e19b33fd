"""Turns source text into a list of tokens."""

from __future__ import annotations

from typing import Any

from .errors import ErrorReporter
from .tokens import Token, TokenType

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
    "%": TokenType.MODULO,
}

# Operators that become a different token when followed by '='.
_WITH_EQUAL: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Lexer:
    """Scans source text, reporting bad characters to a reporter."""

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; the result always ends with an EOF token."""
        self._tokens = []
        self._start = self._current = 0
        self._line = 1
        while not self._at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        char = self.source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        return "" if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        index = self._current + 1
        return self.source[index] if index < len(self.source) else ""

    def _add(self, kind: TokenType, literal: Any = None) -> None:
        text = self.source[self._start:self._current]
        self._tokens.append(Token(kind, text, literal, self._line))

    def _scan_token(self) -> None:
        char = self._advance()
        if char in _SINGLE:
            self._add(_SINGLE[char])
        elif char in _WITH_EQUAL:
            double, single = _WITH_EQUAL[char]
            self._add(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                while self._peek() not in ("\n", ""):
                    self._advance()
            else:
                self._add(TokenType.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self._line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            self.reporter.report(self._line, "", "Unexpected character.")

    def _string(self) -> None:
        while self._peek() not in ('"', ""):
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        if self._at_end():
            self.reporter.report(self._line, "", "Unterminated string.")
            return
        self._advance()
        self._add(TokenType.STRING, self.source[self._start + 1:self._current - 1])

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        self._add(TokenType.NUMBER, float(self.source[self._start:self._current]))

    def _identifier(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()
        text = self.source[self._start:self._current]
        self._add(KEYWORDS.get(text, TokenType.IDENTIFIER))


def tokenize(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan ``source`` and return its tokens."""
    return Lexer(source, reporter).scan_tokens()