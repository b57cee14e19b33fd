"""Functions available to every program without being declared."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .environment import Environment
from .values import Callable, ValueType, stringify, type_of


def _output_of(interpreter: Any) -> TextIO:
    return interpreter.output if interpreter is not None else sys.stdout


class Builtin(Callable):
    """A named function implemented by the host."""

    def __init__(self, name: str, arity: int) -> None:
        self.name = name
        self._arity = arity

    def arity(self) -> int:
        """Number of arguments the function expects."""
        return self._arity

    def __str__(self) -> str:
        return f"[Built-in Function {self.name}]"


class PrintBuiltin(Builtin):
    """``print(value)``: writes a value followed by a newline."""

    def __init__(self) -> None:
        super().__init__("print", 1)

    def call(self, interpreter: Any, arguments: list[Any]) -> None:
        out = _output_of(interpreter)
        out.write((stringify(arguments[0]) if arguments else "void") + "\n")
        return None


class InputBuiltin(Builtin):
    """``input()``: reads one line from standard input."""

    def __init__(self) -> None:
        super().__init__("input", 0)

    def call(self, interpreter: Any, arguments: list[Any]) -> str:
        if arguments and type_of(arguments[0]) is ValueType.STRING:
            out = _output_of(interpreter)
            out.write(arguments[0])
            out.flush()
        line = sys.stdin.readline()
        return line[:-1] if line.endswith("\n") else line


class LenBuiltin(Builtin):
    """``len(value)``: length of a string or a list."""

    def __init__(self) -> None:
        super().__init__("len", 1)

    def call(self, interpreter: Any, arguments: list[Any]) -> float:
        if len(arguments) != 1:
            raise RuntimeError("MegaladonError: len() expects 1 argument.")
        (argument,) = arguments
        if type_of(argument) in (ValueType.STRING, ValueType.LIST):
            return float(len(argument))
        raise RuntimeError(
            "MegaladonError: len() argument must be a string or a list."
        )


def register_builtins(environment: Environment) -> None:
    """Define every built-in function in ``environment``."""
    for builtin in (PrintBuiltin(), InputBuiltin(), LenBuiltin()):
        environment.define(builtin.name, builtin)