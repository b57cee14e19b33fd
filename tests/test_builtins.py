import io
import sys

import pytest

from megaladon.builtins import (
    InputBuiltin,
    LenBuiltin,
    PrintBuiltin,
    register_builtins,
)
from megaladon.environment import Environment
from megaladon.interpreter import Interpreter
from megaladon.tokens import Token, TokenType
from megaladon.values import stringify


def test_names_and_arities():
    assert str(PrintBuiltin()) == "[Built-in Function print]"
    assert str(InputBuiltin()) == "[Built-in Function input]"
    assert str(LenBuiltin()) == "[Built-in Function len]"
    assert PrintBuiltin().arity() == 1
    assert InputBuiltin().arity() == 0
    assert LenBuiltin().arity() == 1


def test_print_writes_value_to_stdout(capsys):
    value = [1.0, "a", True]
    result = PrintBuiltin().call(None, [value])
    assert result is None
    assert capsys.readouterr().out == stringify(value) + "\n"


def test_print_without_arguments_writes_void(capsys):
    PrintBuiltin().call(None, [])
    assert capsys.readouterr().out == "void\n"


def test_print_uses_interpreter_output():
    buffer = io.StringIO()
    PrintBuiltin().call(Interpreter(output=buffer), ["text"])
    assert buffer.getvalue() == "text\n"


def test_input_reads_a_line(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("hello\nworld\n"))
    builtin = InputBuiltin()
    assert builtin.call(None, []) == "hello"
    assert builtin.call(None, []) == "world"
    assert builtin.call(None, []) == ""


def test_input_writes_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("answer\n"))
    assert InputBuiltin().call(None, ["name? "]) == "answer"
    assert capsys.readouterr().out == "name? "


def test_len_of_string_and_list():
    assert LenBuiltin().call(None, ["abcd"]) == float(len("abcd"))
    assert LenBuiltin().call(None, [[1.0, 2.0]]) == 2.0
    assert LenBuiltin().call(None, [[]]) == 0.0


def test_len_rejects_wrong_argument_count():
    with pytest.raises(RuntimeError, match="len\\(\\) expects 1 argument"):
        LenBuiltin().call(None, [])


def test_len_rejects_other_types():
    with pytest.raises(RuntimeError, match="must be a string or a list"):
        LenBuiltin().call(None, [3.0])


@pytest.mark.parametrize(
    "name, kind, arity",
    [("print", PrintBuiltin, 1), ("input", InputBuiltin, 0), ("len", LenBuiltin, 1)],
)
def test_register_builtins_defines_all(name, kind, arity):
    environment = Environment()
    register_builtins(environment)
    found = environment.get(Token(TokenType.IDENTIFIER, name, None, 1))
    assert isinstance(found, kind)
    assert str(found) == f"[Built-in Function {name}]"
    assert found.arity() == arity


def test_registered_len_works():
    environment = Environment()
    register_builtins(environment)
    found = environment.get(Token(TokenType.IDENTIFIER, "len", None, 1))
    assert found.call(None, ["abc"]) == 3.0