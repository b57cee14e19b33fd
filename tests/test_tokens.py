import dataclasses

import pytest

from megaladon.tokens import Token, TokenType


def test_token_keeps_its_fields():
    token = Token(TokenType.NUMBER, "42", 42.0, 7)
    assert token.type is TokenType.NUMBER
    assert token.lexeme == "42"
    assert token.literal == 42.0
    assert token.line == 7


def test_token_without_literal_defaults_to_none():
    token = Token(TokenType.IDENTIFIER, "name", line=3)
    assert token.literal is None
    assert token.line == 3


def test_tokens_compare_by_value():
    assert Token(TokenType.PLUS, "+", None, 1) == Token(TokenType.PLUS, "+", None, 1)
    assert Token(TokenType.PLUS, "+", None, 1) != Token(TokenType.PLUS, "+", None, 2)


def test_token_is_immutable():
    token = Token(TokenType.DOT, ".", None, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.lexeme = ","
    assert token.lexeme == "."
    assert token.type is TokenType.DOT


def test_tokens_of_distinct_types_differ():
    tokens = [Token(member, "x", None, 1) for member in TokenType]
    assert len(set(tokens)) == len(list(TokenType))
    assert len({token.type.value for token in tokens}) == len(tokens)


@pytest.mark.parametrize(
    "name", ["TRUE", "FALSE", "NIL", "STRING", "NUMBER", "MODULO", "EOF"]
)
def test_keyword_and_literal_kinds_make_tokens(name):
    token = Token(TokenType[name], name.lower(), None, 2)
    assert token.type.name == name
    assert token.lexeme == name.lower()
    assert token.line == 2