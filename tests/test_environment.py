import pytest

from megaladon.environment import Environment
from megaladon.errors import MegaladonError
from megaladon.tokens import Token, TokenType


def _name(text):
    return Token(TokenType.IDENTIFIER, text, None, 1)


def test_define_then_get():
    env = Environment()
    env.define("a", 1.0)
    assert env.get(_name("a")) == 1.0


def test_get_falls_back_to_enclosing():
    outer = Environment()
    outer.define("a", "outer")
    inner = Environment(outer)
    assert inner.get(_name("a")) == "outer"


def test_inner_definition_shadows_outer():
    outer = Environment()
    outer.define("a", "outer")
    inner = Environment(outer)
    inner.define("a", "inner")
    assert inner.get(_name("a")) == "inner"
    assert outer.get(_name("a")) == "outer"


def test_undefined_variable_raises():
    env = Environment(Environment())
    with pytest.raises(MegaladonError) as info:
        env.get(_name("missing"))
    assert info.value.message == "Undefined variable 'missing'."
    assert info.value.token.lexeme == "missing"


def test_assign_updates_enclosing_binding():
    outer = Environment()
    outer.define("a", 1.0)
    inner = Environment(outer)
    inner.assign(_name("a"), 2.0)
    assert outer.get(_name("a")) == 2.0


def test_assign_undefined_raises():
    with pytest.raises(MegaladonError):
        Environment().assign(_name("nope"), 1.0)


def test_ancestor_walks_the_chain():
    root = Environment()
    middle = Environment(root)
    leaf = Environment(middle)
    assert leaf.ancestor(0) is leaf
    assert leaf.ancestor(1) is middle
    assert leaf.ancestor(2) is root


def test_ancestor_beyond_scope_raises():
    with pytest.raises(RuntimeError):
        Environment().ancestor(1)


def test_get_at_and_assign_at():
    root = Environment()
    root.define("x", "root")
    leaf = Environment(Environment(root))
    leaf.define("x", "leaf")
    assert leaf.get_at(2, "x") == "root"
    leaf.assign_at(2, _name("x"), "changed")
    assert root.get(_name("x")) == "changed"
    assert leaf.get_at(0, "x") == "leaf"


def test_get_at_missing_name_raises_key_error():
    with pytest.raises(KeyError):
        Environment().get_at(0, "absent")