"""Variable scopes chained to their enclosing scope."""

from __future__ import annotations

from typing import Any

from .errors import MegaladonError
from .tokens import Token


class Environment:
    """A scope mapping names to values, with an optional parent."""

    def __init__(self, enclosing: Environment | None = None) -> None:
        self.enclosing = enclosing
        self._values: dict[str, Any] = {}

    def _scopes(self):
        scope: Environment | None = self
        while scope is not None:
            yield scope
            scope = scope.enclosing

    def define(self, name: str, value: Any) -> None:
        """Bind ``name`` in this scope, replacing any earlier binding."""
        self._values[name] = value

    def get(self, name: Token) -> Any:
        """Look a variable up through the chain of scopes."""
        for scope in self._scopes():
            if name.lexeme in scope._values:
                return scope._values[name.lexeme]
        raise MegaladonError(f"Undefined variable '{name.lexeme}'.", name)

    def assign(self, name: Token, value: Any) -> None:
        """Rebind an existing variable in the nearest scope that holds it."""
        for scope in self._scopes():
            if name.lexeme in scope._values:
                scope._values[name.lexeme] = value
                return
        raise MegaladonError(f"Undefined variable '{name.lexeme}'.", name)

    def get_at(self, distance: int, name: str) -> Any:
        """Read a variable from the scope ``distance`` levels up."""
        return self.ancestor(distance)._values[name]

    def assign_at(self, distance: int, name: Token, value: Any) -> None:
        """Write a variable in the scope ``distance`` levels up."""
        self.ancestor(distance)._values[name.lexeme] = value

    def ancestor(self, distance: int) -> Environment:
        """Return the scope ``distance`` levels up the chain."""
        scope = self
        for _ in range(distance):
            if scope.enclosing is None:
                raise RuntimeError(
                    "MegaladonError: Internal error: Attempted to access an "
                    "ancestor environment beyond scope."
                )
            scope = scope.enclosing
        return scope