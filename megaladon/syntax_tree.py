"""Syntax tree nodes for expressions and statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .tokens import Token, TokenType


def _blank_token() -> Token:
    return Token(TokenType.EOF, "", None, 0)


class Expr:
    """Base of all expression nodes."""

    def accept(self, visitor: Any) -> Any:
        raise NotImplementedError

    def is_literal(self) -> bool:
        """Whether this node is a literal value."""
        return False


class Stmt:
    """Base of all statement nodes."""

    def accept(self, visitor: Any) -> Any:
        raise NotImplementedError


@dataclass(eq=False)
class AssignExpr(Expr):
    name: Token
    value: Expr
    distance: int = -1

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_assign_expr(self)


@dataclass(eq=False)
class BinaryExpr(Expr):
    left: Expr
    op: Token
    right: Expr

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass(eq=False)
class CallExpr(Expr):
    callee: Expr
    paren: Token
    arguments: list[Expr] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_call_expr(self)


@dataclass(eq=False)
class GetExpr(Expr):
    """Indexed access such as ``items[0]``."""

    object: Expr
    index: Expr | None
    name: Token = field(default_factory=_blank_token)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_get_expr(self)


@dataclass(eq=False)
class GroupingExpr(Expr):
    expression: Expr

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_grouping_expr(self)


@dataclass(eq=False)
class LiteralExpr(Expr):
    value: Any

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_literal_expr(self)

    def is_literal(self) -> bool:
        return True


@dataclass(eq=False)
class LogicalExpr(Expr):
    left: Expr
    op: Token
    right: Expr

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_logical_expr(self)


@dataclass(eq=False)
class SetExpr(Expr):
    """Indexed assignment such as ``items[0] = value``."""

    object: Expr
    index: Expr | None
    value: Expr
    name: Token = field(default_factory=_blank_token)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_set_expr(self)


@dataclass(eq=False)
class UnaryExpr(Expr):
    op: Token
    right: Expr

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_unary_expr(self)


@dataclass(eq=False)
class VariableExpr(Expr):
    name: Token
    distance: int = -1

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_variable_expr(self)


@dataclass(eq=False)
class ListExpr(Expr):
    elements: list[Expr] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_expr(self)


@dataclass(eq=False)
class BlockStmt(Stmt):
    statements: list[Stmt] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_stmt(self)


@dataclass(eq=False)
class ExpressionStmt(Stmt):
    expression: Expr

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_expression_stmt(self)


@dataclass(eq=False)
class FunctionStmt(Stmt):
    name: Token
    params: list[Token] = field(default_factory=list)
    body: list[Stmt] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_function_stmt(self)


@dataclass(eq=False)
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Stmt | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_if_stmt(self)


@dataclass(eq=False)
class PrintStmt(Stmt):
    expression: Expr

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_print_stmt(self)


@dataclass(eq=False)
class ReturnStmt(Stmt):
    keyword: Token
    value: Expr | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_return_stmt(self)


@dataclass(eq=False)
class VarStmt(Stmt):
    name: Token
    initializer: Expr | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_var_stmt(self)


@dataclass(eq=False)
class WhileStmt(Stmt):
    condition: Expr
    body: Stmt

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_while_stmt(self)