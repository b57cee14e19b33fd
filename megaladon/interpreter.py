"""Tree-walking evaluator for parsed programs."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, TextIO

from .builtins import register_builtins
from .environment import Environment
from .errors import ErrorReporter, MegaladonError
from .syntax_tree import (
    AssignExpr,
    BinaryExpr,
    BlockStmt,
    CallExpr,
    Expr,
    ExpressionStmt,
    FunctionStmt,
    GetExpr,
    GroupingExpr,
    IfStmt,
    ListExpr,
    LiteralExpr,
    LogicalExpr,
    PrintStmt,
    ReturnStmt,
    SetExpr,
    Stmt,
    UnaryExpr,
    VariableExpr,
    VarStmt,
    WhileStmt,
)
from .tokens import Token, TokenType
from .values import (
    INVALID,
    Callable,
    ValueType,
    is_truthy,
    stringify,
    type_of,
    values_equal,
)


class ReturnValue(RuntimeError):
    """Unwinds the stack out of a function body carrying its result."""

    def __init__(self, value: Any) -> None:
        super().__init__("")
        self.value = value


class MegaladonFunction(Callable):
    """A function declared in a program, closed over its defining scope."""

    def __init__(self, declaration: FunctionStmt, closure: Environment) -> None:
        self.declaration = declaration
        self.closure = closure

    def arity(self) -> int:
        """Number of declared parameters."""
        return len(self.declaration.params)

    def __str__(self) -> str:
        return f"<fn {self.declaration.name.lexeme}>"

    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        """Run the body in a fresh scope with parameters bound."""
        scope = Environment(self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            scope.define(param.lexeme, argument)
        try:
            interpreter.execute_block(self.declaration.body, scope)
        except ReturnValue as returned:
            return returned.value
        return None


def _is_number(value: Any) -> bool:
    return type_of(value) is ValueType.NUMBER


def _check_number(op: Token, operand: Any) -> None:
    if not _is_number(operand):
        raise MegaladonError("Operand must be a number.", op)


def _check_numbers(op: Token, left: Any, right: Any) -> None:
    if not (_is_number(left) and _is_number(right)):
        raise MegaladonError("Operands must be numbers.", op)


def _is_whole(value: Any) -> bool:
    return _is_number(value) and float(value).is_integer()


_COMPARISONS = {
    TokenType.GREATER: lambda a, b: a > b,
    TokenType.GREATER_EQUAL: lambda a, b: a >= b,
    TokenType.LESS: lambda a, b: a < b,
    TokenType.LESS_EQUAL: lambda a, b: a <= b,
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
}


class Interpreter:
    """Executes statements against a global scope holding the built-ins."""

    def __init__(
        self,
        output: TextIO | None = None,
        reporter: ErrorReporter | None = None,
    ) -> None:
        self._output = output
        self.reporter = reporter
        self.globals = Environment()
        self.environment = self.globals
        register_builtins(self.globals)

    @property
    def output(self) -> TextIO:
        """Stream that printed values go to."""
        return self._output if self._output is not None else sys.stdout

    def _report_failure(self, text: str) -> None:
        stream = None
        if self.reporter is not None:
            self.reporter.had_runtime_error = True
            stream = self.reporter.stream
        (stream if stream is not None else sys.stderr).write(text + "\n")

    def interpret(self, statements: Iterable[Stmt]) -> None:
        """Run statements, reporting the first runtime error and stopping."""
        try:
            for statement in statements:
                self.execute(statement)
        except MegaladonError as error:
            self._report_failure(f"Runtime Error: {error}")
        except RuntimeError as error:
            self._report_failure(f"Internal Runtime Error: {error}")

    def execute(self, stmt: Stmt) -> None:
        """Run one statement."""
        stmt.accept(self)

    def evaluate(self, expr: Expr) -> Any:
        """Compute the value of an expression."""
        return expr.accept(self)

    def execute_block(self, statements: Iterable[Stmt], environment: Environment) -> None:
        """Run statements in ``environment``, restoring the current scope after."""
        previous = self.environment
        self.environment = environment
        try:
            for statement in statements:
                self.execute(statement)
        finally:
            self.environment = previous

    # --- expressions ---------------------------------------------------

    def visit_assign_expr(self, expr: AssignExpr) -> Any:
        value = self.evaluate(expr.value)
        if expr.distance != -1:
            self.environment.assign_at(expr.distance, expr.name, value)
        else:
            self.globals.assign(expr.name, value)
        return value

    def visit_binary_expr(self, expr: BinaryExpr) -> Any:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        kind = expr.op.type

        if kind in _COMPARISONS:
            _check_numbers(expr.op, left, right)
            return _COMPARISONS[kind](left, right)
        if kind is TokenType.PLUS:
            left_kind, right_kind = type_of(left), type_of(right)
            if left_kind is right_kind and left_kind in (
                ValueType.NUMBER,
                ValueType.STRING,
                ValueType.LIST,
            ):
                return left + right
            raise MegaladonError(
                "Operands must be two numbers, two strings, or two lists.", expr.op
            )
        if kind is TokenType.SLASH:
            _check_numbers(expr.op, left, right)
            if right == 0:
                raise MegaladonError("Division by zero.", expr.op)
            return left / right
        if kind is TokenType.BANG_EQUAL:
            return not values_equal(left, right)
        if kind is TokenType.EQUAL_EQUAL:
            return values_equal(left, right)
        return INVALID

    def visit_call_expr(self, expr: CallExpr) -> Any:
        callee = self.evaluate(expr.callee)
        arguments = [self.evaluate(argument) for argument in expr.arguments]
        if not isinstance(callee, Callable):
            raise MegaladonError("Can only call functions.", expr.paren)
        arity = callee.arity()
        if arity != -1 and arity != len(arguments):
            raise MegaladonError(
                f"Expected {arity} arguments but got {len(arguments)}.", expr.paren
            )
        return callee.call(self, arguments)

    def visit_grouping_expr(self, expr: GroupingExpr) -> Any:
        return self.evaluate(expr.expression)

    def visit_literal_expr(self, expr: LiteralExpr) -> Any:
        return expr.value

    def visit_logical_expr(self, expr: LogicalExpr) -> Any:
        left = self.evaluate(expr.left)
        if expr.op.type is TokenType.OR:
            if is_truthy(left):
                return left
        elif not is_truthy(left):
            return left
        return self.evaluate(expr.right)

    def visit_unary_expr(self, expr: UnaryExpr) -> Any:
        right = self.evaluate(expr.right)
        if expr.op.type is TokenType.BANG:
            return not is_truthy(right)
        if expr.op.type is TokenType.MINUS:
            _check_number(expr.op, right)
            return -right
        return INVALID

    def visit_variable_expr(self, expr: VariableExpr) -> Any:
        if expr.distance != -1:
            return self.environment.get_at(expr.distance, expr.name.lexeme)
        return self.globals.get(expr.name)

    def visit_list_expr(self, expr: ListExpr) -> list[Any]:
        return [self.evaluate(element) for element in expr.elements]

    def _list_index(self, expr: GetExpr | SetExpr, items: list[Any], suffix: str) -> int:
        if expr.index is None or not expr.index.is_literal():
            raise MegaladonError(f"List index must be a literal number{suffix}.", expr.name)
        index = self.evaluate(expr.index)
        if not _is_whole(index):
            message = (
                "List index for assignment must be an integer."
                if suffix
                else "List index must be an integer."
            )
            raise MegaladonError(message, expr.name)
        position = int(index)
        if not 0 <= position < len(items):
            raise MegaladonError(f"List index out of bounds{suffix}.", expr.name)
        return position

    def visit_get_expr(self, expr: GetExpr) -> Any:
        target = self.evaluate(expr.object)
        if type_of(target) is ValueType.LIST:
            return target[self._list_index(expr, target, "")]
        raise MegaladonError("Only lists support indexed access.", expr.name)

    def visit_set_expr(self, expr: SetExpr) -> Any:
        target = self.evaluate(expr.object)
        value = self.evaluate(expr.value)
        if type_of(target) is ValueType.LIST:
            # Lists are values: the assignment acts on a copy of the list.
            items = list(target)
            items[self._list_index(expr, items, " for assignment")] = value
            return value
        raise MegaladonError("Only lists support indexed assignment.", expr.name)

    # --- statements ----------------------------------------------------

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> None:
        self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> None:
        self.output.write(stringify(self.evaluate(stmt.expression)) + "\n")

    def visit_var_stmt(self, stmt: VarStmt) -> None:
        value = self.evaluate(stmt.initializer) if stmt.initializer is not None else None
        self.environment.define(stmt.name.lexeme, value)

    def visit_block_stmt(self, stmt: BlockStmt) -> None:
        self.execute_block(stmt.statements, Environment(self.environment))

    def visit_if_stmt(self, stmt: IfStmt) -> None:
        if is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.then_branch)
        elif stmt.else_branch is not None:
            self.execute(stmt.else_branch)

    def visit_while_stmt(self, stmt: WhileStmt) -> None:
        while is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.body)

    def visit_function_stmt(self, stmt: FunctionStmt) -> None:
        self.environment.define(stmt.name.lexeme, MegaladonFunction(stmt, self.environment))

    def visit_return_stmt(self, stmt: ReturnStmt) -> None:
        value = self.evaluate(stmt.value) if stmt.value is not None else None
        raise ReturnValue(value)