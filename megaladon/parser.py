"""Recursive-descent parser turning tokens into statements."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import ErrorReporter, ParseError
from .syntax_tree import (
    AssignExpr,
    BinaryExpr,
    BlockStmt,
    CallExpr,
    Expr,
    ExpressionStmt,
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

MAX_ARGUMENTS = 255

_STATEMENT_STARTS = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)


class Parser:
    """Builds a list of statements from tokens, reporting syntax errors."""

    def __init__(self, tokens: Iterable[Token], reporter: ErrorReporter | None = None) -> None:
        self.tokens = list(tokens)
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._current = 0

    def parse(self) -> list[Stmt]:
        """Parse every statement; statements with syntax errors are dropped."""
        self._current = 0
        statements = []
        while not self._at_end():
            statement = self._declaration()
            if statement is not None:
                statements.append(statement)
        return statements

    # --- token helpers -------------------------------------------------

    def _peek(self) -> Token:
        return self.tokens[self._current]

    def _previous(self) -> Token:
        return self.tokens[self._current - 1]

    def _at_end(self) -> bool:
        return self._peek().type is TokenType.EOF

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous()

    def _check(self, kind: TokenType) -> bool:
        return not self._at_end() and self._peek().type is kind

    def _match(self, *kinds: TokenType) -> bool:
        if any(self._check(kind) for kind in kinds):
            self._advance()
            return True
        return False

    def _consume(self, kind: TokenType, message: str) -> Token:
        if self._check(kind):
            return self._advance()
        raise ParseError(self._peek(), message)

    def _synchronize(self) -> None:
        self._advance()
        while not self._at_end():
            if self._previous().type is TokenType.SEMICOLON:
                return
            if self._peek().type in _STATEMENT_STARTS:
                return
            self._advance()

    # --- declarations --------------------------------------------------

    def _declaration(self) -> Stmt | None:
        try:
            if self._match(TokenType.VAR):
                return self._var_declaration()
            if self._match(TokenType.FUN):
                raise ParseError(self._peek(), "Function declarations not fully supported yet.")
            return self._statement()
        except ParseError as error:
            self.reporter.report_token(error.token, error.message)
            self._synchronize()
            return None

    def _var_declaration(self) -> VarStmt:
        name = self._consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer = self._expression() if self._match(TokenType.EQUAL) else None
        self._consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return VarStmt(name, initializer)

    # --- statements ----------------------------------------------------

    def _statement(self) -> Stmt:
        if self._match(TokenType.PRINT):
            return self._print_statement()
        if self._match(TokenType.LEFT_BRACE):
            return BlockStmt(self._block())
        if self._match(TokenType.IF):
            return self._if_statement()
        if self._match(TokenType.WHILE):
            return self._while_statement()
        if self._match(TokenType.FOR):
            return self._for_statement()
        if self._match(TokenType.RETURN):
            return self._return_statement()
        return self._expression_statement()

    def _print_statement(self) -> PrintStmt:
        value = self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return PrintStmt(value)

    def _block(self) -> list[Stmt]:
        statements = []
        while not self._check(TokenType.RIGHT_BRACE) and not self._at_end():
            statement = self._declaration()
            if statement is not None:
                statements.append(statement)
        self._consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    def _if_statement(self) -> IfStmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")
        then_branch = self._statement()
        else_branch = self._statement() if self._match(TokenType.ELSE) else None
        return IfStmt(condition, then_branch, else_branch)

    def _while_statement(self) -> WhileStmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after while condition.")
        return WhileStmt(condition, self._statement())

    def _for_statement(self) -> Stmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")

        initializer: Stmt | None
        if self._match(TokenType.SEMICOLON):
            initializer = None
        elif self._match(TokenType.VAR):
            initializer = self._var_declaration()
        else:
            initializer = self._expression_statement()

        condition = None if self._check(TokenType.SEMICOLON) else self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        increment = None if self._check(TokenType.RIGHT_PAREN) else self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

        body = self._statement()
        if increment is not None:
            body = BlockStmt([body, ExpressionStmt(increment)])
        if condition is None:
            condition = LiteralExpr(True)
        body = WhileStmt(condition, body)
        if initializer is not None:
            body = BlockStmt([initializer, body])
        return body

    def _return_statement(self) -> ReturnStmt:
        keyword = self._previous()
        value = None if self._check(TokenType.SEMICOLON) else self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after return value.")
        return ReturnStmt(keyword, value)

    def _expression_statement(self) -> ExpressionStmt:
        expression = self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return ExpressionStmt(expression)

    # --- expressions ---------------------------------------------------

    def _expression(self) -> Expr:
        return self._assignment()

    def _assignment(self) -> Expr:
        expression = self._or()
        if not self._match(TokenType.EQUAL):
            return expression

        equals = self._previous()
        value = self._assignment()

        if isinstance(expression, VariableExpr):
            return AssignExpr(expression.name, value)
        if isinstance(expression, GetExpr):
            if expression.index is not None:
                return SetExpr(expression.object, expression.index, value)
            raise ParseError(
                equals,
                "Invalid assignment target. Property assignment is not yet fully "
                "implemented via GetExpr's name token.",
            )
        raise ParseError(equals, "Invalid assignment target.")

    def _or(self) -> Expr:
        expression = self._and()
        while self._match(TokenType.OR):
            op = self._previous()
            expression = LogicalExpr(expression, op, self._and())
        return expression

    def _and(self) -> Expr:
        expression = self._equality()
        while self._match(TokenType.AND):
            op = self._previous()
            expression = LogicalExpr(expression, op, self._equality())
        return expression

    def _binary(self, operand, *kinds: TokenType) -> Expr:
        expression = operand()
        while self._match(*kinds):
            op = self._previous()
            expression = BinaryExpr(expression, op, operand())
        return expression

    def _equality(self) -> Expr:
        return self._binary(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Expr:
        return self._binary(
            self._term,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expr:
        return self._binary(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expr:
        return self._binary(self._unary, TokenType.SLASH, TokenType.STAR, TokenType.MODULO)

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            op = self._previous()
            return UnaryExpr(op, self._unary())
        return self._call()

    def _call(self) -> Expr:
        expression = self._primary()
        while True:
            if self._match(TokenType.LEFT_PAREN):
                expression = self._finish_call(expression)
            elif self._match(TokenType.DOT):
                name = self._consume(TokenType.IDENTIFIER, "Expect property name after '.'.")
                raise ParseError(
                    name,
                    "Property access via '.' is not fully implemented with current "
                    "GetExpr structure. Only indexed access (list[idx]) is.",
                )
            elif self._match(TokenType.LEFT_BRACKET):
                index = self._expression()
                self._consume(TokenType.RIGHT_BRACKET, "Expect ']' after index.")
                expression = GetExpr(expression, index)
            else:
                return expression

    def _finish_call(self, callee: Expr) -> CallExpr:
        arguments: list[Expr] = []
        if not self._check(TokenType.RIGHT_PAREN):
            while True:
                if len(arguments) >= MAX_ARGUMENTS:
                    self.reporter.report_token(
                        self._peek(), "Cannot have more than 255 arguments."
                    )
                arguments.append(self._expression())
                if not self._match(TokenType.COMMA):
                    break
        paren = self._consume(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
        return CallExpr(callee, paren, arguments)

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return LiteralExpr(False)
        if self._match(TokenType.TRUE):
            return LiteralExpr(True)
        if self._match(TokenType.NIL):
            return LiteralExpr(None)
        if self._match(TokenType.NUMBER):
            return LiteralExpr(float(self._previous().lexeme))
        if self._match(TokenType.STRING):
            # The raw lexeme, surrounding quotes included.
            return LiteralExpr(self._previous().lexeme)

        if self._match(TokenType.LEFT_BRACKET):
            elements: list[Expr] = []
            if not self._check(TokenType.RIGHT_BRACKET):
                elements.append(self._expression())
                while self._match(TokenType.COMMA):
                    elements.append(self._expression())
            self._consume(TokenType.RIGHT_BRACKET, "Expect ']' after list literal.")
            return ListExpr(elements)

        if self._match(TokenType.IDENTIFIER):
            return VariableExpr(self._previous())

        if self._match(TokenType.LEFT_PAREN):
            expression = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return GroupingExpr(expression)

        raise ParseError(self._peek(), "Expect expression.")


def parse(tokens: Iterable[Token], reporter: ErrorReporter | None = None) -> list[Stmt]:
    """Parse ``tokens`` into a list of statements."""
    return Parser(tokens, reporter).parse()