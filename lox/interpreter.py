"""Tree-walking interpreter for the Lox language.

The interpreter evaluates the statement list produced by the parser.
Every `execute`/`evaluate` call receives the environment it works in; a
block simply passes a fresh child environment down to its statements, so
the enclosing scope is back in effect as soon as the call returns, on
every exit path.

Runtime errors (`LoxRuntimeError` and its subclasses) propagate out of
the evaluation and are caught only by `Interpreter.interpret`, which
reports the first one and abandons the rest of the run.
"""

from __future__ import annotations

from typing import Any, List, Optional, TextIO

from .ast import (
    Expr, Stmt, Literal, Grouping, Unary, Binary, Variable, Assign,
    Expression, Print, Var, Block,
)
from .diagnostics import ErrorReporter
from .environment import Environment
from .errors import LoxRuntimeError, TypeMismatch
from .parser import parse_program
from .scanner import scan_tokens
from .tokens import Token, TokenType
from .types import divide, is_equal, is_number, is_truthy, stringify, type_name


class Interpreter:
    """Core interpreter that executes a Lox AST."""
    def __init__(
        self,
        reporter: Optional[ErrorReporter] = None,
        stdout: Optional[TextIO] = None,
        debug_level: int = 0,
        debug_file: str = 'debug.txt',
    ):
        self.globals = Environment()
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.stdout = stdout
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        # Nothing is written once close() has released the file
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, statements: List[Stmt], env: Optional[Environment] = None) -> bool:
        """Execute `statements` in order; return False if a runtime error stopped the run."""
        if env is None:
            env = self.globals
        self.debug(f"run {len(statements)} statement(s)")
        try:
            for stmt in statements:
                self.execute(stmt, env)
        except LoxRuntimeError as error:
            self.debug(f"runtime error at line {error.token.line}: {error.message}")
            self.reporter.runtime_error(error)
            return False
        return True

    def execute(self, stmt: Stmt, env: Environment) -> None:
        if isinstance(stmt, Expression):
            self.evaluate(stmt.expression, env)
            return
        if isinstance(stmt, Print):
            value = self.evaluate(stmt.expression, env)
            text = stringify(value)
            if self.debug_level >= 3:
                self.debug(f"print {text}")
            print(text, file=self.stdout)
            return
        if isinstance(stmt, Var):
            value = None
            if stmt.initializer is not None:
                value = self.evaluate(stmt.initializer, env)
            env.define(stmt.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"declare {stmt.name.lexeme}: {type_name(value)} = {stringify(value)}")
            return
        if isinstance(stmt, Block):
            self.execute_block(stmt.statements, Environment(enclosing=env))
            return
        raise NotImplementedError(f"execute: unexpected node type {type(stmt)}")

    def execute_block(self, statements, env: Environment) -> None:
        if self.debug_level >= 3:
            self.debug(f"enter block ({len(statements)} statement(s))")
        for stmt in statements:
            self.execute(stmt, env)
        if self.debug_level >= 3:
            self.debug("exit block")

    def evaluate(self, expr: Expr, env: Environment) -> Any:
        if isinstance(expr, Literal):
            return expr.value
        if isinstance(expr, Grouping):
            return self.evaluate(expr.expression, env)
        if isinstance(expr, Variable):
            return env.get(expr.name)
        if isinstance(expr, Assign):
            value = self.evaluate(expr.value, env)
            env.assign(expr.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {expr.name.lexeme} = {stringify(value)}")
            return value
        if isinstance(expr, Unary):
            right = self.evaluate(expr.right, env)
            return self.apply_unary_op(expr.operator, right)
        if isinstance(expr, Binary):
            # Both operands, left first, before the operator is looked at
            left = self.evaluate(expr.left, env)
            right = self.evaluate(expr.right, env)
            return self.apply_binary_op(expr.operator, left, right)
        raise NotImplementedError(f"evaluate: unexpected node type {type(expr)}")

    def apply_unary_op(self, operator: Token, right: Any) -> Any:
        if operator.type == TokenType.BANG:
            return not is_truthy(right)
        if operator.type == TokenType.MINUS:
            check_number_operand(operator, right)
            return -right
        raise NotImplementedError(f"unknown unary operator {operator.lexeme}")

    def apply_binary_op(self, operator: Token, left: Any, right: Any) -> Any:
        op = operator.type
        if op == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op == TokenType.BANG_EQUAL:
            return not is_equal(left, right)
        if op == TokenType.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise TypeMismatch(operator, 'Operands must be two numbers or two strings.')
        check_number_operands(operator, left, right)
        if op == TokenType.GREATER:
            return left > right
        if op == TokenType.GREATER_EQUAL:
            return left >= right
        if op == TokenType.LESS:
            return left < right
        if op == TokenType.LESS_EQUAL:
            return left <= right
        if op == TokenType.MINUS:
            return left - right
        if op == TokenType.STAR:
            return left * right
        if op == TokenType.SLASH:
            return divide(left, right)
        raise NotImplementedError(f"unknown binary operator {operator.lexeme}")


def check_number_operand(operator: Token, operand: Any) -> None:
    if not is_number(operand):
        raise TypeMismatch(operator, 'Operand must be a number.')


def check_number_operands(operator: Token, left: Any, right: Any) -> None:
    if not (is_number(left) and is_number(right)):
        raise TypeMismatch(operator, 'Operands must be numbers.')


def run_source(source: str, interpreter: Optional[Interpreter] = None) -> ErrorReporter:
    """Scan, parse and run Lox source text.

    Statements dropped by syntax-error recovery are skipped; every
    statement that parsed is still run. The returned reporter tells which
    kind of error, if any, occurred.
    """
    if interpreter is None:
        interpreter = Interpreter()
    reporter = interpreter.reporter
    tokens = scan_tokens(source, reporter)
    statements = parse_program(tokens, reporter)
    interpreter.interpret(statements)
    return reporter
