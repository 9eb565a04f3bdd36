"""Abstract Syntax Tree (AST) definitions for the Lox language.

The node set is closed: expressions derive from `Expr`, statements from
`Stmt`. Nodes are frozen dataclasses, built once by the parser and only
read afterwards by the interpreter. Operators and names keep their
`Token` so that errors can point at a source line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .tokens import Token


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Expr(Node):
    pass


@dataclass(frozen=True)
class Stmt(Node):
    pass


@dataclass(frozen=True)
class Literal(Expr):
    value: Any  # float, str, bool or None (nil)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]
