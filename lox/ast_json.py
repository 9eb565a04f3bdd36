"""JSON serialization/deserialization for Lox AST.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for all node types and for the `Token` objects that nodes keep
for error reporting. A whole program is a `Program` object wrapping the
statement list.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Stmt,
    Literal,
    Grouping,
    Unary,
    Binary,
    Variable,
    Assign,
    Expression,
    Print,
    Var,
    Block,
)
from .tokens import Token, TokenType


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"__type__": "Token", "type": t.type.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["type"]], o["lexeme"], o.get("literal"), int(o["line"]))


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[Stmt]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("Expected a Program object")
    return [ast_from_obj(s) for s in obj["body"]]


def ast_to_obj(node: Any) -> Any:
    # Primitives
    if node is None:
        return None
    if isinstance(node, (float, str, bool)):
        return node

    if isinstance(node, Token):
        return token_to_obj(node)

    # Expressions
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": ast_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": ast_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Variable):
        return {"type": "Variable", "name": ast_to_obj(node.name)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": ast_to_obj(node.name), "value": ast_to_obj(node.value)}

    # Statements
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Var):
        return {"type": "Var", "name": ast_to_obj(node.name), "initializer": ast_to_obj(node.initializer)}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None or isinstance(obj, (str, bool)):
        return obj
    if isinstance(obj, (int, float)):
        # JSON writers may drop the fraction of integral numbers
        return float(obj)
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    if obj.get("__type__") == "Token":
        return token_from_obj(obj)
    t = obj.get("type")
    if t == "Literal":
        return Literal(value=ast_from_obj(obj["value"]))
    if t == "Grouping":
        return Grouping(expression=ast_from_obj(obj["expression"]))
    if t == "Unary":
        return Unary(operator=ast_from_obj(obj["operator"]), right=ast_from_obj(obj["right"]))
    if t == "Binary":
        return Binary(
            left=ast_from_obj(obj["left"]),
            operator=ast_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "Variable":
        return Variable(name=ast_from_obj(obj["name"]))
    if t == "Assign":
        return Assign(name=ast_from_obj(obj["name"]), value=ast_from_obj(obj["value"]))
    if t == "Expression":
        return Expression(expression=ast_from_obj(obj["expression"]))
    if t == "Print":
        return Print(expression=ast_from_obj(obj["expression"]))
    if t == "Var":
        return Var(name=ast_from_obj(obj["name"]), initializer=ast_from_obj(obj.get("initializer")))
    if t == "Block":
        return Block(statements=tuple(ast_from_obj(s) for s in obj["statements"]))

    raise ValueError(f"Unknown AST node type: {t}")
