from typing import Any, Dict, Optional
from lox.errors import UndefinedVariable
from lox.tokens import Token


class Environment:
    """Represents a scope environment mapping identifiers to values."""
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # Redeclaring in the same scope simply rebinds
        self.values[name] = value

    def get(self, name: Token) -> Any:
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise UndefinedVariable(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any):
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing is not None:
            self.enclosing.assign(name, value)
            return
        raise UndefinedVariable(name, f"Undefined variable '{name.lexeme}'.")

    def __contains__(self, name: str) -> bool:
        if name in self.values:
            return True
        return self.enclosing is not None and name in self.enclosing
