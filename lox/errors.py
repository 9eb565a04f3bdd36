from lox.tokens import Token


class ParseError(Exception):
    """Raised by the parser to unwind to the nearest statement boundary."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class LoxRuntimeError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class TypeMismatch(LoxRuntimeError):
    """An operator was applied to operands of the wrong runtime kind."""


class UndefinedVariable(LoxRuntimeError):
    """A variable was read or assigned without being declared."""
