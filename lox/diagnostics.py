"""Error reporting for the Lox toolchain.

The scanner, parser and interpreter never print errors themselves. They
hand them to an `ErrorReporter`, which records a `Diagnostic` for each
problem and writes it to a text stream (standard error by default). The
run driver inspects `had_error` and `had_runtime_error` afterwards to
decide whether to keep going and which exit status to use.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .errors import LoxRuntimeError
from .tokens import Token, TokenType


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem.

    `kind` is one of 'lexical', 'syntax' or 'runtime'. `where` is the
    location fragment (" at 'x'", " at end" or empty).
    """
    kind: str
    line: int
    message: str
    where: str = ''

    def __str__(self) -> str:
        if self.kind == 'runtime':
            return f"{self.message}\n[line {self.line}]"
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ErrorReporter:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str) -> None:
        """Report a lexical error that has no token attached."""
        self._emit(Diagnostic('lexical', line, message))
        self.had_error = True

    def syntax_error(self, token: Token, message: str) -> None:
        if token.type == TokenType.EOF:
            where = ' at end'
        else:
            where = f" at '{token.lexeme}'"
        self._emit(Diagnostic('syntax', token.line, message, where))
        self.had_error = True

    def runtime_error(self, error: LoxRuntimeError) -> None:
        self._emit(Diagnostic('runtime', error.token.line, error.message))
        self.had_runtime_error = True

    def reset(self) -> None:
        self.had_error = False
        self.had_runtime_error = False
        self.diagnostics.clear()

    def _emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        stream = self.stream if self.stream is not None else sys.stderr
        print(diagnostic, file=stream)
