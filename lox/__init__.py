# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .diagnostics import ErrorReporter
from .errors import LoxRuntimeError, ParseError, TypeMismatch, UndefinedVariable
from .interpreter import Interpreter, run_source
from .parser import Parser, parse_program
from .scanner import scan_tokens

__all__ = [
    'ErrorReporter',
    'Interpreter',
    'LoxRuntimeError',
    'ParseError',
    'Parser',
    'TypeMismatch',
    'UndefinedVariable',
    'parse_program',
    'run_source',
    'scan_tokens',
]
