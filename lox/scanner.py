"""Scanner for the Lox language.

Tokenization is delegated to Lark's basic lexer. The grammar below exists
only to declare the terminals: `LOX_LEXER.lex` is used directly and the
`start` rule is never parsed. Two low-priority catch-all terminals pick up
an unterminated string and any stray character so that scanning never
stops at the first bad character; both are reported and dropped.

Identifiers that spell a reserved word are retyped through `KEYWORDS`
rather than declared as separate terminals.
"""

from __future__ import annotations

from typing import List

from lark import Lark

from .diagnostics import ErrorReporter
from .tokens import KEYWORDS, Token, TokenType


LOX_TERMINALS = r"""
    start: _token*

    _token: LEFT_PAREN | RIGHT_PAREN | LEFT_BRACE | RIGHT_BRACE
          | COMMA | DOT | MINUS | PLUS | SEMICOLON | SLASH | STAR
          | BANG | BANG_EQUAL | EQUAL | EQUAL_EQUAL
          | GREATER | GREATER_EQUAL | LESS | LESS_EQUAL
          | IDENTIFIER | STRING | NUMBER
          | UNTERMINATED_STRING | UNEXPECTED_CHAR

    LEFT_PAREN: "("
    RIGHT_PAREN: ")"
    LEFT_BRACE: "{"
    RIGHT_BRACE: "}"
    COMMA: ","
    DOT: "."
    MINUS: "-"
    PLUS: "+"
    SEMICOLON: ";"
    SLASH: "/"
    STAR: "*"
    BANG: "!"
    BANG_EQUAL: "!="
    EQUAL: "="
    EQUAL_EQUAL: "=="
    GREATER: ">"
    GREATER_EQUAL: ">="
    LESS: "<"
    LESS_EQUAL: "<="

    IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
    STRING: /"[^"]*"/
    NUMBER: /[0-9]+(\.[0-9]+)?/

    // Catch-alls, tried only after every regular terminal failed
    UNTERMINATED_STRING.-1: /"[^"]*/
    UNEXPECTED_CHAR.-2: /./

    // Comments and whitespace
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
    WS: /\s+/
    %ignore WS
"""


LOX_LEXER = Lark(
    LOX_TERMINALS,
    parser='lalr',
    lexer='basic',
)


def scan_tokens(source: str, reporter: ErrorReporter) -> List[Token]:
    """Convert Lox source text into a list of tokens ending with EOF.

    Lexical errors are reported to `reporter` and the offending text is
    skipped; the remaining source is still scanned.
    """
    tokens: List[Token] = []
    for lark_token in LOX_LEXER.lex(source):
        kind = lark_token.type
        text = str(lark_token)
        line = lark_token.line
        if kind in ('STRING', 'UNTERMINATED_STRING'):
            # A string spanning lines is located where it ends
            line = lark_token.end_line
        if kind == 'UNEXPECTED_CHAR':
            reporter.error(line, 'Unexpected character.')
            continue
        if kind == 'UNTERMINATED_STRING':
            reporter.error(line, 'Unterminated string.')
            continue
        if kind == 'IDENTIFIER':
            tokens.append(Token(KEYWORDS.get(text, TokenType.IDENTIFIER), text, None, line))
        elif kind == 'STRING':
            tokens.append(Token(TokenType.STRING, text, text[1:-1], line))
        elif kind == 'NUMBER':
            tokens.append(Token(TokenType.NUMBER, text, float(text), line))
        else:
            tokens.append(Token(TokenType[kind], text, None, line))
    tokens.append(Token(TokenType.EOF, '', None, source.count('\n') + 1))
    return tokens
