import io

from lox.diagnostics import ErrorReporter
from lox.scanner import scan_tokens
from lox.tokens import TokenType


def scan(source):
    reporter = ErrorReporter(stream=io.StringIO())
    return scan_tokens(source, reporter), reporter


def test_operators_prefer_two_character_forms():
    tokens, reporter = scan('! != = == > >= < <=')
    assert [t.type for t in tokens] == [
        TokenType.BANG, TokenType.BANG_EQUAL,
        TokenType.EQUAL, TokenType.EQUAL_EQUAL,
        TokenType.GREATER, TokenType.GREATER_EQUAL,
        TokenType.LESS, TokenType.LESS_EQUAL,
        TokenType.EOF,
    ]
    assert not reporter.had_error


def test_literals_carry_decoded_values():
    tokens, _ = scan('12 3.5 "hi there"')
    assert tokens[0].type == TokenType.NUMBER and tokens[0].literal == 12.0
    assert isinstance(tokens[0].literal, float)
    assert tokens[1].literal == 3.5
    assert tokens[2].type == TokenType.STRING
    assert tokens[2].lexeme == '"hi there"'
    assert tokens[2].literal == 'hi there'


def test_keywords_and_identifiers():
    tokens, _ = scan('var variable print nil true false _x1')
    assert [t.type for t in tokens[:-1]] == [
        TokenType.VAR, TokenType.IDENTIFIER, TokenType.PRINT,
        TokenType.NIL, TokenType.TRUE, TokenType.FALSE, TokenType.IDENTIFIER,
    ]
    assert tokens[1].lexeme == 'variable'


def test_comments_and_line_numbers():
    source = 'var a = 1; // trailing comment\n\nprint a / 2;\n'
    tokens, _ = scan(source)
    assert TokenType.SLASH in [t.type for t in tokens]
    print_token = next(t for t in tokens if t.type == TokenType.PRINT)
    assert print_token.line == 3
    assert tokens[-1].type == TokenType.EOF
    assert tokens[-1].line == 4


def test_multiline_string_takes_its_closing_line():
    tokens, _ = scan('"one\ntwo" x')
    assert tokens[0].literal == 'one\ntwo'
    assert tokens[0].line == 2
    assert tokens[1].line == 2


def test_unexpected_character_is_reported_and_skipped():
    tokens, reporter = scan('1 @ 2')
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert reporter.had_error
    assert str(reporter.diagnostics[0]) == '[line 1] Error: Unexpected character.'


def test_unterminated_string():
    tokens, reporter = scan('print "oops')
    assert [t.type for t in tokens] == [TokenType.PRINT, TokenType.EOF]
    assert reporter.diagnostics[0].message == 'Unterminated string.'


def test_empty_source_is_just_eof():
    tokens, reporter = scan('')
    assert len(tokens) == 1
    assert tokens[0].type == TokenType.EOF
    assert not reporter.had_error


def test_unterminated_multiline_string_reports_last_line():
    tokens, reporter = scan('print "one\ntwo\nthree')
    assert [t.type for t in tokens] == [TokenType.PRINT, TokenType.EOF]
    assert str(reporter.diagnostics[0]) == '[line 3] Error: Unterminated string.'
