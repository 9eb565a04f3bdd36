from pathlib import Path

from lox.interpreter import Interpreter, run_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_runtime_error_halts(capsys):
    source = (EXAMPLES / 'program_5.lox').read_text(encoding='utf-8')
    reporter = run_source(source, Interpreter())
    captured = capsys.readouterr()
    # Nothing after the failing statement runs
    assert captured.out.strip() == 'hi'
    assert 'Operands must be two numbers or two strings.\n[line 4]' in captured.err
    assert reporter.had_runtime_error
    assert not reporter.had_error
