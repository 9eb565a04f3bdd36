from pathlib import Path

from lox.interpreter import Interpreter, run_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_precedence(capsys):
    source = (EXAMPLES / 'program_2.lox').read_text(encoding='utf-8')
    run_source(source, Interpreter())
    out_lines = capsys.readouterr().out.strip().split('\n')
    # Integral results print without a trailing ".0"
    assert out_lines == ['7', '9', '-5', '2.5', '2']
