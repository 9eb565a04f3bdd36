import builtins
from pathlib import Path

import pytest

from lox.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_run_script(capsys):
    main([str(EXAMPLES / 'program_3.lox')])
    out = capsys.readouterr().out
    assert out.startswith('inner a\n')


def test_syntax_error_exit_status(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(EXAMPLES / 'program_4.lox')])
    assert exc_info.value.code == 65
    # The recovered statements still ran
    assert capsys.readouterr().out == 'before\nafter\n'


def test_runtime_error_exit_status(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(EXAMPLES / 'program_5.lox')])
    assert exc_info.value.code == 70
    assert '[line 4]' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / 'nope.lox')])
    assert exc_info.value.code == 66
    assert 'not found' in capsys.readouterr().err


def test_emit_ast_then_run_it(tmp_path, capsys):
    script = tmp_path / 'prog.lox'
    script.write_text('var a = 2; { a = a * 21; } print a;', encoding='utf-8')
    main(['--emit-ast', str(script)])
    ast_path = Path(capsys.readouterr().out.strip())
    assert ast_path == tmp_path / 'prog.lox.ast.json'
    assert ast_path.exists()
    main(['--ast', str(ast_path)])
    assert capsys.readouterr().out == '42\n'


def test_emit_ast_refuses_broken_source(tmp_path):
    script = tmp_path / 'bad.lox'
    script.write_text('print ;', encoding='utf-8')
    with pytest.raises(SystemExit) as exc_info:
        main(['--emit-ast', str(script)])
    assert exc_info.value.code == 65
    assert not (tmp_path / 'bad.lox.ast.json').exists()


def test_verbose_run_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(['-vv', str(EXAMPLES / 'program_1.lox')])
    assert capsys.readouterr().out == 'Hello World!!\n'
    assert 'run 1 statement(s)' in (tmp_path / 'debug.txt').read_text(encoding='utf-8')


def test_prompt_keeps_state_and_survives_errors(monkeypatch, capsys):
    lines = iter(['var a = 1;', 'print b;', 'print a +;', '', 'a = a + 1;', 'print a;', ':q'])
    monkeypatch.setattr(builtins, 'input', lambda prompt='': next(lines))
    main([])
    captured = capsys.readouterr()
    assert captured.out.strip() == '2'
    assert "Undefined variable 'b'." in captured.err
    assert 'Expect expression.' in captured.err


def test_prompt_exits_on_eof(monkeypatch, capsys):
    def fake_input(prompt=''):
        raise EOFError
    monkeypatch.setattr(builtins, 'input', fake_input)
    main([])
    assert capsys.readouterr().out == '\n'
