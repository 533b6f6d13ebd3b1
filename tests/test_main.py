import json

import pytest

from errors import UndefinedSeparator, UnexpectedSymbol
from main import DEMO_PROGRAM, analyze, interactive_mode, lex, main, process_program
from symbols import SymbolSession


def test_lex_returns_pre_tokens():
    assert [t.value for t in lex("b = 3; # b = 9999;")] == ["b", "=", "3", ";"]


def test_analyze_demo_program():
    tokens, session = analyze(DEMO_PROGRAM)
    assert list(session.literals) == ["432", "3"]
    assert list(session.identifiers) == ["a", "b", "c"]
    assert len(session.trace) == len(tokens)
    assert "9999" not in session.literals


def test_analyze_reports_first_failing_stage():
    with pytest.raises(UnexpectedSymbol):
        analyze("a = 1 @ b => c")
    with pytest.raises(UndefinedSeparator):
        analyze("a => c")


def test_process_program_prints_tables(capsys):
    assert process_program("a = 1;", print_tokens=True)
    out = capsys.readouterr().out
    assert "Tokens (4):" in out
    assert "Standard symbols" in out


def test_process_program_collects_errors(capsys):
    assert not process_program("a @ b $ c", collect_errors=True)
    out = capsys.readouterr().out
    assert out.count("Lexical error:") == 2


def test_process_program_dumps_json(tmp_path, capsys):
    path = tmp_path / "tables.json"
    assert process_program("x = 2;", print_tables=False, dump_tables_path=str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["identifiers"] == ["x"]


def test_cli_demo_and_file(tmp_path, capsys):
    assert main(["--demo", "--no-tables"]) == 0

    src = tmp_path / "prog.txt"
    src.write_text("a => b", encoding="utf-8")
    assert main(["--file", str(src)]) == 1
    assert "Undefined separator '=>'" in capsys.readouterr().out


def test_collect_errors_reports_scan_and_separator_errors(capsys):
    session = SymbolSession()
    assert not process_program("a @ b => c", session=session, collect_errors=True)
    out = capsys.readouterr().out
    assert "Unexpected symbol '@'" in out
    assert "Undefined separator '=>'" in out
    assert len(session.identifiers) == 0
    assert session.trace == []


def test_collect_errors_leaves_session_clean_after_scan_error(capsys):
    session = SymbolSession()
    assert not process_program("a @ b = 1;", session=session, collect_errors=True)
    assert capsys.readouterr().out.count("Lexical error:") == 1
    assert len(session.identifiers) == 0
    assert len(session.literals) == 0
    assert session.trace == []


def test_interactive_mode_collects_errors(monkeypatch, capsys):
    lines = iter(["a @ b => c", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    interactive_mode(print_tables=False, collect_errors=True)
    out = capsys.readouterr().out
    assert "Unexpected symbol '@'" in out
    assert "Undefined separator '=>'" in out
