"""Tests for the table printer, the JSON export and the scanner visualization."""

import json

from fsm_viz import render_fsm_dot
from lexer import scan
from pretty_printer import TablePrinter
from tables_json import session_to_json
from tests.utils import classify_text


def test_print_session_lists_tables_in_order():
    session = classify_text("let a: number = 5;")
    out = TablePrinter.print_session(session)
    headings = ["Keywords", "Separators", "Literals", "Identifiers", "Standard symbols"]
    positions = [out.index(h) for h in headings]
    assert positions == sorted(positions)
    assert "\t0\t5" in out
    assert "\tlet\t(keyword, 0)" in out
    assert "\ta\t(identifier, 0)" in out


def test_print_pre_tokens():
    out = TablePrinter.print_pre_tokens(scan("x = 10"))
    assert out.splitlines()[2:] == ["\tx\tidentifier", "\t=\tseparator", "\t10\tliteral"]


def test_session_to_json_is_serializable():
    session = classify_text("a = a + 1;")
    data = session_to_json(session)
    assert data["literals"] == ["1"]
    assert data["identifiers"] == ["a"]
    assert data["trace"][0] == {"value": "a", "table": "identifier", "index": 0}
    assert json.loads(json.dumps(data)) == data


def test_fsm_dot_source():
    src = render_fsm_dot().source
    for state in ("START", "DIGIT", "SEPARATOR", "IDENTIFIER", "COMMENT"):
        assert state in src
    assert "UnexpectedSymbol" in src
    assert "comment_marker/skip" in src
