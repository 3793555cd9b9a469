"""Batch and interactive pipeline behaviour."""

import threading

import pytest

from oq.errors import ParseError, SourceError
from oq.object import Error, Integer
from oq.oq_token import LET, IDENT, EOF, INT, TILDE
from oq.session import Session, parse_source, run_source, read_source, tokenize


def test_parse_source_reports_final_dialect():
    program, errors, warnings, dialect = parse_source("~trk\nolsun x = 1\n")
    assert errors == []
    assert warnings == []
    assert dialect == "trk"
    assert len(program.statements) == 1


def test_run_source_returns_last_value():
    result = run_source("let a = 2\nlet b = 3\na * b")
    assert isinstance(result, Integer)
    assert result.value == 6


def test_run_source_without_value():
    assert run_source("let a = 2") is None


def test_run_source_raises_on_syntax_errors():
    with pytest.raises(ParseError) as excinfo:
        run_source("let x 5\nlet = 1")
    assert excinfo.value.errors == [
        "expected next token to be =, got INTEGER instead",
        "expected next token to be IDENTIFIER, got = instead",
    ]
    assert str(excinfo.value) == "parsing failed with 2 errors"


def test_run_source_runtime_error_is_a_value():
    result = run_source("1 + true")
    assert isinstance(result, Error)


def test_session_keeps_bindings_between_lines():
    session = Session()
    assert session.execute("let a = 5").value is None
    outcome = session.execute("a * 2")
    assert outcome.ok
    assert outcome.value.value == 10


def test_session_keeps_dialect_between_lines():
    session = Session()
    session.execute("~trk")
    assert session.dialect == "trk"
    outcome = session.execute("olsun x = 3")
    assert outcome.errors == []
    assert session.execute("x").value.value == 3


def test_session_bad_line_is_not_evaluated():
    session = Session()
    session.execute("let a = 1")
    outcome = session.execute("let a 2")
    assert not outcome.ok
    assert outcome.errors == ["expected next token to be =, got INTEGER instead"]
    assert outcome.value is None
    assert session.execute("a").value.value == 1


def test_session_reports_unknown_dialect_warning():
    session = Session()
    outcome = session.execute("~klingon")
    assert outcome.errors == []
    assert outcome.warnings == ["Unknown dialect 'klingon'. Keeping default(eng) keyword map."]
    assert session.dialect == "eng"


def test_session_closures_survive_between_lines():
    session = Session()
    session.execute("let adder = fn(x) { fn(y) { x + y } }")
    session.execute("let addTwo = adder(2)")
    assert session.execute("addTwo(40)").value.value == 42


def test_session_is_safe_to_share_between_threads():
    session = Session()
    session.execute("let base = 1")

    results = []

    def worker(n):
        results.append(session.execute(f"base + {n}").value.value)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == [1 + i for i in range(8)]


def test_tokenize_follows_dialect_pragmas():
    kinds = [tok.type for tok in tokenize("olsun\n~trk\nolsun")]
    assert kinds[0] == IDENT
    assert kinds[-2] == LET
    assert kinds[-1] == EOF


def test_tokenize_ignores_tilde_inside_a_statement():
    kinds = [tok.type for tok in tokenize("5 ~ trk olsun")]
    assert kinds == [INT, TILDE, IDENT, IDENT, EOF]


def test_tokenize_switches_at_block_start_and_after_a_pragma():
    toks = list(tokenize("if (x) { ~trk olsun y = 1 }\n~qzq ~trk olsun"))
    assert [tok.type for tok in toks if tok.literal == "olsun"] == [LET, LET]
    toks = list(tokenize("~trk ~qzq болсын"))
    assert toks[-2].type == LET


def test_read_source(tmp_path):
    path = tmp_path / "prog.oq"
    path.write_text("let x = 1\n", encoding="utf-8")
    assert read_source(path) == "let x = 1\n"


def test_read_source_errors(tmp_path):
    with pytest.raises(SourceError):
        read_source(tmp_path / "missing.oq")
    bad = tmp_path / "bad.oq"
    bad.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(SourceError):
        read_source(bad)
