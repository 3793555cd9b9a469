"""Command line behaviour through click's CliRunner."""

import pytest
from click.testing import CliRunner

from oq import __version__
from oq.cli.main import cli
from oq.config import config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write(tmp_path):
    def _write(text, name="prog.oq"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_run_prints_final_value(runner, write):
    path = write("let add = fn(a, b) { a + b }\nadd(2, 3)\n")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "5"


def test_run_dialect_program(runner, write):
    path = write("~qzq\nболсын x = 4\nегер (x > 3) { \"үлкен\" } әйтпесе { \"кіші\" }\n")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 0, result.output
    assert "үлкен" in result.output


def test_run_with_dialect_option(runner, write):
    path = write("olsun x = 2\nx * 21\n")
    result = runner.invoke(cli, ["--dialect", "trk", "run", path])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "42"


def test_run_without_value_prints_nothing(runner, write):
    path = write("let x = 1\n")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 0
    assert result.output.strip() == ""


def test_run_reports_parser_errors_and_fails(runner, write):
    path = write("let x 5\nlet y = 1\n")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 1
    assert "Parser errors:" in result.output
    assert "expected next token to be =, got INTEGER instead" in result.output


def test_run_runtime_error_fails(runner, write):
    path = write("5 + true\n")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 1
    assert "ERROR: type mismatch: INTEGER + BOOLEAN" in result.output


def test_run_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["run", str(tmp_path / "nope.oq")])
    assert result.exit_code == 2


def test_check(runner, write):
    good = write("let x = 1\n", "good.oq")
    bad = write("let = 1\n", "bad.oq")
    ok = runner.invoke(cli, ["check", good])
    assert ok.exit_code == 0
    assert "Syntax is valid" in ok.output
    failed = runner.invoke(cli, ["check", bad])
    assert failed.exit_code == 1
    assert "expected next token to be IDENTIFIER, got = instead" in failed.output


def test_ast_shows_canonical_form(runner, write):
    path = write("~trk\nolsun x = 1 + 2 * 3\n")
    result = runner.invoke(cli, ["ast", path])
    assert result.exit_code == 0, result.output
    assert "let x = (1 + (2 * 3))" in result.output


def test_ast_of_deeply_nested_program(runner, write, default_recursion_limit):
    depth = config.max_parse_depth - 1
    path = write("if (1) {" * depth + "1" + "}" * depth + "\n")
    checked = runner.invoke(cli, ["check", path])
    assert checked.exit_code == 0, checked.output
    result = runner.invoke(cli, ["ast", path])
    assert result.exit_code == 0, result.output
    assert result.exception is None
    assert "has_else=False" in result.output


def test_tokens_table(runner, write):
    path = write("~trk\nolsun x = 1\n")
    result = runner.invoke(cli, ["tokens", path])
    assert result.exit_code == 0, result.output
    assert "olsun" in result.output
    assert "LET" in result.output


def test_dialects_table(runner):
    result = runner.invoke(cli, ["dialects"])
    assert result.exit_code == 0
    for spelling in ("olsun", "болсын", "döndür", "қайтару", "elsif"):
        assert spelling in result.output


def test_repl_session(runner):
    lines = "let a = 20\na + 1\nlet b 2\n~trk\nolsun c = a * 2\nc\nexit\n"
    result = runner.invoke(cli, ["repl"], input=lines)
    assert result.exit_code == 0, result.output
    assert "21" in result.output
    assert "expected next token to be =, got INTEGER instead" in result.output
    assert "40" in result.output


def test_repl_shows_unknown_dialect_warning_at_any_log_level(runner):
    result = runner.invoke(cli, ["--log-level", "error", "repl"], input="~klingon\nlet x = 3\nx\n")
    assert result.exit_code == 0, result.output
    assert "Warning: Unknown dialect 'klingon'. Keeping default(eng) keyword map." in result.output
    assert "3" in result.output


def test_run_shows_unknown_dialect_warning(runner, write):
    path = write("~klingon\n1 + 1\n")
    result = runner.invoke(cli, ["--log-level", "error", "run", path])
    assert result.exit_code == 0, result.output
    assert "Unknown dialect 'klingon'" in result.output
    assert "2" in result.output


def test_repl_ends_on_eof(runner):
    result = runner.invoke(cli, ["repl"], input="1 + 1\n")
    assert result.exit_code == 0
    assert "2" in result.output


def test_log_level_option(runner, write):
    path = write("1\n")
    result = runner.invoke(cli, ["--log-level", "error", "run", path])
    assert result.exit_code == 0
    bad = runner.invoke(cli, ["--log-level", "loud", "run", path])
    assert bad.exit_code == 2
