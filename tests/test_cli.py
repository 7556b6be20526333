"""Tests for the command-line wrapper."""

import io
import json
import logging

import pytest

from yamljson.args import add_arg, get_arg, init_args
from yamljson.cli import (
    EXIT_CONVERSION_ERROR,
    EXIT_IO_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
    main,
    parse_args,
    run,
)


SAMPLE = "# config\nname: demo\nitems:\n  - a\n  - b\n"


def _run(store, stdin_text=""):
    out = io.StringIO()
    code = run(store, io.StringIO(stdin_text), out)
    return code, out.getvalue()


# ---------------------------------------------------------------------------
# parse_args
# ---------------------------------------------------------------------------

def test_parse_args_defaults(monkeypatch):
    monkeypatch.delenv("YAMLJSON_STRICT", raising=False)
    monkeypatch.delenv("YAMLJSON_LOG_LEVEL", raising=False)
    store = parse_args([])
    assert get_arg(store, "input") == "-"
    assert get_arg(store, "mode") == "json"
    assert get_arg(store, "indent") is None
    assert get_arg(store, "strict") == ""
    assert get_arg(store, "log_level") == "INFO"

def test_parse_args_flags():
    store = parse_args(["cfg.yaml", "--intermediate", "--indent", "2", "--strict", "--quiet"])
    assert get_arg(store, "input") == "cfg.yaml"
    assert get_arg(store, "mode") == "intermediate"
    assert get_arg(store, "indent") == "2"
    assert get_arg(store, "strict") == "1"
    assert get_arg(store, "quiet") == "1"

def test_parse_args_strict_from_env(monkeypatch):
    monkeypatch.setenv("YAMLJSON_STRICT", "true")
    assert get_arg(parse_args([]), "strict") == "1"

@pytest.mark.parametrize("level", ["debug", "WARNING", "3"])
def test_parse_args_log_level(level):
    assert get_arg(parse_args(["--log-level", level]), "log_level") == level

def test_parse_args_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--log-level", "bogus"])
    assert excinfo.value.code == 2
    assert "Unknown log level" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

def test_run_stdin():
    code, out = _run(parse_args([]), SAMPLE)
    assert code == EXIT_OK
    assert out == '{"name":"demo","items":["a","b"]}\n'

def test_run_file(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(SAMPLE, encoding="utf-8")
    code, out = _run(parse_args([str(path)]))
    assert code == EXIT_OK
    assert json.loads(out) == {"name": "demo", "items": ["a", "b"]}

def test_run_intermediate():
    code, out = _run(parse_args(["--intermediate"]), "k: v")
    assert code == EXIT_OK
    assert out == '[{"type":"key_value","indentation":0,"key":"k","value":"v"}]\n'

def test_run_indent():
    code, out = _run(parse_args(["--indent", "2"]), "k: v")
    assert out == '{\n  "k": "v"\n}\n'

def test_run_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="yamljson"):
        code, out = _run(parse_args([str(tmp_path / "nope.yaml")]))
    assert code == EXIT_IO_ERROR
    assert out == ""
    assert "Error reading" in caplog.text

def test_run_undecodable_file(tmp_path, caplog):
    path = tmp_path / "latin1.yaml"
    path.write_bytes(b"name: caf\xe9\n")
    with caplog.at_level(logging.ERROR, logger="yamljson"):
        code, out = _run(parse_args([str(path)]))
    assert code == EXIT_IO_ERROR
    assert out == ""
    assert "Error reading" in caplog.text

def test_run_strict_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="yamljson"):
        code, out = _run(parse_args(["--strict"]), "- orphan")
    assert code == EXIT_CONVERSION_ERROR
    assert out == ""
    assert "Conversion failed" in caplog.text

def test_run_lenient_keeps_going():
    code, out = _run(parse_args([]), "- orphan\nk: v")
    assert code == EXIT_OK
    assert out == '{"k":"v"}\n'

def test_run_requires_input_arg(caplog):
    store = add_arg(init_args(), "mode", "json")
    with caplog.at_level(logging.ERROR, logger="yamljson"):
        code, _ = _run(store)
    assert code == EXIT_CONVERSION_ERROR
    assert "Missing mandatory arguments: input" in caplog.text


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_main_prints_json(tmp_path, capsys):
    path = tmp_path / "cfg.yaml"
    path.write_text("block: |\n  line one\n  line two\n", encoding="utf-8")
    assert main([str(path), "--quiet"]) == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == '{"block":"line one\\nline two\\n"}\n'

def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a:\n  b: c\n"))
    assert main(["-", "--quiet"]) == EXIT_OK
    assert capsys.readouterr().out == '{"a":{"b":"c"}}\n'

def test_main_bad_log_level_from_env(monkeypatch, capsys):
    monkeypatch.setenv("YAMLJSON_LOG_LEVEL", "bogus")
    assert main(["-"]) == EXIT_USAGE_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown log level" in captured.err
