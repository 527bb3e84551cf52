import os

import pytest

from lispy import __version__, cli
from lispy.config import get_load_roots, get_log_level, paths_from_env
from lispy.interpreter import Interpreter
from lispy.repl import PROMPT, run_repl


def _feed(lines):
    """input() replacement that replays `lines`, then signals EOF."""
    it = iter(lines)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input, prompts


def test_repl_prints_each_result(capsys):
    input_fn, prompts = _feed(["+ 1 2", "", "def {x} 5", "list x x", "head {}"])
    run_repl(Interpreter(prelude=None), input_fn)
    out = capsys.readouterr().out
    assert out.startswith(f"Lispy Version {__version__}")
    assert "3\n" in out
    assert "()\n" in out
    assert "{5 5}\n" in out
    assert "Error: Function 'head' passed {}!\n" in out
    assert prompts == [PROMPT] * 6


def test_repl_reports_syntax_errors_and_continues(capsys):
    input_fn, _ = _feed(["(+ 1", "+ 2 2"])
    run_repl(Interpreter(prelude=None), input_fn)
    out = capsys.readouterr().out
    assert "<stdin>:1:5: error: expected ')' but reached end of input" in out
    assert "4\n" in out


def test_repl_survives_runaway_recursion(capsys):
    input_fn, _ = _feed(["fun {loop n} {loop n}", "loop 1", "+ 1 1"])
    run_repl(Interpreter(prelude=None), input_fn)
    out = capsys.readouterr().out
    assert "Error: Maximum recursion depth exceeded!" in out
    assert out.rstrip().endswith("2")


def test_repl_stops_on_keyboard_interrupt(capsys):
    def _input(prompt):
        raise KeyboardInterrupt

    run_repl(Interpreter(prelude=None), _input)
    assert capsys.readouterr().out.startswith("Lispy Version")


def test_cli_runs_files(tmp_path, capsys):
    src = tmp_path / "hello.lspy"
    src.write_text('(print "hello") (print (sum {1 2 3}))', encoding="utf-8")
    assert cli.main([str(src)]) == 0
    assert capsys.readouterr().out == '"hello"\n6\n'


def test_cli_without_prelude(tmp_path, capsys):
    src = tmp_path / "plain.lspy"
    src.write_text("(sum {1 2})", encoding="utf-8")
    assert cli.main(["--no-prelude", str(src)]) == 0
    assert capsys.readouterr().out == "Error: Unbound Symbol 'sum'\n"


def test_cli_missing_file_sets_status(tmp_path, capsys):
    assert cli.main(["--no-prelude", str(tmp_path / "missing.lspy")]) == 1
    assert "no such file" in capsys.readouterr().out


def test_cli_starts_repl_without_files(monkeypatch):
    started = []
    monkeypatch.setattr(cli, "run_repl", lambda interp: started.append(interp))
    assert cli.main(["--no-prelude"]) == 0
    assert len(started) == 1
    assert isinstance(started[0], Interpreter)


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_cli_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        cli.main(["--log-level", "LOUD"])


def test_config_from_env(tmp_path, monkeypatch):
    monkeypatch.delenv("LISPY_PATH", raising=False)
    monkeypatch.delenv("LISPY_LOG_LEVEL", raising=False)
    assert get_load_roots() == []
    assert get_log_level() == "WARNING"

    monkeypatch.setenv("LISPY_PATH", f"{tmp_path / 'a'}{os.pathsep}{tmp_path / 'b'}")
    assert [p.name for p in get_load_roots()] == ["a", "b"]
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
    assert paths_from_env("LISPY_UNSET_VAR", [tmp_path]) == [tmp_path]
