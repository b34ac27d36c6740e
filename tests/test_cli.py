import io
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from loxscan import cli
from loxscan.logger import get_logger

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


#a clean script prints one line per token and exits 0
def test_run_file_prints_tokens(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "ok.lox"
    script.write_text("(+)\n// done\n")
    assert cli.main([str(script)]) == cli.EX_OK
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "LEFT_PAREN '(' line=0",
        "PLUS '+' line=0",
        "RIGHT_PAREN ')' line=0",
        "EOF '' line=2",
    ]


#lexical errors are reported individually and scanning continues
def test_run_file_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "bad.lox"
    script.write_text("@+\n#")
    assert cli.main([str(script)]) == cli.EX_DATAERR
    captured = capsys.readouterr()
    assert captured.err.splitlines() == [
        "error: unexpected character '@' at line 0",
        "error: unexpected character '#' at line 1",
    ]
    assert captured.out.splitlines() == ["PLUS '+' line=0", "EOF '' line=1"]


def test_missing_file_exits_noinput(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([str(tmp_path / "missing.lox")]) == cli.EX_NOINPUT
    assert capsys.readouterr().err.startswith("error: cannot read")


#more than one script path is a usage error
def test_too_many_arguments_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["a.lox", "b.lox"])
    assert excinfo.value.code == cli.EX_USAGE


#each prompt line gets a fresh scanner, so lines restart at 0
def test_prompt_scans_each_line(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("+\n@\n-\n"))
    assert cli.main(["--prompt", "$ "]) == cli.EX_OK
    captured = capsys.readouterr()
    assert "PLUS '+' line=0" in captured.out
    assert "MINUS '-' line=0" in captured.out
    assert captured.out.count("$ ") == 4
    assert captured.err.splitlines() == ["error: unexpected character '@' at line 0"]


#run returns the error count without raising
def test_run_counts_errors() -> None:
    out, err = io.StringIO(), io.StringIO()
    assert cli.run("@ ! @", out, err) == 2
    assert out.getvalue().splitlines() == ["BANG '!' line=0", "EOF '' line=0"]


#verbose mode traces tokens through the loxscan logger
def test_run_logs_tokens(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="loxscan"):
        cli.run("*", io.StringIO(), io.StringIO())
    messages = [record.getMessage() for record in caplog.records if record.name == "loxscan.cli"]
    assert "token Token(TokenKind.STAR, '*', line=0)" in messages
    assert "scanned 2 tokens, 0 errors" in messages


#loggers are always namespaced under loxscan
def test_get_logger_prefixes_namespace() -> None:
    assert get_logger("driver").name == "loxscan.driver"
    assert get_logger("loxscan.scanner").name == "loxscan.scanner"


#undecodable scripts are treated like unreadable ones
def test_undecodable_file_exits_noinput(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    script = tmp_path / "binary.lox"
    script.write_bytes(b"\xff\xfe+")
    assert cli.main([str(script)]) == cli.EX_NOINPUT
    assert capsys.readouterr().err.startswith("error: cannot read")


#-v turns on DEBUG and replaces any handlers left by an earlier call
@pytest.mark.parametrize(("argv", "level"), [(["-v"], logging.DEBUG), ([], logging.WARNING)])
def test_verbose_flag_configures_logging(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, argv: list[str], level: int
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    script = tmp_path / "ok.lox"
    script.write_text("+")
    assert cli.main([*argv, str(script)]) == cli.EX_OK
    assert len(calls) == 1
    assert calls[0]["level"] == level
    assert calls[0]["force"] is True


#importing the package must not pull in the driver
def test_package_does_not_import_cli() -> None:
    import loxscan

    assert "cli" not in loxscan.__all__


#module execution logs under loxscan.cli without a double-import warning
@pytest.mark.parametrize("module", ["loxscan.cli", "loxscan"])
def test_module_execution(tmp_path: Path, module: str) -> None:
    script = tmp_path / "bad.lox"
    script.write_text("@+")
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(SRC_DIR), env.get("PYTHONPATH")])
    )
    proc = subprocess.run(
        [sys.executable, "-m", module, "-v", str(script)],
        capture_output=True,
        text=True,
        env=env,
    )
    assert proc.returncode == cli.EX_DATAERR
    assert "RuntimeWarning" not in proc.stderr
    assert "INFO loxscan.cli: loaded" in proc.stderr
    assert "DEBUG loxscan.scanner: unexpected character '@' at line 0" in proc.stderr
    assert "PLUS '+' line=0" in proc.stdout
