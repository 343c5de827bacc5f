"""Unit tests for the prettier subprocess adapter."""

import subprocess
from typing import Any
from unittest.mock import patch

import pytest

from as_prettier.core.errors import FormatterError
from as_prettier.formatter.prettier import PrettierFormatter, get_prettier_command


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_default_command_is_prettier(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AS_PRETTIER_COMMAND", raising=False)
    assert get_prettier_command() == ["prettier"]


def test_command_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AS_PRETTIER_COMMAND", "npx --yes prettier@3")
    assert get_prettier_command() == ["npx", "--yes", "prettier@3"]


def test_build_args_without_config() -> None:
    formatter = PrettierFormatter(["prettier"])
    assert formatter.build_args("/src/a.ts") == ["prettier", "--stdin-filepath", "/src/a.ts", "--parser", "typescript"]


def test_build_args_with_config() -> None:
    formatter = PrettierFormatter(["npx", "prettier"])
    assert formatter.build_args("a.ts", ".prettierrc.json")[-2:] == ["--config", ".prettierrc.json"]
    assert formatter.build_args("a.ts", ".prettierrc.json")[:2] == ["npx", "prettier"]


def test_format_pipes_code_through_stdin() -> None:
    formatter = PrettierFormatter(["prettier"])

    with patch("as_prettier.formatter.prettier.subprocess.run", return_value=_completed(stdout="let a = 1;\n")) as run:
        result = formatter.format("let a=1", "/src/a.ts")

    assert result == "let a = 1;\n"
    args, kwargs = run.call_args
    assert args[0] == ["prettier", "--stdin-filepath", "/src/a.ts", "--parser", "typescript"]
    assert kwargs["input"] == "let a=1"
    assert kwargs["capture_output"] is True
    assert kwargs["text"] is True


def test_format_raises_with_prettier_stderr() -> None:
    formatter = PrettierFormatter(["prettier"])
    failure = _completed(returncode=2, stderr="[error] a.ts: SyntaxError: ';' expected. (1:9)\n")

    with patch("as_prettier.formatter.prettier.subprocess.run", return_value=failure):
        with pytest.raises(FormatterError, match="SyntaxError"):
            formatter.format("let a b", "a.ts")


def test_format_raises_on_silent_failure() -> None:
    formatter = PrettierFormatter(["prettier"])

    with patch("as_prettier.formatter.prettier.subprocess.run", return_value=_completed(returncode=1)):
        with pytest.raises(FormatterError, match="exited with code 1"):
            formatter.format("x", "a.ts")


def test_missing_executable_raises_formatter_error() -> None:
    formatter = PrettierFormatter(["definitely-not-prettier"])

    def _raise(*_: Any, **__: Any) -> None:
        raise FileNotFoundError(2, "No such file or directory")

    with patch("as_prettier.formatter.prettier.subprocess.run", side_effect=_raise):
        with pytest.raises(FormatterError, match="definitely-not-prettier"):
            formatter.format("x", "a.ts")
