import subprocess
from pathlib import Path
from typing import Any

import pytest

from rb2js import rb2js_format
from rb2js.rb2js_errors import FormatError
from rb2js.rb2js_format import DEFAULT_COMMAND, format_js


def fake_run(returncode: int = 0, rewrite: str | None = None, stderr: str = "") -> Any:
    calls: list[list[str]] = []

    def run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append(args)
        path = Path(args[-1])
        assert path.suffix == ".js"
        if rewrite is not None:
            path.write_text(rewrite, encoding="utf-8")
        return subprocess.CompletedProcess(args, returncode, "", stderr)

    run.calls = calls  # type: ignore[attr-defined]
    return run


def test_format_js_returns_rewritten_file(monkeypatch: pytest.MonkeyPatch) -> None:
    run = fake_run(rewrite="function f() {\n  return 1;\n}\n\n")
    monkeypatch.setattr(rb2js_format.subprocess, "run", run)
    assert format_js("function f() {\nreturn 1;\n}\n") == (
        "function f() {\n  return 1;\n}"
    )
    [args] = run.calls
    assert args[:-1] == DEFAULT_COMMAND.split()


def test_format_js_custom_command(monkeypatch: pytest.MonkeyPatch) -> None:
    run = fake_run()
    monkeypatch.setattr(rb2js_format.subprocess, "run", run)
    assert format_js("x = 1;\n", command="my-fmt --in-place") == "x = 1;"
    assert run.calls[0][:2] == ["my-fmt", "--in-place"]


def test_format_js_removes_temp_file(monkeypatch: pytest.MonkeyPatch) -> None:
    run = fake_run()
    monkeypatch.setattr(rb2js_format.subprocess, "run", run)
    format_js("x;\n")
    assert not Path(run.calls[0][-1]).exists()


def test_format_js_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    run = fake_run(returncode=2, stderr="SyntaxError: Unexpected token")
    monkeypatch.setattr(rb2js_format.subprocess, "run", run)
    with pytest.raises(FormatError, match="Unexpected token") as e:
        format_js("function (")
    assert e.value.stderr == "SyntaxError: Unexpected token"
    assert not Path(run.calls[0][-1]).exists()


def test_format_js_missing_tool_raises() -> None:
    with pytest.raises(FormatError):
        format_js("x;\n", command="rb2js-no-such-formatter-tool")
