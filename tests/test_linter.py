# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for RuboCop command construction, invocation and parsing."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from rubocheck.config import RunContext
from rubocheck.errors import ExitCode, LinterNotFoundError, LinterOutputError
from rubocheck.linter import build_rubocop_command, parse_rubocop_output, run_rubocop
from rubocheck.logging import build_cli_logger


def test_build_command_appends_fragments_verbatim(run_context: RunContext) -> None:
    assert build_rubocop_command(run_context) == "rubocop --format json --parallel app lib"


def test_build_command_keeps_shell_syntax_unescaped(run_context: RunContext) -> None:
    context = run_context.model_copy(update={"rubocop_args": "-c 'conf dir/.rubocop.yml'", "lint_files": "$(ls)"})

    assert build_rubocop_command(context) == "rubocop --format json -c 'conf dir/.rubocop.yml' $(ls)"


def test_parse_single_offense(rubocop_report: Callable[..., str]) -> None:
    stdout = rubocop_report(("a.rb", [("warning", "unused var", 10)]))

    findings = parse_rubocop_output(stdout)

    assert len(findings) == 1
    finding = findings[0]
    assert finding.path == "a.rb"
    assert finding.severity == "warning"
    assert finding.message == "unused var"
    assert finding.start_line == 10
    assert finding.end_line == 10
    assert finding.cop_name == "Lint/Example"


def test_parse_preserves_file_then_offense_order(rubocop_report: Callable[..., str]) -> None:
    stdout = rubocop_report(
        ("a.rb", [("warning", "first", 3), ("convention", "second", 1)]),
        ("b.rb", []),
        ("c.rb", [("fatal", "third", 9)]),
    )

    findings = parse_rubocop_output(stdout)

    assert [(item.path, item.message) for item in findings] == [
        ("a.rb", "first"),
        ("a.rb", "second"),
        ("c.rb", "third"),
    ]


def test_parse_minimal_shape() -> None:
    stdout = (
        '{"files":[{"path":"a.rb","offenses":[{"severity":"warning","message":"unused var",'
        '"location":{"start_line":10}}]}]}'
    )

    assert parse_rubocop_output(stdout)[0].start_line == 10


def test_parse_zero_files() -> None:
    assert parse_rubocop_output('{"files": []}') == []


def test_parse_keeps_unknown_severity_for_the_mapper() -> None:
    stdout = '{"files":[{"path":"a.rb","offenses":[{"severity":"info","message":"m","location":{"start_line":1}}]}]}'

    assert parse_rubocop_output(stdout)[0].severity == "info"


@pytest.mark.parametrize("stdout", ["", "rubocop: command not found", "{truncated"])
def test_parse_rejects_non_json(stdout: str) -> None:
    with pytest.raises(LinterOutputError, match="not valid JSON") as excinfo:
        parse_rubocop_output(stdout)

    assert excinfo.value.exit_code is ExitCode.LINTER_ERROR


@pytest.mark.parametrize(
    "stdout",
    [
        "[]",
        '{"summary": {}}',
        '{"files": [{"offenses": []}]}',
        '{"files": [{"path": "a.rb"}]}',
        '{"files": [{"path": "a.rb", "offenses": [{"severity": "warning", "message": "m"}]}]}',
        '{"files": [{"path": "a.rb", "offenses": [{"severity": "warning", "message": "m", "location": {}}]}]}',
    ],
)
def test_parse_rejects_unexpected_shape(stdout: str) -> None:
    with pytest.raises(LinterOutputError, match="unexpected shape"):
        parse_rubocop_output(stdout)


def test_run_rubocop_invokes_command_in_workspace(
    run_context: RunContext,
    rubocop_report: Callable[..., str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[tuple[str, Path, Path]] = []

    def fake_run(command: str, *, cwd: Path) -> subprocess.CompletedProcess[str]:
        calls.append((command, cwd, Path.cwd()))
        stdout = rubocop_report(("a.rb", [("error", "boom", 2)]))
        return subprocess.CompletedProcess(args=command, returncode=1, stdout=stdout)

    monkeypatch.setattr("rubocheck.linter.ensure_executable", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("rubocheck.linter.run_shell_command", fake_run)

    findings = run_rubocop(run_context)

    assert calls[0][0] == "rubocop --format json --parallel app lib"
    assert calls[0][1] == run_context.workspace
    assert findings[0].severity == "error"


def test_run_rubocop_announces_command(
    run_context: RunContext,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("rubocheck.linter.ensure_executable", lambda name: name)
    monkeypatch.setattr(
        "rubocheck.linter.run_shell_command",
        lambda command, *, cwd: subprocess.CompletedProcess(args=command, returncode=0, stdout='{"files": []}'),
    )

    run_rubocop(run_context, logger=build_cli_logger(emoji=False))

    captured = capsys.readouterr()
    assert "Running rubocop: rubocop --format json --parallel app lib" in captured.err
    assert captured.out == ""


def test_run_rubocop_requires_executable(run_context: RunContext, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("rubocheck.process_utils.shutil.which", lambda name: None)

    with pytest.raises(LinterNotFoundError):
        run_rubocop(run_context)


def test_run_rubocop_end_to_end_with_stub_binary(
    run_context: RunContext,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    stub = bin_dir / "rubocop"
    stub.write_text(
        "#!/bin/sh\n"
        "echo \"$PWD\" > cwd.txt\n"
        "printf '%s' '{\"files\":[{\"path\":\"a.rb\",\"offenses\":[{\"severity\":\"warning\","
        "\"message\":\"unused var\",\"location\":{\"start_line\":10}}]}]}'\n"
        "exit 1\n",
        encoding="utf-8",
    )
    stub.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}:/usr/bin:/bin")
    before = Path.cwd()

    findings = run_rubocop(run_context)

    assert [(item.path, item.start_line) for item in findings] == [("a.rb", 10)]
    assert (run_context.workspace / "cwd.txt").is_file()
    assert Path.cwd() == before
