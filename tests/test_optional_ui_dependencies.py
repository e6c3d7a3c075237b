"""Regression tests for missing UI dependencies (rich/questionary).

These tests verify that ``--version`` works without them, and that a
session start fails with a typed, readable error instead of a traceback.
"""

from __future__ import annotations

import sys

import pytest

from tablecraft.cli import exit_codes
from tablecraft.cli.app import cli, main
from tablecraft.cli.console import console
from tablecraft.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)
    # Force the session module to be imported again under the hidden rich.
    monkeypatch.delitem(sys.modules, "tablecraft.cli.session", raising=False)


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_console_falls_back_to_plain_print(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain output", soft_wrap=True)
    assert capsys.readouterr().out == "plain output\n"


def test_session_errors_cleanly_when_rich_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        main(["--no-banner"])


def test_cli_reports_missing_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["tablecraft", "--no-banner"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "rich is not installed" in capsys.readouterr().out
