"""CLI tests driven through typer's CliRunner."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jv_ui.cli import app

cli_main = importlib.import_module("jv_ui.cli.main")

pytestmark = pytest.mark.unit_ui

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("JV_TITLE", "JV_PAGE_STEP", "JV_SHOW_STATE", "JV_MOUSE", "JV_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)


def test_print_tree_from_stdin() -> None:
    result = runner.invoke(
        app, ["--print-tree", "--title", "Scenario"], input='{"a": 1, "b": [2, 3]}'
    )

    assert result.exit_code == 0, result.output
    assert "Scenario" in result.output
    assert "a: 1" in result.output
    assert "0: 2" in result.output
    assert "1: 3" in result.output


def test_print_tree_from_file(tmp_path: Path) -> None:
    doc = tmp_path / "doc.json"
    doc.write_text('"just a string"', encoding="utf-8")

    result = runner.invoke(app, [str(doc), "--print-tree"])

    assert result.exit_code == 0, result.output
    assert '"just a string"' in result.output


def test_invalid_json_exits_nonzero() -> None:
    result = runner.invoke(app, ["-", "--print-tree"], input="{not json")

    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_non_json_constant_exits_nonzero() -> None:
    result = runner.invoke(app, ["-", "--print-tree"], input='{"a": NaN}')

    assert result.exit_code == 1
    assert "not a valid JSON value" in result.output


def test_missing_file_exits_nonzero(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_invalid_setting_exits_nonzero() -> None:
    result = runner.invoke(app, ["--page-step", "0", "--print-tree"], input="{}")

    assert result.exit_code == 1
    assert "Invalid viewer settings" in result.output


def test_interactive_mode_runs_viewer(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    doc = tmp_path / "doc.json"
    doc.write_text('{"a": {"b": 1}, "c": []}', encoding="utf-8")
    seen: dict[str, object] = {}

    def fake_run_viewer(navigator, settings) -> int:
        seen["rows"] = [row.node.label for row in navigator.flatten()]
        seen["settings"] = settings
        return 0

    monkeypatch.setattr(cli_main, "run_viewer", fake_run_viewer)

    result = runner.invoke(
        app,
        [str(doc), "--title", "T", "--page-step", "7", "--show-state", "--no-mouse"],
    )

    assert result.exit_code == 0, result.output
    assert seen["rows"] == ["a", "c"]
    settings = seen["settings"]
    assert settings.title == "T"
    assert settings.page_step == 7
    assert settings.show_state is True
    assert settings.mouse_support is False


def test_log_file_option_writes_startup_failure(tmp_path: Path) -> None:
    log_file = tmp_path / "jv.log"

    result = runner.invoke(app, ["--log-file", str(log_file)], input="[")

    assert result.exit_code == 1
    text = log_file.read_text(encoding="utf-8")
    assert "Startup failed" in text
    assert "DocumentLoadError" in text
    assert "<stdin>" in text
