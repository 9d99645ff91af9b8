from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from template_store import cli


def test_partials_prints_template_info():
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        [
            "partials",
            "Partials",
            "--file",
            "Partials/Header=// header",
            "--file",
            "Partials/Footer=// footer",
        ],
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {
        "Header": {"relative_directory": "Partials", "file_name": "Header.hbs"},
        "Footer": {"relative_directory": "Partials", "file_name": "Footer.hbs"},
    }


def test_partials_defaults_directory_and_extension_override():
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        [
            "partials",
            "--extension",
            ".tmpl",
            "--file",
            "CodeTemplates/Partials/Property=x",
        ],
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["Property"] == {
        "relative_directory": "CodeTemplates/Partials",
        "file_name": "Property.tmpl",
    }


def test_partials_missing_directory_exits_nonzero():
    runner = CliRunner()
    result = runner.invoke(cli.app, ["partials", "Nope", "--file", "Partials/A=a"])
    assert result.exit_code == 1
    assert "Could not find directory Nope" in result.output


def test_show_prints_contents():
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        ["show", "Templates", "Entity", "--file", "Templates/Entity=class {{name}} {}"],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "class {{name}} {}"


def test_show_missing_file_exits_nonzero():
    runner = CliRunner()
    result = runner.invoke(cli.app, ["show", "Templates", "Other", "-f", "Templates/Entity=x"])
    assert result.exit_code == 1


def test_bad_file_spec_is_rejected():
    runner = CliRunner()
    result = runner.invoke(cli.app, ["show", "d", "f", "--file", "no-directory"])
    assert result.exit_code != 0


def test_settings_command(monkeypatch):
    monkeypatch.setenv("TEMPLATE_STORE_PARTIALS_DIRECTORY", "Shared")
    runner = CliRunner()
    result = runner.invoke(cli.app, ["settings"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["partials_directory"] == "Shared"


def test_partials_rejects_extension_without_dot():
    runner = CliRunner()
    result = runner.invoke(cli.app, ["partials", "d", "--extension", "tmpl", "-f", "d/a=x"])
    assert result.exit_code == 2
    assert "--extension" in result.output
    assert "tmpl" in result.output


def test_commands_leave_root_logging_alone():
    root = logging.getLogger()
    before = list(root.handlers)
    runner = CliRunner()
    result = runner.invoke(cli.app, ["show", "Templates", "Other", "-f", "Templates/Entity=x"])
    assert result.exit_code == 1
    assert root.handlers == before


def test_main_configures_logging_before_running(monkeypatch):
    calls: list[str] = []
    monkeypatch.setattr(cli, "configure_logging", lambda: calls.append("logging"))
    monkeypatch.setattr(sys, "argv", ["template-store", "settings"])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    assert exc_info.value.code == 0
    assert calls == ["logging"]
