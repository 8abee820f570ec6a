from __future__ import annotations

import json

from typer.testing import CliRunner

from xdg_desktop import __version__
from xdg_desktop.cli.app import app
from xdg_desktop.core.errors import ExitCode

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_show_table(htop_file):
    result = runner.invoke(app, ["show", str(htop_file)])
    assert result.exit_code == int(ExitCode.OK)
    assert "Desktop Entry" in result.output
    assert "Process Viewer" in result.output


def test_show_json(htop_file):
    result = runner.invoke(app, ["show", str(htop_file), "--format", "json"])
    assert result.exit_code == int(ExitCode.OK)
    data = json.loads(result.output)
    assert data["Desktop Entry"]["Terminal"] == {"type": "boolean", "value": True}


def test_show_keep_brackets(htop_file):
    result = runner.invoke(app, ["show", str(htop_file), "-f", "json", "--keep-brackets"])
    assert "[Desktop Entry]" in json.loads(result.output)


def test_show_reports_invalid_entries(tmp_path):
    p = tmp_path / "bad.desktop"
    p.write_text("[Desktop Entry]\nTerminal=yes\n", encoding="utf-8")
    result = runner.invoke(app, ["show", str(p), "--errors-only"])
    assert result.exit_code == int(ExitCode.INVALID_ENTRIES)
    assert "Terminal" in result.output


def test_show_structural_error(tmp_path):
    p = tmp_path / "orphan.desktop"
    p.write_text("Name=Orphan\n", encoding="utf-8")
    result = runner.invoke(app, ["show", str(p)])
    assert result.exit_code == int(ExitCode.ERROR)


def test_get_prints_display_form(htop_file):
    result = runner.invoke(app, ["get", str(htop_file), "Categories"])
    assert result.exit_code == 0
    assert result.output.strip() == "ConsoleOnly;System;"

    result = runner.invoke(app, ["get", str(htop_file), "Comment[es_CL]"])
    assert result.output.strip() == "Mostrar procesos del sistema"


def test_get_missing_key(htop_file):
    result = runner.invoke(app, ["get", str(htop_file), "TryExec"])
    assert result.exit_code == int(ExitCode.INVALID_ENTRIES)


def test_check_directory(htop_file):
    (htop_file.parent / "bad.desktop").write_text("[Desktop Entry]\nHidden=0\n", encoding="utf-8")

    result = runner.invoke(app, ["check", str(htop_file.parent)])
    assert result.exit_code == int(ExitCode.INVALID_ENTRIES)

    result = runner.invoke(app, ["check", str(htop_file.parent), "--no-fail"])
    assert result.exit_code == int(ExitCode.OK)


def test_check_clean_file(htop_file):
    result = runner.invoke(app, ["check", str(htop_file), "--verbose"])
    assert result.exit_code == int(ExitCode.OK)
    assert "No invalid entries" in result.output


def test_check_missing_file(tmp_path):
    result = runner.invoke(app, ["check", str(tmp_path / "missing.desktop")])
    assert result.exit_code == int(ExitCode.ERROR)
    result = runner.invoke(app, ["check", str(tmp_path / "missing.desktop"), "--ignore-errors"])
    assert result.exit_code == int(ExitCode.OK)


def test_init_writes_config_once(tmp_path):
    result = runner.invoke(app, ["init", str(tmp_path)])
    assert result.exit_code == 0
    cfg = tmp_path / ".xdg-desktop" / "config.toml"
    assert cfg.exists()

    result = runner.invoke(app, ["init", str(tmp_path)])
    assert "already exists" in result.output
