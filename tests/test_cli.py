"""Tests for the sassy-export Typer application."""

import json
from pathlib import Path

from typer.testing import CliRunner

from sassy_export.cli import app

runner = CliRunner()


def _write_data(tmp_path: Path) -> Path:
    path = tmp_path / "theme.yml"
    path.write_text("gap: 8px\ncolumns: 12\nbrand: '#336699'\n", encoding="utf-8")
    return path


def test_export_json(tmp_path: Path, monkeypatch):
    data_file = _write_data(tmp_path)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["export", str(data_file), "dist/theme.json"])

    assert result.exit_code == 0, result.output
    written = (tmp_path / "dist" / "theme.json").read_text(encoding="utf-8")
    assert written == '{"gap":"8px","columns":12,"brand":"#336699"}'
    assert "JSON was successfully exported to" in result.output


def test_export_js_pretty(tmp_path: Path, monkeypatch):
    data_file = _write_data(tmp_path)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["export", str(data_file), "dist/theme.js", "--pretty"])

    assert result.exit_code == 0, result.output
    written = (tmp_path / "dist" / "theme.js").read_text(encoding="utf-8")
    assert written.startswith("var theme = {\n")
    assert json.loads(written[len("var theme = "):])["gap"] == "8px"
    assert "JavaScript was successfully exported to" in result.output


def test_export_use_env_root(tmp_path: Path, monkeypatch):
    data_file = _write_data(tmp_path)
    env_root = tmp_path / "shell"
    env_root.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PWD", str(env_root))

    result = runner.invoke(app, ["export", str(data_file), "theme.json", "--use-env-root"])

    assert result.exit_code == 0, result.output
    assert (env_root / "theme.json").is_file()
    assert not (tmp_path / "theme.json").exists()


def test_export_missing_data_file(tmp_path: Path):
    result = runner.invoke(app, ["export", str(tmp_path / "missing.yml"), "out.json"])
    assert result.exit_code != 0


def test_preview_prints_json(tmp_path: Path):
    data_file = _write_data(tmp_path)

    result = runner.invoke(app, ["preview", str(data_file)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"gap": "8px", "columns": 12, "brand": "#336699"}
    assert list(tmp_path.iterdir()) == [data_file]


def test_preview_pretty(tmp_path: Path):
    data_file = _write_data(tmp_path)

    result = runner.invoke(app, ["preview", str(data_file), "--pretty"])

    assert result.exit_code == 0, result.output
    assert '\n  "gap": "8px"' in result.output
