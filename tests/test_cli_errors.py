from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from seedforge.cli import app


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["string", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["string", "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code == 4


def test_inverted_length_bounds() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["string", "--min", "5", "--max", "2"])
    assert result.exit_code == 4


def test_unknown_charset() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["string", "--charset", "emoji"])
    assert result.exit_code == 4


def test_all_choices_excluded() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["choice", "a", "b", "--seed", "0", "-x", "a", "-x", "b"])
    assert result.exit_code == 5
    assert "no candidate" in result.output


def test_null_logging_section(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("logging: null\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["string", "--seed", "1", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_list_logging_section(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("logging: []\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["choice", "a", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_top_level_list_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("- a\n- b\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["string", "--seed", "1", "--config", str(bad_cfg)])
    assert result.exit_code == 4
    assert "mapping" in result.output
