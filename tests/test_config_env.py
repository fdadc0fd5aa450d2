from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from seedforge.config import load_config


def test_env_log_level(monkeypatch: Any) -> None:
    monkeypatch.setenv("SEEDFORGE_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.logging.level == "DEBUG"


def test_explicit_env_mapping() -> None:
    cfg = load_config(env={"SEEDFORGE_LOG_LEVEL": "ERROR"})
    assert cfg.logging.level == "ERROR"


def test_empty_env_keeps_file_level(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("logging:\n  level: INFO\n")
    cfg = load_config(cfg_file, env={"SEEDFORGE_LOG_LEVEL": ""})
    assert cfg.logging.level == "INFO"


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('logging:\n  level_env: "CUSTOM_ENV"\n')
    monkeypatch.setenv("CUSTOM_ENV", "critical")
    cfg = load_config(cfg_file)
    assert cfg.logging.level_env == "CUSTOM_ENV"
    assert cfg.logging.level == "CRITICAL"


def test_invalid_env_level() -> None:
    with pytest.raises(ValidationError):
        load_config(env={"SEEDFORGE_LOG_LEVEL": "chatty"})
