"""Typed configuration schema and loader for the seedforge package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

# Largest integer a double represents exactly.
MAX_SAFE_INTEGER = 2**53 - 1

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ForgerSettings(BaseModel):
    """Seed allocation settings for :class:`~seedforge.forger.Forger`."""

    seed_upper_bound: conint(ge=1) = MAX_SAFE_INTEGER
    max_attempts: conint(ge=1) = 64

    model_config = ConfigDict(extra="forbid", frozen=True)


class StringSettings(BaseModel):
    """Defaults for string molds built from configuration."""

    minimum_length: conint(ge=0)
    maximum_length: conint(ge=0)
    charset: Literal["alphanumeric", "alpha", "slug", "numeric", "symbol"]

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_bounds(self) -> StringSettings:
        if self.maximum_length < self.minimum_length:
            raise ValueError("maximum_length must be >= minimum_length")
        return self


class LoggingSettings(BaseModel):
    """Package logger settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    level_env: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    forger: ForgerSettings
    strings: StringSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``logging.level_env``.  A fresh model is
    returned on every call; nothing is cached at module level.
    """

    with (
        importlib_resources.files("seedforge.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: top level must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    level = environ.get(cfg.logging.level_env)
    if level:
        cfg = ConfigModel.model_validate(
            deep_merge_dicts(cfg.model_dump(), {"logging": {"level": level.upper()}})
        )

    return cfg


__all__ = [
    "ConfigModel",
    "ForgerSettings",
    "LoggingSettings",
    "MAX_SAFE_INTEGER",
    "StringSettings",
    "deep_merge_dicts",
    "load_config",
]
