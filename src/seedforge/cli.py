"""Typer-based command line interface for previewing generated data.

``scramble`` prints scrambled integers, ``string`` and ``choice`` pour values
from the built-in molds.  Without ``--seed`` a :class:`~seedforge.forger.Forger`
allocates fresh seeds; with it, values are reproducible from ``--seed`` on.

Exit codes
----------
0 success
4 configuration error (invalid YAML or schema violation)
5 generation error (invalid mold configuration, exhausted choices)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, StringSettings, load_config
from .forger import Forger
from .mold import Mold, enum_mold, string_mold_from_settings
from .scramble import scramble as scramble_value
from .utils.errors import SeedforgeError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="seedforge",
    help="Preview deterministic test data. Use 'seedforge string' or 'seedforge choice'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ValueError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging(cfg.logging.level)
    return cfg


def _pour(
    mold: Mold[Any, Any],
    cfg: ConfigModel,
    count: int,
    seed: int | None,
    overrides: dict[str, Any] | None = None,
) -> list[Any]:
    forger = Forger(mold, settings=cfg.forger)
    if seed is None:
        return forger.forge_multi(count, overrides)
    return forger.forge_multi_with_seed(count, seed, overrides)


@app.callback()
def main() -> None:
    """Entry point for the seedforge command group."""
    pass


@app.command()
def scramble(
    values: List[int] = typer.Argument(..., help="Integers to scramble"),  # noqa: B008
) -> None:
    """Print the 32-bit scramble of each value."""

    for value in values:
        typer.echo(str(scramble_value(value)))


@app.command()
def string(
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", min=0, help="First seed; omit to draw fresh seeds"
    ),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values"),  # noqa: B008
    minimum_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--min", help="Override strings.minimum_length"
    ),
    maximum_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--max", help="Override strings.maximum_length"
    ),
    charset: Optional[str] = typer.Option(  # noqa: B008
        None, "--charset", help="alphanumeric|alpha|slug|numeric|symbol"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print strings poured from the configured string mold."""

    cfg = _load(config_path)
    update: dict[str, Any] = {}
    if minimum_length is not None:
        update["minimum_length"] = minimum_length
    if maximum_length is not None:
        update["maximum_length"] = maximum_length
    if charset is not None:
        update["charset"] = charset
    try:
        settings = StringSettings.model_validate(cfg.strings.model_dump() | update)
    except ValidationError as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    try:
        values = _pour(string_mold_from_settings(settings), cfg, count, seed)
    except SeedforgeError as exc:
        _safe_exit(5, str(exc))
    for value in values:
        typer.echo(value)


@app.command()
def choice(
    candidates: List[str] = typer.Argument(..., help="Candidate values"),  # noqa: B008
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", min=0, help="First seed; omit to draw fresh seeds"
    ),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values"),  # noqa: B008
    exclude: Optional[List[str]] = typer.Option(  # noqa: B008
        None, "--exclude", "-x", help="Candidate to exclude; repeatable"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print choices among ``candidates``."""

    cfg = _load(config_path)
    try:
        overrides = {"exclusion": set(exclude)} if exclude else None
        values = _pour(enum_mold(candidates), cfg, count, seed, overrides)
    except SeedforgeError as exc:
        _safe_exit(5, str(exc))
    for value in values:
        typer.echo(value)


if __name__ == "__main__":  # pragma: no cover
    app()
