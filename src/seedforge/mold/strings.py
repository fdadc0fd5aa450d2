"""Bounded-length string mold.

The resolved length is ``minimum_length + seed % span`` where ``span`` is the
number of admissible lengths.  Character ``i`` is picked from the candidate
table at ``scramble(seed + i) % len(candidates)`` so neighbouring positions and
neighbouring seeds do not produce runs of consecutive characters.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from seedforge.scramble import scramble
from seedforge.utils.constants import ALPHANUMERIC, CHARSETS
from seedforge.utils.errors import InvalidConfigurationError

from .base import Mold, Overrides, overlay

if TYPE_CHECKING:  # pragma: no cover
    from seedforge.config import StringSettings

DEFAULT_MINIMUM_LENGTH = 1
DEFAULT_MAXIMUM_LENGTH = 255


@dataclass(frozen=True, slots=True)
class StringProperties:
    value: str


def string_mold(
    minimum_length: int | None = None,
    maximum_length: int | None = None,
    candidates: Sequence[str] | None = None,
) -> Mold[str, StringProperties]:
    """Return a mold producing strings of bounded length.

    Parameters
    ----------
    minimum_length:
        Shortest length produced; defaults to ``1``.
    maximum_length:
        Longest length produced; defaults to ``255``.
    candidates:
        Characters to draw from; defaults to the 62-character alphanumeric
        table.

    Raises
    ------
    InvalidConfigurationError
        If ``maximum_length < minimum_length``, ``minimum_length`` is negative
        or ``candidates`` is empty.
    """

    min_length = DEFAULT_MINIMUM_LENGTH if minimum_length is None else minimum_length
    max_length = DEFAULT_MAXIMUM_LENGTH if maximum_length is None else maximum_length
    characters = tuple(ALPHANUMERIC if candidates is None else candidates)

    if min_length < 0:
        raise InvalidConfigurationError(f"minimum_length must be >= 0, got {min_length}")
    if max_length < min_length:
        raise InvalidConfigurationError(
            f"maximum_length ({max_length}) must be >= minimum_length ({min_length})"
        )
    if not characters:
        raise InvalidConfigurationError("candidates must not be empty")

    span = max_length - min_length + 1
    size = len(characters)

    def resolve(overrides: Overrides, seed: int) -> StringProperties:
        length = min_length + seed % span
        value = "".join(characters[scramble(seed + i) % size] for i in range(length))
        return overlay(StringProperties(value=value), overrides)

    def construct(properties: StringProperties) -> str:
        return properties.value

    return Mold(resolve=resolve, construct=construct, name="string")


def string_mold_from_settings(settings: StringSettings) -> Mold[str, StringProperties]:
    """Build a string mold from a :class:`~seedforge.config.StringSettings`."""

    return string_mold(
        settings.minimum_length,
        settings.maximum_length,
        CHARSETS[settings.charset],
    )


__all__ = [
    "DEFAULT_MAXIMUM_LENGTH",
    "DEFAULT_MINIMUM_LENGTH",
    "StringProperties",
    "string_mold",
    "string_mold_from_settings",
]
