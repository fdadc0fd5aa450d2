"""Exclusion-aware enum choice mold.

Candidates are fixed when the mold is built.  Each call may exclude one value
or a set of values through the ``exclusion`` override; the choice is then
``available[seed % len(available)]`` over the remaining candidates in their
original order.  Overriding ``value`` skips selection entirely.
"""

from __future__ import annotations

import enum
from collections.abc import Hashable, Iterable, Set
from dataclasses import dataclass
from typing import Any, TypeVar

from seedforge.utils.errors import (
    DomainExhaustionError,
    InvalidConfigurationError,
    InvalidOverrideError,
)

from .base import Mold, Overrides, overlay

C = TypeVar("C", bound=Hashable)


@dataclass(frozen=True, slots=True)
class EnumProperties:
    """Resolved choice.

    ``exclusion`` is either a single hashable candidate or a set (any
    :class:`collections.abc.Set`) of candidates removed before selection.  A
    tuple is one candidate, not a collection.
    """

    value: Any
    exclusion: Any = None


def _exclusion_set(exclusion: object) -> frozenset[Any]:
    if exclusion is None:
        return frozenset()
    if isinstance(exclusion, Set):
        return frozenset(exclusion)
    if not isinstance(exclusion, Hashable):
        raise InvalidOverrideError(
            f"exclusion must be a hashable candidate or a set of candidates, "
            f"got {type(exclusion).__name__}"
        )
    return frozenset([exclusion])


def _candidates(choices: type[enum.Enum] | Iterable[C]) -> tuple[Any, ...]:
    if isinstance(choices, type) and issubclass(choices, enum.Enum):
        return tuple(choices)
    return tuple(dict.fromkeys(choices))


def enum_mold(choices: type[enum.Enum] | Iterable[C]) -> Mold[Any, EnumProperties]:
    """Return a mold choosing one of ``choices``.

    ``choices`` is an :class:`enum.Enum` subclass (its members are the
    candidates) or any iterable of hashable values.  Duplicates are dropped,
    order is kept.  An empty candidate set raises
    :class:`InvalidConfigurationError`.
    """

    candidates = _candidates(choices)
    if not candidates:
        raise InvalidConfigurationError("enum mold requires at least one candidate")

    def resolve(overrides: Overrides, seed: int) -> EnumProperties:
        if "value" in overrides:
            return overlay(EnumProperties(value=overrides["value"]), overrides)

        excluded = _exclusion_set(overrides.get("exclusion"))
        available = [c for c in candidates if c not in excluded]
        if not available:
            raise DomainExhaustionError(
                f"no candidate left out of {len(candidates)} after exclusions"
            )
        return overlay(EnumProperties(value=available[seed % len(available)]), overrides)

    def construct(properties: EnumProperties) -> Any:
        return properties.value

    return Mold(resolve=resolve, construct=construct, name="enum")


__all__ = ["EnumProperties", "enum_mold"]
