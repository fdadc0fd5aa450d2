"""Core mold model and protocol definitions.

A mold turns ``(overrides, seed)`` into a value in two pure phases:

``resolve(overrides, seed) -> properties``
    Derive a default for every field from ``seed`` and overlay ``overrides``.
    A field present in ``overrides`` always wins, including wholesale
    replacement of derived collections.

``construct(properties) -> value``
    Build the final value from resolved properties.  Construction never looks
    at the seed, so composing molds may call it with properties they built
    themselves.

Molds hold no per-invocation state and may be shared freely.  Concrete molds
are plain :class:`Mold` values built from functions rather than subclasses, so
they nest (a map of strings, a record holding a choice) by composition.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from seedforge.utils.errors import InvalidOverrideError, InvalidSeedError

T = TypeVar("T")
P = TypeVar("P")
T_co = TypeVar("T_co", covariant=True)

Overrides = Mapping[str, Any]

_EMPTY: Overrides = {}


def validate_seed(seed: object) -> int:
    """Return ``seed`` if it is a non-negative ``int``, else raise."""

    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidSeedError(f"seed must be an integer, got {type(seed).__name__}")
    if seed < 0:
        raise InvalidSeedError(f"seed must be non-negative, got {seed}")
    return seed


def overlay(defaults: P, overrides: Overrides) -> P:
    """Return ``defaults`` with every field named in ``overrides`` replaced.

    ``defaults`` must be a dataclass instance.  Unknown field names raise
    :class:`InvalidOverrideError` instead of being silently ignored.
    """

    if not overrides:
        return defaults
    names = {f.name for f in dataclasses.fields(defaults)}  # type: ignore[arg-type]
    unknown = sorted(set(overrides) - names)
    if unknown:
        kind = type(defaults).__name__
        raise InvalidOverrideError(f"unknown override field(s) for {kind}: {', '.join(unknown)}")
    return dataclasses.replace(defaults, **overrides)  # type: ignore[type-var]


@runtime_checkable
class MoldDelegate(Protocol[T_co, P]):
    """Protocol for objects supplying the two mold phases as methods."""

    def resolve(self, overrides: Overrides, seed: int) -> P:
        """Return fully resolved properties for ``seed``."""

        ...

    def construct(self, properties: P) -> T_co:
        """Return the value described by ``properties``."""

        ...


@dataclass(frozen=True, slots=True)
class Mold(Generic[T, P]):
    """Immutable pair of pure ``resolve``/``construct`` functions.

    Attributes
    ----------
    resolve:
        ``(overrides, seed) -> properties``.
    construct:
        ``properties -> value``.
    name:
        Short label used in logs and error messages.
    """

    resolve: Callable[[Overrides, int], P]
    construct: Callable[[P], T]
    name: str = "mold"

    @classmethod
    def from_delegate(cls, delegate: MoldDelegate[T, P], *, name: str | None = None) -> Mold[T, P]:
        """Build a mold from an object implementing :class:`MoldDelegate`."""

        if not isinstance(delegate, MoldDelegate):
            raise TypeError(f"{type(delegate).__name__} does not implement resolve/construct")
        return cls(
            resolve=delegate.resolve,
            construct=delegate.construct,
            name=name or type(delegate).__name__,
        )

    def prepare(self, overrides: Overrides | None, seed: int) -> P:
        """Validate ``seed`` and return resolved properties."""

        return self.resolve(_EMPTY if overrides is None else overrides, validate_seed(seed))

    def pour(self, overrides: Overrides | None = None, seed: int = 0) -> T:
        """Resolve and construct one value."""

        return self.construct(self.prepare(overrides, seed))


__all__ = [
    "Mold",
    "MoldDelegate",
    "Overrides",
    "overlay",
    "validate_seed",
]
