"""Key/value mapping mold composed from a key mold and a value mold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .base import Mold, Overrides, overlay

K = TypeVar("K")
V = TypeVar("V")

MAX_ENTRIES = 10


@dataclass(frozen=True, slots=True)
class MapProperties(Generic[K, V]):
    entries: tuple[tuple[K, V], ...]


def map_mold(key_mold: Mold[K, Any], value_mold: Mold[V, Any]) -> Mold[dict[K, V], MapProperties[K, V]]:
    """Return a mold producing dicts of ``1..10`` entries.

    Slot ``i`` pours both the key mold and the value mold with seed
    ``seed + i`` and no overrides, so a key and its value share one derived
    seed.  An ``entries`` override replaces the generated pairs wholesale.
    Later duplicate keys overwrite earlier ones on construction.
    """

    def resolve(overrides: Overrides, seed: int) -> MapProperties[K, V]:
        if "entries" in overrides:
            return overlay(MapProperties(entries=()), overrides)
        count = seed % MAX_ENTRIES + 1
        entries = tuple(
            (key_mold.pour({}, seed + index), value_mold.pour({}, seed + index))
            for index in range(count)
        )
        return overlay(MapProperties(entries=entries), overrides)

    def construct(properties: MapProperties[K, V]) -> dict[K, V]:
        return dict(properties.entries)

    return Mold(resolve=resolve, construct=construct, name=f"map[{key_mold.name}, {value_mold.name}]")


__all__ = ["MAX_ENTRIES", "MapProperties", "map_mold"]
