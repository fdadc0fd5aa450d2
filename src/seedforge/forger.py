"""Seed-lifecycle manager wrapping a mold.

A :class:`Forger` mints fixtures from one :class:`~seedforge.mold.Mold`.  The
auto-seeded operations (:meth:`Forger.forge`, :meth:`Forger.forge_multi`) draw
fresh seeds and remember them, so the same forger never issues one seed twice.
The explicitly seeded operations (:meth:`Forger.forge_with_seed`,
:meth:`Forger.forge_multi_with_seed`) neither consult nor update that record;
they are the entry point for golden-seed tests.

Fresh seeds come from a plain :class:`random.Random`, not a cryptographic
source.  Draws that hit an already issued seed are repeated up to
``settings.max_attempts`` times, after which :class:`SeedAllocationError` is
raised instead of looping forever.
"""

from __future__ import annotations

import random
import threading
from typing import Generic, TypeVar

from seedforge.config import ForgerSettings
from seedforge.mold.base import Mold, Overrides, validate_seed
from seedforge.utils.errors import SeedAllocationError
from seedforge.utils.logging import get_logger

T = TypeVar("T")
P = TypeVar("P")

logger = get_logger(__name__)


def _validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return size


class Forger(Generic[T, P]):
    """Allocate unique seeds and pour values from ``mold``."""

    def __init__(
        self,
        mold: Mold[T, P],
        *,
        settings: ForgerSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the forger.

        Parameters
        ----------
        mold:
            Mold used for every value.
        settings:
            Seed range and retry ceiling; defaults to :class:`ForgerSettings`.
        rng:
            Source of fresh seeds.  Pass a seeded :class:`random.Random` to
            make allocation itself repeatable.
        """

        self.mold: Mold[T, P] = mold
        self.settings: ForgerSettings = settings or ForgerSettings()
        self._rng = rng or random.Random()
        self._used: set[int] = set()
        self._lock = threading.Lock()

    @property
    def used_seeds(self) -> frozenset[int]:
        """Snapshot of every seed issued by the auto-seeded operations."""

        with self._lock:
            return frozenset(self._used)

    # -- Seed allocation ---------------------------------------------------

    def _draw(self) -> int:
        bound = self.settings.seed_upper_bound
        for attempt in range(1, self.settings.max_attempts + 1):
            candidate = self._rng.randrange(bound)
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate
            logger.debug("seed collision on attempt %d for %s", attempt, self.mold.name)
        logger.warning(
            "no fresh seed after %d attempts (%d issued, bound %d)",
            self.settings.max_attempts,
            len(self._used),
            bound,
        )
        raise SeedAllocationError(
            f"could not draw a fresh seed in {self.settings.max_attempts} attempts; "
            f"{len(self._used)} of {bound} seeds already issued"
        )

    def next_seeds(self, size: int) -> list[int]:
        """Reserve ``size`` pairwise-distinct fresh seeds.

        The batch is all or nothing: if a draw fails, seeds already reserved by
        this call are released before :class:`SeedAllocationError` propagates.
        """

        _validate_size(size)
        seeds: list[int] = []
        with self._lock:
            try:
                for _ in range(size):
                    seeds.append(self._draw())
            except SeedAllocationError:
                self._used.difference_update(seeds)
                raise
        return seeds

    def next_seed(self) -> int:
        """Reserve one fresh seed."""

        return self.next_seeds(1)[0]

    # -- Value production --------------------------------------------------

    def forge(self, overrides: Overrides | None = None) -> T:
        """Return one value built from a fresh seed."""

        return self.mold.pour(overrides, self.next_seed())

    def forge_multi(self, size: int, overrides: Overrides | None = None) -> list[T]:
        """Return ``size`` values built from distinct fresh seeds."""

        return [self.mold.pour(overrides, seed) for seed in self.next_seeds(size)]

    def forge_with_seed(self, seed: int, overrides: Overrides | None = None) -> T:
        """Return the value for ``seed`` without touching the issued seeds."""

        return self.mold.pour(overrides, seed)

    def forge_multi_with_seed(
        self, size: int, seed: int, overrides: Overrides | None = None
    ) -> list[T]:
        """Return values for seeds ``seed .. seed + size - 1`` in order."""

        _validate_size(size)
        validate_seed(seed)
        return [self.forge_with_seed(seed + index, overrides) for index in range(size)]


__all__ = ["Forger"]
