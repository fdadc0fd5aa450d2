"""Deterministic 32-bit seed scrambling.

Molds derive many related values from one base seed by adding small offsets
(``seed``, ``seed + 1``, ``seed + 2`` ...).  Reducing those directly modulo a
table size yields visibly periodic output, so offsets are first passed through
:func:`scramble`, a bijection on the unsigned 32-bit range:

1. multiply by the odd constant :data:`SALT` modulo ``2**32``
2. swap bit groups of width 1, 2, 4, 8 and 16 (:func:`interleave`)
3. multiply by the modular inverse of :data:`SALT`

Each step is a permutation of ``[0, 2**32)`` so the composition is one too.
All arithmetic is exact integer arithmetic masked to 32 bits after every step.
This is a dispersal tool only; it offers no unpredictability against an
adversary.
"""

from __future__ import annotations

from typing import Final

from seedforge.utils.errors import ArithmeticInvariantError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MASK32: Final = 0xFFFFFFFF
MODULUS: Final = MASK32 + 1

_INTERLEAVE_MASKS: Final = (
    0x55555555,
    0x33333333,
    0x0F0F0F0F,
    0x00FF00FF,
    0xFFFFFFFF,
)


def as_uint32(value: int) -> int:
    """Return ``value`` reduced to the unsigned 32-bit range."""

    return value & MASK32


# ---------------------------------------------------------------------------
# Modular arithmetic
# ---------------------------------------------------------------------------


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a * x + b * y == g == gcd(a, b)``."""

    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def modular_inverse(a: int, modulus: int) -> int:
    """Return ``a**-1 mod modulus``.

    Raises :class:`ArithmeticInvariantError` when ``a`` and ``modulus`` are not
    coprime.
    """

    g, x, _ = extended_gcd(a, modulus)
    if g != 1:
        raise ArithmeticInvariantError(f"No inverse is found for {a:#x} on {modulus:#x}.")
    return x % modulus


SALT: Final = 0x17654321
INVERTED_SALT: Final = modular_inverse(SALT, MODULUS)


# ---------------------------------------------------------------------------
# Bit permutation
# ---------------------------------------------------------------------------


def interleave(value: int) -> int:
    """Swap the halves of every 2, 4, 8, 16 and 32 bit group of ``value``."""

    value = as_uint32(value)
    for index, mask in enumerate(_INTERLEAVE_MASKS):
        shift = 1 << index
        left = (value >> shift) & mask
        right = (value & mask) << shift
        value = as_uint32(left | right)
    return value


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def scramble(original: int) -> int:
    """Map ``original`` to a well-dispersed value in ``[0, 2**32)``.

    Inputs are reduced modulo ``2**32`` first, so ``0`` maps to ``0`` and very
    large seeds wrap without sign or overflow artifacts.
    """

    base = as_uint32(as_uint32(original) * SALT)
    inverted = interleave(base)
    return as_uint32(inverted * INVERTED_SALT)


__all__ = [
    "MASK32",
    "MODULUS",
    "SALT",
    "INVERTED_SALT",
    "as_uint32",
    "extended_gcd",
    "modular_inverse",
    "interleave",
    "scramble",
]
