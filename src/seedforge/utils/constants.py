"""Shared character tables for string molds."""

from __future__ import annotations

import string

__all__ = [
    "ALPHANUMERIC",
    "ALPHA",
    "SLUG",
    "NUMERIC",
    "SYMBOL",
    "CHARSETS",
]

ALPHA: tuple[str, ...] = tuple(string.ascii_lowercase + string.ascii_uppercase)
NUMERIC: tuple[str, ...] = tuple(string.digits)
ALPHANUMERIC: tuple[str, ...] = ALPHA + NUMERIC
SLUG: tuple[str, ...] = tuple(string.ascii_lowercase + string.digits + "-")
SYMBOL: tuple[str, ...] = tuple(string.punctuation)

CHARSETS: dict[str, tuple[str, ...]] = {
    "alphanumeric": ALPHANUMERIC,
    "alpha": ALPHA,
    "slug": SLUG,
    "numeric": NUMERIC,
    "symbol": SYMBOL,
}
