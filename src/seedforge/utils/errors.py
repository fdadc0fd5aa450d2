"""Typed exceptions for mold configuration, seeds and seed allocation."""


class SeedforgeError(Exception):
    """Base class for all package errors."""


class InvalidConfigurationError(SeedforgeError, ValueError):
    """Raised when a mold is built from an inconsistent configuration."""


class InvalidOverrideError(InvalidConfigurationError):
    """Raised when an override names a field the properties do not have."""


class InvalidSeedError(SeedforgeError, ValueError):
    """Raised when a seed is not a non-negative integer."""


class DomainExhaustionError(SeedforgeError, LookupError):
    """Raised when no candidate remains after applying exclusions."""


class SeedAllocationError(SeedforgeError, RuntimeError):
    """Raised when a fresh seed cannot be drawn within the retry ceiling."""


class ArithmeticInvariantError(SeedforgeError, ArithmeticError):
    """Raised when a fixed multiplier has no modular inverse."""
