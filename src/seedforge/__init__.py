"""Deterministic, seed-driven test data molds and a unique-seed forger."""

from .forger import Forger
from .mold import (
    EnumProperties,
    MapProperties,
    Mold,
    MoldDelegate,
    StringProperties,
    enum_mold,
    map_mold,
    string_mold,
)
from .scramble import scramble
from .utils.errors import (
    ArithmeticInvariantError,
    DomainExhaustionError,
    InvalidConfigurationError,
    InvalidOverrideError,
    InvalidSeedError,
    SeedAllocationError,
    SeedforgeError,
)

__version__ = "0.1.0"

__all__ = [
    "ArithmeticInvariantError",
    "DomainExhaustionError",
    "EnumProperties",
    "Forger",
    "InvalidConfigurationError",
    "InvalidOverrideError",
    "InvalidSeedError",
    "MapProperties",
    "Mold",
    "MoldDelegate",
    "SeedAllocationError",
    "SeedforgeError",
    "StringProperties",
    "enum_mold",
    "map_mold",
    "scramble",
    "string_mold",
    "__version__",
]
