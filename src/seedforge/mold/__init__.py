"""Two-phase value molds and the built-in string, enum and map molds."""

from .base import Mold, MoldDelegate, Overrides, overlay, validate_seed
from .choices import EnumProperties, enum_mold
from .maps import MapProperties, map_mold
from .strings import StringProperties, string_mold, string_mold_from_settings

__all__ = [
    "EnumProperties",
    "MapProperties",
    "Mold",
    "MoldDelegate",
    "Overrides",
    "StringProperties",
    "enum_mold",
    "map_mold",
    "overlay",
    "string_mold",
    "string_mold_from_settings",
    "validate_seed",
]
