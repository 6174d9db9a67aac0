"""Exception types raised while loading the config or laying out the grid."""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for every configuration problem reported at startup."""


class ConfigNotFound(ConfigError):
    """No config file in any search location (or the given path is missing)."""


class ConfigParseError(ConfigError):
    """The document could not be decoded or does not match the schema."""


class MalformedPalette(ConfigParseError):
    """A color in ``[colors]`` is neither a 24-bit int nor ``#RRGGBB``."""


class LayoutError(ValueError):
    """Grid geometry cannot be satisfied (zero columns, blocks too small, ...)."""
