"""Color helpers: 24-bit packed RGB ints, as stored in the config."""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"#([0-9a-fA-F]{6})")
_MAX_COLOR = 0xFFFFFF


def parse_color(value: int | str) -> int:
    """Return *value* as a packed ``0xRRGGBB`` int.

    Accepts an int in ``0..0xFFFFFF`` or a ``#RRGGBB`` string.
    """
    # bool is an int subclass; ``true`` in a TOML file is not a color
    if isinstance(value, bool):
        raise ValueError(f"not a color: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= _MAX_COLOR:
            raise ValueError(f"color {value:#x} is outside 0x000000..0xffffff")
        return value
    if isinstance(value, str):
        m = _HEX_RE.fullmatch(value.strip())
        if m:
            return int(m.group(1), 16)
    raise ValueError(f"not a #RRGGBB color: {value!r}")


def to_rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def to_hex(color: int) -> str:
    """``0x1d2021`` → ``"#1d2021"`` (the form Tk and Rich both accept)."""
    return "#{:02x}{:02x}{:02x}".format(*to_rgb(color))
