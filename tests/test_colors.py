from __future__ import annotations

import pytest

from automation.shrots.colors import parse_color, to_hex, to_rgb


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x282828, 0x282828),
        (0, 0),
        (0xFFFFFF, 0xFFFFFF),
        ("#ebdbb2", 0xEBDBB2),
        ("#EBDBB2", 0xEBDBB2),
        (" #1d2021 ", 0x1D2021),
    ],
)
def test_parse_color(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["ebdbb2", "#ebdbb", "#ebdbb2ff", "0x282828", 0x1000000, -1, True, 1.5, None])
def test_parse_color_rejects(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_to_hex_and_rgb():
    assert to_rgb(0x1D2021) == (0x1D, 0x20, 0x21)
    assert to_hex(0x1D2021) == "#1d2021"
    assert to_hex(0) == "#000000"
