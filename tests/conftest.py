"""Shared fixtures for the cheat-sheet tests."""

from __future__ import annotations

import pytest

from automation.shrots.layout import Block, Entry
from automation.shrots.render import Font, Palette


class FakeMeasurer:
    """Deterministic metrics: every char is ``size // 2`` wide, lines are ``size + 4`` tall."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Font]] = []

    def measure(self, text: str, font: Font) -> tuple[int, int]:
        self.calls.append((text, font))
        return len(text) * (font.size // 2), font.size + 4


@pytest.fixture
def measurer() -> FakeMeasurer:
    return FakeMeasurer()


@pytest.fixture
def palette() -> Palette:
    return Palette(
        background=0x282828,
        foreground=0xEBDBB2,
        border=0x1D2021,
        shortcut=0xFABD2F,
        about=0xD5C4A1,
    )


def make_block(title: str, n: int = 1, relative_height: float | None = None) -> Block:
    entries = tuple(Entry(bind=f"k{i}", about=f"action {i}") for i in range(n))
    return Block(title=title, entries=entries, relative_height=relative_height)


IMPLICIT_TOML = """
[general]
width = 1200
height = 800
opacity = 0.9
columns = 3
border = 4

[colors]
background = 0x282828
foreground = "#ebdbb2"
border = 0x1d2021
shrot = 0xfabd2f
about = "#D5C4A1"

[shrots]
vim = [
    { bind = ":w", about = "Save" },
    { bind = ":q", about = "Quit" },
]
tmux = [ { bind = "C-b d", about = "Detach" } ]
"""


@pytest.fixture
def implicit_toml() -> str:
    return IMPLICIT_TOML
