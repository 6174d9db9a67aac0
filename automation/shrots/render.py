"""Block renderer: turns placed blocks into an ordered list of draw commands.

Rendering is a pure function of (block, rect, palette, measurer, style).
Commands come out in painter's order (background, header, then each
bind/about pair), so a canvas only has to replay them front to back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence, Union

from .layout import Block, Entry, LayoutConfig, PlacedBlock, Rect


# ── Draw commands ───────────────────────────────────────────


@dataclass(frozen=True)
class Font:
    family: str
    size: int
    bold: bool = False


@dataclass(frozen=True)
class FillRect:
    x: int
    y: int
    width: int
    height: int
    color: int


@dataclass(frozen=True)
class DrawText:
    """A single-line text run anchored at its top-left corner."""

    x: int
    y: int
    text: str
    color: int
    font: Font


DrawCommand = Union[FillRect, DrawText]


@dataclass(frozen=True)
class Palette:
    background: int
    foreground: int
    border: int
    shortcut: int
    about: int


@dataclass(frozen=True)
class RenderStyle:
    """Padding, spacing and fonts, in the canvas' own units."""

    pad_x: int
    pad_y: int
    about_spacing: int
    heading_font: Font
    shortcut_font: Font


PIXEL_STYLE = RenderStyle(
    pad_x=8,
    pad_y=0,
    about_spacing=32,
    heading_font=Font("Helvetica", 24, bold=True),
    shortcut_font=Font("Helvetica", 12, bold=True),
)

# Same layout scaled to terminal cells (8 px per column)
TERMINAL_STYLE = RenderStyle(
    pad_x=1,
    pad_y=0,
    about_spacing=4,
    heading_font=Font("Helvetica", 24, bold=True),
    shortcut_font=Font("Helvetica", 12, bold=True),
)


# ── Collaborators ───────────────────────────────────────────


class TextMeasurer(Protocol):
    def measure(self, text: str, font: Font) -> tuple[int, int]:
        """Return ``(width, height)`` of *text* drawn on one line in *font*."""
        ...


class Canvas(Protocol):
    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None: ...

    def draw_text(self, x: int, y: int, text: str, color: int, font: Font) -> None: ...


# ── Rendering ───────────────────────────────────────────────


def _render_entries(
    entries: Sequence[Entry],
    rect: Rect,
    line_y: int,
    palette: Palette,
    measurer: TextMeasurer,
    style: RenderStyle,
) -> tuple[list[DrawCommand], int]:
    """Draw the bind/about rows starting at *line_y*; return commands and the final cursor."""
    font = style.shortcut_font
    bind_sizes = [measurer.measure(e.bind, font) for e in entries]
    max_bind_width = max((w for w, _ in bind_sizes), default=0)
    about_offset = max_bind_width + style.about_spacing

    x_bind = rect.x + style.pad_x
    x_about = x_bind + about_offset
    commands: list[DrawCommand] = []
    for entry, (_, bind_height) in zip(entries, bind_sizes):
        _, about_height = measurer.measure(entry.about, font)
        y = rect.y + line_y
        commands.append(DrawText(x_bind, y, entry.bind, palette.shortcut, font))
        commands.append(DrawText(x_about, y, entry.about, palette.about, font))
        # Newlines are not supported; each row is one measured line
        line_y += max(bind_height, about_height)
    return commands, line_y


def render_block(
    block: Block,
    rect: Rect,
    palette: Palette,
    measurer: TextMeasurer,
    style: RenderStyle = PIXEL_STYLE,
) -> list[DrawCommand]:
    """Draw commands for one block, back to front."""
    commands: list[DrawCommand] = [
        FillRect(rect.x, rect.y, rect.width, rect.height, palette.background)
    ]
    if block.is_filler:
        return commands

    _, title_height = measurer.measure(block.title, style.heading_font)
    commands.append(
        DrawText(
            rect.x + style.pad_x,
            rect.y + style.pad_y,
            block.title,
            palette.foreground,
            style.heading_font,
        )
    )
    rows, _ = _render_entries(
        block.entries, rect, style.pad_y + title_height, palette, measurer, style,
    )
    commands.extend(rows)
    return commands


def render_sheet(
    placements: Iterable[tuple[int, PlacedBlock]],
    cfg: LayoutConfig,
    palette: Palette,
    measurer: TextMeasurer,
    style: RenderStyle = PIXEL_STYLE,
) -> list[DrawCommand]:
    """Whole-window commands: border-colored backdrop, then every block."""
    commands: list[DrawCommand] = [FillRect(0, 0, cfg.width, cfg.height, palette.border)]
    for _, placed in placements:
        commands.extend(render_block(placed.block, placed.rect, palette, measurer, style))
    return commands


def paint(commands: Iterable[DrawCommand], canvas: Canvas) -> None:
    for cmd in commands:
        if isinstance(cmd, FillRect):
            canvas.fill_rect(cmd.x, cmd.y, cmd.width, cmd.height, cmd.color)
        else:
            canvas.draw_text(cmd.x, cmd.y, cmd.text, cmd.color, cmd.font)
