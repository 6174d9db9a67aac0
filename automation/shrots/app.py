"""Cheat sheet — Textual terminal view.

Launch with:  python -m automation.shrots --terminal

The pixel layout is scaled down to terminal cells and the same draw
commands the Tk window uses are composited into a grid of styled cells.
"""

from __future__ import annotations

from typing import Any

from rich.cells import cell_len, get_character_cell_size
from rich.segment import Segment
from rich.style import Style
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.strip import Strip
from textual.widget import Widget

from .colors import to_hex
from .layout import LayoutConfig, LayoutModel, layout
from .render import TERMINAL_STYLE, Font, Palette, paint, render_sheet

# ── Constants ────────────────────────────────────────────────

CELL_WIDTH = 8  # px per terminal column
CELL_HEIGHT = 16  # px per terminal row


# ── Utility ──────────────────────────────────────────────────


def to_cells(cfg: LayoutConfig) -> LayoutConfig:
    """Scale a pixel config to terminal cells.

    A non-zero border never rounds away, so the block grid stays visible.
    """
    border = 0
    if cfg.border > 0:
        border = max(1, round(cfg.border / CELL_WIDTH))
    return LayoutConfig(
        width=max(1, cfg.width // CELL_WIDTH),
        height=max(1, cfg.height // CELL_HEIGHT),
        opacity=cfg.opacity,
        border=border,
        unit=" cells",
    )


class CellMeasurer:
    """Text is one row tall and as wide as the cells it occupies."""

    def measure(self, text: str, font: Font) -> tuple[int, int]:
        return cell_len(text), 1


# ── Cell grid ────────────────────────────────────────────────


class CellGrid:
    """A canvas made of terminal cells; each cell is ``(char, style)``."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        blank = (" ", Style())
        self._cells = [[blank] * width for _ in range(height)]

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        style = Style(bgcolor=to_hex(color))
        for row in range(max(y, 0), min(y + height, self.height)):
            line = self._cells[row]
            for col in range(max(x, 0), min(x + width, self.width)):
                line[col] = (" ", style)

    def draw_text(self, x: int, y: int, text: str, color: int, font: Font) -> None:
        if not 0 <= y < self.height:
            return
        line = self._cells[y]
        fg = Style(color=to_hex(color), bold=font.bold)
        col = x
        for char in text:
            size = get_character_cell_size(char)
            if col + size > self.width:
                break
            if col >= 0:
                line[col] = (char, line[col][1] + fg)
                # The second half of a wide character renders as nothing
                if size == 2:
                    line[col + 1] = ("", line[col + 1][1] + fg)
            col += size

    def text(self, y: int) -> str:
        return "".join(char for char, _ in self._cells[y])

    def style_at(self, x: int, y: int) -> Style:
        return self._cells[y][x][1]

    def strip(self, y: int) -> Strip:
        segments: list[Segment] = []
        run, run_style = "", None
        for char, style in self._cells[y]:
            if style != run_style and run:
                segments.append(Segment(run, run_style))
                run = ""
            run += char
            run_style = style
        if run:
            segments.append(Segment(run, run_style))
        return Strip(segments, self.width)


def composite(model: LayoutModel, cfg: LayoutConfig, palette: Palette) -> CellGrid:
    """Lay out *model* in cells and paint it into a fresh grid."""
    cells = to_cells(cfg)
    grid = CellGrid(cells.width, cells.height)
    commands = render_sheet(layout(model, cells), cells, palette, CellMeasurer(), TERMINAL_STYLE)
    paint(commands, grid)
    return grid


# ── Sheet widget ─────────────────────────────────────────────


class SheetView(Widget):
    """Shows a composited :class:`CellGrid` line by line."""

    def __init__(self, grid: CellGrid, **kw: Any) -> None:
        super().__init__(**kw)
        self._grid = grid

    def on_mount(self) -> None:
        self.styles.width = self._grid.width
        self.styles.height = self._grid.height

    def render_line(self, y: int) -> Strip:
        if y >= self._grid.height:
            return Strip.blank(self.size.width)
        return self._grid.strip(y)


# ── App ──────────────────────────────────────────────────────


class CheatSheetApp(App[None]):
    """Keyboard shortcut cheat sheet in the terminal."""

    TITLE = "shrots"

    CSS = """
    Screen {
        overflow: auto;
    }

    SheetView {
        padding: 0;
        margin: 0;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
    ]

    def __init__(self, grid: CellGrid, palette: Palette, **kw: Any) -> None:
        super().__init__(**kw)
        self.grid = grid
        self.palette = palette

    def compose(self) -> ComposeResult:
        yield SheetView(self.grid, id="sheet")

    def on_mount(self) -> None:
        self.screen.styles.background = to_hex(self.palette.border)

    def action_quit(self) -> None:
        self.exit()
