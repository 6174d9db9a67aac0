"""Block renderer: draw-command sequences and description alignment."""

from __future__ import annotations

from automation.shrots.layout import FILLER, Block, Entry, Implicit, LayoutConfig, Rect, layout
from automation.shrots.render import (
    PIXEL_STYLE,
    DrawText,
    FillRect,
    Font,
    paint,
    render_block,
    render_sheet,
)

from conftest import FakeMeasurer, make_block

HEADING = PIXEL_STYLE.heading_font
SHORTCUT = PIXEL_STYLE.shortcut_font

EDITOR = Block(
    title="Editor",
    entries=(
        Entry(bind="Ctrl+S", about="Save"),
        Entry(bind="Ctrl+Shift+P", about="Command palette"),
    ),
)


class RecordingCanvas:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def fill_rect(self, x, y, width, height, color) -> None:
        self.calls.append(("rect", x, y, width, height, color))

    def draw_text(self, x, y, text, color, font) -> None:
        self.calls.append(("text", x, y, text, color, font))


def test_editor_block(measurer, palette):
    commands = render_block(EDITOR, Rect(0, 0, 300, 100), palette, measurer)

    # "Ctrl+Shift+P" is 12 chars * 6px = 72px wide, plus 32px spacing
    assert commands == [
        FillRect(0, 0, 300, 100, palette.background),
        DrawText(8, 0, "Editor", palette.foreground, HEADING),
        DrawText(8, 28, "Ctrl+S", palette.shortcut, SHORTCUT),
        DrawText(112, 28, "Save", palette.about, SHORTCUT),
        DrawText(8, 44, "Ctrl+Shift+P", palette.shortcut, SHORTCUT),
        DrawText(112, 44, "Command palette", palette.about, SHORTCUT),
    ]


def test_about_column_is_aligned(measurer, palette):
    block = Block(
        title="Mixed",
        entries=(
            Entry(bind="a", about="one"),
            Entry(bind="Super+Shift+Alt+Q", about="two"),
            Entry(bind="Esc", about="three"),
        ),
    )
    rect = Rect(20, 40, 400, 200)
    commands = render_block(block, rect, measurer=measurer, palette=palette)

    abouts = [c for c in commands if isinstance(c, DrawText) and c.color == palette.about]
    max_bind_width = max(measurer.measure(e.bind, SHORTCUT)[0] for e in block.entries)
    assert len(abouts) == 3
    assert {c.x for c in abouts} == {rect.x + 8 + max_bind_width + 32}


def test_block_is_offset_by_its_rect(measurer, palette):
    commands = render_block(EDITOR, Rect(100, 50, 300, 100), palette, measurer)

    assert commands[0] == FillRect(100, 50, 300, 100, palette.background)
    assert commands[1] == DrawText(108, 50, "Editor", palette.foreground, HEADING)
    assert commands[2] == DrawText(108, 78, "Ctrl+S", palette.shortcut, SHORTCUT)


def test_filler_only_paints_background(measurer, palette):
    commands = render_block(FILLER, Rect(4, 4, 50, 60), palette, measurer)

    assert commands == [FillRect(4, 4, 50, 60, palette.background)]
    assert measurer.calls == []


def test_title_without_entries(measurer, palette):
    commands = render_block(Block(title="Empty"), Rect(0, 0, 100, 100), palette, measurer)

    assert commands == [
        FillRect(0, 0, 100, 100, palette.background),
        DrawText(8, 0, "Empty", palette.foreground, HEADING),
    ]


def test_painters_order(measurer, palette):
    commands = render_block(make_block("Tools", n=3), Rect(0, 0, 300, 300), palette, measurer)

    assert isinstance(commands[0], FillRect)
    assert commands[1].text == "Tools"
    texts = [c.text for c in commands[2:]]
    assert texts == ["k0", "action 0", "k1", "action 1", "k2", "action 2"]


def test_rendering_is_repeatable(measurer, palette):
    rect = Rect(4, 4, 300, 200)
    assert render_block(EDITOR, rect, palette, measurer) == render_block(EDITOR, rect, palette, measurer)


def test_duplicate_binds_are_kept(measurer, palette):
    block = Block(title="Dupes", entries=(Entry("x", "first"), Entry("x", "second")))
    texts = [c.text for c in render_block(block, Rect(0, 0, 100, 100), palette, measurer)[2:]]

    assert texts == ["x", "first", "x", "second"]


class TallBindMeasurer(FakeMeasurer):
    def measure(self, text: str, font: Font) -> tuple[int, int]:
        width, height = super().measure(text, font)
        return width, 40 if text.startswith("TALL") else height


def test_line_advance_uses_taller_text(palette):
    block = Block(title="T", entries=(Entry("TALL+X", "a"), Entry("y", "b")))
    commands = render_block(block, Rect(0, 0, 200, 200), palette, TallBindMeasurer())

    binds = [c for c in commands if isinstance(c, DrawText) and c.color == palette.shortcut]
    # Title is 28px tall; the first row is 40px because of its bind text
    assert [c.y for c in binds] == [28, 68]


def test_sheet_starts_with_border_backdrop(measurer, palette):
    cfg = LayoutConfig(width=600, height=300, border=4)
    placements = layout(Implicit(blocks=(EDITOR, make_block("Shell")), column_count=2), cfg)
    commands = render_sheet(placements, cfg, palette, measurer)

    assert commands[0] == FillRect(0, 0, 600, 300, palette.border)
    backgrounds = [c for c in commands[1:] if isinstance(c, FillRect)]
    assert [(c.x, c.y, c.width, c.height) for c in backgrounds] == [
        (p.rect.x, p.rect.y, p.rect.width, p.rect.height) for _, p in placements
    ]


def test_paint_replays_commands(measurer, palette):
    canvas = RecordingCanvas()
    paint(render_block(EDITOR, Rect(0, 0, 300, 100), palette, measurer), canvas)

    assert canvas.calls[0] == ("rect", 0, 0, 300, 100, palette.background)
    assert canvas.calls[1] == ("text", 8, 0, "Editor", palette.foreground, HEADING)
    assert len(canvas.calls) == 6
