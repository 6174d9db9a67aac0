"""Borderless Tk overlay window that paints the cheat sheet in pixels."""

from __future__ import annotations

import tkinter as tk
from tkinter import font as tkfont

from .colors import to_hex
from .layout import LayoutConfig, LayoutModel, layout
from .render import PIXEL_STYLE, Font, Palette, paint, render_sheet


class TkMeasurer:
    """Measures text with real Tk fonts (requires a live Tk root)."""

    def __init__(self, root: tk.Misc) -> None:
        self._root = root
        self._fonts: dict[Font, tkfont.Font] = {}

    def font(self, font: Font) -> tkfont.Font:
        tk_font = self._fonts.get(font)
        if tk_font is None:
            tk_font = tkfont.Font(
                root=self._root,
                family=font.family,
                size=font.size,
                weight="bold" if font.bold else "normal",
            )
            self._fonts[font] = tk_font
        return tk_font

    def measure(self, text: str, font: Font) -> tuple[int, int]:
        tk_font = self.font(font)
        return tk_font.measure(text), tk_font.metrics("linespace")


class TkCanvas:
    """Replays draw commands onto a ``tk.Canvas``."""

    def __init__(self, canvas: tk.Canvas, measurer: TkMeasurer) -> None:
        self._canvas = canvas
        self._measurer = measurer

    def clear(self) -> None:
        self._canvas.delete("all")

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        fill = to_hex(color)
        self._canvas.create_rectangle(
            x, y, x + width, y + height, fill=fill, outline=fill, width=0,
        )

    def draw_text(self, x: int, y: int, text: str, color: int, font: Font) -> None:
        self._canvas.create_text(
            x, y, text=text, anchor="nw", fill=to_hex(color), font=self._measurer.font(font),
        )


class CheatSheetWindow:
    """Fixed-size overlay at the top-left corner of the screen."""

    def __init__(self, model: LayoutModel, cfg: LayoutConfig, palette: Palette) -> None:
        self.model = model
        self.cfg = cfg
        self.palette = palette
        # Geometry does not depend on fonts, so bad configs fail before a window exists
        self.placements = layout(model, cfg)

        self.root = tk.Tk()
        self.root.title("shrots")
        self.root.overrideredirect(True)
        self.root.geometry(f"{cfg.width}x{cfg.height}+0+0")
        self.root.resizable(False, False)
        self.root.configure(background=to_hex(palette.border))

        self.measurer = TkMeasurer(self.root)
        widget = tk.Canvas(
            self.root,
            width=cfg.width,
            height=cfg.height,
            highlightthickness=0,
            borderwidth=0,
            background=to_hex(palette.border),
        )
        widget.pack(fill="both", expand=True)
        self.canvas = TkCanvas(widget, self.measurer)

        widget.bind("<Expose>", self._on_expose)
        self.root.bind("<Escape>", lambda _event: self.root.destroy())
        self.root.bind("q", lambda _event: self.root.destroy())

    def repaint(self) -> None:
        self.canvas.clear()
        commands = render_sheet(self.placements, self.cfg, self.palette, self.measurer, PIXEL_STYLE)
        paint(commands, self.canvas)

    def _on_expose(self, _event: tk.Event) -> None:
        self.repaint()

    def run(self) -> None:
        self.root.update_idletasks()
        # -alpha is ignored by window managers without compositing
        self.root.attributes("-alpha", self.cfg.opacity)
        self.repaint()
        self.root.focus_force()
        self.root.mainloop()
