"""Grid layout engine.

Turns a layout model (explicit columns with relative heights, or a flat
collection of blocks auto-distributed over N columns) into absolute
rectangles.  Everything here is pure: the same model and config always
produce the same placements.

─── Vertical stacking ─────────────────────────────────────────

Each block in a column owns a *span* of pixels.  With ``b = border``:

    y = b
    block 1..n-1   height = span - b        y += b + height
    block n        height = span - 2b

so blocks are separated by exactly ``b`` pixels and the last one keeps
``b`` pixels clear of the bottom edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import LayoutError


# ── Model ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Entry:
    """One key binding and what it does."""

    bind: str
    about: str


@dataclass(frozen=True)
class Block:
    """A titled group of entries, drawn as one rectangle."""

    title: str
    entries: tuple[Entry, ...] = ()
    # Fraction of the window height (explicit mode only)
    relative_height: float | None = None

    @property
    def is_filler(self) -> bool:
        return not self.title and not self.entries


FILLER = Block(title="")


@dataclass(frozen=True)
class Explicit:
    """Author-declared columns, each a list of blocks with relative heights."""

    columns: tuple[tuple[Block, ...], ...]


@dataclass(frozen=True)
class Implicit:
    """Blocks to be sorted by title and spread over *column_count* columns."""

    blocks: tuple[Block, ...]
    column_count: int


LayoutModel = Union[Explicit, Implicit]


@dataclass(frozen=True)
class LayoutConfig:
    width: int
    height: int
    opacity: float = 1.0
    border: int = 0
    # Name of the length unit, used in error messages
    unit: str = "px"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class PlacedBlock:
    block: Block
    rect: Rect


# ── Helpers ─────────────────────────────────────────────────


def column_width(window_width: int, columns: int, border: int) -> int:
    """Uniform width of one column once the ``columns + 1`` gutters are paid."""
    return (window_width - (columns + 1) * border) // columns


def _row_spans(rows: int, height: int) -> list[int]:
    """Split *height* into *rows* equal spans, rounding at the slot edges."""
    edges = [round(i * height / rows) for i in range(rows + 1)]
    return [edges[i + 1] - edges[i] for i in range(rows)]


def _stack(
    blocks: list[Block],
    spans: list[int],
    x: int,
    width: int,
    border: int,
    unit: str = "px",
) -> list[PlacedBlock]:
    placed: list[PlacedBlock] = []
    y = border
    last = len(blocks) - 1
    for i, (block, span) in enumerate(zip(blocks, spans)):
        height = span - (2 * border if i == last else border)
        if height <= 0:
            name = block.title or "filler"
            raise LayoutError(
                f"block {name!r} gets {span}{unit} of height, "
                f"not enough for a {border}{unit} border"
            )
        placed.append(PlacedBlock(block, Rect(x, y, width, height)))
        y += border + height
    return placed


def _check(cfg: LayoutConfig, columns: int) -> int:
    if cfg.width <= 0 or cfg.height <= 0:
        raise LayoutError(f"window size must be positive, got {cfg.width}x{cfg.height}")
    if cfg.border < 0:
        raise LayoutError(f"border must be >= 0, got {cfg.border}")
    if columns < 1:
        raise LayoutError(f"need at least one column, got {columns}")
    width = column_width(cfg.width, columns, cfg.border)
    if width <= 0:
        raise LayoutError(
            f"{columns} columns with a {cfg.border}{cfg.unit} border "
            f"do not fit in {cfg.width}{cfg.unit}"
        )
    return width


# ── Layout modes ────────────────────────────────────────────


def _layout_explicit(model: Explicit, cfg: LayoutConfig) -> list[tuple[int, PlacedBlock]]:
    count = len(model.columns)
    width = _check(cfg, count)
    out: list[tuple[int, PlacedBlock]] = []
    for c, column in enumerate(model.columns):
        x = cfg.border + c * (width + cfg.border)
        if column:
            blocks = list(column)
            spans = [round((b.relative_height or 0.0) * cfg.height) for b in blocks]
        else:
            blocks, spans = [FILLER], [cfg.height]
        out.extend((c, p) for p in _stack(blocks, spans, x, width, cfg.border, cfg.unit))
    return out


def _layout_implicit(model: Implicit, cfg: LayoutConfig) -> list[tuple[int, PlacedBlock]]:
    columns = model.column_count
    width = _check(cfg, columns)
    pending = sorted(model.blocks, key=lambda b: b.title)
    total = len(pending)
    rows = -(-total // columns)
    row_spans = _row_spans(rows, cfg.height) if rows else []

    out: list[tuple[int, PlacedBlock]] = []
    taken = 0
    for c in range(columns):
        x = cfg.border + c * (width + cfg.border)
        blocks = pending[taken:taken + rows]
        taken += len(blocks)
        spans = row_spans[:len(blocks)]
        if len(blocks) < rows or not blocks:
            # One filler covers whatever slots the content did not reach
            blocks.append(FILLER)
            spans.append(cfg.height - sum(spans))
        out.extend((c, p) for p in _stack(blocks, spans, x, width, cfg.border, cfg.unit))
    return out


def layout(model: LayoutModel, cfg: LayoutConfig) -> list[tuple[int, PlacedBlock]]:
    """Place every block of *model* inside a ``cfg.width × cfg.height`` window.

    Returns ``(column_index, PlacedBlock)`` pairs, column by column and top
    to bottom within a column.  Raises :class:`LayoutError` when the
    geometry cannot be satisfied.
    """
    if isinstance(model, Explicit):
        return _layout_explicit(model, cfg)
    if isinstance(model, Implicit):
        return _layout_implicit(model, cfg)
    raise TypeError(f"unknown layout model: {type(model).__name__}")
