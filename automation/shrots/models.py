"""Pydantic models for the cheat-sheet config.

Strict schema for the TOML / JSON document.  Validated models convert
into the immutable runtime types used by the layout engine and renderer.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

from .colors import parse_color
from .layout import Block, Entry, Explicit, Implicit, LayoutConfig, LayoutModel
from .render import Palette

MALFORMED_COLOR = "malformed_color"

# Relative heights are floats; allow for 0.1 + 0.2 style drift
_HEIGHT_EPSILON = 1e-9


def _color(value: Any) -> int:
    try:
        return parse_color(value)
    except ValueError as exc:
        raise PydanticCustomError(MALFORMED_COLOR, "{reason}", {"reason": str(exc)})


Color = Annotated[int, BeforeValidator(_color)]


class General(BaseModel):
    """Window geometry and grid options."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    columns: int = Field(default=1, ge=1, description="Column count (auto mode only)")
    border: int = Field(default=0, ge=0, description="Gap between blocks, in pixels")


class Colors(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    background: Color
    foreground: Color
    border: Color
    shortcut: Color = Field(alias="shrot")
    about: Color


class Shortcut(BaseModel):
    """A single key binding."""

    bind: str
    about: str

    def to_entry(self) -> Entry:
        return Entry(bind=self.bind, about=self.about)


class BlockSpec(BaseModel):
    """A block in an explicit column."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    relative_height: float = Field(alias="relativeHeight", gt=0.0, le=1.0)
    shrots: list[Shortcut] = Field(default_factory=list)

    def to_block(self) -> Block:
        return Block(
            title=self.title,
            entries=tuple(s.to_entry() for s in self.shrots),
            relative_height=self.relative_height,
        )


class Config(BaseModel):
    """Root object of the config document."""

    general: General
    colors: Colors
    # Auto mode: program name → ordered shortcuts
    shrots: Optional[dict[str, list[Shortcut]]] = None
    # Explicit mode: columns of blocks
    columns: Optional[list[list[BlockSpec]]] = None

    @model_validator(mode="after")
    def _check_content(self) -> Config:
        if (self.shrots is None) == (self.columns is None):
            raise ValueError("exactly one of 'shrots' or 'columns' must be given")
        for i, column in enumerate(self.columns or []):
            total = sum(b.relative_height for b in column)
            if total > 1.0 + _HEIGHT_EPSILON:
                raise ValueError(
                    f"column {i}: relative heights sum to {total:g}, more than 1.0"
                )
        return self

    # ── helpers ────────────────────────────────────────────────
    @property
    def is_explicit(self) -> bool:
        return self.columns is not None

    @property
    def block_count(self) -> int:
        if self.columns is not None:
            return sum(len(c) for c in self.columns)
        return len(self.shrots or {})

    @property
    def entry_count(self) -> int:
        if self.columns is not None:
            return sum(len(b.shrots) for c in self.columns for b in c)
        return sum(len(v) for v in (self.shrots or {}).values())

    def layout_model(self) -> LayoutModel:
        if self.columns is not None:
            return Explicit(
                columns=tuple(tuple(b.to_block() for b in column) for column in self.columns)
            )
        blocks = tuple(
            Block(title=name, entries=tuple(s.to_entry() for s in shortcuts))
            for name, shortcuts in (self.shrots or {}).items()
        )
        return Implicit(blocks=blocks, column_count=self.general.columns)

    def layout_config(self) -> LayoutConfig:
        g = self.general
        return LayoutConfig(width=g.width, height=g.height, opacity=g.opacity, border=g.border)

    def palette(self) -> Palette:
        c = self.colors
        return Palette(
            background=c.background,
            foreground=c.foreground,
            border=c.border,
            shortcut=c.shortcut,
            about=c.about,
        )
