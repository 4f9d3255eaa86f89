"""Painter widgets that draw text and single icon glyphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from flut import context
from flut.models import FontCfg
from flut.widgets.core import PainterWidget, Rect
from flut.widgets.painters import BLACK

if TYPE_CHECKING:
    from flut.canvas import Canvas

_REPLACEMENT = "\ufffd"


def _measure(font: pygame.font.Font, text: str) -> Rect:
    """Ink bounds of ``text`` relative to the top-left of its rendered image."""
    if not text:
        return Rect(0.0, 0.0, 0.0, 0.0)
    image = font.render(text, True, (255, 255, 255))
    box = image.get_bounding_rect()
    return Rect(float(box.x), float(box.y), float(box.width), float(box.height))


def _glyph(codepoint: int) -> str:
    value = int(codepoint)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"codepoint {value:#x} does not fit in 16 bits")
    if 0xD800 <= value <= 0xDFFF:
        return _REPLACEMENT
    return chr(value)


class Text(PainterWidget):
    """A line of text sized to its ink bounds."""

    def __init__(
        self,
        text: str = "",
        font_cfg: FontCfg | None = None,
        color: tuple[int, ...] = BLACK,
    ) -> None:
        self.text = text
        self.font_cfg = font_cfg if font_cfg is not None else FontCfg()
        self.color = color
        self.bound = _measure(context.get_font(self.font_cfg), text)

    def get_size(self) -> tuple[float, float]:
        return (self.bound.width, self.bound.height)

    def draw(self, canvas: Canvas, constraint: Rect) -> None:
        canvas.draw_text(
            self.text,
            (constraint.x - self.bound.x, constraint.y - self.bound.y),
            context.get_font(self.font_cfg),
            self.color,
        )


class Icon(PainterWidget):
    """A single glyph from the icon font, sized to its ink bounds."""

    def __init__(self, codepoint: int, size: int = 12, color: tuple[int, ...] = BLACK) -> None:
        self.name = _glyph(codepoint)
        self.font_cfg = FontCfg(font_size=size)
        self.color = color
        self.bound = _measure(context.get_icon_font(size), self.name)

    def get_size(self) -> tuple[float, float]:
        return (self.bound.width, self.bound.height)

    def draw(self, canvas: Canvas, constraint: Rect) -> None:
        canvas.draw_text(
            self.name,
            (constraint.x - self.bound.x, constraint.y - self.bound.y),
            context.get_icon_font(self.font_cfg.font_size),
            self.color,
        )