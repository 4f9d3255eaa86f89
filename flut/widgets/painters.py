"""Simple painter widgets: filled rectangles and empty spacing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flut.widgets.core import PainterWidget, Rect

if TYPE_CHECKING:
    from flut.canvas import Canvas

BLACK = (0, 0, 0, 255)


@dataclass
class RectWidget(PainterWidget):
    """A filled, optionally rounded rectangle covering its constraint."""

    color: tuple[int, ...] = BLACK
    border_radius: float = 0.0

    def draw(self, canvas: Canvas, constraint: Rect) -> None:
        canvas.draw_rrect(constraint, self.border_radius, self.color)


@dataclass
class Spacing(PainterWidget):
    """Invisible widget that only takes up space."""

    width: float = -1.0
    height: float = -1.0

    def get_size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def draw(self, canvas: Canvas, constraint: Rect) -> None:
        """Spacing draws nothing."""