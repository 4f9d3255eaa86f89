"""Builder widgets that transform how their child is drawn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flut.widgets.core import BuilderWidget, Rect, Widget

if TYPE_CHECKING:
    from flut.canvas import Canvas


@dataclass(eq=False)
class Scale(BuilderWidget):
    """Draws its child scaled about the centre of its constraint."""

    scale: float
    child: Widget

    def pre_draw(self, canvas: Canvas, constraint: Rect) -> None:
        cx, cy = constraint.center
        canvas.save()
        canvas.translate(cx, cy)
        canvas.scale(self.scale, self.scale)
        canvas.translate(-cx, -cy)

    def build(self, constraint: Rect) -> Widget:
        return self.child

    def post_draw(self, canvas: Canvas, constraint: Rect) -> None:
        canvas.restore()


@dataclass(eq=False)
class Translation(BuilderWidget):
    """Draws its child shifted by a fixed offset."""

    translation: tuple[float, float]
    child: Widget

    def pre_draw(self, canvas: Canvas, constraint: Rect) -> None:
        canvas.save()
        canvas.translate(*self.translation)

    def build(self, constraint: Rect) -> Widget:
        return self.child

    def post_draw(self, canvas: Canvas, constraint: Rect) -> None:
        canvas.restore()