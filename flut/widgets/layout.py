"""Linear layouts: columns stack children top to bottom, rows left to right."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from flut.models import HorizontalAlign, VerticalAlign
from flut.widgets.core import BuilderWidget, Rect, Stack, StackChild, Widget, widget_size

_Aligner = Callable[[float, float, float], float]


def _at_start(start: float, length: float, size: float) -> float:
    return start


def _at_center(start: float, length: float, size: float) -> float:
    return start + (length - size) * 0.5


def _at_end(start: float, length: float, size: float) -> float:
    return start + length - size


_HORIZONTAL: dict[HorizontalAlign, _Aligner] = {
    HorizontalAlign.LEFT: _at_start,
    HorizontalAlign.CENTER: _at_center,
    HorizontalAlign.RIGHT: _at_end,
}

_VERTICAL: dict[VerticalAlign, _Aligner] = {
    VerticalAlign.TOP: _at_start,
    VerticalAlign.CENTER: _at_center,
    VerticalAlign.BOTTOM: _at_end,
}


def _linear_build(
    children: list[Widget], constraint: Rect, vertical: bool, align: _Aligner
) -> Stack:
    """Lay out children along one axis.

    Sized children are packed from the start until the first child without a
    main-axis size; the rest are packed backwards from the end, stopping at the
    next unsized child. The first unsized child fills the gap between them.
    """
    if vertical:
        main_start, main_len = constraint.y, constraint.height
        cross_start, cross_len = constraint.x, constraint.width
    else:
        main_start, main_len = constraint.x, constraint.width
        cross_start, cross_len = constraint.y, constraint.height

    def sizes(child: Widget) -> tuple[float, float]:
        width, height = widget_size(child)
        return (height, width) if vertical else (width, height)

    def cross(size: float) -> tuple[float, float]:
        length = cross_len if size < 0.0 else size
        return align(cross_start, cross_len, length), length

    def place(main_pos: float, main_size: float, cross_size: float) -> Rect:
        cross_pos, cross_length = cross(cross_size)
        if vertical:
            return Rect(cross_pos, main_pos, cross_length, main_size)
        return Rect(main_pos, cross_pos, main_size, cross_length)

    pending = iter(children)
    placed: list[StackChild] = []
    cursor = main_start
    remaining: Widget | None = None

    for child in pending:
        main_size, cross_size = sizes(child)
        if main_size < 0.0:
            remaining = child
            break
        placed.append(StackChild.from_rect(place(cursor, main_size, cross_size), child))
        cursor += main_size

    if remaining is None:
        return Stack(placed)

    end = main_start + main_len
    tail: list[StackChild] = []
    for child in reversed(list(pending)):
        main_size, cross_size = sizes(child)
        if main_size < 0.0:
            break
        end -= main_size
        tail.append(StackChild.from_rect(place(end, main_size, cross_size), child))

    _, remaining_cross = sizes(remaining)
    placed.append(StackChild.from_rect(place(cursor, end - cursor, remaining_cross), remaining))
    placed.extend(tail)
    return Stack(placed)


@dataclass(eq=False)
class Column(BuilderWidget):
    """Children stacked vertically; building consumes the children."""

    align: HorizontalAlign = HorizontalAlign.LEFT
    children: list[Widget] = field(default_factory=list)

    def build(self, constraint: Rect) -> Widget:
        children, self.children = self.children, []
        return _linear_build(children, constraint, True, _HORIZONTAL[self.align])


@dataclass(eq=False)
class Row(BuilderWidget):
    """Children laid out horizontally; building consumes the children."""

    align: VerticalAlign = VerticalAlign.TOP
    children: list[Widget] = field(default_factory=list)

    def build(self, constraint: Rect) -> Widget:
        children, self.children = self.children, []
        return _linear_build(children, constraint, False, _VERTICAL[self.align])