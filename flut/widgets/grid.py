"""A uniform grid of cells produced by a builder function."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from flut.widgets.core import BuilderWidget, Rect, Stack, StackChild, Widget


@dataclass(eq=False)
class Grid(BuilderWidget):
    """Cells of equal size separated by ``gap``, filled row by row."""

    col_count: int
    row_count: int
    gap: float
    builder: Callable[[int], Widget]

    def build(self, constraint: Rect) -> Widget:
        if self.col_count < 1 or self.row_count < 1:
            raise ValueError(
                f"grid needs at least one column and row, got {self.col_count}x{self.row_count}"
            )
        cell_width = (constraint.width - self.gap * (self.col_count - 1)) / self.col_count
        cell_height = (constraint.height - self.gap * (self.row_count - 1)) / self.row_count
        children = []
        for index in range(self.col_count * self.row_count):
            row, col = divmod(index, self.col_count)
            position = (
                constraint.x + col * (cell_width + self.gap),
                constraint.y + row * (cell_height + self.gap),
            )
            children.append(StackChild(position, (cell_width, cell_height), self.builder(index)))
        return Stack(children)