"""Node storage of a widget tree and its expansion from widgets into drawables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from flut.sparse_vec import SparseVec
from flut.widgets.core import (
    BuilderWidget,
    MouseButton,
    PainterWidget,
    Rect,
    Stack,
    Widget,
)

Parent = Optional[tuple[int, int]]


class DrawableKind(Enum):
    STACK = auto()
    PAINTER = auto()


@dataclass(frozen=True)
class DrawableIndex:
    """Which store a drawable lives in and its slot there."""

    kind: DrawableKind
    index: int


INVALID_DRAWABLE = DrawableIndex(DrawableKind.PAINTER, 2**32 - 1)


@dataclass
class BuildableNode:
    """A built builder widget with its pointer state."""

    widget: BuilderWidget
    mouse_downed_btn: MouseButton = MouseButton.UNKNOWN
    is_mouse_over: bool = False


@dataclass
class BuilderNode:
    """A builder widget waiting to be built."""

    widget: BuilderWidget
    parent: Parent = None
    buildable_indices: list[int] = field(default_factory=list)


@dataclass
class StackChildNode:
    """A stack slot; ``child`` is a widget before expansion and a DrawableIndex after."""

    position: tuple[float, float]
    size: tuple[float, float]
    child: Union[Widget, DrawableIndex]


@dataclass
class StackNode:
    """A stack, either waiting to be expanded or already placed in the store."""

    parent: Parent = None
    buildable_indices: list[int] = field(default_factory=list)
    children: list[StackChildNode] = field(default_factory=list)


@dataclass
class PainterNode:
    """A painter widget placed in the store."""

    widget: PainterWidget
    parent: Parent = None
    buildable_indices: list[int] = field(default_factory=list)


ExpandableNode = Union[BuilderNode, StackNode]


def expandable_from_widget(widget: Widget, parent: Parent) -> ExpandableNode:
    """Wrap a builder or stack widget as a node to expand under ``parent``."""
    if isinstance(widget, BuilderWidget):
        return BuilderNode(widget, parent)
    if isinstance(widget, Stack):
        return StackNode(
            parent,
            [],
            [StackChildNode(child.position, child.size, child.child) for child in widget.children],
        )
    if isinstance(widget, PainterWidget):
        raise TypeError("painter widgets are placed directly, not expanded")
    raise TypeError(f"not a widget: {widget!r}")


@dataclass
class TreeStore:
    """Slot stores of buildables, stacks and painters that make up a built tree."""

    buildable_nodes: SparseVec[BuildableNode] = field(default_factory=SparseVec)
    stack_nodes: SparseVec[StackNode] = field(default_factory=SparseVec)
    painter_nodes: SparseVec[PainterNode] = field(default_factory=SparseVec)

    def constraint_of(self, parent: Parent) -> Rect | None:
        """The rectangle of the stack slot ``parent``, or None for the root."""
        if parent is None:
            return None
        stack_index, child_index = parent
        slot = self.stack_nodes[stack_index].children[child_index]
        return Rect(slot.position[0], slot.position[1], slot.size[0], slot.size[1])

    def expand(self, expandable_nodes: list[ExpandableNode], root_constraint: Rect) -> None:
        """Build and place every pending node, last in first out, until none remain."""
        while expandable_nodes:
            node = expandable_nodes.pop()
            if isinstance(node, BuilderNode):
                self._expand_builder(node, expandable_nodes, root_constraint)
            else:
                self._expand_stack(node, expandable_nodes)

    def _link(self, parent: Parent, drawable: DrawableIndex) -> None:
        if parent is None:
            return
        stack_index, child_index = parent
        self.stack_nodes[stack_index].children[child_index].child = drawable

    def _place_painter(self, widget: PainterWidget, parent: Parent, indices: list[int]) -> None:
        painter_index = self.painter_nodes.push(PainterNode(widget, parent, indices))
        self._link(parent, DrawableIndex(DrawableKind.PAINTER, painter_index))

    def _expand_builder(
        self, node: BuilderNode, pending: list[ExpandableNode], root_constraint: Rect
    ) -> None:
        constraint = self.constraint_of(node.parent)
        if constraint is None:
            constraint = root_constraint
        child = node.widget.build(constraint)
        buildable_index = self.buildable_nodes.push(BuildableNode(node.widget))
        indices = [*node.buildable_indices, buildable_index]
        if isinstance(child, PainterWidget):
            self._place_painter(child, node.parent, indices)
            return
        next_node = expandable_from_widget(child, node.parent)
        next_node.buildable_indices = indices
        pending.append(next_node)

    def _expand_stack(self, node: StackNode, pending: list[ExpandableNode]) -> None:
        placed = StackNode(
            node.parent,
            node.buildable_indices,
            [StackChildNode(c.position, c.size, INVALID_DRAWABLE) for c in node.children],
        )
        stack_index = self.stack_nodes.push(placed)
        self._link(node.parent, DrawableIndex(DrawableKind.STACK, stack_index))
        for child_index, slot in enumerate(node.children):
            parent = (stack_index, child_index)
            if isinstance(slot.child, PainterWidget):
                self._place_painter(slot.child, parent, [])
            else:
                pending.append(expandable_from_widget(slot.child, parent))