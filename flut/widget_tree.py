"""A widget tree that builds widgets into drawables, routes input, updates and draws them."""

from __future__ import annotations

from typing import Any

import pygame

from flut.sparse_vec import SparseVec
from flut.tree_nodes import (
    DrawableIndex,
    DrawableKind,
    ExpandableNode,
    Parent,
    PainterNode,
    TreeStore,
    BuilderNode,
    expandable_from_widget,
)
from flut.widgets.core import MouseButton, PainterWidget, Rect, Widget

_PYGAME_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    6: MouseButton.X1,
    7: MouseButton.X2,
}


def _mouse_button(button: int) -> MouseButton:
    return _PYGAME_BUTTONS.get(button, MouseButton.UNKNOWN)


class WidgetTree:
    """Holds built widgets; ``update`` marks dirty parts and ``build`` rebuilds them."""

    def __init__(self, root: Widget, constraint: Rect) -> None:
        self._store = TreeStore()
        self._pending: list[ExpandableNode] = []
        if isinstance(root, PainterWidget):
            self._store.painter_nodes = SparseVec([PainterNode(root)])
            self._built = True
        else:
            self._pending.append(expandable_from_widget(root, None))
            self._built = False
            self.build(constraint)

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("widget tree must be built after update")

    def _root(self) -> DrawableIndex:
        if len(self._store.stack_nodes) == 0:
            return DrawableIndex(DrawableKind.PAINTER, 0)
        return DrawableIndex(DrawableKind.STACK, 0)

    def _node(self, drawable: DrawableIndex) -> Any:
        if drawable.kind is DrawableKind.STACK:
            return self._store.stack_nodes[drawable.index]
        return self._store.painter_nodes[drawable.index]

    # Input ----------------------------------------------------------------

    def process_event(
        self, event: Any, root_constraint: Rect, app_size: tuple[float, float]
    ) -> None:
        """Route an input event to the builder widgets along every drawable."""
        self._require_built()
        event_type = getattr(event, "type", None)
        position: tuple[float, float] | None = None
        if event_type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            x, y = event.pos
            position = (
                x * root_constraint.width / app_size[0],
                y * root_constraint.height / app_size[1],
            )

        queue: list[tuple[DrawableIndex, Rect]] = [(self._root(), root_constraint)]
        while queue:
            drawable, constraint = queue.pop()
            node = self._node(drawable)
            indices = node.buildable_indices

            if event_type == pygame.MOUSEBUTTONDOWN:
                self._on_mouse_down(_mouse_button(event.button), position, indices)
            elif event_type == pygame.MOUSEBUTTONUP:
                self._on_mouse_up(_mouse_button(event.button), position, indices)
            elif event_type == pygame.MOUSEMOTION:
                # A zero-sized constraint (a dialog) covers the whole app.
                if constraint.is_empty() or constraint.contains(position):
                    self._on_mouse_over(position, indices)
                else:
                    self._on_mouse_out(position, indices)
            else:
                for buildable_index in indices:
                    self._store.buildable_nodes[buildable_index].widget.process_event(event)

            if drawable.kind is DrawableKind.STACK:
                queue.extend(
                    (slot.child, Rect(slot.position[0], slot.position[1], *slot.size))
                    for slot in node.children
                )

    def _on_mouse_down(
        self, button: MouseButton, position: tuple[float, float], indices: list[int]
    ) -> None:
        for buildable_index in indices:
            node = self._store.buildable_nodes[buildable_index]
            if not node.is_mouse_over:
                break
            node.mouse_downed_btn = button
            node.widget.on_mouse_down(button, position)

    def _on_mouse_up(
        self, button: MouseButton, position: tuple[float, float], indices: list[int]
    ) -> None:
        for buildable_index in indices:
            node = self._store.buildable_nodes[buildable_index]
            if not node.is_mouse_over or node.mouse_downed_btn != button:
                break
            node.mouse_downed_btn = MouseButton.UNKNOWN
            node.widget.on_mouse_up(button, position)

    def _on_mouse_over(self, position: tuple[float, float], indices: list[int]) -> None:
        for buildable_index in indices:
            node = self._store.buildable_nodes[buildable_index]
            if node.is_mouse_over:
                break
            node.is_mouse_over = True
            node.widget.on_mouse_over(position)

    def _on_mouse_out(self, position: tuple[float, float], indices: list[int]) -> None:
        for buildable_index in indices:
            node = self._store.buildable_nodes[buildable_index]
            if not node.is_mouse_over:
                break
            node.is_mouse_over = False
            node.mouse_downed_btn = MouseButton.UNKNOWN
            node.widget.on_mouse_out(position)

    # Update and rebuild ---------------------------------------------------

    def update(self, dt: float) -> WidgetTree:
        """Advance every builder widget; dirty subtrees are dropped until ``build``."""
        self._require_built()
        queue = [self._root()]
        pending: list[ExpandableNode] = []
        store = self._store

        while queue:
            drawable = queue.pop()
            if drawable.kind is DrawableKind.STACK:
                node = store.stack_nodes[drawable.index]
                expandable = self._update_drawable(dt, node.buildable_indices, node.parent)
                if expandable is None:
                    queue.extend(slot.child for slot in node.children)
                    continue
                pending.append(expandable)
                store.stack_nodes.take(drawable.index)
                self._invalidate([slot.child for slot in node.children])
            else:
                node = store.painter_nodes[drawable.index]
                expandable = self._update_drawable(dt, node.buildable_indices, node.parent)
                if expandable is not None:
                    pending.append(expandable)
                    store.painter_nodes.take(drawable.index)

        self._pending = pending
        self._built = False
        return self

    def _update_drawable(
        self, dt: float, indices: list[int], parent: Parent
    ) -> BuilderNode | None:
        buildables = self._store.buildable_nodes
        dirty_pos = next(
            (
                pos
                for pos, buildable_index in enumerate(indices)
                if buildables[buildable_index].widget.update(dt)
            ),
            None,
        )
        if dirty_pos is None:
            return None

        dirty_index = indices[dirty_pos]
        stale = indices[dirty_pos + 1 :]
        if stale:
            stale = [stale[-1], *stale[:-1]]
        dirty_node = buildables.take(dirty_index)
        for buildable_index in stale:
            buildables.take(buildable_index)

        kept = indices[:dirty_pos]
        indices.clear()
        return BuilderNode(dirty_node.widget, parent, kept)

    def _invalidate(self, drawables: list[DrawableIndex]) -> None:
        store = self._store
        queue = list(drawables)
        while queue:
            drawable = queue.pop()
            if drawable.kind is DrawableKind.STACK:
                node = store.stack_nodes.take(drawable.index)
                queue.extend(slot.child for slot in node.children)
            else:
                node = store.painter_nodes.take(drawable.index)
            for buildable_index in node.buildable_indices:
                store.buildable_nodes.take(buildable_index)

    def build(self, root_constraint: Rect) -> WidgetTree:
        """Rebuild every subtree dropped by the last ``update``."""
        self._store.expand(self._pending, root_constraint)
        self._pending = []
        self._built = True
        return self

    # Drawing --------------------------------------------------------------

    def _constraint(self, parent: Parent, root_constraint: Rect) -> Rect:
        constraint = self._store.constraint_of(parent)
        return root_constraint if constraint is None else constraint

    def draw(self, canvas: Any, root_constraint: Rect) -> None:
        """Draw the tree depth first, children in declaration order."""
        self._require_built()
        store = self._store
        queue = [self._root()]
        while queue:
            drawable = queue.pop()
            node = self._node(drawable)
            constraint = self._constraint(node.parent, root_constraint)
            widgets = [store.buildable_nodes[i].widget for i in node.buildable_indices]

            for widget in widgets:
                widget.pre_draw(canvas, constraint)

            if drawable.kind is DrawableKind.STACK and node.children:
                queue.extend(slot.child for slot in reversed(node.children))
                continue

            if drawable.kind is DrawableKind.PAINTER:
                node.widget.draw(canvas, constraint)
            for widget in reversed(widgets):
                widget.post_draw(canvas, constraint)
            self._post_draw(canvas, root_constraint, node.parent)

    def _post_draw(self, canvas: Any, root_constraint: Rect, parent: Parent) -> None:
        store = self._store
        while parent is not None:
            stack_index, child_index = parent
            stack_node = store.stack_nodes[stack_index]
            if child_index < len(stack_node.children) - 1:
                break
            constraint = self._constraint(stack_node.parent, root_constraint)
            for buildable_index in reversed(stack_node.buildable_indices):
                store.buildable_nodes[buildable_index].widget.post_draw(canvas, constraint)
            parent = stack_node.parent