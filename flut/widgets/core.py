"""Widget kinds, geometry and the stack layout primitive."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from flut.canvas import Canvas

UNSIZED = (-1.0, -1.0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width * 0.5, self.y + self.height * 0.5)

    def is_empty(self) -> bool:
        """True when the rectangle has no area."""
        return not (self.width > 0 and self.height > 0)

    def contains(self, point: tuple[float, float]) -> bool:
        """Half-open containment: left and top edges inside, right and bottom outside."""
        px, py = point
        return self.x <= px < self.right and self.y <= py < self.bottom


class MouseButton(IntEnum):
    UNKNOWN = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


class BuilderWidget(ABC):
    """A stateful widget that builds a child widget and may react to input.

    The default input hooks keep track of the pointer, the pressed button,
    the last other event and the time elapsed, so subclasses that do not
    override them can still read that state.
    """

    mouse_position: Optional[tuple[float, float]] = None
    pressed_button: MouseButton = MouseButton.UNKNOWN
    is_hovered: bool = False
    last_event: Any = None
    elapsed: float = 0.0

    def _remember(self, name: str, value: Any) -> None:
        # Bypasses frozen dataclass guards so immutable widgets can use the defaults too.
        object.__setattr__(self, name, value)

    def get_size(self) -> tuple[float, float]:
        """Preferred size; a negative component means "fill the constraint"."""
        return UNSIZED

    def on_mouse_down(self, mouse_btn: MouseButton, mouse_position: tuple[float, float]) -> None:
        """Called when a mouse button is pressed over the widget."""
        self._remember("pressed_button", MouseButton(mouse_btn))
        self._remember("mouse_position", mouse_position)

    def on_mouse_up(self, mouse_btn: MouseButton, mouse_position: tuple[float, float]) -> None:
        """Called when a pressed mouse button is released over the widget."""
        self._remember("pressed_button", MouseButton.UNKNOWN)
        self._remember("mouse_position", mouse_position)

    def on_mouse_over(self, mouse_position: tuple[float, float]) -> None:
        """Called when the pointer enters the widget."""
        self._remember("is_hovered", True)
        self._remember("mouse_position", mouse_position)

    def on_mouse_out(self, mouse_position: tuple[float, float]) -> None:
        """Called when the pointer leaves the widget."""
        self._remember("is_hovered", False)
        self._remember("pressed_button", MouseButton.UNKNOWN)
        self._remember("mouse_position", mouse_position)

    def process_event(self, event: Any) -> None:
        """Called for every event that is not a mouse button or motion event."""
        self._remember("last_event", event)

    def update(self, dt: float) -> bool:
        """Advance state by ``dt`` seconds; return True when a rebuild is needed."""
        self._remember("elapsed", self.elapsed + dt)
        return False

    def pre_draw(self, canvas: Canvas, constraint: Rect) -> None:
        """Called before the built subtree is drawn."""

    @abstractmethod
    def build(self, constraint: Rect) -> Widget:
        """Return the child widget for the given constraint."""

    def post_draw(self, canvas: Canvas, constraint: Rect) -> None:
        """Called after the built subtree is drawn."""


class PainterWidget(ABC):
    """A leaf widget that draws itself."""

    def get_size(self) -> tuple[float, float]:
        """Preferred size; a negative component means "fill the constraint"."""
        return UNSIZED

    @abstractmethod
    def draw(self, canvas: Canvas, constraint: Rect) -> None:
        """Draw into ``constraint``."""


@dataclass
class StackChild:
    """A widget placed at an absolute position with a fixed size."""

    position: tuple[float, float]
    size: tuple[float, float]
    child: Widget

    @classmethod
    def from_rect(cls, rect: Rect, child: Widget) -> StackChild:
        return cls((rect.x, rect.y), (rect.width, rect.height), child)


@dataclass
class Stack:
    """Children drawn in order, each at its own absolute placement."""

    children: list[StackChild] = field(default_factory=list)


Widget = Union[BuilderWidget, PainterWidget, Stack]


def widget_size(widget: Widget) -> tuple[float, float]:
    """Preferred size of any widget; stacks have none."""
    if isinstance(widget, (BuilderWidget, PainterWidget)):
        return widget.get_size()
    if isinstance(widget, Stack):
        return UNSIZED
    raise TypeError(f"not a widget: {widget!r}")