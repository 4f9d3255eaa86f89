"""A modal dialog that pops up over the whole app and shakes off clicks outside it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from flut import context
from flut.helpers import Idle, Transition
from flut.models import FontCfg
from flut.widgets.core import BuilderWidget, MouseButton, Rect, Stack, StackChild, Widget
from flut.widgets.painters import BLACK, RectWidget
from flut.widgets.text import Icon, Text
from flut.widgets.transforms import Scale

SIZE = (512.0, 256.0)
BACKGROUND_ALPHA = 128
_POP_UP_DURATION = 0.125
_VIBRATE_DURATION = 0.08
_VIBRATE_SCALE = 0.9
_SEMI_BOLD = 600


def _position() -> tuple[float, float]:
    width, height = context.drawable_size()
    return ((width - SIZE[0]) * 0.5, (height - SIZE[1]) * 0.5)


def _default_title_font() -> FontCfg:
    return FontCfg(font_size=32, font_weight=_SEMI_BOLD)


@dataclass
class Header:
    """Optional icon and title shown at the top of a dialog."""

    icon: int | None = None
    icon_color: tuple[int, ...] = BLACK
    title: str = ""
    title_color: tuple[int, ...] = BLACK
    title_font_cfg: FontCfg = field(default_factory=_default_title_font)


@dataclass
class _PoppedUp:
    def step(self, dt: float) -> _State:
        return self


@dataclass
class _PoppingUp:
    background_alpha: Transition
    scale: Transition

    def step(self, dt: float) -> _State:
        alpha = self.background_alpha.update(dt)
        if isinstance(alpha, Idle):
            return _PoppedUp()
        scale = self.scale.update(dt)
        if isinstance(scale, Idle):
            return _PoppedUp()
        return _PoppingUp(alpha, scale)


@dataclass
class _ScalingUp:
    scale: Transition

    def step(self, dt: float) -> _State:
        scale = self.scale.update(dt)
        if isinstance(scale, Idle):
            return _PoppedUp()
        return _ScalingUp(scale)


@dataclass
class _ScalingDown:
    scale: Transition

    def step(self, dt: float) -> _State:
        scale = self.scale.update(dt)
        if isinstance(scale, Idle):
            return _ScalingUp(Transition(_VIBRATE_SCALE, 1.0, _VIBRATE_DURATION))
        return _ScalingDown(scale)


_State = Union[_PoppingUp, _PoppedUp, _ScalingDown, _ScalingUp]


class Dialog(BuilderWidget):
    """A centred panel over a dimmed background covering the whole app."""

    def __init__(self, color: tuple[int, ...] = BLACK, header: Header | None = None) -> None:
        self.color = color
        self.header = header if header is not None else Header()
        self._animation: _State = _PoppingUp(
            Transition(0.0, float(BACKGROUND_ALPHA), _POP_UP_DURATION),
            Transition(0.0, 1.0, _POP_UP_DURATION),
        )

    def get_size(self) -> tuple[float, float]:
        # Zero so it fits in any layout; the dialog always covers the whole app.
        return (0.0, 0.0)

    @property
    def scale(self) -> float:
        """Current scale of the foreground panel."""
        state = self._animation
        if isinstance(state, _PoppedUp):
            return 1.0
        return state.scale.now

    @property
    def background_alpha(self) -> int:
        """Current opacity of the dimmed background, 0..255."""
        state = self._animation
        if not isinstance(state, _PoppingUp):
            return BACKGROUND_ALPHA
        now = state.background_alpha.now
        if math.isnan(now):
            return 0
        return max(0, min(255, int(now)))

    def on_mouse_up(self, mouse_btn: MouseButton, mouse_position: tuple[float, float]) -> None:
        x, y = _position()
        if mouse_btn != MouseButton.LEFT or Rect(x, y, *SIZE).contains(mouse_position):
            return
        if isinstance(self._animation, _PoppedUp):
            self._animation = _ScalingDown(Transition(1.0, _VIBRATE_SCALE, _VIBRATE_DURATION))

    def update(self, dt: float) -> bool:
        is_animating = not isinstance(self._animation, _PoppedUp)
        self._animation = self._animation.step(dt)
        return is_animating

    def build(self, constraint: Rect) -> Widget:
        x, y = _position()
        panel: list[StackChild] = [
            StackChild((x, y), SIZE, RectWidget(color=self.color, border_radius=8.0))
        ]
        if self.header.icon is not None:
            panel.append(
                StackChild(
                    (x + 16.0, y + 16.0),
                    (0.0, 0.0),
                    Icon(self.header.icon, 64, self.header.icon_color),
                )
            )
        if self.header.title:
            panel.append(
                StackChild(
                    (x + 84.0, y + 32.0),
                    (0.0, 0.0),
                    Text(self.header.title, self.header.title_font_cfg, self.header.title_color),
                )
            )
        return Stack(
            [
                StackChild(
                    (0.0, 0.0),
                    context.drawable_size(),
                    RectWidget(color=(0, 0, 0, self.background_alpha)),
                ),
                StackChild((x, y), SIZE, Scale(self.scale, Stack(panel))),
            ]
        )