"""The worm game: a worm on a walled board that grows by eating food."""

from __future__ import annotations

import functools
import random
from collections import deque
from typing import Any

import pygame

from flut import context
from flut.helpers import Clock, ShakeAnimation
from flut.icon_names import make_icon_name_enum
from flut.models import FontCfg, HorizontalAlign, PlaySound
from flut.widgets.core import BuilderWidget, Rect, Widget
from flut.widgets.dialog import Dialog, Header
from flut.widgets.grid import Grid
from flut.widgets.layout import Column
from flut.widgets.painters import RectWidget, Spacing
from flut.widgets.text import Text
from flut.widgets.transforms import Translation
from flut.worm.models import Direction, GameCell, WormCell

COL_COUNT = 41
ROW_COUNT = 41
CELL_COUNT = COL_COUNT * ROW_COUNT
TICKS_PER_SECOND = 30.0
CODEPOINTS_PATH = "assets/fonts/MaterialSymbolsOutlined[FILL,GRAD,opsz,wght].codepoints"
DEAD_SOUND = "assets/worm/audio/dead.wav"
EAT_SOUND = "assets/worm/audio/eat.wav"

WHITE = (255, 255, 255, 255)
DIALOG_COLOR = (255, 128, 128, 255)

CELL_COLORS = {
    GameCell.AIR: (68, 68, 68, 255),
    GameCell.WORM: (243, 125, 121, 255),
    GameCell.WALL: (255, 0, 0, 255),
    GameCell.FOOD: (0, 255, 0, 255),
}

OFFSETS = {
    Direction.UP: -COL_COUNT,
    Direction.RIGHT: 1,
    Direction.DOWN: COL_COUNT,
    Direction.LEFT: -1,
}

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
}


@functools.lru_cache(maxsize=1)
def _skull_codepoint() -> int:
    with open(CODEPOINTS_PATH, encoding="utf-8") as codepoints:
        icon_name = make_icon_name_enum(codepoints.read())
    return int(icon_name["Skull"])


class GamePage(BuilderWidget):
    """The game board, the score and, once the worm dies, a dialog."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.grid = [GameCell.AIR] * CELL_COUNT
        self.air_indices = set(range(CELL_COUNT))
        self.worm: deque[WormCell] = deque()  # front is the tail, back is the head
        self.clock: Clock | None = Clock(TICKS_PER_SECOND)
        self.next_worm_head_direction: Direction | None = None
        self.is_worm_dead = False
        self.shake_animation: ShakeAnimation | None = None

        for i in range(COL_COUNT):
            self._set_cell(i, GameCell.WALL)
            self._set_cell(CELL_COUNT - 1 - i, GameCell.WALL)
        for i in range(ROW_COUNT):
            self._set_cell(i * COL_COUNT, GameCell.WALL)
            self._set_cell(CELL_COUNT - 1 - i * COL_COUNT, GameCell.WALL)

        center = CELL_COUNT >> 1
        self._set_cell(center, GameCell.WORM)
        self.worm.append(WormCell(center, Direction.random(self._rng)))
        self._spawn_food()

    def _set_cell(self, index: int, cell: GameCell) -> None:
        self.grid[index] = cell
        if cell is GameCell.AIR:
            self.air_indices.add(index)
        else:
            self.air_indices.discard(index)

    def _grow_worm(self) -> None:
        head = self.worm[-1]
        new_head = WormCell(head.position + OFFSETS[head.direction], head.direction)
        self.worm.append(new_head)
        self._set_cell(new_head.position, GameCell.WORM)

    def _move_worm(self) -> None:
        self._grow_worm()
        tail = self.worm.popleft()
        self._set_cell(tail.position, GameCell.AIR)

    def _spawn_food(self) -> None:
        food_index = self._rng.choice(sorted(self.air_indices))
        self._set_cell(food_index, GameCell.FOOD)

    def _kill_worm(self) -> None:
        self.is_worm_dead = True
        if self.clock is not None:
            self.clock._release()
        self.clock = None
        self.shake_animation = ShakeAnimation(duration=0.5, strength=32.0, rng=self._rng)
        context.send_audio(PlaySound(DEAD_SOUND))

    def _eat_food(self) -> None:
        self._grow_worm()
        self._spawn_food()
        context.send_audio(PlaySound(EAT_SOUND))

    def process_event(self, event: Any) -> None:
        if self.is_worm_dead or getattr(event, "type", None) != pygame.KEYDOWN:
            return
        direction = _KEY_DIRECTIONS.get(getattr(event, "key", None))
        if direction is None:
            return
        if self.worm[-1].direction is not _OPPOSITE[direction]:
            self.next_worm_head_direction = direction

    def update(self, dt: float) -> bool:
        is_shaking = self.shake_animation is not None
        if self.shake_animation is not None:
            self.shake_animation = self.shake_animation.update(dt)

        if self.clock is None:
            return is_shaking
        if not self.clock.update(dt) or self.is_worm_dead:
            return is_shaking

        head = self.worm[-1]
        if self.next_worm_head_direction is not None:
            head.direction = self.next_worm_head_direction
            self.next_worm_head_direction = None

        target = self.grid[head.position + OFFSETS[head.direction]]
        if target in (GameCell.WORM, GameCell.WALL):
            self._kill_worm()
        elif target is GameCell.FOOD:
            self._eat_food()
        else:
            self._move_worm()
        return True

    def _cell_widget(self, index: int) -> Widget:
        return RectWidget(color=CELL_COLORS[self.grid[index]])

    def build(self, constraint: Rect) -> Widget:
        translation = (
            self.shake_animation.translation if self.shake_animation is not None else (0.0, 0.0)
        )
        board = Column(
            align=HorizontalAlign.CENTER,
            children=[
                Spacing(height=16.0),
                Text(str(len(self.worm) - 1), FontCfg(font_size=48), WHITE),
                Spacing(height=16.0),
                Grid(COL_COUNT, ROW_COUNT, 2.0, self._cell_widget),
            ],
        )
        children: list[Widget] = [Translation(translation, board)]
        if self.is_worm_dead:
            header = Header(icon=_skull_codepoint(), title="You died...")
            children.append(Dialog(DIALOG_COLOR, header))
        return Column(children=children)