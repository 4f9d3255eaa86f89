"""Value types of the worm game."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto


class Direction(Enum):
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Direction:
        """A uniformly chosen direction."""
        chooser = rng if rng is not None else random
        return chooser.choice(list(cls))


class GameCell(Enum):
    AIR = auto()
    WORM = auto()
    WALL = auto()
    FOOD = auto()


@dataclass
class WormCell:
    """One segment of the worm: its board index and heading."""

    position: int
    direction: Direction