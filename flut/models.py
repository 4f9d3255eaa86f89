"""Plain value types shared by widgets and the application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class PlaySound:
    """Request to play the sound file at ``file_path``."""

    file_path: str


class HorizontalAlign(Enum):
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class VerticalAlign(Enum):
    TOP = auto()
    CENTER = auto()
    BOTTOM = auto()


class Slant(Enum):
    UPRIGHT = auto()
    ITALIC = auto()
    OBLIQUE = auto()


@dataclass(frozen=True)
class FontCfg:
    """Font selection; hashable so it can key a font cache."""

    font_family: str = "Arial"
    font_weight: int = 400
    font_width: int = 5
    font_slant: Slant = Slant.UPRIGHT
    font_size: int = 12

    def __post_init__(self) -> None:
        if not 0 <= self.font_size <= 255:
            raise ValueError(f"font size {self.font_size} out of range 0..255")