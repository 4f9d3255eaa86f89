"""Process-wide state: drawable size, the audio queue and font caches."""

from __future__ import annotations

import functools
import os
import threading
from queue import Queue

import pygame

from flut.models import FontCfg, PlaySound, Slant

ICON_FONT_PATH = "assets/fonts/MaterialSymbolsOutlined[FILL,GRAD,opsz,wght].ttf"
_SEMI_BOLD = 600

_drawable_size: tuple[float, float] = (0.0, 0.0)
_audio_queue: Queue | None = None
_audio_lock = threading.Lock()


def set_drawable_size(width: float, height: float) -> None:
    global _drawable_size
    _drawable_size = (float(width), float(height))


def drawable_size() -> tuple[float, float]:
    """The size in pixels of the window's drawable area."""
    return _drawable_size


def set_audio_queue(queue: Queue) -> None:
    """Install the queue that carries audio requests; it can be set only once."""
    global _audio_queue
    with _audio_lock:
        if _audio_queue is not None:
            raise RuntimeError("audio queue is already set")
        _audio_queue = queue


def send_audio(request: PlaySound) -> bool:
    """Queue an audio request; return False when audio is not enabled."""
    queue = _audio_queue
    if queue is None:
        return False
    queue.put(request)
    return True


def _ensure_font_module() -> None:
    if not pygame.font.get_init():
        pygame.font.init()


@functools.lru_cache(maxsize=None)
def get_font(font_cfg: FontCfg) -> pygame.font.Font:
    """Return the cached system font matching ``font_cfg``."""
    _ensure_font_module()
    return pygame.font.SysFont(
        font_cfg.font_family,
        font_cfg.font_size,
        bold=font_cfg.font_weight >= _SEMI_BOLD,
        italic=font_cfg.font_slant is not Slant.UPRIGHT,
    )


@functools.lru_cache(maxsize=None)
def get_icon_font(size: int) -> pygame.font.Font:
    """Return the cached icon font at ``size``; the font file must exist."""
    if not os.path.isfile(ICON_FONT_PATH):
        raise FileNotFoundError(ICON_FONT_PATH)
    _ensure_font_module()
    return pygame.font.Font(ICON_FONT_PATH, size)