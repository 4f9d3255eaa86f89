"""Application window, event loop and frame pacing."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice, pairwise
from queue import Queue
from typing import Any, Optional

import pygame

from flut import audio, context
from flut.canvas import Canvas
from flut.helpers import Animation
from flut.widget_tree import WidgetTree
from flut.widgets.core import Rect, Widget

TPS = 240.0
MAX_FRAME_TICK_COUNT = 8
_BLACK = (0, 0, 0, 255)
_WHEEL_BUTTONS = (4, 5)


@dataclass
class App:
    """Window settings and the root widget of an application."""

    title: str = ""
    size: tuple[int, int] = (800, 600)
    favicon_file_path: str = ""
    use_audio: bool = False
    child: Optional[Widget] = None


def frame_steps(frame_time: float, tps: float, max_ticks: int) -> Iterator[float]:
    """Split ``frame_time`` into update steps of at most ``1 / tps`` seconds.

    The steps are full periods followed by the remainder, at most ``max_ticks`` of them.
    """
    period = 1.0 / tps

    def remaining() -> Iterator[float]:
        left = frame_time
        yield left
        while left > 0.0:
            left = max(0.0, left - period)
            yield left

    steps = (before - after for before, after in pairwise(remaining()))
    yield from islice(steps, max_ticks)


def _is_wheel_button(event: Any) -> bool:
    # Wheel motion also arrives as MOUSEWHEEL; the button form is a legacy duplicate.
    return (
        event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP)
        and getattr(event, "button", None) in _WHEEL_BUTTONS
    )


def _open_window(app: App) -> pygame.Surface:
    pygame.display.set_caption(app.title)
    try:
        pygame.display.set_icon(pygame.image.load(app.favicon_file_path))
    except (pygame.error, OSError):
        pass
    try:
        return pygame.display.set_mode(app.size, vsync=1)
    except pygame.error:
        return pygame.display.set_mode(app.size)


def _start_audio() -> Queue:
    queue: Queue = Queue()
    context.set_audio_queue(queue)
    thread = threading.Thread(
        target=audio.serve, args=(iter(queue.get, None),), daemon=True, name="audio"
    )
    thread.start()
    return queue


def _event_loop(app: App, surface: pygame.Surface) -> None:
    width, height = surface.get_size()
    context.set_drawable_size(width, height)
    constraint = Rect(0.0, 0.0, float(width), float(height))
    app_size = (float(app.size[0]), float(app.size[1]))
    canvas = Canvas(surface)
    tree = WidgetTree(app.child, constraint) if app.child is not None else None
    last = time.perf_counter()

    def dispatch(event: Any) -> None:
        if tree is not None and not _is_wheel_button(event):
            tree.process_event(event, constraint, app_size)

    while True:
        while Animation.has():
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                dispatch(event)

            if tree is None:
                continue

            current = time.perf_counter()
            frame_time = current - last
            last = current

            for dt in frame_steps(frame_time, TPS, MAX_FRAME_TICK_COUNT):
                tree = tree.update(dt).build(constraint)

            canvas.clear(_BLACK)
            tree.draw(canvas, constraint)
            pygame.display.flip()

        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            dispatch(event)
            if Animation.has():
                break


def run(app: App) -> None:
    """Open the window and run the application until it is closed."""
    os.environ.setdefault("SDL_WINDOWS_DPI_SCALING", "1")
    pygame.display.init()
    audio_queue = _start_audio() if app.use_audio else None
    try:
        _event_loop(app, _open_window(app))
    finally:
        # Closing the window first makes quitting feel responsive.
        pygame.display.quit()
        if audio_queue is not None:
            audio_queue.put(None)