"""Sound playback service fed by a stream of requests."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from flut.models import PlaySound


def _open_mixer() -> None:
    if pygame.mixer.get_init():
        return
    try:
        pygame.mixer.init(frequency=48000, size=32, channels=2, buffer=2048)
    except pygame.error:
        pass


def _load(file_path: str) -> pygame.mixer.Sound | None:
    try:
        return pygame.mixer.Sound(file_path)
    except (pygame.error, OSError):
        return None


def serve(requests: Iterable[PlaySound]) -> dict[str, pygame.mixer.Sound | None]:
    """Play each requested sound, loading every file once; return the sound cache.

    Files that fail to load are cached as None and silently skipped.
    """
    _open_mixer()
    sounds: dict[str, pygame.mixer.Sound | None] = {}
    for request in requests:
        if request.file_path not in sounds:
            sounds[request.file_path] = _load(request.file_path)
        sound = sounds[request.file_path]
        if sound is not None:
            try:
                sound.play()
            except pygame.error:
                pass
    return sounds