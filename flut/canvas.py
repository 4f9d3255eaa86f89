"""A drawing surface with a save/restore transform stack."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from flut.widgets.core import Rect

_Transform = tuple[float, float, float, float]
_IDENTITY: _Transform = (1.0, 1.0, 0.0, 0.0)


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    left, top = round(rect.x), round(rect.y)
    return pygame.Rect(left, top, round(rect.right) - left, round(rect.bottom) - top)


class Canvas:
    """Draws onto a pygame surface through a scale-and-translate transform."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._transform: _Transform = _IDENTITY
        self._saved: list[_Transform] = []

    def save(self) -> None:
        """Push the current transform."""
        self._saved.append(self._transform)

    def restore(self) -> None:
        """Pop the last saved transform; does nothing if none is saved."""
        if self._saved:
            self._transform = self._saved.pop()

    def translate(self, dx: float, dy: float) -> None:
        sx, sy, tx, ty = self._transform
        self._transform = (sx, sy, tx + sx * dx, ty + sy * dy)

    def scale(self, sx: float, sy: float | None = None) -> None:
        if sy is None:
            sy = sx
        csx, csy, tx, ty = self._transform
        self._transform = (csx * sx, csy * sy, tx, ty)

    def _map_point(self, x: float, y: float) -> tuple[float, float]:
        sx, sy, tx, ty = self._transform
        return x * sx + tx, y * sy + ty

    def map_rect(self, rect: Rect) -> Rect:
        """Map a rectangle through the current transform."""
        x1, y1 = self._map_point(rect.x, rect.y)
        x2, y2 = self._map_point(rect.right, rect.bottom)
        left, top = min(x1, x2), min(y1, y2)
        return Rect(left, top, abs(x2 - x1), abs(y2 - y1))

    def clear(self, color: Sequence[int]) -> None:
        self.surface.fill(pygame.Color(*color))

    def draw_rrect(self, rect: Rect, radius: float, color: Sequence[int]) -> None:
        """Fill a rounded rectangle."""
        rgba = pygame.Color(*color)
        if rgba.a == 0:
            return
        area = _to_pygame_rect(self.map_rect(rect))
        if area.width <= 0 or area.height <= 0:
            return
        sx, sy, _, _ = self._transform
        border_radius = max(0, round(radius * min(abs(sx), abs(sy))))
        if rgba.a == 255:
            pygame.draw.rect(self.surface, rgba, area, border_radius=border_radius)
            return
        layer = pygame.Surface(area.size, pygame.SRCALPHA)
        pygame.draw.rect(layer, rgba, layer.get_rect(), border_radius=border_radius)
        self.surface.blit(layer, area.topleft)

    def draw_text(
        self,
        text: str,
        position: tuple[float, float],
        font: pygame.font.Font,
        color: Sequence[int],
    ) -> None:
        """Render ``text`` with its top-left corner at ``position``."""
        rgba = pygame.Color(*color)
        if not text or rgba.a == 0:
            return
        image = font.render(text, True, (rgba.r, rgba.g, rgba.b))
        sx, sy, _, _ = self._transform
        if (sx, sy) != (1.0, 1.0):
            width = round(image.get_width() * abs(sx))
            height = round(image.get_height() * abs(sy))
            if width <= 0 or height <= 0:
                return
            image = pygame.transform.smoothscale(image, (width, height))
        if rgba.a < 255:
            image.set_alpha(rgba.a)
        x, y = self._map_point(*position)
        self.surface.blit(image, (round(x), round(y)))