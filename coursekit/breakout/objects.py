"""Sprites with an optional hit counter, and the mouse-driven paddle."""

from __future__ import annotations

import pygame

LABEL_COLOR = (255, 255, 255)


def _rects_intersect(a: tuple[float, float, float, float], b: tuple[float, float, float, float]) -> bool:
    left = max(a[0], b[0])
    right = min(a[0] + a[2], b[0] + b[2])
    top = max(a[1], b[1])
    bottom = min(a[1] + a[3], b[1] + b[3])
    return left < right and top < bottom


class GameObject:
    """A textured object at a position; bricks also show how many hits remain."""

    def __init__(self, texture: pygame.Surface, x: float = 0.0, y: float = 0.0, hits: int | None = None) -> None:
        self.texture = texture
        self.x = float(x)
        self.y = float(y)
        self.hits = 0 if hits is None else hits
        self._labelled = hits is not None

    @property
    def width(self) -> int:
        return self.texture.get_width()

    @property
    def height(self) -> int:
        return self.texture.get_height()

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(left, top, width, height) of the object."""
        return (self.x, self.y, float(self.width), float(self.height))

    @property
    def label(self) -> str | None:
        """The hit counter text, or None for objects that show none."""
        return str(self.hits) if self._labelled else None

    def intersects(self, other: GameObject) -> bool:
        """True when the two objects overlap; touching edges do not count."""
        return _rects_intersect(self.bounds, other.bounds)

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def decrement(self, amount: int = 1) -> None:
        """Take amount off the remaining hits and show the counter."""
        self.hits -= amount
        self._labelled = True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font | None = None) -> None:
        """Draw the texture, and the hit counter centred on it if a font is given."""
        surface.blit(self.texture, (round(self.x), round(self.y)))
        label = self.label
        if label is None or font is None:
            return
        text = font.render(label, True, LABEL_COLOR)
        center = (round(self.x + self.width / 2), round(self.y + self.height / 2))
        surface.blit(text, text.get_rect(center=center))


def follow_mouse(paddle: GameObject, mouse_x: float, window_width: float) -> None:
    """Move the paddle horizontally to the mouse, keeping it inside the window."""
    x = float(mouse_x)
    if x < 0:
        x = 0.0
    elif x > window_width - paddle.width:
        x = float(window_width - paddle.width)
    paddle.set_position(x, paddle.y)