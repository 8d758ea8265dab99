"""A pixel buffer with line and rectangle drawing, and sprite ray matching."""

from __future__ import annotations

import math
from typing import List, Optional

from cubecast.geometry import (
    FOV,
    HEIGHT,
    WIDTH,
    Player,
    degrees_to_radians,
    step_sign,
)


class Canvas:
    """A ``width`` x ``height`` grid of 0xRRGGBB colours, initially black."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels: List[int] = [0] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Paint one pixel; points off the canvas are ignored."""
        x, y = int(x), int(y)
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The colour at ``(x, y)``; raises ``IndexError`` off the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return self._pixels[y * self.width + x]


def draw_line(canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Draw from ``(x0, y0)`` towards ``(x1, y1)``, leaving the end point unpainted."""
    dx = abs(x1 - x0)
    sx = step_sign(x0, x1)
    dy = -abs(y1 - y0)
    sy = step_sign(y0, y1)
    err = dx + dy
    x, y = x0, y0
    while not (x == x1 and y == y1):
        canvas.set_pixel(x, y, color)
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def draw_rect(canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Fill columns ``x0..x1-1`` of rows ``y0..y1-1``.

    Nothing is drawn when the corners are inverted or the rectangle starts
    past the canvas.
    """
    if x1 < x0 or y1 < y0 or x0 > canvas.width or y0 > canvas.height:
        return
    for y in range(y0, y1):
        draw_line(canvas, x0, y, x1, y, color)


def sprite_screen_column(player: Player, sprite_x: float, sprite_y: float) -> Optional[int]:
    """The screen column whose ray first passes within 2 units of the sprite.

    One ray is cast per column across the field of view, marching a unit at a
    time until it leaves the world. Returns ``None`` when no ray reaches it.
    """
    step = FOV / WIDTH
    a = 0.001
    column = 0
    while a < FOV:
        angle = degrees_to_radians((a - player.rot) - 60)
        cx, cy = math.cos(angle), math.sin(angle)
        px, py = float(player.x), float(player.y)
        while not (px < 0.0 or int(px) > WIDTH or int(py) > HEIGHT or py < 0.0):
            if sprite_x - 2 < px < sprite_x + 2 and sprite_y - 2 < py < sprite_y + 2:
                return column
            px += cx
            py += cy
        column += 1
        a += step
    return None