"""Screen constants, angle helpers, the tile map and grid-line stepping for rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

WIDTH = 800
HEIGHT = 650
FOV = 60
TEXTURE_HEIGHT = 64
TEXTURE_WIDTH = 64
MINIMAP_RATIO = 3

NORTH = 0
SOUTH = 1
EAST = 2
WEST = 3

WALL_TILES = "1P"


def degrees_to_radians(a: float) -> float:
    """Convert degrees to radians."""
    return a * math.pi / 180.0


def radians_to_degrees(a: float) -> float:
    """Convert radians to degrees."""
    return a * 180.0 / math.pi


def entity_size(kind: int) -> float:
    """Sprite scale for an entity kind: enemies (kind 1) are drawn smaller."""
    return 0.4 if kind == 1 else 1.2


def step_sign(a: int, b: int) -> int:
    """1 when stepping from ``a`` towards a larger ``b``, otherwise -1."""
    return 1 if a < b else -1


def _c_mod(a: int, b: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields an infinity instead of raising on zero."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass
class Player:
    """The player's position in screen units and view rotation in degrees."""

    x: int
    y: int
    rot: float = 0.0
    fov: int = FOV
    health: int = 100


@dataclass
class GameMap:
    """A grid of tile characters laid over the ``WIDTH`` x ``HEIGHT`` world.

    ``width`` and ``height`` default to the longest row and the number of
    rows. Rows shorter than ``width`` read as open floor past their end.
    """

    rows: List[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    floor: int = 0
    ceiling: int = 0

    def __post_init__(self) -> None:
        self.rows = list(self.rows)
        if not self.width:
            self.width = max((len(row) for row in self.rows), default=0)
        if not self.height:
            self.height = len(self.rows)
        if self.width <= 0 or self.height <= 0:
            raise ValueError("a map needs at least one row and one column")
        if self.width > WIDTH or self.height > HEIGHT:
            raise ValueError(
                f"a {self.width}x{self.height} map is larger than the {WIDTH}x{HEIGHT} world"
            )

    def tile_width(self) -> int:
        """Width of one tile in world units."""
        return WIDTH // self.width

    def tile_height(self) -> int:
        """Height of one tile in world units."""
        return HEIGHT // self.height

    def _cell(self, tx: int, ty: int) -> str:
        if ty >= len(self.rows):
            return ""
        row = self.rows[ty]
        return row[tx] if tx < len(row) else ""

    def _tile_of(self, px: float, py: float) -> Optional[Tuple[int, int]]:
        ix, iy = int(px), int(py)
        if ix > WIDTH or iy > HEIGHT or ix < 0 or iy < 0:
            return None
        tx, ty = ix // self.tile_width(), iy // self.tile_height()
        if tx >= self.width or ty >= self.height:
            return None
        return tx, ty

    def wall_at(self, px: float, py: float) -> Optional[str]:
        """The wall character at world position ``(px, py)``, or ``None``.

        Positions outside the grid have no wall character.
        """
        tile = self._tile_of(px, py)
        if tile is None:
            return None
        cell = self._cell(*tile)
        return cell if cell and cell in WALL_TILES else None

    def is_blocked(self, px: float, py: float) -> bool:
        """True for a wall or door tile and for any point outside the grid."""
        if self._tile_of(px, py) is None:
            return True
        return self.wall_at(px, py) is not None


def next_horizontal_intersection(
    alpha: float, x: float, y: float, game_map: GameMap
) -> Tuple[float, float]:
    """Where a ray at ``alpha`` degrees from ``(x, y)`` next meets a horizontal grid line.

    Upward rays stop just above the line so the point lies in the next tile.
    """
    tick = game_map.tile_height()
    if math.sin(degrees_to_radians(alpha)) > 0:
        ny = float(y - _c_mod(int(y), tick)) - 0.1
    else:
        ny = y + float(tick - _c_mod(int(y), tick))
    nx = x + _divide(y - ny, math.tan(degrees_to_radians(alpha)))
    return nx, ny


def next_vertical_intersection(
    alpha: float, x: float, y: float, game_map: GameMap
) -> Tuple[float, float]:
    """Where a ray at ``alpha`` degrees from ``(x, y)`` next meets a vertical grid line.

    Leftward rays stop just left of the line so the point lies in the next tile.
    """
    tick = game_map.tile_width()
    if math.cos(degrees_to_radians(alpha)) < 0:
        nx = float(x - _c_mod(int(x), tick)) - 0.1
    else:
        nx = x + float(tick - _c_mod(int(x), tick))
    ny = y + (x - nx) * math.tan(degrees_to_radians(alpha))
    return nx, ny