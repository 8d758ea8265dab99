"""The top-down minimap: walls, doors, the player and entities as small rectangles."""

from __future__ import annotations

from typing import Iterable, Tuple

from cubecast.canvas import Canvas, draw_rect
from cubecast.entities import Entity, EntityKind
from cubecast.geometry import MINIMAP_RATIO, WALL_TILES, GameMap, Player

PLAYER_COLOR = 0x00FFFF
WALL_COLOR = 0xFFFFFF
DOOR_COLOR = 0xAAAAAA
PROJECTILE_COLOR = 0x222222
ENEMY_COLOR = 0xFFFF00

PLAYER_SIZE = 4
PROJECTILE_SIZE = 2
ENEMY_SIZE = 5

Rect = Tuple[int, int, int, int]


def _scaled(value: int) -> int:
    """Divide by the minimap ratio, truncating toward zero."""
    quotient = abs(value) // MINIMAP_RATIO
    return -quotient if value < 0 else quotient


def wall_rect(game_map: GameMap, x: int, y: int) -> Rect:
    """Minimap corners ``(x0, y0, x1, y1)`` of the tile at column ``x``, row ``y``."""
    tile_w, tile_h = game_map.tile_width(), game_map.tile_height()
    return (
        _scaled(x * tile_w),
        _scaled(y * tile_h),
        _scaled((x + 1) * tile_w),
        _scaled((y + 1) * tile_h),
    )


def entity_rect(entity: Entity, size: int) -> Rect:
    """Minimap corners of a ``size``-pixel square at the entity's position."""
    x0, y0 = _scaled(int(entity.x)), _scaled(int(entity.y))
    return x0, y0, x0 + size, y0 + size


def draw_player(canvas: Canvas, player: Player) -> None:
    """Draw the player as a small cyan square."""
    x0, y0 = _scaled(int(player.x)), _scaled(int(player.y))
    draw_rect(canvas, x0, y0, x0 + PLAYER_SIZE, y0 + PLAYER_SIZE, PLAYER_COLOR)


def draw_walls(canvas: Canvas, game_map: GameMap) -> None:
    """Draw wall tiles in white and door tiles in grey."""
    for y, row in enumerate(game_map.rows[: game_map.height]):
        for x, cell in enumerate(row[: game_map.width]):
            if cell not in WALL_TILES:
                continue
            color = DOOR_COLOR if cell == "P" else WALL_COLOR
            draw_rect(canvas, *wall_rect(game_map, x, y), color)


def draw_entities(canvas: Canvas, player: Player, entities: Iterable[Entity]) -> None:
    """Draw the player, then every entity: projectiles small and dark, others yellow."""
    draw_player(canvas, player)
    for entity in entities:
        if entity.kind == EntityKind.PROJECTILE:
            color, size = PROJECTILE_COLOR, PROJECTILE_SIZE
        else:
            color, size = ENEMY_COLOR, ENEMY_SIZE
        draw_rect(canvas, *entity_rect(entity, size), color)