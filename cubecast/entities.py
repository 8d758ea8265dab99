"""Game entities: enemies placed on the map and the projectiles the player fires."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, List, Optional

from cubecast.geometry import GameMap

ENEMY_TILE = "$"
MAX_ENTITIES = 100
NEAR_DISTANCE = 5


class EntityKind(enum.IntEnum):
    """What an entity is."""

    ENEMY = 1
    PROJECTILE = 2


@dataclass
class Entity:
    """Something that lives in the world besides walls and the player.

    ``frame`` is the animation frame of an enemy's sprite; ``direction`` is
    the heading of a projectile in degrees.
    """

    kind: EntityKind
    x: float
    y: float
    sprite: Any = None
    frame: int = 0
    direction: float = 0.0
    destroyed: bool = False
    killed: bool = False
    seen: bool = False


def spawn_entities(game_map: GameMap) -> List[Entity]:
    """One enemy for every ``$`` tile, scanned row by row, at the tile's corner."""
    tile_w, tile_h = game_map.tile_width(), game_map.tile_height()
    entities: List[Entity] = []
    for ty, row in enumerate(game_map.rows[: game_map.height]):
        for tx, cell in enumerate(row[: game_map.width]):
            if cell != ENEMY_TILE:
                continue
            if len(entities) >= MAX_ENTITIES:
                raise OverflowError(f"a map may hold at most {MAX_ENTITIES} entities")
            entities.append(Entity(EntityKind.ENEMY, float(tx * tile_w), float(ty * tile_h)))
    return entities


def spawn_projectile(
    entities: List[Entity], x: int, y: int, direction: float, sprite: Any = None
) -> Entity:
    """Append a projectile at ``(x, y)`` heading ``direction`` degrees and return it."""
    if len(entities) >= MAX_ENTITIES:
        raise OverflowError(f"no room for more than {MAX_ENTITIES} entities")
    projectile = Entity(
        EntityKind.PROJECTILE, float(x), float(y), sprite=sprite, direction=direction
    )
    entities.append(projectile)
    return projectile


def find_entity_near(entities: List[Entity], px: float, py: float) -> Optional[int]:
    """Index of the first live entity within 5 units of ``(px, py)``, or ``None``.

    The point is truncated to whole units first. The entity found is marked
    as seen.
    """
    ix, iy = int(px), int(py)
    for index, entity in enumerate(entities):
        if entity.destroyed:
            continue
        if (
            entity.x - NEAR_DISTANCE < ix < entity.x + NEAR_DISTANCE
            and entity.y - NEAR_DISTANCE < iy < entity.y + NEAR_DISTANCE
        ):
            entity.seen = True
            return index
    return None