# cubecast

The core of a small first-person ray-casting game, together with the text,
byte and list helpers it relies on. It has no dependencies beyond the
standard library.

## What is inside

- `cubecast.geometry`: the world constants (`WIDTH`, `HEIGHT`, `FOV`,
  `MINIMAP_RATIO`, ...), the `GameMap` grid and `Player`, angle conversions
  (`degrees_to_radians`, `radians_to_degrees`), `entity_size`, `step_sign`,
  tile lookups (`GameMap.tile_width`, `GameMap.tile_height`,
  `GameMap.wall_at`, `GameMap.is_blocked`) and the
  `next_horizontal_intersection` / `next_vertical_intersection` steps that
  move a ray to the next grid line.
- `cubecast.canvas`: a pixel `Canvas` (`set_pixel`, `get_pixel`), plus
  `draw_line`, `draw_rect` and `sprite_screen_column`, which finds the screen
  column whose ray passes a sprite.
- `cubecast.entities`: enemies and projectiles (`Entity`, `EntityKind`,
  `spawn_entities`, `spawn_projectile`, `find_entity_near`).
- `cubecast.minimap`: the overhead map (`wall_rect`, `entity_rect`,
  `draw_walls`, `draw_player`, `draw_entities`).
- `cubecast.keys`: key and mouse codes (`Key`, `MouseButton`, `key_code`).
  Linux platforms use X11 keysyms; every other platform uses macOS key codes.
- `cubecast.lines`: a buffered `LineReader` over file descriptors and
  `get_next_line`, which keeps unread data per descriptor between calls.
- `cubecast.linked`: a singly linked `LinkedList` of `Node`s.
- `cubecast.chars`, `cubecast.numbers`, `cubecast.search`,
  `cubecast.memory`, `cubecast.transform`, `cubecast.output`: ASCII character
  classes, C-width integer parsing and formatting, searching and comparing
  NUL-terminated strings, byte buffers, string transforms (splitting,
  trimming, quote removal) and writing to file descriptors.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

A map, the minimap and wall lookups:

```python
from cubecast.geometry import GameMap, Player
from cubecast.canvas import Canvas
from cubecast.minimap import draw_walls, draw_player

rows = [
    "1111",
    "1$01",
    "1001",
    "1111",
]
game_map = GameMap(rows)
canvas = Canvas()

draw_walls(canvas, game_map)
draw_player(canvas, Player(x=300, y=300))

print(game_map.is_blocked(10, 10))    # True: inside the corner wall
print(game_map.is_blocked(300, 300))  # False: open floor
```

Enemies are placed on every `$` tile:

```python
from cubecast.entities import spawn_entities, find_entity_near

entities = spawn_entities(game_map)
print(entities[0].x, entities[0].y)             # 200.0 162.0
print(find_entity_near(entities, 201, 163))     # 0, and entities[0].seen is now True
```

Key codes:

```python
from cubecast.keys import Key, key_code

print(key_code(Key.ESC, "linux"))   # 65307
print(key_code("esc", "darwin"))    # 53
```

Reading a file line by line:

```python
import os
from cubecast.lines import LineReader

fd = os.open("level.cub", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line, end="")
finally:
    os.close(fd)
```

## What it does not do

cubecast is a library of building blocks, not a playable game. It opens no
window, has no game loop or input handling, provides no command to run, does
not parse level files into a `GameMap`, loads no textures or sprite images,
and does not render the first-person 3D view. The `Canvas` is an in-memory
pixel buffer; displaying it is left to the caller.