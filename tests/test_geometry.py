import math

import pytest

from cubecast.geometry import (
    HEIGHT,
    WIDTH,
    GameMap,
    Player,
    degrees_to_radians,
    entity_size,
    next_horizontal_intersection,
    next_vertical_intersection,
    radians_to_degrees,
    step_sign,
)


@pytest.fixture
def game_map():
    return GameMap(["1111", "1001", "1P01", "1111"])


def _tile_center(game_map, tx, ty):
    return (
        tx * game_map.tile_width() + game_map.tile_width() // 2,
        ty * game_map.tile_height() + game_map.tile_height() // 2,
    )


def test_degrees_to_radians_half_turn():
    assert degrees_to_radians(180) == pytest.approx(math.pi)


@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, -45.0, 359.5])
def test_angle_round_trip(angle):
    assert radians_to_degrees(degrees_to_radians(angle)) == pytest.approx(angle)


def test_entity_size_values():
    assert entity_size(1) == pytest.approx(0.4)
    assert entity_size(2) == pytest.approx(1.2)
    assert entity_size(7) == pytest.approx(1.2)


@pytest.mark.parametrize("a,b,expected", [(1, 2, 1), (2, 1, -1), (3, 3, -1)])
def test_step_sign(a, b, expected):
    assert step_sign(a, b) == expected


def test_map_dimensions_default_from_rows(game_map):
    assert (game_map.width, game_map.height) == (4, 4)


def test_tile_sizes_cover_world(game_map):
    assert WIDTH - game_map.width < game_map.tile_width() * game_map.width <= WIDTH
    assert HEIGHT - game_map.height < game_map.tile_height() * game_map.height <= HEIGHT


def test_wall_at_reports_tile_character(game_map):
    assert game_map.wall_at(*_tile_center(game_map, 0, 0)) == "1"
    assert game_map.wall_at(*_tile_center(game_map, 1, 2)) == "P"
    assert game_map.wall_at(*_tile_center(game_map, 1, 1)) is None


def test_is_blocked_inside_grid(game_map):
    assert game_map.is_blocked(*_tile_center(game_map, 0, 0)) is True
    assert game_map.is_blocked(*_tile_center(game_map, 1, 2)) is True
    assert game_map.is_blocked(*_tile_center(game_map, 2, 1)) is False


@pytest.mark.parametrize("px,py", [(-1, 10), (10, -1), (WIDTH + 1, 10), (10, HEIGHT + 1)])
def test_outside_world_is_blocked(game_map, px, py):
    assert game_map.is_blocked(px, py) is True
    assert game_map.wall_at(px, py) is None


def test_past_last_tile_is_blocked():
    wide = GameMap(["00", "00"])
    assert wide.is_blocked(WIDTH, 10) is True
    assert wide.is_blocked(WIDTH - 1, 10) is False


def test_short_rows_read_as_open():
    ragged = GameMap(["111", "1"])
    assert ragged.width == 3
    x, y = _tile_center(ragged, 2, 1)
    assert ragged.is_blocked(x, y) is False


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        GameMap([])


def test_player_defaults():
    player = Player(x=5, y=6)
    assert (player.x, player.y, player.rot, player.fov) == (5, 6, 0.0, 60)


def test_horizontal_intersection_upward(game_map):
    x, y = 250.0, 250.0
    nx, ny = next_horizontal_intersection(90, x, y, game_map)
    k = (ny + 0.1) / game_map.tile_height()
    assert k == pytest.approx(round(k))
    assert ny < y
    assert nx == pytest.approx(x)


def test_horizontal_intersection_downward(game_map):
    x, y = 250.0, 250.0
    nx, ny = next_horizontal_intersection(270, x, y, game_map)
    assert ny % game_map.tile_height() == 0
    assert y < ny <= y + game_map.tile_height()
    assert nx == pytest.approx(x)


def test_horizontal_intersection_follows_diagonal(game_map):
    x, y = 250.0, 250.0
    nx, ny = next_horizontal_intersection(45, x, y, game_map)
    assert nx - x == pytest.approx(y - ny)


def test_horizontal_intersection_flat_ray_is_infinite(game_map):
    nx, ny = next_horizontal_intersection(0, 250.0, 250.0, game_map)
    assert abs(nx) == math.inf
    assert ny % game_map.tile_height() == 0


def test_vertical_intersection_rightward(game_map):
    x, y = 250.0, 250.0
    nx, ny = next_vertical_intersection(0, x, y, game_map)
    assert nx % game_map.tile_width() == 0
    assert x < nx <= x + game_map.tile_width()
    assert ny == y


def test_vertical_intersection_leftward(game_map):
    x, y = 250.0, 250.0
    nx, ny = next_vertical_intersection(180, x, y, game_map)
    k = (nx + 0.1) / game_map.tile_width()
    assert k == pytest.approx(round(k))
    assert nx < x
    assert ny == pytest.approx(y)


def test_vertical_intersection_follows_diagonal(game_map):
    x, y = 250.0, 250.0
    nx, ny = next_vertical_intersection(45, x, y, game_map)
    assert nx - x == pytest.approx(y - ny)