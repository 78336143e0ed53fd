"""Mapping between screen positions and map tiles, and placement rules."""

from typing import Optional, Sequence, Tuple

from villagedefense.tile import SIZE_TILE, Direction
from villagedefense.tilemap import GameMap


def cursor_tile_index(
    game_map: GameMap,
    rect_tile_map: Sequence[int],
    screen_x: int,
    screen_y: int,
) -> Optional[Tuple[int, int]]:
    """Return the tile index under a screen point, or None off the map.

    Points on the right or bottom edge of the map belong to the last column
    or row.
    """
    rect_x, rect_y, rect_w, rect_h = rect_tile_map
    if not (rect_x <= screen_x <= rect_x + rect_w and rect_y <= screen_y <= rect_y + rect_h):
        return None
    idx_x = min((screen_x - rect_x) // SIZE_TILE, game_map.width - 1)
    idx_y = min((screen_y - rect_y) // SIZE_TILE, game_map.height - 1)
    return (idx_x, idx_y)


def can_place_tower(game_map: GameMap, idx: Tuple[int, int]) -> bool:
    """A tower fits on a tile without decoration, route direction or tower."""
    x, y = idx
    tile = game_map.tile_map[y][x]
    return tile.decoration < 0 and tile.direction == Direction.NONE and not tile.has_tower


def tile_center(rect_tile_map: Sequence[int], idx: Tuple[int, int]) -> Tuple[int, int]:
    """Screen position of the centre of tile ``idx``."""
    x, y = idx
    return (
        rect_tile_map[0] + x * SIZE_TILE + SIZE_TILE // 2,
        rect_tile_map[1] + y * SIZE_TILE + SIZE_TILE // 2,
    )


def is_home(game_map: GameMap, idx: Tuple[int, int]) -> bool:
    """True when ``idx`` is the home tile."""
    return tuple(idx) == tuple(game_map.home_point)