"""Enemy paths traced along tile directions."""

from villagedefense.tile import Direction

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Route:
    """Tile indices from a spawn point following tile directions.

    The path stops at the home tile, at a tile without a direction, at the
    map edge, or when it would revisit a tile.
    """

    def __init__(self, tile_map, origin) -> None:
        self.idx_list: list = []
        visited = set()
        x, y = origin
        while 0 <= y < len(tile_map) and 0 <= x < len(tile_map[y]):
            if (x, y) in visited:
                break
            visited.add((x, y))
            self.idx_list.append((x, y))

            tile = tile_map[y][x]
            if tile.special_flag == 0:
                break
            step = _STEPS.get(tile.direction)
            if step is None:
                break
            x, y = x + step[0], y + step[1]