"""Tile maps loaded from comma-separated text."""

from villagedefense.route import Route
from villagedefense.tile import parse_tile


class MapError(Exception):
    """Raised when a map cannot be read or is empty."""


class GameMap:
    """A grid of tiles with its home position and spawner routes."""

    def __init__(self) -> None:
        self.tile_map: list = []
        self.home_point = (0, 0)
        self.spawner_route_pool: dict = {}

    def load(self, path) -> None:
        """Load a map from a file; raise MapError on failure."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise MapError(f"cannot read map file {path}") from exc
        self.parse(text)

    def parse(self, text: str) -> None:
        """Replace the map with the one described by ``text``."""
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        tile_map = []
        for line in lines:
            line = line.strip("\t")
            if not line:
                continue
            cells = line.split(",")
            if cells and cells[-1] == "":
                cells.pop()
            tile_map.append([parse_tile(cell) for cell in cells])

        if not tile_map or not tile_map[0]:
            raise MapError("map is empty")

        self.tile_map = tile_map
        self._generate_map_cache()

    def _generate_map_cache(self) -> None:
        self.spawner_route_pool = {}
        for y, row in enumerate(self.tile_map):
            for x, tile in enumerate(row):
                if tile.special_flag < 0:
                    continue
                if tile.special_flag == 0:
                    self.home_point = (x, y)
                else:
                    self.spawner_route_pool[tile.special_flag] = Route(self.tile_map, (x, y))

    @property
    def width(self) -> int:
        return len(self.tile_map[0]) if self.tile_map else 0

    @property
    def height(self) -> int:
        return len(self.tile_map)

    def place_tower(self, idx) -> None:
        x, y = idx
        self.tile_map[y][x].has_tower = True