from villagedefense.route import Route
from villagedefense.tile import Direction, Tile


def _row(*tiles):
    return list(tiles)


def test_follows_directions_to_home():
    tile_map = [
        _row(Tile(direction=Direction.RIGHT), Tile(direction=Direction.DOWN)),
        _row(Tile(), Tile(special_flag=0, direction=Direction.LEFT)),
    ]
    route = Route(tile_map, (0, 0))
    assert route.idx_list == [(0, 0), (1, 0), (1, 1)]


def test_stops_on_loop():
    tile_map = [_row(Tile(direction=Direction.RIGHT), Tile(direction=Direction.LEFT))]
    route = Route(tile_map, (0, 0))
    assert route.idx_list == [(0, 0), (1, 0)]


def test_stops_at_map_edge():
    tile_map = [_row(Tile(direction=Direction.UP))]
    route = Route(tile_map, (0, 0))
    assert route.idx_list == [(0, 0)]


def test_stops_without_direction():
    tile_map = [_row(Tile(direction=Direction.RIGHT), Tile(), Tile(direction=Direction.LEFT))]
    route = Route(tile_map, (0, 0))
    assert route.idx_list == [(0, 0), (1, 0)]


def test_origin_outside_map_is_empty():
    tile_map = [_row(Tile())]
    assert Route(tile_map, (5, 0)).idx_list == []