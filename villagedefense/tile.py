"""Map tiles and their text encoding."""

import re
from dataclasses import dataclass
from enum import IntEnum

SIZE_TILE = 48

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Direction(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


@dataclass
class Tile:
    """One map cell.

    ``special_flag`` is -1 for nothing, 0 for the home, 1-9 for spawn points.
    """

    terrain: int = 0
    decoration: int = -1
    direction: Direction = Direction.NONE
    special_flag: int = -1
    has_tower: bool = False


def _split_fields(text: str, sep: str) -> list:
    parts = text.split(sep)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else -1


def parse_tile(text: str) -> Tile:
    """Parse ``terrain\\decoration\\direction\\flag`` into a tile."""
    values = [_to_int(part) for part in _split_fields(text.strip("\t"), "\\")]

    terrain = 0 if not values or values[0] < 0 else values[0]
    decoration = values[1] if len(values) >= 2 else -1
    raw_direction = values[2] if len(values) >= 3 and values[2] >= 0 else 0
    try:
        direction = Direction(raw_direction)
    except ValueError:
        direction = Direction.NONE
    special_flag = values[3] if len(values) > 3 else -1

    return Tile(
        terrain=terrain,
        decoration=decoration,
        direction=direction,
        special_flag=special_flag,
    )