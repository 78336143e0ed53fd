"""Placement, upgrading and updating of towers."""

from typing import Callable, Iterable, List, Optional

from villagedefense.config import GameConfig, TOWER_LEVELS
from villagedefense.tile import SIZE_TILE
from villagedefense.tower import (
    ArcherTower,
    AxemanTower,
    GunnerTower,
    Shot,
    Tower,
    TowerType,
    _TOWER_ATTRS,
    _template_and_level,
)
from villagedefense.vector2 import Vector2

MAX_LEVEL = TOWER_LEVELS - 1

_TOWER_CLASSES = {
    TowerType.ARCHER: ArcherTower,
    TowerType.AXEMAN: AxemanTower,
    TowerType.GUNNER: GunnerTower,
}


class TowerManager:
    """Owns the placed towers and the shared tower levels in the config."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.tower_list: List[Tower] = []
        self.on_place: Optional[Callable[[Tower], None]] = None
        self.on_upgrade: Optional[Callable[[TowerType], None]] = None

    def place_cost(self, tower_type: TowerType) -> float:
        template, level = _template_and_level(self.config, tower_type)
        return template.cost[level]

    def upgrade_cost(self, tower_type: TowerType) -> float:
        """Cost of the next level, or -1 at the top level."""
        template, level = _template_and_level(self.config, tower_type)
        if level == MAX_LEVEL:
            return -1
        return template.upgrade_cost[level]

    def damage_range(self, tower_type: TowerType) -> float:
        template, level = _template_and_level(self.config, tower_type)
        return template.view_range[level]

    def place_tower(self, tower_type: TowerType, idx) -> Tower:
        """Build a tower on tile ``idx`` and mark the tile as occupied."""
        tower = _TOWER_CLASSES.get(tower_type, ArcherTower)(self.config)
        x, y = idx
        rect_x, rect_y = self.config.rect_tile_map[0], self.config.rect_tile_map[1]
        tower.position = Vector2(
            float(rect_x + x * SIZE_TILE + SIZE_TILE // 2),
            float(rect_y + y * SIZE_TILE + SIZE_TILE // 2),
        )
        self.tower_list.append(tower)
        self.config.map.place_tower(idx)
        if self.on_place is not None:
            self.on_place(tower)
        return tower

    def upgrade_tower(self, tower_type: TowerType) -> None:
        """Raise the level of every tower of ``tower_type``, up to the top level."""
        _, level_attr = _TOWER_ATTRS[tower_type]
        level = getattr(self.config, level_attr)
        setattr(self.config, level_attr, min(level + 1, MAX_LEVEL))
        if self.on_upgrade is not None:
            self.on_upgrade(tower_type)

    def on_update(self, delta: float, enemies: Iterable) -> List[Shot]:
        """Update every tower and return the shots fired this frame."""
        enemies = list(enemies)
        shots = []
        for tower in self.tower_list:
            shot = tower.on_update(delta, enemies)
            if shot is not None:
                shots.append(shot)
        return shots