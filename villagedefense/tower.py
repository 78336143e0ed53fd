"""Defence towers that pick a target on the route and fire at it."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple

from villagedefense.animation import Animation
from villagedefense.config import GameConfig, TowerTemplate
from villagedefense.tile import SIZE_TILE
from villagedefense.timer import Timer
from villagedefense.vector2 import Vector2

FRAME_INTERVAL = 0.2


class Facing(Enum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


class TowerType(Enum):
    ARCHER = 0
    AXEMAN = 1
    GUNNER = 2


class BulletType(Enum):
    ARROW = 0
    AXE = 1
    SHELL = 2


_TOWER_ATTRS = {
    TowerType.ARCHER: ("archer_template", "level_archer"),
    TowerType.AXEMAN: ("axeman_template", "level_axeman"),
    TowerType.GUNNER: ("gunner_template", "level_gunner"),
}


def _template_and_level(config: GameConfig, tower_type: TowerType) -> Tuple[TowerTemplate, int]:
    template_attr, level_attr = _TOWER_ATTRS[tower_type]
    return getattr(config, template_attr), getattr(config, level_attr)


@dataclass
class Shot:
    """A bullet fired by a tower."""

    bullet_type: BulletType
    position: Vector2
    velocity: Vector2
    damage: float


class Tower:
    """A tower that fires at the furthest-advanced enemy within its view range.

    Enemies passed in need a ``position`` and a ``route_progress()`` method.
    """

    TOWER_TYPE = TowerType.ARCHER
    BULLET_TYPE = BulletType.ARROW
    FIRE_SPEED = 0.0
    SHEET_COLUMNS = 3
    SHEET_ROWS = 8
    FRAME_INDICES: Dict[Tuple[str, Facing], Sequence[int]] = {}

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.size = Vector2(48.0, 48.0)
        self.position = Vector2()
        self.tower_type = self.TOWER_TYPE
        self.bullet_type = self.BULLET_TYPE
        self.fire_speed = self.FIRE_SPEED
        self.can_fire = True
        self.facing = Facing.RIGHT
        self.on_shot: Optional[Callable[[Shot], None]] = None

        self._timer_fire = Timer(one_shot=True, callback=self._enable_fire)
        self.animations: Dict[Tuple[str, Facing], Animation] = self._build_animations()
        self.current_animation: Optional[Animation] = self.animations.get(("idle", Facing.RIGHT))

    def _build_animations(self) -> Dict[Tuple[str, Facing], Animation]:
        sheet_size = (
            int(self.size.x) * self.SHEET_COLUMNS,
            int(self.size.y) * self.SHEET_ROWS,
        )
        animations = {}
        for (state, facing), indices in self.FRAME_INDICES.items():
            anim = Animation()
            anim.loop = True
            anim.interval = FRAME_INTERVAL
            if state == "fire":
                anim.on_finish = self._update_idle_animation
            anim.set_frame_data(sheet_size, self.SHEET_COLUMNS, self.SHEET_ROWS, indices)
            animations[(state, facing)] = anim
        return animations

    def _enable_fire(self) -> None:
        self.can_fire = True

    def _update_idle_animation(self) -> None:
        self.current_animation = self.animations.get(("idle", self.facing))

    def _update_fire_animation(self) -> None:
        self.current_animation = self.animations.get(("fire", self.facing))

    def find_target_enemy(self, enemies: Iterable):
        """Return the enemy in view that is furthest along its route, or None."""
        template, level = _template_and_level(self.config, self.tower_type)
        reach = template.view_range[level] * SIZE_TILE
        target = None
        max_progress = -1.0
        for enemy in enemies:
            if (enemy.position - self.position).length() <= reach:
                progress = enemy.route_progress()
                if progress > max_progress:
                    max_progress = progress
                    target = enemy
        return target

    def on_fire(self, enemies: Iterable) -> Optional[Shot]:
        """Fire at a target if one is in view; return the shot fired."""
        target = self.find_target_enemy(enemies)
        if target is None:
            return None

        self.can_fire = False
        template, level = _template_and_level(self.config, self.tower_type)
        self._timer_fire.wait_time = template.interval[level]
        self._timer_fire.restart()

        direction = target.position - self.position
        shot = Shot(
            bullet_type=self.bullet_type,
            position=Vector2(self.position.x, self.position.y),
            velocity=direction.normalize() * (self.fire_speed * SIZE_TILE),
            damage=template.damage[level],
        )

        if abs(direction.x) >= abs(direction.y):
            self.facing = Facing.RIGHT if direction.x > 0 else Facing.LEFT
        else:
            self.facing = Facing.DOWN if direction.y > 0 else Facing.UP
        self._update_fire_animation()
        if self.current_animation is not None:
            self.current_animation.reset()

        if self.on_shot is not None:
            self.on_shot(shot)
        return shot

    def on_update(self, delta: float, enemies: Iterable) -> Optional[Shot]:
        """Advance the reload timer and animation; fire when ready."""
        self._timer_fire.on_update(delta)
        if self.current_animation is not None:
            self.current_animation.on_update(delta)
        if self.can_fire:
            return self.on_fire(enemies)
        return None


class ArcherTower(Tower):
    TOWER_TYPE = TowerType.ARCHER
    BULLET_TYPE = BulletType.ARROW
    FIRE_SPEED = 6.0
    SHEET_COLUMNS = 3
    SHEET_ROWS = 8
    FRAME_INDICES = {
        ("idle", Facing.UP): (3, 4),
        ("idle", Facing.DOWN): (0, 1),
        ("idle", Facing.LEFT): (6, 7),
        ("idle", Facing.RIGHT): (9, 10),
        ("fire", Facing.UP): (15, 16, 17),
        ("fire", Facing.DOWN): (12, 13, 14),
        ("fire", Facing.LEFT): (18, 19, 20),
        ("fire", Facing.RIGHT): (21, 22, 23),
    }


class AxemanTower(Tower):
    TOWER_TYPE = TowerType.AXEMAN
    BULLET_TYPE = BulletType.AXE
    FIRE_SPEED = 5.0
    SHEET_COLUMNS = 3
    SHEET_ROWS = 8
    FRAME_INDICES = {
        ("idle", Facing.UP): (3, 4),
        ("idle", Facing.DOWN): (0, 1),
        ("idle", Facing.RIGHT): (6, 7),
        ("idle", Facing.LEFT): (9, 10),
        ("fire", Facing.UP): (15, 16, 17),
        ("fire", Facing.DOWN): (12, 13, 14),
        ("fire", Facing.RIGHT): (18, 19, 20),
        ("fire", Facing.LEFT): (21, 22, 23),
    }


class GunnerTower(Tower):
    TOWER_TYPE = TowerType.GUNNER
    BULLET_TYPE = BulletType.SHELL
    FIRE_SPEED = 6.0
    SHEET_COLUMNS = 4
    SHEET_ROWS = 8
    FRAME_INDICES = {
        ("idle", Facing.UP): (4, 5),
        ("idle", Facing.DOWN): (0, 1),
        ("idle", Facing.LEFT): (12, 13),
        ("idle", Facing.RIGHT): (8, 9),
        ("fire", Facing.UP): (20, 21, 22, 23),
        ("fire", Facing.DOWN): (16, 17, 18, 19),
        ("fire", Facing.LEFT): (28, 29, 30, 31),
        ("fire", Facing.RIGHT): (24, 25, 26, 27),
    }