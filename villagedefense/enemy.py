"""Enemies that walk a route towards the home tile."""

from typing import Callable, Dict, Optional, Sequence, Tuple

from villagedefense.animation import Animation
from villagedefense.config import EnemyTemplate, EnemyType, GameConfig
from villagedefense.route import Route
from villagedefense.tile import SIZE_TILE
from villagedefense.timer import Timer
from villagedefense.vector2 import Vector2

SKETCH_DURATION = 0.075
SLOW_DOWN_AMOUNT = 0.5
SLOW_DOWN_DURATION = 1.0
FRAME_INTERVAL = 0.1

_FACINGS = ("up", "down", "left", "right")


class Enemy:
    """A walking enemy with hit points, a route and a periodic skill.

    Speed is in tiles per second. Positions are pixel centres; the tile map
    is drawn at ``rect_tile_map`` (x, y, w, h).
    """

    SHEET_COLUMNS: Optional[int] = None
    SHEET_ROWS: Optional[int] = None
    FRAME_INDICES: Dict[str, Sequence[int]] = {}

    def __init__(
        self,
        template: EnemyTemplate,
        rect_tile_map: Tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> None:
        self.rect_tile_map = rect_tile_map
        self.size = Vector2(48.0, 48.0)

        self.max_hp = template.hp
        self.hp = self.max_hp
        self.max_speed = template.speed
        self.speed = self.max_speed
        self.damage = template.damage
        self.reward_ratio = template.reward_ratio
        self.recover_interval = template.recover_interval
        self.recover_range = template.recover_range
        self.recover_intensity = template.recover_intensity

        self.position = Vector2()
        self.velocity = Vector2()
        self.direction = Vector2()
        self.position_target = Vector2()

        self.route: Optional[Route] = None
        self.idx_target = 0
        self.is_valid = True
        self.is_show_sketch = False

        self.on_skill_released: Optional[Callable[["Enemy"], None]] = None

        self._timer_skill = Timer(
            wait_time=self.recover_interval, one_shot=False, callback=self._release_skill
        )
        self._timer_sketch = Timer(
            wait_time=SKETCH_DURATION, one_shot=True, callback=self._hide_sketch
        )
        self._timer_restore_speed = Timer(one_shot=True, callback=self._restore_speed)

        self.animations: Dict[Tuple[str, bool], Animation] = self._build_animations()
        self.current_animation: Optional[Animation] = None

    def _build_animations(self) -> Dict[Tuple[str, bool], Animation]:
        if self.SHEET_COLUMNS is None or self.SHEET_ROWS is None:
            return {}
        sheet_size = (
            int(self.size.x) * self.SHEET_COLUMNS,
            int(self.size.y) * self.SHEET_ROWS,
        )
        animations = {}
        for facing in _FACINGS:
            for sketch in (False, True):
                anim = Animation()
                anim.loop = True
                anim.interval = FRAME_INTERVAL
                anim.set_frame_data(
                    sheet_size, self.SHEET_COLUMNS, self.SHEET_ROWS, self.FRAME_INDICES[facing]
                )
                animations[(facing, sketch)] = anim
        return animations

    def _release_skill(self) -> None:
        if self.on_skill_released is not None:
            self.on_skill_released(self)

    def _hide_sketch(self) -> None:
        self.is_show_sketch = False

    def _restore_speed(self) -> None:
        self.speed = self.max_speed

    @property
    def _idx_list(self) -> list:
        return self.route.idx_list if self.route is not None else []

    def _refresh_position_target(self) -> None:
        idx_list = self._idx_list
        if self.idx_target < len(idx_list):
            x, y = idx_list[self.idx_target]
            self.position_target = Vector2(
                float(self.rect_tile_map[0] + x * SIZE_TILE + SIZE_TILE // 2),
                float(self.rect_tile_map[1] + y * SIZE_TILE + SIZE_TILE // 2),
            )

    def on_update(self, delta: float) -> None:
        """Advance timers, move towards the next route tile and pick the animation."""
        self._timer_skill.on_update(delta)
        self._timer_sketch.on_update(delta)
        self._timer_restore_speed.on_update(delta)

        move_distance = self.velocity * delta
        target_distance = self.position_target - self.position
        step = move_distance if move_distance < target_distance else target_distance
        self.position = self.position + step

        if target_distance.approx_zero():
            self.idx_target += 1
            self._refresh_position_target()
            self.direction = (self.position_target - self.position).normalize()

        self.velocity = self.direction * (self.speed * SIZE_TILE)

        if not self.animations:
            return
        if abs(self.velocity.x) > abs(self.velocity.y):
            facing = "right" if self.velocity.x > 0 else "left"
        else:
            facing = "down" if self.velocity.y > 0 else "up"
        self.current_animation = self.animations[(facing, self.is_show_sketch)]
        self.current_animation.on_update(delta)

    def increase_hp(self, val: float) -> None:
        self.hp = min(self.hp + val, self.max_hp)

    def decrease_hp(self, val: float) -> None:
        """Take damage and flash; an enemy at zero hit points becomes removable."""
        self.hp -= val
        if self.hp <= 0:
            self.hp = 0
            self.is_valid = False
        self.is_show_sketch = True
        self._timer_sketch.restart()

    def slow_down(self) -> None:
        """Reduce speed for a short while."""
        self.speed = self.max_speed - SLOW_DOWN_AMOUNT
        self._timer_restore_speed.wait_time = SLOW_DOWN_DURATION
        self._timer_restore_speed.restart()

    def set_route(self, route: Route) -> None:
        self.route = route
        self._refresh_position_target()

    def make_invalid(self) -> None:
        self.is_valid = False

    def can_remove(self) -> bool:
        return not self.is_valid

    def recover_radius(self) -> float:
        """Healing radius in pixels."""
        return SIZE_TILE * self.recover_range

    def route_progress(self) -> float:
        """Fraction of the route walked, by target tile index."""
        count = len(self._idx_list)
        if count == 1:
            return 1.0
        return self.idx_target / (count - 1)


class SlimEnemy(Enemy):
    SHEET_COLUMNS = 6
    SHEET_ROWS = 4
    FRAME_INDICES = {
        "up": (6, 7, 8, 9, 10, 11),
        "down": (0, 1, 2, 3, 4, 5),
        "left": (18, 19, 20, 21, 22, 23),
        "right": (12, 13, 14, 15, 16, 17),
    }

    def __init__(self, config: GameConfig) -> None:
        super().__init__(config.slim_template, config.rect_tile_map)


class KingSlimEnemy(Enemy):
    SHEET_COLUMNS = 6
    SHEET_ROWS = 4
    FRAME_INDICES = {
        "up": (18, 19, 20, 21, 22, 23),
        "down": (0, 1, 2, 3, 4, 5),
        "left": (6, 7, 8, 9, 10, 11),
        "right": (12, 13, 14, 15, 16, 17),
    }

    def __init__(self, config: GameConfig) -> None:
        super().__init__(config.king_slim_template, config.rect_tile_map)


_FIVE_COLUMN_FRAMES = {
    "up": (5, 6, 7, 8, 9),
    "down": (0, 1, 2, 3, 4),
    "left": (15, 16, 17, 18, 19),
    "right": (10, 11, 12, 13, 14),
}


class SkeletonEnemy(Enemy):
    SHEET_COLUMNS = 5
    SHEET_ROWS = 4
    FRAME_INDICES = _FIVE_COLUMN_FRAMES

    def __init__(self, config: GameConfig) -> None:
        super().__init__(config.skeleton_template, config.rect_tile_map)


class GoblinEnemy(Enemy):
    SHEET_COLUMNS = 5
    SHEET_ROWS = 4
    FRAME_INDICES = _FIVE_COLUMN_FRAMES

    def __init__(self, config: GameConfig) -> None:
        super().__init__(config.goblin_template, config.rect_tile_map)


class GoblinPriestEnemy(Enemy):
    SHEET_COLUMNS = 5
    SHEET_ROWS = 4
    FRAME_INDICES = _FIVE_COLUMN_FRAMES

    def __init__(self, config: GameConfig) -> None:
        super().__init__(config.goblin_priest_template, config.rect_tile_map)


_ENEMY_CLASSES = {
    EnemyType.SLIM: SlimEnemy,
    EnemyType.KING_SLIM: KingSlimEnemy,
    EnemyType.SKELETON: SkeletonEnemy,
    EnemyType.GOBLIN: GoblinEnemy,
    EnemyType.GOBLIN_PRIEST: GoblinPriestEnemy,
}


def create_enemy(enemy_type: EnemyType, config: GameConfig) -> Enemy:
    """Create an enemy of ``enemy_type``; unknown types give a slime."""
    return _ENEMY_CLASSES.get(enemy_type, SlimEnemy)(config)