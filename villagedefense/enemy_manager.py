"""Spawning, collision and removal of enemies."""

import random
from typing import Callable, List, Optional

from villagedefense.config import EnemyType, GameConfig
from villagedefense.enemy import Enemy, create_enemy
from villagedefense.home import Home
from villagedefense.tile import SIZE_TILE
from villagedefense.vector2 import Vector2


class EnemyManager:
    """Owns the live enemies.

    ``bullets`` holds objects with ``position``, ``damage`` and
    ``damage_range`` attributes and ``can_collide()`` and
    ``on_collide(enemy)`` methods. ``on_coin_drop`` is called with a
    position when a killed enemy drops a coin.
    """

    def __init__(self, config: GameConfig, home: Home) -> None:
        self.config = config
        self.home = home
        self.enemy_list: List[Enemy] = []
        self.bullets: list = []
        self.on_coin_drop: Optional[Callable[[Vector2], None]] = None
        self.rng = random.Random()

    def on_update(self, delta: float) -> None:
        for enemy in self.enemy_list:
            enemy.on_update(delta)
        self._process_home_collision()
        self._process_bullet_collision()
        self.enemy_list = [enemy for enemy in self.enemy_list if not enemy.can_remove()]

    def _heal_around(self, source: Enemy) -> None:
        radius = source.recover_radius()
        if radius <= 0:
            return
        pos_src = source.position
        for target in self.enemy_list:
            if (target.position - pos_src).length() <= radius:
                target.increase_hp(source.recover_intensity)

    def spawn_enemy(self, enemy_type: EnemyType, idx_spawn_point: int) -> Optional[Enemy]:
        """Spawn an enemy at a spawn point; unknown points spawn nothing."""
        route = self.config.map.spawner_route_pool.get(idx_spawn_point)
        if route is None:
            return None

        enemy = create_enemy(enemy_type, self.config)
        enemy.on_skill_released = self._heal_around

        rect_x, rect_y = self.config.rect_tile_map[0], self.config.rect_tile_map[1]
        start_x, start_y = route.idx_list[0]
        enemy.position = Vector2(
            float(rect_x + start_x * SIZE_TILE + SIZE_TILE // 2),
            float(rect_y + start_y * SIZE_TILE + SIZE_TILE // 2),
        )
        enemy.set_route(route)
        self.enemy_list.append(enemy)
        return enemy

    def check_clear(self) -> bool:
        return not self.enemy_list

    def _process_home_collision(self) -> None:
        home_x, home_y = self.config.map.home_point
        left = float(self.config.rect_tile_map[0] + home_x * SIZE_TILE)
        top = float(self.config.rect_tile_map[1] + home_y * SIZE_TILE)

        for enemy in self.enemy_list:
            if enemy.can_remove():
                continue
            pos = enemy.position
            if left <= pos.x <= left + SIZE_TILE and top <= pos.y <= top + SIZE_TILE:
                enemy.make_invalid()
                self.home.decrease_hp(enemy.damage)

    def _process_bullet_collision(self) -> None:
        for enemy in self.enemy_list:
            if enemy.can_remove():
                continue
            pos_enemy = enemy.position
            half_w, half_h = enemy.size.x / 2, enemy.size.y / 2

            for bullet in self.bullets:
                if not bullet.can_collide():
                    continue
                pos_bullet = bullet.position
                if not (
                    pos_enemy.x - half_w <= pos_bullet.x <= pos_enemy.x + half_w
                    and pos_enemy.y - half_h <= pos_bullet.y <= pos_enemy.y + half_h
                ):
                    continue

                if bullet.damage_range <= 0:
                    enemy.decrease_hp(bullet.damage)
                    if enemy.can_remove():
                        self._try_spawn_coin(pos_enemy, enemy.reward_ratio)
                else:
                    for target in self.enemy_list:
                        pos_target = target.position
                        if (pos_bullet - pos_target).length() <= bullet.damage_range:
                            target.decrease_hp(bullet.damage)
                            if target.can_remove():
                                self._try_spawn_coin(pos_target, target.reward_ratio)
                bullet.on_collide(enemy)

    def _try_spawn_coin(self, position: Vector2, ratio: float) -> None:
        if self.rng.randrange(100) / 100 <= ratio and self.on_coin_drop is not None:
            self.on_coin_drop(Vector2(position.x, position.y))