"""Wave progression: start delays, spawn timing and rewards."""

from typing import Callable

from villagedefense.config import ConfigError, GameConfig
from villagedefense.enemy_manager import EnemyManager
from villagedefense.timer import Timer


class WaveManager:
    """Runs the configured waves and reports each wave's reward."""

    def __init__(
        self,
        config: GameConfig,
        enemy_manager: EnemyManager,
        on_reward: Callable[[int], None],
    ) -> None:
        if not config.wave_list:
            raise ConfigError("no waves configured")
        self.config = config
        self.enemy_manager = enemy_manager
        self.on_reward = on_reward

        self.idx_wave = 0
        self.idx_spawn_event = 0
        self.is_wave_start = False
        self.is_spawned_last_enemy = False

        self._timer_start_wave = Timer(
            wait_time=config.wave_list[0].interval,
            one_shot=True,
            callback=self._start_wave,
        )
        self._timer_spawn_enemy = Timer(one_shot=True, callback=self._spawn_next)

    def _start_wave(self) -> None:
        self.is_wave_start = True
        wave = self.config.wave_list[self.idx_wave]
        self._timer_spawn_enemy.wait_time = wave.spawn_event_list[0].interval
        self._timer_spawn_enemy.restart()

    def _spawn_next(self) -> None:
        events = self.config.wave_list[self.idx_wave].spawn_event_list
        event = events[self.idx_spawn_event]
        self.enemy_manager.spawn_enemy(event.enemy_type, event.spawn_point)

        self.idx_spawn_event += 1
        if self.idx_spawn_event >= len(events):
            self.is_spawned_last_enemy = True
            return
        self._timer_spawn_enemy.wait_time = events[self.idx_spawn_event].interval
        self._timer_spawn_enemy.restart()

    def on_update(self, delta: float) -> None:
        config = self.config
        if config.is_game_over:
            return

        if not self.is_wave_start:
            self._timer_start_wave.on_update(delta)
        else:
            self._timer_spawn_enemy.on_update(delta)

        if self.is_spawned_last_enemy and self.enemy_manager.check_clear():
            self.on_reward(config.wave_list[self.idx_wave].rewards)
            self.idx_wave += 1
            if self.idx_wave >= len(config.wave_list):
                config.is_game_win = True
                config.is_game_over = True
            else:
                self.idx_spawn_event = 0
                self.is_wave_start = False
                self.is_spawned_last_enemy = False
                self._timer_start_wave.wait_time = config.wave_list[self.idx_wave].interval
                self._timer_start_wave.restart()