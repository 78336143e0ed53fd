"""Game and level configuration loaded from JSON."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Tuple

from villagedefense.tilemap import GameMap

TOWER_LEVELS = 10


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class EnemyType(Enum):
    SLIM = 0
    KING_SLIM = 1
    SKELETON = 2
    GOBLIN = 3
    GOBLIN_PRIEST = 4


_ENEMY_NAMES = {
    "slim": EnemyType.SLIM,
    "KingSlim": EnemyType.KING_SLIM,
    "Skeleton": EnemyType.SKELETON,
    "Goblin": EnemyType.GOBLIN,
    "GoblinPriest": EnemyType.GOBLIN_PRIEST,
}


@dataclass
class SpawnEvent:
    interval: float = 0.0
    spawn_point: int = 1
    enemy_type: EnemyType = EnemyType.SLIM


@dataclass
class Wave:
    rewards: int = 0
    interval: float = 0.0
    spawn_event_list: List[SpawnEvent] = field(default_factory=list)


@dataclass
class WindowTemplate:
    window_title: str = "村庄保卫战"
    window_width: int = 1280
    window_height: int = 720


@dataclass
class PlayerTemplate:
    speed: float = 3.0
    normal_attack_interval: float = 0.5
    normal_attack_damage: float = 0.0
    skill_interval: float = 10.0
    skill_damage: float = 1.0


def _levels(first: float, count: int = TOWER_LEVELS) -> List[float]:
    return [first] + [0.0] * (count - 1)


@dataclass
class TowerTemplate:
    """Per-level tower values; only the first level has a non-zero default."""

    interval: List[float] = field(default_factory=lambda: _levels(1.0))
    damage: List[float] = field(default_factory=lambda: _levels(25.0))
    view_range: List[float] = field(default_factory=lambda: _levels(5.0))
    cost: List[float] = field(default_factory=lambda: _levels(50.0))
    upgrade_cost: List[float] = field(
        default_factory=lambda: _levels(75.0, TOWER_LEVELS - 1)
    )


@dataclass
class EnemyTemplate:
    hp: float = 100.0
    speed: float = 1.0
    damage: float = 1.0
    reward_ratio: float = 0.5
    recover_interval: float = 10.0
    recover_range: float = 0.0
    recover_intensity: float = 25.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_spawn_event(data: dict) -> SpawnEvent:
    event = SpawnEvent()
    interval = data.get("interval")
    if _is_number(interval):
        event.interval = float(interval)
    point = data.get("point")
    if _is_number(point):
        event.spawn_point = int(point)
    enemy = data.get("enemy")
    if isinstance(enemy, str) and enemy in _ENEMY_NAMES:
        event.enemy_type = _ENEMY_NAMES[enemy]
    return event


def parse_level_config(data: Any) -> List[Wave]:
    """Build the wave list from decoded level JSON (a list of wave objects).

    Non-object entries are skipped, and a wave whose ``spawn_list`` is an
    array without any spawn objects is dropped.
    """
    if not isinstance(data, list):
        raise ConfigError("level config must be a JSON array")

    waves = []
    for wave_data in data:
        if not isinstance(wave_data, dict):
            continue
        wave = Wave()
        rewards = wave_data.get("rewards")
        if _is_number(rewards):
            wave.rewards = int(rewards)
        interval = wave_data.get("interval")
        if _is_number(interval):
            wave.interval = float(interval)
        spawn_list = wave_data.get("spawn_list")
        if isinstance(spawn_list, list):
            wave.spawn_event_list = [
                _parse_spawn_event(item) for item in spawn_list if isinstance(item, dict)
            ]
            if not wave.spawn_event_list:
                continue
        waves.append(wave)
    return waves


def _read_json(path) -> Any:
    try:
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}") from exc


def _parse_window(template: WindowTemplate, data: Any) -> None:
    if not isinstance(data, dict):
        return
    title = data.get("window_title")
    if isinstance(title, str):
        template.window_title = title
    width = data.get("window_width")
    if _is_number(width):
        template.window_width = int(width)
    height = data.get("window_height")
    if _is_number(height):
        template.window_height = int(height)


def _apply_numbers(template: Any, data: Any, names) -> None:
    if not isinstance(data, dict):
        return
    for name in names:
        value = data.get(name)
        if _is_number(value):
            setattr(template, name, float(value))


def _parse_number_array(target: List[float], data: Any) -> None:
    if not isinstance(data, list):
        return
    for idx, value in enumerate(data[: len(target)]):
        if _is_number(value):
            target[idx] = float(value)


def _parse_tower(template: TowerTemplate, data: Any) -> None:
    if not isinstance(data, dict):
        return
    _parse_number_array(template.interval, data.get("interval"))
    _parse_number_array(template.damage, data.get("damage"))
    _parse_number_array(template.view_range, data.get("view_range"))
    _parse_number_array(template.cost, data.get("cost"))
    _parse_number_array(template.upgrade_cost, data.get("upgrade_cost"))


_PLAYER_FIELDS = (
    "speed",
    "normal_attack_interval",
    "normal_attack_damage",
    "skill_interval",
    "skill_damage",
)

_ENEMY_FIELDS = (
    "hp",
    "speed",
    "damage",
    "reward_ratio",
    "recover_interval",
    "recover_range",
    "recover_intensity",
)


@dataclass
class GameConfig:
    """Shared game state: map, waves, templates, tower levels and outcome."""

    map: GameMap = field(default_factory=GameMap)
    wave_list: List[Wave] = field(default_factory=list)

    level_archer: int = 0
    level_axeman: int = 0
    level_gunner: int = 0

    is_game_win: bool = False
    is_game_over: bool = False

    rect_tile_map: Tuple[int, int, int, int] = (0, 0, 0, 0)

    window_template: WindowTemplate = field(default_factory=WindowTemplate)
    player_template: PlayerTemplate = field(default_factory=PlayerTemplate)

    archer_template: TowerTemplate = field(default_factory=TowerTemplate)
    axeman_template: TowerTemplate = field(default_factory=TowerTemplate)
    gunner_template: TowerTemplate = field(default_factory=TowerTemplate)

    slim_template: EnemyTemplate = field(default_factory=EnemyTemplate)
    king_slim_template: EnemyTemplate = field(default_factory=EnemyTemplate)
    skeleton_template: EnemyTemplate = field(default_factory=EnemyTemplate)
    goblin_template: EnemyTemplate = field(default_factory=EnemyTemplate)
    goblin_priest_template: EnemyTemplate = field(default_factory=EnemyTemplate)

    num_initial_hp: float = field(default=10.0, init=False)
    num_initial_coin: float = field(default=100.0, init=False)
    num_coin_per_prop: float = field(default=10.0, init=False)

    def load_level_config(self, path) -> None:
        """Append the waves from a level file; raise ConfigError if none result."""
        self.wave_list.extend(parse_level_config(_read_json(path)))
        if not self.wave_list:
            raise ConfigError("level config holds no waves")

    def load_game_config(self, path) -> None:
        """Load window, player, tower and enemy settings from a file."""
        self.apply_game_config(_read_json(path))

    def apply_game_config(self, data: Any) -> None:
        """Apply decoded game config; every section must be an object."""
        if not isinstance(data, dict):
            raise ConfigError("game config must be a JSON object")
        sections = {name: data.get(name) for name in ("window", "player", "tower", "enemy")}
        for name in ("player", "window", "tower", "enemy"):
            if not isinstance(sections[name], dict):
                raise ConfigError(f"game config section '{name}' missing or not an object")

        _parse_window(self.window_template, sections["window"])
        _apply_numbers(self.player_template, sections["player"], _PLAYER_FIELDS)

        tower = sections["tower"]
        _parse_tower(self.archer_template, tower.get("archer"))
        _parse_tower(self.axeman_template, tower.get("axeman"))
        _parse_tower(self.gunner_template, tower.get("gunner"))

        enemy = sections["enemy"]
        _apply_numbers(self.slim_template, enemy.get("slim"), _ENEMY_FIELDS)
        _apply_numbers(self.king_slim_template, enemy.get("king_slim"), _ENEMY_FIELDS)
        _apply_numbers(self.skeleton_template, enemy.get("skeleton"), _ENEMY_FIELDS)
        _apply_numbers(self.goblin_template, enemy.get("goblin"), _ENEMY_FIELDS)
        _apply_numbers(
            self.goblin_priest_template, enemy.get("goblin_priest"), _ENEMY_FIELDS
        )