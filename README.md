# villagedefense

Simulation logic for a tile-based tower-defence game. Waves of enemies walk
along routes on a tile map towards the village home. Towers placed by the
player pick the enemy furthest along its route and fire at it. The package
keeps the game state and advances it frame by frame. You drive it from your
own front end or from tests.

## Installation

```
pip install .
pip install .[test]   # adds pytest
```

## Modules

- `villagedefense.timer`: `Timer`, a frame-delta countdown with one-shot or repeating callbacks. It also has `restart`, `pause` and `resume`.
- `villagedefense.vector2`: `Vector2`. `+`, `-` and `*` work as usual: `*` with a number scales, and `*` with a vector is the dot product. `<` and `>` compare lengths. It also has `dot`, `length`, `approx_zero` and `normalize`.
- `villagedefense.tile`: `Tile`, `Direction`, `SIZE_TILE` (48 pixels) and `parse_tile`.
- `villagedefense.animation`: `Animation`, which steps through frames cut from a sprite sheet of a given pixel size.
- `villagedefense.route`: `Route`, the tile path traced from a spawn point.
- `villagedefense.tilemap`: `GameMap` and `MapError`.
- `villagedefense.config`: `GameConfig`, the templates, `Wave`, `SpawnEvent`, `EnemyType`, `parse_level_config` and `ConfigError`.
- `villagedefense.enemy`: `Enemy`, its five kinds and `create_enemy`.
- `villagedefense.home`: `Home`.
- `villagedefense.enemy_manager`: `EnemyManager`.
- `villagedefense.wave_manager`: `WaveManager`.
- `villagedefense.tower`: `Tower`, `ArcherTower`, `AxemanTower`, `GunnerTower`, `Shot`, `Facing`, `TowerType` and `BulletType`.
- `villagedefense.tower_manager`: `TowerManager`.
- `villagedefense.placement`: `cursor_tile_index`, `can_place_tower`, `tile_center` and `is_home`.

## Maps

A map is comma-separated text with one row per line. Each cell has the form
`terrain\decoration\direction\flag`:

- `direction`: 0 none, 1 up, 2 down, 3 left, 4 right.
- `flag`: `-1` none, `0` the home, `1`–`9` spawn points.

Missing fields take defaults. Blank lines are skipped.

```python
from villagedefense.tilemap import GameMap

game_map = GameMap()
game_map.load("map.csv")        # raises MapError if unreadable or empty
print(game_map.width, game_map.height, game_map.home_point)
```

`GameMap.parse(text)` does the same from a string. A `Route` is built for each
spawn point and stored in `spawner_route_pool`. The route follows tile
directions. It stops at the home, at a tile without a direction, at the map
edge, or before it would revisit a tile.

## Configuration

```python
from villagedefense.config import GameConfig

config = GameConfig()
config.load_level_config("level.json")  # JSON array of waves
config.load_game_config("config.json")  # window, player, tower, enemy sections
```

Both loaders raise `ConfigError` in these cases: the file cannot be read, the
JSON is invalid, no waves result, or a required section is missing.
`parse_level_config(data)` and `GameConfig.apply_game_config(data)` accept JSON
that you have already decoded.

## Running a simulation

```python
from villagedefense.config import GameConfig, parse_level_config
from villagedefense.enemy_manager import EnemyManager
from villagedefense.home import Home
from villagedefense.tower import TowerType
from villagedefense.tower_manager import TowerManager
from villagedefense.wave_manager import WaveManager

config = GameConfig()
config.map.parse(
    r"0\-1\4\1,0\-1\4\-1,0\-1\0\0" "\n"
    r"0,0,0"
)
config.wave_list = parse_level_config(
    [{"rewards": 10, "interval": 1, "spawn_list": [{"interval": 0.5, "point": 1, "enemy": "slim"}]}]
)

home = Home(config)
enemies = EnemyManager(config, home)
rewards = []
waves = WaveManager(config, enemies, rewards.append)
towers = TowerManager(config)
towers.place_tower(TowerType.ARCHER, (1, 1))

for _ in range(600):
    waves.on_update(1 / 60)
    enemies.on_update(1 / 60)
    shots = towers.on_update(1 / 60, enemies.enemy_list)
    if config.is_game_over:
        break
```

The game is over when `Home.hp` reaches zero or when the last wave is cleared.
A win also sets `config.is_game_win`. Tower levels are kept in the config, and
`TowerManager.upgrade_tower` raises them up to level 9.
`TowerManager.upgrade_cost` returns -1 at the top level.

## What the package does not do

- It draws nothing and plays no sound, and it has no window or input loop. It only exposes hooks: `Home.on_hurt`, `TowerManager.on_place`, `TowerManager.on_upgrade`, `Tower.on_shot` and `EnemyManager.on_coin_drop`.
- It has no bullet objects. Towers return `Shot` records. `EnemyManager.bullets` takes objects that you supply. Each needs the attributes `position`, `damage` and `damage_range`, plus the methods `can_collide()` and `on_collide(enemy)`.
- It keeps no coin balance and no coin pickups. Wave rewards go to the `on_reward` callback, and coin drops go to `on_coin_drop`.
- It has no player character and no command to start a game.

## Tests

```
pytest
```