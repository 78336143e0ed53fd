import json

import pytest

from villagedefense.config import (
    ConfigError,
    EnemyTemplate,
    EnemyType,
    GameConfig,
    TowerTemplate,
    parse_level_config,
)


def _full_game_config(**overrides):
    data = {"window": {}, "player": {}, "tower": {}, "enemy": {}}
    data.update(overrides)
    return data


def test_parse_level_config_reads_waves_and_events():
    data = [
        {
            "rewards": 100,
            "interval": 2.5,
            "spawn_list": [
                {"interval": 1.0, "point": 2, "enemy": "Goblin"},
                {"interval": 0.5, "point": 3, "enemy": "KingSlim"},
            ],
        }
    ]
    waves = parse_level_config(data)
    assert len(waves) == 1
    wave = waves[0]
    assert wave.rewards == 100
    assert wave.interval == 2.5
    assert [e.enemy_type for e in wave.spawn_event_list] == [
        EnemyType.GOBLIN,
        EnemyType.KING_SLIM,
    ]
    assert [e.spawn_point for e in wave.spawn_event_list] == [2, 3]
    assert [e.interval for e in wave.spawn_event_list] == [1.0, 0.5]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("slim", EnemyType.SLIM),
        ("KingSlim", EnemyType.KING_SLIM),
        ("Skeleton", EnemyType.SKELETON),
        ("Goblin", EnemyType.GOBLIN),
        ("GoblinPriest", EnemyType.GOBLIN_PRIEST),
        ("Dragon", EnemyType.SLIM),
    ],
)
def test_enemy_names(name, expected):
    waves = parse_level_config([{"spawn_list": [{"enemy": name}]}])
    assert waves[0].spawn_event_list[0].enemy_type == expected


def test_spawn_event_defaults():
    waves = parse_level_config([{"spawn_list": [{}]}])
    event = waves[0].spawn_event_list[0]
    assert event.spawn_point == 1
    assert event.interval == 0.0
    assert event.enemy_type == EnemyType.SLIM


def test_non_objects_are_skipped():
    data = [1, "x", {"spawn_list": [5, {"point": 4}]}]
    waves = parse_level_config(data)
    assert len(waves) == 1
    assert [e.spawn_point for e in waves[0].spawn_event_list] == [4]


def test_wave_with_empty_spawn_list_dropped_but_missing_list_kept():
    waves = parse_level_config([{"rewards": 1, "spawn_list": []}, {"rewards": 2}])
    assert [w.rewards for w in waves] == [2]
    assert waves[0].spawn_event_list == []


def test_wrongly_typed_values_ignored():
    waves = parse_level_config(
        [{"rewards": "lots", "interval": True, "spawn_list": [{"point": "2"}]}]
    )
    assert waves[0].rewards == 0
    assert waves[0].interval == 0.0
    assert waves[0].spawn_event_list[0].spawn_point == 1


def test_level_root_must_be_array():
    with pytest.raises(ConfigError):
        parse_level_config({"rewards": 1})


def test_load_level_config_from_file(tmp_path):
    path = tmp_path / "level.json"
    path.write_text(json.dumps([{"rewards": 7, "spawn_list": [{"enemy": "Skeleton"}]}]))
    config = GameConfig()
    config.load_level_config(path)
    assert len(config.wave_list) == 1
    assert config.wave_list[0].rewards == 7
    assert config.wave_list[0].spawn_event_list[0].enemy_type == EnemyType.SKELETON


def test_load_level_config_empty_raises(tmp_path):
    path = tmp_path / "level.json"
    path.write_text("[]")
    with pytest.raises(ConfigError):
        GameConfig().load_level_config(path)


def test_load_level_config_bad_json_raises(tmp_path):
    path = tmp_path / "level.json"
    path.write_text("[{")
    with pytest.raises(ConfigError):
        GameConfig().load_level_config(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        GameConfig().load_game_config(tmp_path / "absent.json")


def test_tower_template_defaults_only_first_level_set():
    template = TowerTemplate()
    assert len(template.interval) == 10
    assert len(template.upgrade_cost) == 9
    assert template.damage[0] == 25
    assert template.cost[0] == 50
    assert template.upgrade_cost[0] == 75
    assert all(v == 0 for v in template.damage[1:])


def test_game_config_constants_and_defaults():
    config = GameConfig()
    assert config.num_initial_hp == 10
    assert config.num_initial_coin == 100
    assert config.window_template.window_width == 1280
    assert config.window_template.window_height == 720
    assert config.is_game_over is False


def test_apply_window_and_player():
    config = GameConfig()
    config.apply_game_config(
        _full_game_config(
            window={"window_title": "Demo", "window_width": 800, "window_height": 600},
            player={"speed": 4, "skill_damage": 3.5},
        )
    )
    assert config.window_template.window_title == "Demo"
    assert config.window_template.window_width == 800
    assert config.window_template.window_height == 600
    assert config.player_template.speed == 4
    assert config.player_template.skill_damage == 3.5
    assert config.player_template.normal_attack_interval == 0.5


def test_tower_arrays_partial_and_bounded():
    config = GameConfig()
    config.apply_game_config(
        _full_game_config(
            tower={
                "archer": {
                    "damage": [10, "x", 14],
                    "upgrade_cost": list(range(1, 13)),
                }
            }
        )
    )
    archer = config.archer_template
    assert archer.damage[0] == 10
    assert archer.damage[1] == 0
    assert archer.damage[2] == 14
    assert len(archer.upgrade_cost) == 9
    assert archer.upgrade_cost == [float(v) for v in range(1, 10)]
    assert config.axeman_template == TowerTemplate()


def test_enemy_templates_applied():
    config = GameConfig()
    config.apply_game_config(
        _full_game_config(enemy={"goblin_priest": {"hp": 300, "recover_range": 2}})
    )
    assert config.goblin_priest_template.hp == 300
    assert config.goblin_priest_template.recover_range == 2
    assert config.goblin_priest_template.speed == 1
    assert config.slim_template == EnemyTemplate()


@pytest.mark.parametrize("section", ["window", "player", "tower", "enemy"])
def test_missing_section_raises_without_changes(section):
    data = _full_game_config(window={"window_width": 640})
    data[section] = [1, 2]
    config = GameConfig()
    with pytest.raises(ConfigError):
        config.apply_game_config(data)
    assert config.window_template.window_width == 1280


def test_game_config_root_must_be_object():
    with pytest.raises(ConfigError):
        GameConfig().apply_game_config([{"window": {}}])


def test_load_game_config_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(_full_game_config(tower={"gunner": {"view_range": [7]}})),
        encoding="utf-8",
    )
    config = GameConfig()
    config.load_game_config(path)
    assert config.gunner_template.view_range[0] == 7