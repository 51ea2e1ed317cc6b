import json

import pytest
import yaml

from veggie_catch.config import Settings, load_settings


def test_defaults_match_reference_game():
    settings = Settings()
    assert settings.session_seconds == 15
    assert settings.tick_rate == 60
    assert settings.reaction_ticks == 30
    assert settings.catalog_mode == "breakpoints"
    assert [kind['name'] for kind in settings.catalog] == ["carrot", "cucumber", "tomato", "pancake"]
    assert settings.validate()


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_save_and_load_round_trip(tmp_path, suffix):
    original = Settings()
    original.session_seconds = 30
    original.catalog_mode = "weights"
    original.seed = 99
    path = tmp_path / f"settings{suffix}"
    original.save_to_file(str(path))

    loaded = Settings()
    loaded.load_from_file(str(path))
    assert loaded.to_dict() == original.to_dict()


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"session_seconds": 20, "lives": 3}), encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.session_seconds == 20
    assert not hasattr(settings, "lives")


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("session_seconds = 3", encoding="utf-8")
    with pytest.raises(ValueError):
        Settings().load_from_file(str(path))
    with pytest.raises(ValueError):
        Settings().save_to_file(str(path))


def test_missing_file_uses_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "nope.yaml"))
    assert settings.session_seconds == 15


@pytest.mark.parametrize("field, value", [
    ("session_seconds", 0),
    ("tick_rate", -1),
    ("min_spawn_cadence", 0),
    ("base_spawn_cadence", 10),
    ("points_per_level", 0),
    ("catch_end_y", 400),
    ("offscreen_y", 450),
    ("catalog_mode", "uniform"),
    ("catalog", []),
])
def test_validate_rejects_broken_values(field, value):
    settings = Settings()
    setattr(settings, field, value)
    with pytest.raises(ValueError):
        settings.validate()


def test_validate_rejects_zero_weight():
    settings = Settings()
    settings.catalog[0]['weight'] = 0
    with pytest.raises(ValueError):
        settings.validate()


def test_breakpoints_fall_back_to_weights_for_custom_catalog(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"catalog": [
        {"name": "apple", "score_delta": 100, "weight": 1},
        {"name": "rock", "score_delta": -300, "weight": 1},
    ]}), encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.catalog_mode == "weights"
