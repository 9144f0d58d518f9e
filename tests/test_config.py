import json
import logging

import pytest

import config


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    d = tmp_path / "configs"
    monkeypatch.setattr(config, "CONFIG_DIR", d)
    return d


def _write(config_dir, data):
    config_dir.mkdir(parents=True, exist_ok=True)
    p = config_dir / "preset.json"
    p.write_text(json.dumps(data))
    return p


def test_defaults_without_saved_preset():
    cfg = config.load_config()
    assert cfg["world"] == {"columns": 45, "rows": 30}
    assert cfg["cell_size"] == 20
    assert cfg["tick_rate"] == 33
    assert cfg["solid_guard"] is True
    assert cfg["relieve_pressure"] is True
    assert cfg["view_mode"] == "bars"


def test_save_then_load_last(config_dir):
    path = config.save_config({"world": {"columns": 10}, "relieve_pressure": False}, "Two rules!")
    assert path == config_dir / "Two_rules.json"
    assert config.get_last_config() == "Two_rules"
    cfg = config.load_config()
    assert cfg["world"] == {"columns": 10, "rows": 30}
    assert cfg["relieve_pressure"] is False


def test_save_without_name_reuses_last_preset(config_dir):
    assert config.save_config({"view_mode": "flat"}) == config_dir / "default.json"
    config.save_config({}, "tank")
    path = config.save_config({"solid_guard": False})
    assert path == config_dir / "tank.json"
    assert config.load_config()["solid_guard"] is False


def test_unknown_keys_dropped_and_values_normalized(config_dir):
    p = _write(config_dir, {"velocity": 3, "view_mode": "heatmap", "log_level": "debug"})
    cfg = config.load_config(p)
    assert "velocity" not in cfg
    assert cfg["view_mode"] == "bars"
    assert cfg["log_level"] == "DEBUG"


def test_wrong_typed_numbers_fall_back_with_warning(config_dir, caplog):
    p = _write(config_dir, {"tick_rate": "fast", "world": {"columns": None, "rows": 12}})
    with caplog.at_level(logging.WARNING, logger="config"):
        cfg = config.load_config(p)
    assert cfg["tick_rate"] == 33
    assert cfg["world"] == {"columns": 45, "rows": 12}
    assert "invalid tick_rate 'fast'" in caplog.text
    assert "invalid world.columns None" in caplog.text


def test_string_false_is_not_treated_as_true(config_dir, caplog):
    p = _write(config_dir, {"solid_guard": "false", "relieve_pressure": False})
    with caplog.at_level(logging.WARNING, logger="config"):
        cfg = config.load_config(p)
    assert cfg["solid_guard"] is True
    assert cfg["relieve_pressure"] is False
    assert "invalid solid_guard 'false'" in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        {"cell_size": -5},
        {"cell_size": 0},
        {"cell_size": True},
        {"cell_size": 12.5},
        {"world": [10, 10]},
        {"log_level": "loud"},
    ],
)
def test_out_of_range_values_keep_defaults(config_dir, caplog, data):
    p = _write(config_dir, data)
    with caplog.at_level(logging.WARNING, logger="config"):
        cfg = config.load_config(p)
    assert cfg == config._default_config()
    assert caplog.records


def test_line_width_zero_is_allowed(config_dir):
    p = _write(config_dir, {"line_width": 0})
    assert config.load_config(p)["line_width"] == 0


def test_non_object_json_gives_defaults(config_dir, caplog):
    p = _write(config_dir, [1, 2, 3])
    with caplog.at_level(logging.WARNING, logger="config"):
        assert config.load_config(p) == config._default_config()
    assert "not a JSON object" in caplog.text


def test_bad_json_falls_back_to_defaults(config_dir, caplog):
    config_dir.mkdir(parents=True)
    p = config_dir / "broken.json"
    p.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="config"):
        cfg = config.load_config(p)
    assert cfg == config._default_config()
    assert "could not load config" in caplog.text


def test_missing_path_gives_defaults(config_dir):
    assert config.load_config(config_dir / "nope.json") == config._default_config()
