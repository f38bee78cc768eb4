from __future__ import annotations

import json

from icpcboard.utils.config_manager import ConfigManager, get_config, set_config


def test_defaults_without_file(tmp_path) -> None:
    config = ConfigManager(str(tmp_path / "absent.json"))
    assert config.get("scoreboard.penalty_per_reject") == 20
    assert config.get("server.port") == 5000
    assert config.get("log.level") == "WARNING"
    assert config.get("nope.missing", "fallback") == "fallback"


def test_file_values_merge_over_defaults(tmp_path) -> None:
    path = tmp_path / "icpcboard.json"
    path.write_text(json.dumps({"server": {"port": 8080}, "scoreboard": {"penalty_per_reject": 15}}), encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.get("server.port") == 8080
    assert config.get("server.host") == "127.0.0.1"
    assert config.get("scoreboard.penalty_per_reject") == 15


def test_environment_overrides_file(tmp_path, monkeypatch) -> None:
    path = tmp_path / "icpcboard.json"
    path.write_text(json.dumps({"log": {"level": "INFO"}}), encoding="utf-8")
    monkeypatch.setenv("ICPCBOARD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ICPCBOARD_PENALTY_PER_REJECT", "5")
    monkeypatch.setenv("ICPCBOARD_LOG_ENABLE_COLORS", "false")

    config = ConfigManager(str(path))

    assert config.get("log.level") == "DEBUG"
    assert config.get("scoreboard.penalty_per_reject") == 5
    assert config.get("log.enable_colors") is False


def test_broken_file_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "icpcboard.json"
    path.write_text("{not json", encoding="utf-8")
    config = ConfigManager(str(path))
    assert config.get("scoreboard.penalty_per_reject") == 20


def test_set_creates_nested_keys(tmp_path) -> None:
    config = ConfigManager(str(tmp_path / "absent.json"))
    config.set("server.port", 9000)
    config.set("extra.flag", True)
    assert config.get("server.port") == 9000
    assert config.get("server.host") == "127.0.0.1"
    assert config.get("extra.flag") is True


def test_global_config_instance(tmp_path) -> None:
    config = ConfigManager(str(tmp_path / "absent.json"))
    set_config(config)
    try:
        assert get_config() is config
    finally:
        set_config(None)
