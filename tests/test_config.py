"""Tests for reading settings."""

import logging

import pytest

from pastelboard.config import DEFAULTS, ConfigError, configure_logging, read_config


def test_defaults_when_no_file(tmp_path):
    config = read_config(tmp_path / "missing.yaml", env={})
    assert config == DEFAULTS


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("store: /tmp/boards\nlog-level: DEBUG\nsaturation: '60'\nunknown: 1\n")
    config = read_config(path, env={})
    assert config["store"] == "/tmp/boards"
    assert config["log_level"] == "DEBUG"
    assert config["saturation"] == 60
    assert "unknown" not in config


def test_env_overrides_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("key: fromfile\nlightness: 70\n")
    config = read_config(path, env={"PASTELBOARD_KEY": "fromenv"})
    assert config["key"] == "fromenv"
    assert config["lightness"] == 70


def test_config_path_from_env(tmp_path):
    path = tmp_path / "other.yaml"
    path.write_text("key: elsewhere\n")
    config = read_config(env={"PASTELBOARD_CONFIG": str(path)})
    assert config["key"] == "elsewhere"


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert read_config(path, env={}) == DEFAULTS


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("store: [unclosed\n")
    with pytest.raises(ConfigError):
        read_config(path, env={})


def test_non_mapping_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        read_config(path, env={})


def test_bad_integer(tmp_path):
    with pytest.raises(ConfigError):
        read_config(tmp_path / "missing.yaml", env={"PASTELBOARD_SATURATION": "lots"})


def test_configure_logging_to_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "board.log"
    configure_logging("info", str(log_file))
    logging.getLogger("pastelboard.test").info("hello")
    for handler in root.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    for handler in root.handlers:
        handler.close()
