"""
Tests for the configuration management in src/say_hello/config.py.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from say_hello.config import DEFAULT_CONFIG, Config
from say_hello.health.probe import ProbeRequest


@pytest.fixture
def mock_home(tmp_path):
    """Fixture to mock Path.home() to use a temporary directory."""
    mock_home_path = tmp_path / ".home"
    mock_home_path.mkdir()
    with patch.object(Path, "home", return_value=mock_home_path):
        yield mock_home_path


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


def write_config(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data))
    return path


def test_creates_default_config_file(mock_home, clean_env):
    cfg = Config()

    config_file = mock_home / ".config" / "say-hello" / "config.yaml"
    assert cfg.config_file == config_file
    assert config_file.exists()
    assert yaml.safe_load(config_file.read_text()) == DEFAULT_CONFIG
    assert cfg.get_debug() is False


def test_explicit_config_file(tmp_path, clean_env):
    config_file = write_config(tmp_path / "custom.yaml", {"debug": True, "health_check": {"model": "gemini-2.5-pro"}})

    cfg = Config(config_file)

    assert cfg.get_debug() is True
    assert cfg.get_setting("model") == "gemini-2.5-pro"
    assert cfg.get_setting("prompt") == "say hi"


def test_get_probe_request_defaults(tmp_path, clean_env):
    cfg = Config(tmp_path / "config.yaml")

    assert cfg.get_probe_request() == ProbeRequest()


def test_get_probe_request_from_file(tmp_path, clean_env):
    config_file = write_config(
        tmp_path / "config.yaml",
        {"health_check": {"program": "gemini-nightly", "prompt": "ping", "timeout": 3, "npm_package": "@x/gemini"}},
    )

    request = Config(config_file).get_probe_request()

    assert request.command == ["gemini-nightly", "-m", "gemini-2.5-flash", "-p", "ping"]
    assert request.timeout == 3.0
    assert request.npm_package == "@x/gemini"


@pytest.mark.parametrize("timeout", ["soon", 0, -5, None, True, False, "nan", "inf", float("inf")])
def test_invalid_timeout_falls_back_to_default(tmp_path, clean_env, timeout):
    config_file = write_config(tmp_path / "config.yaml", {"health_check": {"timeout": timeout}})

    assert Config(config_file).get_probe_request().timeout == 10.0


def test_invalid_yaml_uses_defaults(tmp_path, clean_env):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("health_check: [unclosed\n")

    cfg = Config(config_file)

    assert cfg.config == {}
    assert cfg.get_probe_request() == ProbeRequest()


def test_non_mapping_yaml_is_ignored(tmp_path, clean_env):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- just\n- a list\n")

    assert Config(config_file).config == {}


def test_debug_environment_override(tmp_path):
    config_file = write_config(tmp_path / "config.yaml", {"debug": False})

    with patch.dict(os.environ, {"SAY_HELLO_DEBUG": "yes"}, clear=True):
        cfg = Config(config_file)
        assert cfg.get_debug() is True
        assert cfg.get_log_level() == "DEBUG"

    with patch.dict(os.environ, {"SAY_HELLO_DEBUG": "0"}, clear=True):
        assert cfg.get_debug() is False
        assert cfg.get_log_level() == "INFO"


def test_log_level_environment_override(tmp_path):
    with patch.dict(os.environ, {"LOG_LEVEL": "warning"}, clear=True):
        assert Config(tmp_path / "config.yaml").get_log_level() == "WARNING"


def test_set_setting_persists(tmp_path, clean_env):
    config_file = tmp_path / "config.yaml"
    cfg = Config(config_file)

    cfg.set_setting("timeout", 20)

    assert yaml.safe_load(config_file.read_text())["health_check"]["timeout"] == 20
    assert Config(config_file).get_probe_request().timeout == 20.0


def test_unwritable_config_location_does_not_raise(tmp_path, clean_env):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")

    cfg = Config(blocker / "config.yaml")

    assert cfg.config == {}
    assert cfg.get_probe_request() == ProbeRequest()
