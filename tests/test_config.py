"""Configuration from environment variables."""

from datetime import timezone

import pytest

from graphwalk.config import WalkConfig, resolve_timezone


def test_defaults():
    config = WalkConfig.from_env({})
    assert config == WalkConfig()
    assert config.tz is timezone.utc
    assert config.tick_ms == 1.0
    assert config.walk_timeout_s is None
    assert (config.host, config.port) == ("0.0.0.0", 8000)


def test_reads_environment():
    config = WalkConfig.from_env(
        {
            "GRAPHWALK_TZ": "America/Los_Angeles",
            "GRAPHWALK_TICK_MS": "5",
            "GRAPHWALK_LOG_LEVEL": "debug",
            "GRAPHWALK_LOG_FILE": "/tmp/walk.log",
            "GRAPHWALK_TIMEOUT_S": "2.5",
            "GRAPHWALK_PORT": "9000",
        }
    )
    assert config.timezone == "America/Los_Angeles"
    assert config.tick_ms == 5.0
    assert config.log_level == "DEBUG"
    assert config.log_file == "/tmp/walk.log"
    assert config.walk_timeout_s == 2.5
    assert config.port == 9000


def test_uses_os_environ(monkeypatch):
    monkeypatch.setenv("GRAPHWALK_TICK_MS", "3")
    assert WalkConfig.from_env().tick_ms == 3.0


def test_empty_values_fall_back_to_defaults():
    config = WalkConfig.from_env({"GRAPHWALK_TIMEOUT_S": "", "GRAPHWALK_LOG_FILE": ""})
    assert config.walk_timeout_s is None
    assert config.log_file is None


@pytest.mark.parametrize(
    "env",
    [
        {"GRAPHWALK_TICK_MS": "fast"},
        {"GRAPHWALK_TICK_MS": "0"},
        {"GRAPHWALK_TICK_MS": "-1"},
        {"GRAPHWALK_TIMEOUT_S": "0"},
        {"GRAPHWALK_PORT": "http"},
        {"GRAPHWALK_TZ": "Mars/Olympus_Mons"},
        {"GRAPHWALK_LOG_LEVEL": "LOUD"},
    ],
)
def test_rejects_bad_values(env):
    with pytest.raises(ValueError):
        WalkConfig.from_env(env)


def test_resolve_timezone_utc_spellings():
    assert resolve_timezone("UTC") is timezone.utc
    assert resolve_timezone("utc") is timezone.utc
