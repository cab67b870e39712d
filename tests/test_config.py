"""Tests for BridgeConfig."""

from __future__ import annotations

import pytest

from cluster_bridge.config import BridgeConfig, ConfigError, get_layout
from cluster_bridge.encoder.builder import SAFETY_LAYOUT, STANDARD_LAYOUT


def test_defaults_from_empty_env():
    cfg = BridgeConfig.from_env({})
    assert cfg == BridgeConfig()
    assert cfg.frame_layout is STANDARD_LAYOUT


def test_values_from_env():
    cfg = BridgeConfig.from_env({
        "CLUSTER_BRIDGE_PORT": "COM7",
        "CLUSTER_BRIDGE_BAUD": "9600",
        "CLUSTER_BRIDGE_HZ": "30",
        "CLUSTER_BRIDGE_LAYOUT": "Safety",
        "CLUSTER_BRIDGE_LOG_LEVEL": "debug",
    })
    assert cfg.port == "COM7"
    assert cfg.baudrate == 9600
    assert cfg.target_hz == 30.0
    assert cfg.frame_layout is SAFETY_LAYOUT
    assert cfg.log_level == "debug"


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("CLUSTER_BRIDGE_PORT", "/dev/ttyACM0")
    assert BridgeConfig.from_env().port == "/dev/ttyACM0"


def test_blank_number_uses_default():
    assert BridgeConfig.from_env({"CLUSTER_BRIDGE_BAUD": " "}).baudrate == 115200


@pytest.mark.parametrize("env", [
    {"CLUSTER_BRIDGE_BAUD": "fast"},
    {"CLUSTER_BRIDGE_BAUD": "0"},
    {"CLUSTER_BRIDGE_HZ": "-5"},
    {"CLUSTER_BRIDGE_LAYOUT": "retro"},
    {"CLUSTER_BRIDGE_LOG_LEVEL": "LOUD"},
])
def test_invalid_values_raise(env):
    with pytest.raises(ConfigError):
        BridgeConfig.from_env(env)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_get_layout():
    assert get_layout("standard") is STANDARD_LAYOUT
    with pytest.raises(ConfigError, match="Unknown layout"):
        get_layout("nope")
