"""Тесты групп настроек."""

from __future__ import annotations

import pytest

from docker_check.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from docker_check.settings.groups import (
    DiscoverySettings,
    DockerSettings,
    LoggingSettings,
    ThresholdSettings,
)


def test_defaults() -> None:
    assert DiscoverySettings().to_dict() == {
        "init_d": False,
        "systemd": True,
        "init_dir": "/etc/init.d",
        "systemd_dir": "/etc/systemd/system",
    }
    thresholds = ThresholdSettings()
    assert thresholds.get("runtime_ok") == 120
    assert thresholds.get("runtime_warn") == 60
    assert DockerSettings().get("timeout_sec") == 10
    assert LoggingSettings().get("level") == "INFO"


def test_set_rejects_negative_threshold() -> None:
    with pytest.raises(SettingsValidationError) as excinfo:
        ThresholdSettings().set("runtime_ok", -5)
    assert excinfo.value.key == "thresholds.runtime_ok"


def test_set_rejects_zero_timeout() -> None:
    with pytest.raises(SettingsValidationError):
        DockerSettings().set("timeout_sec", 0)


def test_set_rejects_url_without_scheme() -> None:
    with pytest.raises(SettingsValidationError):
        DockerSettings().set("base_url", "docker.sock")


def test_unknown_key() -> None:
    with pytest.raises(SettingsNotFoundError):
        DiscoverySettings().get("compose")


def test_update_skips_unknown_keys_and_reset() -> None:
    group = DiscoverySettings()
    group.update({"init_d": True, "unknown": 1})
    assert group.get("init_d") is True

    group.reset_to_defaults()
    assert group.get("init_d") is False
