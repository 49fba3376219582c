"""Тесты CheckSettings: файл настроек и переопределения."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docker_check.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from docker_check.settings.registry import CheckSettings


def write_config(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "check.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_from_file(tmp_path: Path) -> None:
    settings = CheckSettings()
    settings.load_from_file(
        write_config(tmp_path, {"thresholds": {"runtime_ok": 300}, "discovery": {"init_d": True}})
    )

    assert settings.get_value("thresholds", "runtime_ok") == 300
    assert settings.get_value("thresholds", "runtime_warn") == 60
    assert settings.get_value("discovery", "init_d") is True


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    settings = CheckSettings()
    settings.load_from_file(write_config(tmp_path, {"thresholds": {"runtime_ok": 300}}))

    settings.apply({"thresholds": {"runtime_ok": 90, "runtime_warn": None}})

    assert settings.get_value("thresholds", "runtime_ok") == 90
    assert settings.get_value("thresholds", "runtime_warn") == 60


def test_unknown_entries_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("WARNING")
    settings = CheckSettings()

    settings.apply({"metrics": {"enabled": True}, "docker": {"tls": True}})

    assert "metrics" in caplog.text
    assert "docker.tls" in caplog.text


def test_socket_path_is_normalized() -> None:
    settings = CheckSettings()
    settings.set_value("docker", "base_url", "/run/docker.sock")

    assert settings.get_value("docker", "base_url") == "unix:///run/docker.sock"


def test_invalid_value_raises() -> None:
    with pytest.raises(SettingsValidationError):
        CheckSettings().apply({"thresholds": {"runtime_warn": "sixty"}})


def test_group_must_be_object() -> None:
    with pytest.raises(SettingsValidationError):
        CheckSettings().apply({"thresholds": [1, 2]})


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "check.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SettingsIOError) as excinfo:
        CheckSettings().load_from_file(path)
    assert "invalid JSON" in str(excinfo.value)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SettingsIOError):
        CheckSettings().load_from_file(tmp_path / "absent.json")


def test_top_level_must_be_object(tmp_path: Path) -> None:
    with pytest.raises(SettingsIOError):
        CheckSettings().load_from_file(write_config(tmp_path, [1, 2, 3]))


def test_unknown_group() -> None:
    with pytest.raises(SettingsNotFoundError):
        CheckSettings().get_group("metrics")


def test_inverted_thresholds_only_warn(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("WARNING")
    settings = CheckSettings()
    settings.apply({"thresholds": {"runtime_ok": 30, "runtime_warn": 60}})

    settings.check_thresholds()

    assert settings.get_value("thresholds", "runtime_ok") == 30
    assert "warning band is empty" in caplog.text
