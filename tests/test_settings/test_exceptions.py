"""Тесты исключений подсистемы настроек."""

from __future__ import annotations

from pathlib import Path

import pytest

from docker_check.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)


def test_not_found_message(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = SettingsNotFoundError("docker", "base_url")
    assert str(error) == "Setting 'docker.base_url' not found"
    assert "docker.base_url" in caplog.text


def test_validation_error_keeps_details(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = SettingsValidationError("thresholds.runtime_ok", -1, "negative")
    assert error.key == "thresholds.runtime_ok"
    assert error.value == -1
    assert "negative" in str(error)
    assert "-1" in caplog.text


def test_io_error_contains_path(tmp_path: Path) -> None:
    path = tmp_path / "check.json"
    error = SettingsIOError(path, "permission denied")
    assert str(path) in str(error)
    assert error.context["reason"] == "permission denied"
