"""Группы настроек проверки: значения по умолчанию и валидаторы."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from docker_check.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from docker_check.settings.validators import (
    ChoiceValidator,
    DockerURLValidator,
    IntegerValidator,
    TypeValidator,
    Validator,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsGroup(ABC):
    """Базовый класс группы настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values[key]

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая SettingsValidationError при ошибке."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def update(self, data: Dict[str, Any]) -> None:
        """Применяет известные ключи из словаря; неизвестные пропускаются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class DiscoverySettings(SettingsGroup):
    """Источники списка ожидаемых контейнеров."""

    group_name = "discovery"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "init_d": False,
            "systemd": True,
            "init_dir": "/etc/init.d",
            "systemd_dir": "/etc/systemd/system",
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "init_d": TypeValidator(bool),
            "systemd": TypeValidator(bool),
            "init_dir": TypeValidator(str),
            "systemd_dir": TypeValidator(str),
        }


class ThresholdSettings(SettingsGroup):
    """Пороги времени работы контейнера в секундах."""

    group_name = "thresholds"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "runtime_ok": 120,
            "runtime_warn": 60,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "runtime_ok": IntegerValidator(),
            "runtime_warn": IntegerValidator(),
        }


class DockerSettings(SettingsGroup):
    """Подключение к Docker Engine API."""

    group_name = "docker"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "base_url": "unix:///var/run/docker.sock",
            "timeout_sec": 10,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "base_url": DockerURLValidator(),
            "timeout_sec": IntegerValidator(min_value=1),
        }


class LoggingSettings(SettingsGroup):
    """Уровень и файл журнала; вывод в stderr включён всегда."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "level": "INFO",
            "file": "",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "level": ChoiceValidator(LOG_LEVELS),
            "file": TypeValidator(str),
            "max_file_size_mb": IntegerValidator(1, 1024),
            "max_archived_files": IntegerValidator(0, 100),
        }
