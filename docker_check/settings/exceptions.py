"""Исключения подсистемы настроек проверки."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class SettingsError(Exception):
    """Базовое исключение настроек; сохраняет контекст и логирует ошибку."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class SettingsNotFoundError(SettingsError):
    """Запрошена несуществующая группа или ключ."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        suffix = f".{key}" if key else ""
        super().__init__(
            f"Setting '{group}{suffix}' not found",
            context={"group": group, "key": key},
        )


class SettingsValidationError(SettingsError):
    """Значение не прошло валидацию."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid value for '{key}': {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason},
        )


class SettingsIOError(SettingsError):
    """Файл настроек не читается или содержит не JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(
            f"Cannot load settings file '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )
