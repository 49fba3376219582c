"""Реестр настроек одного запуска проверки.

Значения собираются в три слоя: значения по умолчанию из групп, JSON-файл
(`--config`) и параметры командной строки. Каждое значение проходит через
валидаторы своей группы.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from docker_check.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from docker_check.settings.groups import (
    DiscoverySettings,
    DockerSettings,
    LoggingSettings,
    SettingsGroup,
    ThresholdSettings,
)
from docker_check.utils.helpers import normalize_docker_url


def _normalize_base_url(value: Any) -> Any:
    return normalize_docker_url(value) if isinstance(value, str) else value


_NORMALIZERS: Dict[Tuple[str, str], Callable[[Any], Any]] = {
    ("docker", "base_url"): _normalize_base_url,
}


class CheckSettings:
    """Набор групп настроек с загрузкой из файла и переопределением из CLI."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._groups: Dict[str, SettingsGroup] = {}
        for group in (DiscoverySettings(), ThresholdSettings(), DockerSettings(), LoggingSettings()):
            self._groups[group.group_name] = group

    def get_group(self, name: str) -> SettingsGroup:
        try:
            return self._groups[name]
        except KeyError:
            raise SettingsNotFoundError(name) from None

    def get_value(self, group: str, key: str) -> Any:
        return self.get_group(group).get(key)

    def set_value(self, group: str, key: str, value: Any) -> None:
        normalizer = _NORMALIZERS.get((group, key))
        if normalizer is not None:
            value = normalizer(value)
        self.get_group(group).set(key, value)

    def apply(self, data: Mapping[str, Any]) -> None:
        """Применяет словарь вида {группа: {ключ: значение}}.

        Неизвестные группы и ключи пропускаются с записью в журнал,
        значения None считаются неуказанными.
        """

        for group_name, values in data.items():
            group = self._groups.get(group_name)
            if group is None:
                self._logger.warning("Ignoring unknown settings group '%s'", group_name)
                continue
            if not isinstance(values, Mapping):
                raise SettingsValidationError(group_name, values, "group must be an object")
            for key, value in values.items():
                if value is None:
                    continue
                if key not in group.keys():
                    self._logger.warning("Ignoring unknown setting '%s.%s'", group_name, key)
                    continue
                self.set_value(group_name, key, value)

    def load_from_file(self, path: Path) -> None:
        """Читает JSON-файл настроек и применяет его поверх текущих значений."""

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SettingsIOError(path, exc.strerror or str(exc)) from exc
        except ValueError as exc:
            raise SettingsIOError(path, f"invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise SettingsIOError(path, "top-level value must be an object")
        self._logger.debug("Loaded settings from %s", path)
        self.apply(payload)

    def check_thresholds(self) -> None:
        """Предупреждает, если runtime_ok меньше runtime_warn; значения не меняются."""

        runtime_ok = self.get_value("thresholds", "runtime_ok")
        runtime_warn = self.get_value("thresholds", "runtime_warn")
        if runtime_ok < runtime_warn:
            self._logger.warning(
                "runtime_ok (%s) is lower than runtime_warn (%s); warning band is empty",
                runtime_ok,
                runtime_warn,
            )

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: group.to_dict() for name, group in self._groups.items()}
