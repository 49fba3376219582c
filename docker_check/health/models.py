"""Модели результатов проверки."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class Severity(IntEnum):
    """Уровни статуса; значения совпадают с кодами выхода плагина мониторинга."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(slots=True, frozen=True)
class Classification:
    """Итог проверки одного ожидаемого контейнера."""

    name: str
    severity: Severity
    message: str


@dataclass(slots=True)
class RunResult:
    """Сообщения всех контейнеров, разложенные по уровням и отсортированные."""

    critical: List[str] = field(default_factory=list)
    warning: List[str] = field(default_factory=list)
    ok: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.critical) + len(self.warning) + len(self.ok)

    @property
    def severity(self) -> Severity:
        """Худший присутствующий уровень; UNKNOWN, если сообщений нет."""

        if self.critical:
            return Severity.CRITICAL
        if self.warning:
            return Severity.WARNING
        if self.ok:
            return Severity.OK
        return Severity.UNKNOWN
