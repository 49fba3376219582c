"""Классификация состояния контейнера по статусу, healthcheck и времени работы."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Optional

from docker_check.docker_api.models import ContainerState
from docker_check.health.models import Classification, Severity

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"

# Docker пишет StartedAt в UTC с наносекундами: 2024-05-01T10:20:30.123456789Z
_UTC_TIMESTAMP = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?Z$")

_UNITS = (("d", 86400), ("h", 3600), ("m", 60), ("s", 1))

LOGGER = logging.getLogger(__name__)


def parse_started_at(value: Optional[str]) -> Optional[datetime]:
    """Разбирает отметку времени UTC с суффиксом Z; для других форматов возвращает None."""

    if not value:
        return None
    match = _UTC_TIMESTAMP.match(value)
    if match is None:
        return None
    base, fraction = match.groups()
    try:
        parsed = datetime.strptime(base, "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return None
    microseconds = int((fraction or "0")[:6].ljust(6, "0"))
    return parsed.replace(microsecond=microseconds, tzinfo=timezone.utc)


def elapsed_seconds(started_at: Optional[str], now: Optional[datetime] = None) -> Optional[float]:
    """Секунды с момента запуска; None, если время запуска не распознано."""

    started = parse_started_at(started_at)
    if started is None:
        return None
    current = now or datetime.now(timezone.utc)
    return max(0.0, (current - started).total_seconds())


def format_elapsed(seconds: Optional[float]) -> str:
    """Две старшие единицы из d/h/m/s: 2d3h, 1h5m, 1m0s, 40s."""

    if seconds is None:
        return "unknown"
    remaining = int(seconds)
    for index, (label, size) in enumerate(_UNITS[:-1]):
        if remaining >= size:
            major, rest = divmod(remaining, size)
            minor_label, minor_size = _UNITS[index + 1]
            return f"{major}{label}{rest // minor_size}{minor_label}"
    return f"{remaining}s"


class HealthClassifier:
    """Присваивает контейнеру CRITICAL, WARNING или OK.

    Правила применяются по порядку, срабатывает первое:

    1. состояние не найдено -> CRITICAL
    2. нет status/running/started_at -> WARNING
    3. контейнер не запущен -> CRITICAL
    4. healthcheck `unhealthy` -> CRITICAL
    5. healthcheck в промежуточном статусе (`starting`) -> WARNING
    6. healthcheck `healthy` -> OK
    7. без healthcheck решает время работы: неизвестно или не меньше
       runtime_ok -> OK, не меньше runtime_warn -> WARNING, иначе CRITICAL.
    """

    def __init__(
        self,
        runtime_ok: int = 120,
        runtime_warn: int = 60,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.runtime_ok = runtime_ok
        self.runtime_warn = runtime_warn
        self._logger = logger or LOGGER

    def classify(
        self,
        name: str,
        state: Optional[ContainerState],
        now: Optional[datetime] = None,
    ) -> Classification:
        result = self._classify(name, state, now)
        self._logger.debug("%s -> %s: %s", name, result.severity.name, result.message)
        return result

    def _classify(
        self,
        name: str,
        state: Optional[ContainerState],
        now: Optional[datetime],
    ) -> Classification:
        if state is None:
            return Classification(name, Severity.CRITICAL, f"{name} not found")
        if not state.is_complete:
            return Classification(name, Severity.WARNING, f"{name} unparsable")
        if not state.running:
            return Classification(name, Severity.CRITICAL, f"{name} not running ({state.status})")

        elapsed = elapsed_seconds(state.started_at, now)
        uptime = format_elapsed(elapsed)
        health = state.health_status
        if health is not None:
            if health == UNHEALTHY:
                return Classification(name, Severity.CRITICAL, f"{name} {health} (up {uptime})")
            if health != HEALTHY:
                return Classification(name, Severity.WARNING, f"{name} {health} (up {uptime})")
            return Classification(name, Severity.OK, f"{name} {health} (up {uptime})")

        message = f"{name} up {uptime}"
        if elapsed is None:
            self._logger.debug("Unrecognized StartedAt for %s: %r", name, state.started_at)
            return Classification(name, Severity.OK, message)
        if elapsed >= self.runtime_ok:
            return Classification(name, Severity.OK, message)
        if elapsed >= self.runtime_warn:
            return Classification(name, Severity.WARNING, message)
        return Classification(name, Severity.CRITICAL, message)
