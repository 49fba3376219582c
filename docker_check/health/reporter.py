"""Сводка результатов в одну строку статуса."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from docker_check.health.models import Classification, RunResult, Severity

NO_CONTAINERS_MESSAGE = "No containers specified"


def build_result(classifications: Iterable[Classification]) -> RunResult:
    """Раскладывает сообщения по уровням и сортирует каждую группу."""

    result = RunResult()
    buckets = {
        Severity.CRITICAL: result.critical,
        Severity.WARNING: result.warning,
        Severity.OK: result.ok,
    }
    for item in classifications:
        buckets[item.severity].append(item.message)
    for messages in buckets.values():
        messages.sort()
    return result


def render(result: RunResult) -> str:
    """Строка вида `CRITICAL: a, b, WARNING: c, OK: d`."""

    if result.severity is Severity.UNKNOWN:
        return f"{Severity.UNKNOWN.name}: {NO_CONTAINERS_MESSAGE}"
    groups: List[Tuple[Severity, List[str]]] = [
        (Severity.CRITICAL, result.critical),
        (Severity.WARNING, result.warning),
        (Severity.OK, result.ok),
    ]
    return ", ".join(
        f"{severity.name}: {', '.join(messages)}" for severity, messages in groups if messages
    )


def exit_code(result: RunResult) -> int:
    return int(result.severity)
