"""Один проход проверки: сбор ожиданий, опрос Docker, классификация, сводка."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from docker_check.discovery.collector import ExpectationCollector
from docker_check.docker_api.client import DockerClientWrapper
from docker_check.docker_api.containers import ContainerInspector
from docker_check.health.classifier import HealthClassifier
from docker_check.health.models import Classification, RunResult
from docker_check.health.reporter import build_result
from docker_check.settings.registry import CheckSettings


def build_collector(settings: CheckSettings, logger: logging.Logger) -> ExpectationCollector:
    discovery = settings.get_group("discovery")
    return ExpectationCollector(
        init_d=discovery.get("init_d"),
        systemd=discovery.get("systemd"),
        init_dir=Path(discovery.get("init_dir")),
        systemd_dir=Path(discovery.get("systemd_dir")),
        logger=logger,
    )


def build_inspector(settings: CheckSettings, logger: logging.Logger) -> ContainerInspector:
    client = DockerClientWrapper(
        base_url=settings.get_value("docker", "base_url"),
        timeout=settings.get_value("docker", "timeout_sec"),
        logger=logger,
    )
    return ContainerInspector(client, logger=logger)


def run_check(
    settings: CheckSettings,
    *,
    collector: Optional[ExpectationCollector] = None,
    inspector: Optional[ContainerInspector] = None,
    now: Optional[datetime] = None,
    logger: Optional[logging.Logger] = None,
) -> RunResult:
    """Проверяет каждый ожидаемый контейнер по очереди и возвращает сводку."""

    log = logger or logging.getLogger(__name__)
    collector = collector or build_collector(settings, log)
    expected = collector.collect()
    if not expected:
        log.warning("No expected containers found")
        return RunResult()

    owns_inspector = inspector is None
    inspector = inspector or build_inspector(settings, log)
    classifier = HealthClassifier(
        runtime_ok=settings.get_value("thresholds", "runtime_ok"),
        runtime_warn=settings.get_value("thresholds", "runtime_warn"),
        logger=log,
    )
    classifications: List[Classification] = []
    try:
        for name in expected:
            state = inspector.inspect(name)
            classifications.append(classifier.classify(name, state, now=now))
    finally:
        if owns_inspector:
            inspector.close()
    log.info("Checked %d container(s)", len(classifications))
    return build_result(classifications)
