"""Сбор имён контейнеров, которые должны работать на хосте."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional, Pattern

from docker_check.discovery.compose import ComposeResolver

INIT_SCRIPT_PATTERN = re.compile(r"^docker-(?P<name>.+)$")
SYSTEMD_UNIT_PATTERN = re.compile(r"^docker-(?P<name>.+)\.service$")
UNIT_SUFFIX = ".service"


class ExpectationCollector:
    """Собирает ожидаемые контейнеры из init-скриптов, systemd unit-ов и compose-файлов.

    Ошибка одного источника записывается в журнал и не мешает остальным.
    Порядок имён не важен, дубликаты сохраняются.
    """

    def __init__(
        self,
        *,
        init_d: bool = False,
        systemd: bool = True,
        init_dir: Path = Path("/etc/init.d"),
        systemd_dir: Path = Path("/etc/systemd/system"),
        resolver: Optional[ComposeResolver] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.init_d = init_d
        self.systemd = systemd
        self.init_dir = init_dir
        self.systemd_dir = systemd_dir
        self._logger = logger or logging.getLogger(__name__)
        self._resolver = resolver or ComposeResolver(logger=self._logger)

    def collect(self) -> List[str]:
        expected: List[str] = []
        if self.init_d:
            expected.extend(self.from_init_scripts())
        if self.systemd:
            expected.extend(self.from_systemd_units())
            expected.extend(self.from_compose_units())
        self._logger.debug("Expected containers: %s", ", ".join(expected) or "none")
        return expected

    def from_init_scripts(self) -> List[str]:
        return self._match_names(self.init_dir, INIT_SCRIPT_PATTERN)

    def from_systemd_units(self) -> List[str]:
        return self._match_names(self.systemd_dir, SYSTEMD_UNIT_PATTERN)

    def from_compose_units(self) -> List[str]:
        """Каждый *.service каталога systemd проверяется на ссылку на compose-файл."""

        names: List[str] = []
        for path in self._regular_files(self.systemd_dir):
            if path.name.endswith(UNIT_SUFFIX):
                names.extend(self._resolver.resolve(path))
        return names

    def _match_names(self, directory: Path, pattern: Pattern[str]) -> List[str]:
        names: List[str] = []
        for path in self._regular_files(directory):
            match = pattern.match(path.name)
            if match is not None:
                names.append(match.group("name"))
        return names

    def _regular_files(self, directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            self._logger.error("Cannot list %s: %s", directory, exc)
            return
        for entry in entries:
            try:
                if entry.is_file():
                    yield entry
            except OSError as exc:  # pragma: no cover - зависит от файловой системы
                self._logger.error("Cannot stat %s: %s", entry, exc)
