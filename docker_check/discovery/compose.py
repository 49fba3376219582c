"""Разворачивание systemd unit-ов, обёрнутых вокруг docker-compose, в имена контейнеров.

Unit-файл считается compose-unit-ом, если в блоке комментариев в его начале
есть строка `# compose_file=/path/to/docker-compose.yml`. Имена контейнеров
строятся так же, как их строит docker-compose: `<каталог>_<сервис>_1`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, List, Optional

import yaml

from docker_check.discovery.models import ComposeManifest, ComposeUnit

COMMENT_MARKER = "#"
COMPOSE_FILE_KEY = "compose_file"
KNOWN_VERSIONS = frozenset(
    ["2", "2.0", "2.1", "2.2", "2.3", "2.4"] + ["3"] + [f"3.{minor}" for minor in range(10)]
)

_MARKER = re.compile(rf"^{COMMENT_MARKER}\s*{COMPOSE_FILE_KEY}\s*=\s*(?P<path>\S.*?)\s*$")


def read_header(path: Path) -> List[str]:
    """Возвращает строки комментариев, идущие подряд с начала файла."""

    header: List[str] = []
    with path.open(encoding="utf-8", errors="replace") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped.startswith(COMMENT_MARKER):
                break
            header.append(stripped)
    return header


def _normalize_version(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float)):
        return str(value).strip()
    return None


class ComposeResolver:
    """Находит compose-файл unit-а и превращает его сервисы в ожидаемые контейнеры."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def find_unit(self, unit_path: Path) -> Optional[ComposeUnit]:
        """ComposeUnit, если в заголовке unit-а есть ссылка на compose-файл."""

        for line in read_header(unit_path):
            match = _MARKER.match(line)
            if match is None:
                continue
            compose_file = Path(match.group("path"))
            if not compose_file.is_absolute():
                compose_file = unit_path.parent / compose_file
            return ComposeUnit(unit_path=unit_path, compose_file=compose_file)
        return None

    def load_manifest(self, compose_file: Path) -> Optional[ComposeManifest]:
        """Читает compose-файл; None для нечитаемых файлов и неизвестных версий."""

        try:
            with compose_file.open("rb") as handle:
                document = yaml.safe_load(handle)
        except OSError as exc:
            self._logger.error("Cannot read compose file %s: %s", compose_file, exc)
            return None
        except yaml.YAMLError as exc:
            self._logger.error("Cannot parse compose file %s: %s", compose_file, exc)
            return None

        if not isinstance(document, dict):
            self._logger.error("Compose file %s is not a mapping", compose_file)
            return None
        version = _normalize_version(document.get("version"))
        if version not in KNOWN_VERSIONS:
            self._logger.error(
                "Compose file %s has unsupported version %r, skipping",
                compose_file,
                document.get("version"),
            )
            return None
        services = document.get("services") or {}
        if not isinstance(services, dict):
            self._logger.error("Compose file %s: 'services' is not a mapping", compose_file)
            return None
        return ComposeManifest(
            path=compose_file,
            version=version,
            services=[str(service) for service in services],
        )

    def resolve(self, unit_path: Path) -> List[str]:
        """Имена контейнеров compose-проекта unit-а; пустой список, если unit не compose."""

        try:
            unit = self.find_unit(unit_path)
        except OSError as exc:
            self._logger.error("Cannot read unit file %s: %s", unit_path, exc)
            return []
        if unit is None:
            return []
        manifest = self.load_manifest(unit.compose_file)
        if manifest is None:
            return []
        names = manifest.container_names()
        self._logger.debug(
            "Unit %s -> compose %s (version %s): %s",
            unit.unit_path,
            manifest.path,
            manifest.version,
            ", ".join(names) or "no services",
        )
        return names
