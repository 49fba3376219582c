"""Структуры, которые появляются при обходе unit-файлов и compose-файлов."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(slots=True, frozen=True)
class ComposeUnit:
    """systemd unit, в заголовке которого указан compose-файл."""

    unit_path: Path
    compose_file: Path


@dataclass(slots=True)
class ComposeManifest:
    """Версия и имена сервисов compose-файла; остальное содержимое не используется."""

    path: Path
    version: str
    services: List[str] = field(default_factory=list)

    @property
    def group(self) -> str:
        """Имя проекта: каталог, в котором лежит compose-файл."""

        return self.path.parent.name

    def container_names(self) -> List[str]:
        return [f"{self.group}_{service}_1" for service in self.services]
