"""Исключения слоя доступа к Docker."""

from __future__ import annotations


class DockerAPIError(Exception):
    """Ошибка обращения к Docker Engine API (нет соединения, таймаут, ответ daemon)."""


class ContainerNotFoundError(DockerAPIError):
    """Daemon не знает контейнер с таким именем."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No such container: {name}")
