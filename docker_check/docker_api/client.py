"""Обёртка над docker-py с отложенным созданием клиента."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import docker
from docker.errors import DockerException, NotFound
from requests.exceptions import RequestException

from docker_check.docker_api.exceptions import ContainerNotFoundError, DockerAPIError

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Создаёт docker client при первом обращении и переводит ошибки SDK в DockerAPIError."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        raw_client: Optional[Any] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._client = raw_client
        self._init_error: Optional[DockerAPIError] = None
        self._logger = logger or LOGGER

    def _create_client(self) -> Any:
        try:
            return docker.DockerClient(base_url=self.base_url, timeout=self.timeout)
        except DockerException as exc:
            self._logger.error("Docker client init error via %s: %s", self.base_url, exc)
            raise DockerAPIError(str(exc)) from exc

    def get_raw_client(self) -> Any:
        """Возвращает docker client, создавая его при необходимости.

        Неудачная попытка запоминается: до конца запуска повторного
        подключения к недоступному daemon не будет.
        """

        if self._init_error is not None:
            raise self._init_error
        if self._client is None:
            try:
                self._client = self._create_client()
            except DockerAPIError as exc:
                self._init_error = exc
                raise
        return self._client

    def inspect_container(self, name: str) -> Dict[str, Any]:
        """Возвращает документ `docker inspect` для контейнера с именем name."""

        raw = self.get_raw_client()
        try:
            return raw.api.inspect_container(name)
        except NotFound as exc:
            raise ContainerNotFoundError(name) from exc
        except (DockerException, RequestException) as exc:
            raise DockerAPIError(str(exc)) from exc

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
