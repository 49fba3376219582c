"""Получение состояния ожидаемых контейнеров через Docker client."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from docker_check.docker_api.client import DockerClientWrapper
from docker_check.docker_api.exceptions import ContainerNotFoundError, DockerAPIError
from docker_check.docker_api.models import ContainerState

SERVICE_SUFFIX = "_1"
RUN_SUFFIX = "_run_1"


def run_variant(name: str) -> Optional[str]:
    """Имя, которое получает контейнер сервиса при `docker-compose run`.

    `myapp_web_1` -> `myapp_web_run_1`; для имён без суффикса `_1`
    (и для уже run-имён) возвращает None.
    """

    if not name.endswith(SERVICE_SUFFIX) or name.endswith(RUN_SUFFIX):
        return None
    return name[: -len(SERVICE_SUFFIX)] + RUN_SUFFIX


class ContainerInspector:
    """Запрашивает состояние контейнеров; ничего не меняет на стороне daemon."""

    def __init__(self, client: DockerClientWrapper, logger: Optional[logging.Logger] = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    def _fetch(self, name: str) -> Optional[Dict[str, Any]]:
        try:
            attrs = self._client.inspect_container(name)
        except ContainerNotFoundError:
            self._logger.debug("Container %s not found", name)
            return None
        except DockerAPIError as exc:
            self._logger.error("Cannot inspect container %s: %s", name, exc)
            return None
        if isinstance(attrs, list):
            attrs = attrs[0] if attrs else None
        if not isinstance(attrs, dict):
            self._logger.error("Unexpected inspect payload for %s: %r", name, type(attrs).__name__)
            return None
        return attrs

    def inspect(self, name: str) -> Optional[ContainerState]:
        """Возвращает ContainerState или None, если контейнер не найден.

        При неудаче для имени вида `*_1` делается одна повторная попытка
        с именем `*_run_1`.
        """

        attrs = self._fetch(name)
        if attrs is None:
            alternate = run_variant(name)
            if alternate is None:
                return None
            self._logger.debug("Retrying %s as %s", name, alternate)
            attrs = self._fetch(alternate)
            if attrs is None:
                return None
        state = ContainerState.from_attrs(name, attrs)
        self._logger.debug(
            "Container %s: status=%s running=%s started_at=%s health=%s",
            name,
            state.status,
            state.running,
            state.started_at,
            state.health_status,
        )
        return state

    def close(self) -> None:
        self._client.close()
