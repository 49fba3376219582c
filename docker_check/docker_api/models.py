"""Снимок состояния контейнера из документа `docker inspect`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

NO_HEALTHCHECK = "none"


@dataclass(slots=True)
class ContainerState:
    """Поля `State` контейнера; отсутствующие или некорректные поля равны None."""

    name: str
    status: Optional[str] = None
    running: Optional[bool] = None
    started_at: Optional[str] = None
    health_status: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True, если status, running и started_at извлечены."""

        return self.status is not None and self.running is not None and self.started_at is not None

    @classmethod
    def from_attrs(cls, name: str, attrs: Dict[str, Any]) -> "ContainerState":
        state = attrs.get("State")
        if not isinstance(state, dict):
            return cls(name=name)
        health = state.get("Health")
        health_status = health.get("Status") if isinstance(health, dict) else None
        return cls(
            name=name,
            status=_as_str(state.get("Status")),
            running=state.get("Running") if isinstance(state.get("Running"), bool) else None,
            started_at=_as_str(state.get("StartedAt")),
            health_status=_health(health_status),
        )


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _health(value: Any) -> Optional[str]:
    # "none" daemon ставит контейнерам без healthcheck
    status = _as_str(value)
    if not status or status == NO_HEALTHCHECK:
        return None
    return status
