"""Мелкие вспомогательные функции."""

from __future__ import annotations

_URL_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_docker_url(raw_value: str) -> str:
    """Дополняет путь к сокету префиксом unix://, остальные адреса не трогает."""

    value = raw_value.strip()
    if value.lower().startswith(_URL_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value
