"""Проверка состояния Docker-контейнеров, ожидаемых на хосте."""

__version__ = "1.0.0"
