"""Валидаторы значений настроек проверки.

Значения приходят из JSON и командной строки, поэтому проверяются строго:
bool не считается числом, уровни логирования сравниваются без учёта регистра.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple

DOCKER_URL_SCHEMES = ("unix", "tcp", "ssh", "npipe", "http", "https")


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> Tuple[bool, str]:
        """Возвращает (True, "") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Значение должно иметь заданный тип; bool принимается только для bool."""

    def __init__(self, expected_type: type) -> None:
        self.expected_type = expected_type

    def validate(self, value: Any) -> Tuple[bool, str]:
        is_bool = isinstance(value, bool)
        if isinstance(value, self.expected_type) and (self.expected_type is bool or not is_bool):
            return True, ""
        return (
            False,
            f"Expected value of type {self.expected_type.__name__}, got {type(value).__name__}",
        )


class IntegerValidator(Validator):
    """Целое число в границах [min_value, max_value]; верхняя граница необязательна."""

    def __init__(self, min_value: int = 0, max_value: Optional[int] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, bool) or not isinstance(value, int):
            return False, f"Expected value of type int, got {type(value).__name__}"
        if value < self.min_value:
            return False, f"Value {value} is below the minimum {self.min_value}"
        if self.max_value is not None and value > self.max_value:
            return False, f"Value {value} is above the maximum {self.max_value}"
        return True, ""


class ChoiceValidator(Validator):
    """Строка из конечного набора, регистр не важен."""

    def __init__(self, choices: Iterable[str]) -> None:
        self.choices = tuple(choice.upper() for choice in choices)

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, str) and value.upper() in self.choices:
            return True, ""
        return False, f"Value {value!r} not in allowed values: {', '.join(self.choices)}"


class DockerURLValidator(Validator):
    """Адрес Docker daemon со схемой из DOCKER_URL_SCHEMES и непустым адресом."""

    def validate(self, value: Any) -> Tuple[bool, str]:
        if not isinstance(value, str):
            return False, f"Expected a URL string, got {type(value).__name__}"
        scheme, separator, address = value.partition("://")
        if not separator or not address:
            return False, f"Value '{value}' is not a URL (expected scheme://address)"
        if scheme.lower() not in DOCKER_URL_SCHEMES:
            return False, f"Unsupported scheme '{scheme}', expected one of {DOCKER_URL_SCHEMES}"
        return True, ""
