"""Проверки валидаторов настроек."""

from __future__ import annotations

import pytest

from docker_check.settings.validators import (
    ChoiceValidator,
    DockerURLValidator,
    IntegerValidator,
    TypeValidator,
)


def test_type_validator_rejects_bool_for_str() -> None:
    is_valid, error = TypeValidator(str).validate(True)
    assert not is_valid
    assert "bool" in error


def test_type_validator_accepts_bool_when_expected() -> None:
    assert TypeValidator(bool).validate(False) == (True, "")


def test_type_validator_failure() -> None:
    is_valid, error = TypeValidator(str).validate(123)
    assert not is_valid
    assert "str" in error


@pytest.mark.parametrize("value", [True, "120", 1.5])
def test_integer_validator_rejects_non_integers(value: object) -> None:
    is_valid, error = IntegerValidator().validate(value)
    assert not is_valid
    assert "int" in error


def test_integer_validator_open_upper_bound() -> None:
    validator = IntegerValidator(0)
    assert validator.validate(10**6) == (True, "")
    is_valid, error = validator.validate(-1)
    assert not is_valid
    assert "below the minimum 0" in error


def test_integer_validator_upper_bound() -> None:
    validator = IntegerValidator(1, 1024)
    assert validator.validate(1024) == (True, "")
    assert "above the maximum 1024" in validator.validate(1025)[1]


def test_choice_validator_ignores_case() -> None:
    validator = ChoiceValidator(["DEBUG", "INFO"])
    assert validator.validate("info") == (True, "")
    assert not validator.validate("TRACE")[0]
    assert not validator.validate(10)[0]


@pytest.mark.parametrize(
    "url", ["unix:///var/run/docker.sock", "tcp://10.0.0.5:2375", "ssh://root@host"]
)
def test_docker_url_validator_accepts_known_schemes(url: str) -> None:
    assert DockerURLValidator().validate(url) == (True, "")


def test_docker_url_validator_failures() -> None:
    validator = DockerURLValidator()
    assert "scheme://address" in validator.validate("/var/run/docker.sock")[1]
    assert "scheme://address" in validator.validate("tcp://")[1]
    assert "Unsupported scheme 'ftp'" in validator.validate("ftp://host")[1]
    assert "string" in validator.validate(1)[1]
