"""Тесты сводки результатов."""

from __future__ import annotations

from docker_check.health.models import Classification, RunResult, Severity
from docker_check.health.reporter import build_result, exit_code, render


def item(name: str, severity: Severity) -> Classification:
    return Classification(name=name, severity=severity, message=f"{name} {severity.name.lower()}")


def test_messages_are_partitioned_and_sorted() -> None:
    classifications = [
        item("zeta", Severity.OK),
        item("beta", Severity.CRITICAL),
        item("alpha", Severity.OK),
        item("gamma", Severity.WARNING),
        item("alpha", Severity.CRITICAL),
    ]

    result = build_result(classifications)

    assert result.critical == ["alpha critical", "beta critical"]
    assert result.warning == ["gamma warning"]
    assert result.ok == ["alpha ok", "zeta ok"]
    assert result.total == len(classifications)


def test_order_of_input_does_not_matter() -> None:
    classifications = [item(name, Severity.OK) for name in ("c", "a", "b")]

    assert build_result(classifications) == build_result(reversed(classifications))


def test_render_concatenates_groups_in_severity_order() -> None:
    result = RunResult(
        critical=["db not found"],
        warning=["cache up 1m30s"],
        ok=["a up 1h0m", "b up 2d3h"],
    )

    assert render(result) == (
        "CRITICAL: db not found, WARNING: cache up 1m30s, OK: a up 1h0m, b up 2d3h"
    )


def test_render_skips_empty_groups() -> None:
    assert render(RunResult(ok=["web up 1h0m"])) == "OK: web up 1h0m"
    assert render(RunResult(warning=["web unparsable"])) == "WARNING: web unparsable"


def test_critical_takes_precedence() -> None:
    result = RunResult(critical=["x"], warning=["y"] * 5, ok=["z"] * 10)

    assert result.severity is Severity.CRITICAL
    assert exit_code(result) == 2


def test_warning_takes_precedence_over_ok() -> None:
    result = RunResult(warning=["y"], ok=["z"] * 10)

    assert exit_code(result) == 1


def test_ok_only() -> None:
    assert exit_code(RunResult(ok=["z"])) == 0


def test_empty_result_is_unknown() -> None:
    result = build_result([])

    assert render(result) == "UNKNOWN: No containers specified"
    assert exit_code(result) == 3
