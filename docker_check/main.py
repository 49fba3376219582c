"""Точка входа: разбор аргументов, настройка логирования и запуск проверки.

Печатает в stdout ровно одну строку статуса и возвращает код выхода
плагина мониторинга: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from docker_check import __version__
from docker_check.checker import run_check
from docker_check.health.models import Severity
from docker_check.health.reporter import exit_code, render
from docker_check.settings.exceptions import SettingsError
from docker_check.settings.registry import CheckSettings
from docker_check.utils.logger import configure_logging, get_logger

LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docker-check",
        description="Check that the Docker containers expected on this host are running and healthy.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", default=None, help="Verbose logging on stderr")
    parser.add_argument("--config", type=Path, help="JSON settings file")
    parser.add_argument("--log-file", type=Path, help="Also write the log to this file")

    discovery = parser.add_argument_group("Discovery")
    discovery.add_argument(
        "--init_d",
        "--init-d",
        dest="init_d",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Expect a container for every docker-<name> init script (default: off)",
    )
    discovery.add_argument(
        "--systemd",
        dest="systemd",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Expect containers from systemd units and their compose files (default: on)",
    )
    discovery.add_argument("--init-dir", help="Init scripts directory (default: /etc/init.d)")
    discovery.add_argument(
        "--systemd-dir", help="systemd units directory (default: /etc/systemd/system)"
    )

    thresholds = parser.add_argument_group("Thresholds")
    thresholds.add_argument(
        "--runtime_ok",
        "--runtime-ok",
        dest="runtime_ok",
        type=int,
        metavar="SECONDS",
        help="Uptime at which a container without healthcheck is OK (default: 120)",
    )
    thresholds.add_argument(
        "--runtime_warn",
        "--runtime-warn",
        dest="runtime_warn",
        type=int,
        metavar="SECONDS",
        help="Uptime below which a container without healthcheck is CRITICAL (default: 60)",
    )

    docker_group = parser.add_argument_group("Docker")
    docker_group.add_argument(
        "--docker-host", help="Docker daemon URL or socket path (default: unix:///var/run/docker.sock)"
    )
    docker_group.add_argument(
        "--timeout", type=int, metavar="SECONDS", help="Per-container inspect timeout (default: 10)"
    )
    return parser


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    """Переводит аргументы командной строки в слой настроек; None означает «не задано»."""

    return {
        "discovery": {
            "init_d": args.init_d,
            "systemd": args.systemd,
            "init_dir": args.init_dir,
            "systemd_dir": args.systemd_dir,
        },
        "thresholds": {
            "runtime_ok": args.runtime_ok,
            "runtime_warn": args.runtime_warn,
        },
        "docker": {
            "base_url": args.docker_host,
            "timeout_sec": args.timeout,
        },
        "logging": {
            "level": "DEBUG" if args.debug else None,
            "file": str(args.log_file) if args.log_file else None,
        },
    }


def load_settings(args: argparse.Namespace) -> CheckSettings:
    """Собирает настройки: умолчания, затем файл --config, затем аргументы."""

    settings = CheckSettings()
    if args.config is not None:
        settings.load_from_file(args.config)
    settings.apply(overrides_from_args(args))
    settings.check_thresholds()
    return settings


def setup_logging_from_settings(settings: CheckSettings) -> None:
    logging_settings = settings.get_group("logging")
    log_file = logging_settings.get("file")
    configure_logging(
        level_name=logging_settings.get("level"),
        log_file=Path(log_file) if log_file else None,
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def _run(argv: Optional[List[str]]) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level_name="DEBUG" if args.debug else "INFO")

    try:
        settings = load_settings(args)
    except SettingsError as exc:
        print(f"{Severity.UNKNOWN.name}: {exc.message}")
        return int(Severity.UNKNOWN)
    try:
        setup_logging_from_settings(settings)
    except OSError as exc:
        LOGGER.error("Cannot open log file: %s", exc)
        reason = exc.strerror or str(exc)
        print(f"{Severity.UNKNOWN.name}: cannot open log file {exc.filename}: {reason}")
        return int(Severity.UNKNOWN)
    LOGGER.debug("docker-check %s, settings: %s", __version__, settings.to_dict())

    try:
        result = run_check(settings)
    except Exception as exc:
        LOGGER.exception("Check failed")
        print(f"{Severity.UNKNOWN.name}: check failed: {exc}")
        return int(Severity.UNKNOWN)

    print(render(result))
    return exit_code(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Основная точка входа; Ctrl+C завершает проверку молча с кодом UNKNOWN."""

    try:
        return _run(argv)
    except KeyboardInterrupt:
        return int(Severity.UNKNOWN)


if __name__ == "__main__":
    sys.exit(main())
