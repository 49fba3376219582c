"""Запуск проверки через `python -m docker_check`."""

from __future__ import annotations

import sys

from docker_check.main import main

if __name__ == "__main__":
    sys.exit(main())
