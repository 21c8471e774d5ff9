from __future__ import annotations

import logging

from live_process.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or get_settings().log_level, format=LOG_FORMAT)
