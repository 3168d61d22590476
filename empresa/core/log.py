"""Logging setup shared by the HTTP app and the maintenance scripts."""

from __future__ import annotations

import logging

from .config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=_FORMAT)
    logging.getLogger("empresa").setLevel(level)
