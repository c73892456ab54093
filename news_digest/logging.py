from __future__ import annotations

import logging

from .config import Config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(config: Config) -> None:
    logging.basicConfig(level=config.log_level.upper(), format=LOG_FORMAT)
