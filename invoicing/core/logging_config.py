# invoicing/core/logging_config.py

import logging

from invoicing.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format=LOG_FORMAT,
    )
