import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from . import settings

LOG_FILENAME = "app.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 3


def setup_logger(
    name: Optional[str] = None, log_level: int | str = settings.LOG_LEVEL
) -> logging.Logger:
    """
    Configures report logging: a bare console stream, so the seller ranking
    table prints cleanly, and a timestamped rotating log under settings.LOG_DIR.
    Calling it again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    file_handler = RotatingFileHandler(
        settings.LOG_DIR / LOG_FILENAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    for handler in (console_handler, file_handler):
        handler.setLevel(log_level)
        logger.addHandler(handler)

    return logger
