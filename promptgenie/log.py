# ---------- Logging
# Named loggers share one stream format; level comes from settings.

import logging

from promptgenie.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(h)
    logger.setLevel(settings.LOG_LEVEL)
    return logger
