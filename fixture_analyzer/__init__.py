import logging
import os

from .constants import LOG_FORMAT

if not logging.getLogger().handlers:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)

logging.getLogger("werkzeug").setLevel(logging.WARNING)
