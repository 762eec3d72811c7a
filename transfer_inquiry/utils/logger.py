"""
Simple logging
"""

import logging
import sys

from transfer_inquiry.core.config import settings


def setup_logging():
    logger = logging.getLogger("transfer_inquiry")
    logger.setLevel(settings.LOG_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

logger = setup_logging()
