import logging
import sys

from string_mixer.core.config import settings


def configure_logging(level=None):
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format='%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    return logging.getLogger("string_mixer")
