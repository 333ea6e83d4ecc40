import logging
from typing import ClassVar

LIBRARY_NAME = "cityweather"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(LIBRARY_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: str = "WARNING") -> None:
    """
    Route library logs to stderr at the given level.

    Library code only ever logs; handlers are installed by entry points such as
    the CLI, which read the level from WeatherEnv.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logger.handlers.clear()
    logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


class LoggingMixin:
    logger: ClassVar[logging.Logger]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.logger = logging.getLogger(f"{LIBRARY_NAME}.{cls.__name__}")
