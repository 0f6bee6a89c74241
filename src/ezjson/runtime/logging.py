import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import EZJSON_CONFIG

LOGGER_NAME = "ezjson"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class _EzjsonRichConsoleHandler(RichHandler):
    """Console handler installed by ``configure_logging``."""

    def __init__(self, level: int | str = logging.NOTSET) -> None:
        super().__init__(
            level=level,
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )


class _EzjsonStreamHandler(logging.StreamHandler):
    """Plain stderr handler used when rich output is turned off."""

    def __init__(self, level: int | str = logging.NOTSET) -> None:
        super().__init__()
        self.setLevel(level)
        self.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a console handler to the ezjson logger.

    Safe to call repeatedly; an existing console handler is replaced rather
    than duplicated. ``level`` defaults to ``EZJSON_CONFIG.log_level``.
    """
    logger = get_logger()
    resolved = level if level is not None else EZJSON_CONFIG.log_level
    if isinstance(resolved, str):
        resolved = resolved.strip().upper()
    for handler in list(logger.handlers):
        if isinstance(handler, (_EzjsonRichConsoleHandler, _EzjsonStreamHandler)):
            logger.removeHandler(handler)

    if EZJSON_CONFIG.rich_logging:
        logger.addHandler(_EzjsonRichConsoleHandler(level=resolved))
    else:
        logger.addHandler(_EzjsonStreamHandler(level=resolved))
    logger.setLevel(resolved)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
