"""Logging setup for the API process."""

import logging

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "shiftboard-console"


def configure_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger.

    Safe to call more than once (app factory in tests): the handler is only
    added the first time, later calls just update the level.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG"
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)
