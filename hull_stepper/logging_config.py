"""
Module: logging_config
Description: Handlers for the 'hull_stepper' logger. Modules log through
             logging.getLogger(__name__); the viewer, CLI and benchmark call
             setup_logging() once at startup.
"""
import logging
import sys
from typing import Optional

FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """stdout, plus `log_file` (overwritten) when given. Calling again replaces the handlers."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(FORMAT, datefmt="%H:%M:%S")
    logger = logging.getLogger("hull_stepper")
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging to stdout%s at %s", f" and {log_file}" if log_file else "",
                 logging.getLevelName(level))
    return logger
