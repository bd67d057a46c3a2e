"""
Logging Configuration for flj.

Provides centralized logger setup for the ``flj`` logger family.
By default the package logger only carries a NullHandler; debug output is
switched on through the ``debug_log`` setting (or FLJ_DEBUG_LOG).
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config_loader import FljSettings, get_settings

PACKAGE_LOGGER = "flj"
LOG_FILENAME = "flj.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class FlushingStreamHandler(logging.StreamHandler):
    """StreamHandler that flushes after every emit.

    ::: This is-in-layer Infrastructure-Layer.
    ::: This is a handler.
    ::: This is stateless.
    """
    def emit(self, record):
        super().emit(record)
        self.flush()


def _create_file_handler(log_dir: str) -> Optional[logging.FileHandler]:
    """
    Create a file handler writing to ``<log_dir>/flj.log``.

    Returns:
        Configured FileHandler, or None if the directory cannot be used
    """
    try:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path / LOG_FILENAME, mode='a', encoding='utf-8')
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def _create_stderr_handler() -> logging.StreamHandler:
    """Create a stderr handler for console output with auto-flush."""
    handler = FlushingStreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def configure_logging(settings: Optional[FljSettings] = None) -> logging.Logger:
    """
    Configure the package logger from settings.

    Existing non-null handlers are replaced, so calling this again after the
    settings change reconfigures the logger.

    Args:
        settings: Settings to apply; defaults to the loaded package settings

    Returns:
        The configured ``flj`` logger
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            handler.close()
            logger.removeHandler(handler)

    logger.setLevel(settings.log_level)

    if settings.debug_log:
        logger.addHandler(_create_stderr_handler())
        if settings.log_dir:
            file_handler = _create_file_handler(settings.log_dir)
            if file_handler:
                logger.addHandler(file_handler)

    return logger


# Apply the configured debug output at import time
if get_settings().debug_log:
    configure_logging()
