"""
Logging Configuration
Sets up the logger of the 'playermarkers' namespace.

Marker tracing logs every marker added or removed and every template
consumed. It is noisy during a task load, so it has its own switch instead
of riding on the global level.
"""
import logging
import sys
from typing import Optional

MARKER_TRACE_LOGGER = "playermarkers.app.player_markers"


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None,
                  trace_markers: bool = False) -> None:
    """
    Configures the root logger for the 'playermarkers' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        trace_markers: Log marker synchronization at DEBUG regardless of `level`.
    """
    logger = logging.getLogger("playermarkers")
    logger.setLevel(level)

    # Re-running setup (e.g. from tests) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    # Handlers pass everything through; the loggers decide what is emitted
    handler_level = min(level, logging.DEBUG) if trace_markers else level

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(handler_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # NOTSET defers to the package logger's level
    marker_logger = logging.getLogger(MARKER_TRACE_LOGGER)
    marker_logger.setLevel(logging.DEBUG if trace_markers else logging.NOTSET)

    logger.info(f"Logging initialized (marker tracing {'on' if trace_markers else 'off'}).")
