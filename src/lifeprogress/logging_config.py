"""
Logging Configuration
Sets up the 'lifeprogress' logger and routes Qt's own messages into it.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'

_qt_logger = logging.getLogger("lifeprogress.qt")


def resolve_level(level: Union[int, str]) -> int:
    """Accept either a logging constant or its name ('debug', 'INFO', ...)."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'lifeprogress' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "debug")
        log_file: Optional path to save logs to a file.
    """
    level = resolve_level(level)

    logger = logging.getLogger("lifeprogress")
    logger.setLevel(level)

    # Avoid duplicate handlers when the app is restarted in the same process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized ({logging.getLevelName(level)}).")


def install_qt_message_handler() -> None:
    """Forward qDebug/qWarning/... output to the 'lifeprogress.qt' logger."""
    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _handler(msg_type, _context, message: str) -> None:
        _qt_logger.log(levels.get(msg_type, logging.WARNING), message)

    qInstallMessageHandler(_handler)
