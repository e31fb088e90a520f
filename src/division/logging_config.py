"""
Logging Configuration
=====================
Configures the 'division' logger namespace and routes Qt's own diagnostics
(failed image loads, painter warnings, ...) into it.

Exports:
    setup_logging       handlers for the namespace, optional Qt capture
    qt_message_handler  the function installed with `qInstallMessageHandler`
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QMessageLogContext, QtMsgType, qInstallMessageHandler

LOGGER_NAMESPACE = "division"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"

qt_logger = logging.getLogger(f"{LOGGER_NAMESPACE}.qt.messages")

_QT_LEVELS: dict[QtMsgType, int] = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def qt_message_handler(mode: QtMsgType, context: Optional[QMessageLogContext], message: str) -> None:
    """Forward a Qt diagnostic to the `division.qt.messages` logger."""
    category = getattr(context, "category", None)
    if category and category != "default":
        message = f"{category}: {message}"
    qt_logger.log(_QT_LEVELS.get(mode, logging.WARNING), message)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    capture_qt: bool = True
) -> logging.Logger:
    """
    Configures the 'division' namespace. Calling it again replaces the handlers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path of a log file, truncated on setup.
        capture_qt: Install `qt_message_handler` so Qt warnings end up in the log.

    Returns:
        The namespace logger.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if capture_qt:
        qInstallMessageHandler(qt_message_handler)

    logger.debug(
        f"Logging initialized: level={logging.getLevelName(level)}, "
        f"file={log_file}, qt messages={'captured' if capture_qt else 'ignored'}"
    )
    return logger
