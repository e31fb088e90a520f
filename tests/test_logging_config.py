import logging

import pytest
from PySide6.QtCore import QtMsgType, qInstallMessageHandler, qWarning

from division.logging_config import qt_message_handler, setup_logging


@pytest.fixture
def division_logger():
    logger = logging.getLogger("division")
    yield logger
    qInstallMessageHandler(None)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_setup_logging_replaces_handlers(tmp_path, division_logger):
    log_file = tmp_path / "division.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger is division_logger
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("division.style").debug("hello from the builder")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the builder" in log_file.read_text(encoding="utf-8")


def test_qt_warnings_reach_the_log(caplog, division_logger):
    setup_logging(level=logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger="division"):
        qWarning("image could not be decoded")

    records = [r for r in caplog.records if r.name == "division.qt.messages"]
    assert [r.levelno for r in records] == [logging.WARNING]
    assert "image could not be decoded" in records[0].getMessage()


@pytest.mark.parametrize("mode, level", [
    (QtMsgType.QtDebugMsg, logging.DEBUG),
    (QtMsgType.QtCriticalMsg, logging.ERROR),
])
def test_qt_message_levels(caplog, mode, level):
    with caplog.at_level(logging.DEBUG, logger="division"):
        qt_message_handler(mode, None, "from qt")
    assert caplog.records[-1].levelno == level
    assert caplog.records[-1].getMessage() == "from qt"
