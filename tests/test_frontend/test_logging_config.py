"""Tests for client logging setup."""
import io
import logging
import pytest
from src.sitewalk_app.logging_config import ColorFormatter, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_color_formatter_leaves_record_untouched():
    formatter = ColorFormatter('%(levelname)s %(message)s')
    record = logging.makeLogRecord({'levelname': 'ERROR', 'levelno': logging.ERROR, 'msg': 'boom'})

    output = formatter.format(record)
    assert output == '\033[31mERROR\033[0m boom'
    assert record.levelname == 'ERROR'


def test_setup_logging_plain_stream(root_logger, monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    stream = io.StringIO()

    logger = setup_logging(stream)
    assert logger is root_logger
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert not isinstance(root_logger.handlers[0].formatter, ColorFormatter)
    assert 'Client logging initialized (level: DEBUG)' in stream.getvalue()
