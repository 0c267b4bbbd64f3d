import io
import logging

from update_deps.logger import MultiLineFormatter, get_logger
from update_deps.logger.logger import module_logger, setup_console_logging


def test_get_logger() -> None:
    assert get_logger() is module_logger
    assert get_logger().name == 'update_deps'
    assert get_logger('config').name == 'update_deps.config'
    assert get_logger('config').parent is module_logger


def test_multi_line_formatter() -> None:
    record = logging.LogRecord('update_deps', logging.INFO, __file__, 1, 'line 1\nline 2', None, None)
    out = MultiLineFormatter('%(levelname)s - %(message)s').format(record)
    assert out == 'INFO - line 1\n    line 2'


def test_setup_console_logging() -> None:
    stream = io.StringIO()
    handler = setup_console_logging(logging.DEBUG, stream=stream)
    try:
        get_logger('test').debug('first\nsecond')
        assert 'DEBUG - update_deps.test: first\n    second' in stream.getvalue()
    finally:
        module_logger.removeHandler(handler)
        module_logger.setLevel(logging.NOTSET)


def test_setup_console_logging_twice() -> None:
    first_stream = io.StringIO()
    second_stream = io.StringIO()
    handlers = list(module_logger.handlers)
    handler = setup_console_logging(logging.DEBUG, stream=first_stream)
    try:
        assert setup_console_logging(logging.INFO, stream=second_stream) is handler
        assert module_logger.handlers == handlers + [handler]
        assert module_logger.level == logging.INFO
        get_logger('test').info('only once')
        assert first_stream.getvalue() == ''
        assert second_stream.getvalue().count('only once') == 1
    finally:
        module_logger.removeHandler(handler)
        module_logger.setLevel(logging.NOTSET)
