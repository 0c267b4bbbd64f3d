import logging
import sys
from typing import Optional, TextIO

module_logger = logging.getLogger('update_deps')

DEFAULT_FORMAT = '[%(asctime)s] %(levelname)s - %(name)s: %(message)s'


def get_logger(suffix: str = '') -> logging.Logger:
    """get a child logger from update_deps, returning the parent logger if suffix is not given."""
    if not suffix:
        return module_logger
    return module_logger.getChild(suffix)


class MultiLineFormatter(logging.Formatter):
    """indent continuation lines of a record

    ``update-deps-config -v dry_run`` output:

    ::

        [2025-06-10 13:05:17] ERROR - update_deps.show_config: Unknown setting: dry_run
            Available settings: user_name, email, password, ...

    """

    def format(self, record: logging.LogRecord) -> str:
        s = super().format(record)
        return s.replace('\n', '\n    ')


def setup_console_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Handler:
    """Attach a console handler using MultiLineFormatter to the package logger.

    Calling it again reuses the attached handler, only the stream and level are updated.
    """
    for handler in module_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and isinstance(handler.formatter, MultiLineFormatter):
            handler.setStream(stream or sys.stderr)
            break
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(MultiLineFormatter(DEFAULT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        module_logger.addHandler(handler)
    module_logger.setLevel(level)
    return handler
