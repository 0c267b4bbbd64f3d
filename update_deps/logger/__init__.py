from .logger import MultiLineFormatter, get_logger, setup_console_logging  # noqa: F401
