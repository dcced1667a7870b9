"""PR Title Spellcheck - spelling validation for pull-request titles."""

import sys

from loguru import logger

__version__ = "0.1.0"

STDERR_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(
    log_file: str | None = None, level: str = "INFO", colorize: bool | None = None
) -> None:
    """Replace all loguru handlers with a stderr sink and an optional log file.

    Args:
        log_file: Optional path to log file. If None, logs only to stderr.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
        colorize: Force colours on or off; None lets loguru detect a terminal.

    Example:
        >>> configure_logging(level="DEBUG")
        >>> configure_logging(log_file="spellcheck.log", level="INFO")
    """
    logger.remove()
    logger.add(sys.stderr, format=STDERR_FORMAT, level=level, colorize=colorize)

    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="1 week",
        )


def install_exception_hook() -> None:
    """Log uncaught exceptions, with traceback, at CRITICAL level."""

    def exception_handler(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical(
            f"Uncaught {exc_type.__name__}: {exc_value}"
        )

    sys.excepthook = exception_handler


__all__ = ["__version__", "configure_logging", "install_exception_hook"]
