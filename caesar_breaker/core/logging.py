import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "caesar_breaker"


def configure_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """
    Attach a Rich console handler to the package logger.

    Safe to call more than once; the handler is installed a single time and
    later calls only adjust the level.

    Args:
        level: Name of the logging level (e.g. "DEBUG", "INFO")
        console: Optional Rich console to write to (stderr by default)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
