"""Logging setup shared by all api_classgen modules."""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "api_classgen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module of this package."""
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING, use_rich: bool = True) -> None:
    """
    Attach a handler to the package logger.

    Args:
        level: Minimum level to emit
        use_rich: Use rich's RichHandler instead of a plain stream handler
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if use_rich:
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.propagate = False
