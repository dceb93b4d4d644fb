"""
Helmsman logging.

Every module logs through logging.getLogger(__name__); the package logger
carries a NullHandler so nothing shows unless the host asks for it.
verbose() is the quick way to see the renderer's debug trail on stderr.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("helmsman")
logger.addHandler(logging.NullHandler())


def verbose(level=logging.DEBUG, /):
    """
    Route helmsman logs to a rich handler on stderr at the given level.

    Calling it again only changes the level; the handler is added once.
    """
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        ))
    logger.setLevel(level)
    return logger


__all__ = (
    "verbose",
)
