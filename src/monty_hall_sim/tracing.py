"""Loguru setup for the simulator's trace output.

Trial code logs unconditionally: ``DEBUG`` for per-trial traces and ``INFO`` for
summaries. Which of those reach the terminal is decided once, here.
"""
import sys
from typing import TextIO

from loguru import logger


def configure_logging(verbose: bool, sink: TextIO | None = None) -> int:
    """Replaces every loguru handler with a single plain-message handler.

    Args:
        verbose (bool): ``True`` lets ``DEBUG`` traces through, ``False`` keeps
            only ``INFO`` and above.
        sink (TextIO | None, optional): stream receiving the messages. Defaults to
            the current ``sys.stdout``.

    Returns:
        int: id of the installed handler, usable with ``logger.remove``.
    """
    logger.remove()
    logger.enable("monty_hall_sim")
    return logger.add(
        sink if sink is not None else sys.stdout,
        level="DEBUG" if verbose else "INFO",
        format="{message}",
    )
