from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TypeVar

from reversi_console.errors import InputStreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def normalize(text: str) -> str:
    return text.strip().lower()


def write(text: str):
    """Print without a newline so the answer is typed on the same line."""
    print(text, end="")


def read_line() -> str:
    """Flush pending output, then block for one normalized line of input."""
    sys.stdout.flush()
    if sys.stdin is None:
        logger.critical("No input stream attached")
        raise InputStreamError("\tFailed to read input!")
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError) as exc:  # ValueError covers decode errors and closed files
        logger.critical("Failed to read input: %s", exc)
        raise InputStreamError("\tFailed to read input!") from exc
    if not line:
        logger.critical("Input stream closed")
        raise InputStreamError("\tFailed to read input!")
    return normalize(line)


def ask(
    prompt: str,
    interpret: Callable[[str], Optional[T]],
    retry_prompt: str,
) -> T:
    """Prompt until interpret() accepts a line; None means ask again."""
    write(prompt)
    while True:
        text = read_line()
        result = interpret(text)
        if result is not None:
            return result
        logger.debug("Rejected input %r", text)
        write(retry_prompt)
