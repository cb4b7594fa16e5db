"""
Source Loader
=============

Reads the input file completely into memory before scanning starts. The
scanner never performs I/O; it only sees the text returned from here.

The buffer is bounded. Text beyond DEFAULT_MAX_SOURCE_SIZE characters is
cut off with a logged warning. Pass ``strict=True`` to get a
SourceTooLargeError instead.
"""

import logging
from pathlib import Path
from typing import Union

from lexscan.errors import SourceLoadError, SourceTooLargeError

logger = logging.getLogger(__name__)

DEFAULT_INPUT_PATH = "input.c"

# A 5000-byte read buffer minus its terminator
DEFAULT_MAX_SOURCE_SIZE = 4999


def load_source(
    path: Union[str, Path] = DEFAULT_INPUT_PATH,
    max_size: int = DEFAULT_MAX_SOURCE_SIZE,
    encoding: str = "utf-8",
    strict: bool = False,
) -> str:
    """
    Read a source file into a single string.

    Args:
        path: File to read
        max_size: Maximum number of characters to keep
        encoding: Text encoding of the file
        strict: Raise instead of truncating oversized input

    Returns:
        The file contents, at most max_size characters long

    Raises:
        SourceLoadError: If the file is missing, unreadable or undecodable
        SourceTooLargeError: If strict and the file exceeds max_size
    """
    path = Path(path)
    logger.debug(f"Loading source from {path}")

    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise SourceLoadError(str(path), f"not valid {encoding} text ({e.reason})") from e
    except OSError as e:
        raise SourceLoadError(str(path), e.strerror or str(e)) from e

    if len(text) > max_size:
        if strict:
            raise SourceTooLargeError(str(path), len(text), max_size)
        logger.warning(
            f"{path}: input is {len(text)} characters, truncating to {max_size}"
        )
        text = text[:max_size]

    logger.debug(f"Loaded {len(text)} characters from {path}")
    return text
