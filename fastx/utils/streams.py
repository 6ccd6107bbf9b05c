#!/usr/bin/env python3
"""
Stream factory

Opens sequence files for reading or writing in text mode, transparently
(de)compressing gzip files. Callers use the returned streams in a ``with``
block so the file descriptor is released on every exit path.
"""

import gzip
import logging
from typing import TextIO

from ..config.formats import PathLike, DEFAULT_FORMAT_CONFIG
from ..errors import ReadError, CreateError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def open_for_read(path: PathLike, compressed: bool) -> TextIO:
    """
    Open text or gz sequence file in text mode

    Args:
        path: File path
        compressed: Whether to decompress with gzip

    Returns:
        TextIO: Readable text stream

    Raises:
        ReadError: If the file cannot be opened
    """
    try:
        if compressed:
            handle = gzip.open(path, "rt", encoding=ENCODING)
        else:
            handle = open(path, "r", encoding=ENCODING)
    except OSError as e:
        raise ReadError(str(path)) from e

    logger.debug("Opened %s for reading (compressed=%s)", path, compressed)
    return handle


def open_for_write(
    path: PathLike,
    compressed: bool,
    compresslevel: int = DEFAULT_FORMAT_CONFIG.compression_level
) -> TextIO:
    """
    Create (truncating) a text or gz sequence file

    Args:
        path: File path
        compressed: Whether to compress with gzip
        compresslevel: gzip compression level

    Returns:
        TextIO: Writable text stream

    Raises:
        CreateError: If the file cannot be created
    """
    try:
        if compressed:
            handle = gzip.open(path, "wt", compresslevel=compresslevel, encoding=ENCODING)
        else:
            handle = open(path, "w", encoding=ENCODING)
    except OSError as e:
        raise CreateError(str(path)) from e

    logger.debug("Created %s for writing (compressed=%s)", path, compressed)
    return handle
