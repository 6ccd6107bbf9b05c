#!/usr/bin/env python3
"""
Filter engine

Single pass selection of records by their zero-based position in a file.
Matching records are written to a sink as they are found, and the scan stops
as soon as every wanted position has been seen.
"""

import logging
from typing import Iterable, Set, TextIO

from ..errors import WriteError, IndicesNotFoundError
from ..records.record import Record

logger = logging.getLogger(__name__)


def collect_indices(wanted: Iterable[int]) -> Set[int]:
    """
    Copy wanted positions into a new set

    Raises:
        ValueError: If a position is not a non-negative integer
    """
    indices = set(wanted)
    for index in indices:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise ValueError(f"Record indices must be non-negative integers, got {index!r}")
    return indices


def filter_records(
    records: Iterable[Record],
    wanted: Iterable[int],
    sink: TextIO
) -> None:
    """
    Write records whose position is in ``wanted`` to ``sink``

    Args:
        records: Records in file order, e.g. a RecordReader
        wanted: Positions to keep; duplicates collapse. The caller's
            collection is copied and never modified.
        sink: Writable text stream receiving the matched records

    Raises:
        ParseError: If a record cannot be parsed. Records already written
            stay written.
        WriteError: If writing to ``sink`` fails
        IndicesNotFoundError: If the records ran out before every wanted
            position was found. All matched records have been written.
        ValueError: If a position is not a non-negative integer
    """
    remaining = collect_indices(wanted)
    if not remaining:
        return None

    requested = len(remaining)
    position = 0
    for record in records:
        if position in remaining:
            try:
                record.render_to(sink)
            except OSError as e:
                raise WriteError(f"Could not write record {position} to output: {e}") from e
            remaining.remove(position)
            if not remaining:
                break
        position += 1

    if remaining:
        logger.warning(
            "%d of %d requested indices were not found in the input",
            len(remaining), requested
        )
        raise IndicesNotFoundError(remaining)

    logger.info("Wrote %d records", requested)
    return None
