"""
Length scanner - sequence length of every record in file order
"""

from typing import Iterable, List

from ..records.record import Record


def read_lengths(records: Iterable[Record]) -> List[int]:
    """Collect sequence lengths; a ParseError aborts without partial results."""
    return [record.sequence_length for record in records]
