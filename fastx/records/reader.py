#!/usr/bin/env python3
"""
Record reader

Wraps Biopython's low-level FASTA/FASTQ parsers behind a single lazy
iterator producing FastaRecord or FastqRecord objects.
"""

import itertools
import logging
from typing import Iterator, TextIO

from Bio.SeqIO.FastaIO import SimpleFastaParser
from Bio.SeqIO.QualityIO import FastqGeneralIterator

from ..config.formats import FileType
from ..errors import ParseError
from .record import FastaRecord, FastqRecord, Record

logger = logging.getLogger(__name__)


def _iter_fasta(handle: TextIO) -> Iterator[Record]:
    # Text before the first header is an error, not a comment
    for line in handle:
        if line.strip():
            break
    else:
        return
    if not line.startswith(">"):
        raise ValueError(f"Expected FASTA record starting with '>', got {line.rstrip()!r}")

    for title, seq in SimpleFastaParser(itertools.chain([line], handle)):
        yield FastaRecord(title, seq)


def _iter_fastq(handle: TextIO) -> Iterator[Record]:
    for title, seq, qual in FastqGeneralIterator(handle):
        yield FastqRecord(title, seq, qual)


class RecordReader:
    """
    Lazy, single pass iterator over the records of a text stream

    Records are parsed one at a time as the reader is advanced. Once
    exhausted (or after a parse error) the reader yields nothing more.

    Args:
        handle: Readable text stream positioned at the start of the records
        filetype: Record format of the stream

    Raises:
        ParseError: From ``__next__`` when a record is malformed
    """

    def __init__(self, handle: TextIO, filetype: FileType):
        self.filetype = filetype
        if filetype is FileType.FASTA:
            self._records = _iter_fasta(handle)
        elif filetype is FileType.FASTQ:
            self._records = _iter_fastq(handle)
        else:
            raise ValueError(f"Unsupported file type: {filetype}")

    def __iter__(self) -> "RecordReader":
        return self

    def __next__(self) -> Record:
        try:
            return next(self._records)
        except (ValueError, OSError, EOFError) as e:
            # gzip and decoding failures surface here too
            logger.debug("Failed to parse %s record: %s", self.filetype.value, e)
            raise ParseError(f"Failed to parse record: {e}") from e


def read_records(handle: TextIO, filetype: FileType) -> RecordReader:
    """Create a RecordReader for ``handle``"""
    return RecordReader(handle, filetype)
