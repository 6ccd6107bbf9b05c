#!/usr/bin/env python3
"""
fastx main API module

Provides the Fastx file handle for seamlessly dealing with either compressed
or uncompressed fasta/fastq files.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .config.formats import FileType, FormatConfig, PathLike, DEFAULT_FORMAT_CONFIG, classify
from .filtering.engine import collect_indices, filter_records
from .filtering.lengths import read_lengths
from .records.reader import RecordReader
from .utils.streams import open_for_read, open_for_write

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fastx:
    """
    A fasta/fastq file identified by its path

    ``filetype`` and ``is_compressed`` are derived from the path's extensions
    when the handle is created and never change afterwards.

    Attributes:
        path: Path of the file
        filetype: Record format
        is_compressed: Whether the file is gzip compressed
        config: Extension rules the handle was classified with
    """
    path: Path
    filetype: FileType
    is_compressed: bool
    config: FormatConfig = field(default=DEFAULT_FORMAT_CONFIG, compare=False, repr=False)

    @classmethod
    def from_path(cls, path: PathLike, config: Optional[FormatConfig] = None) -> "Fastx":
        """
        Create a Fastx handle from a path

        Raises:
            UnknownFileTypeError: If the path is not a fasta or fastq path
        """
        config = config or DEFAULT_FORMAT_CONFIG
        filetype, compressed = classify(path, config)
        return cls(path=Path(path), filetype=filetype, is_compressed=compressed, config=config)

    def open(self) -> TextIO:
        """
        Open the file for reading, decompressing if needed

        Raises:
            ReadError: If the file cannot be opened
        """
        return open_for_read(self.path, self.is_compressed)

    def create(self) -> TextIO:
        """
        Create the file for writing, compressing if needed

        Use the returned stream in a ``with`` block so it is flushed and
        closed.

        Raises:
            CreateError: If the file cannot be created
        """
        return open_for_write(self.path, self.is_compressed, self.config.compression_level)

    def read_lengths(self) -> List[int]:
        """
        Returns a list containing the lengths of all the reads in the file

        Raises:
            ReadError: If the file cannot be opened
            ParseError: If any record cannot be parsed
        """
        with self.open() as handle:
            lengths = read_lengths(RecordReader(handle, self.filetype))
        logger.debug("Read %d record lengths from %s", len(lengths), self.path)
        return lengths

    def filter_reads_into(self, reads_to_keep: Iterable[int], write_to: TextIO) -> None:
        """
        Write reads with indices contained in ``reads_to_keep`` to ``write_to``

        An empty ``reads_to_keep`` succeeds without opening the file.

        Raises:
            ReadError: If the file cannot be opened
            ParseError: If a record cannot be parsed
            WriteError: If writing to ``write_to`` fails
            IndicesNotFoundError: If, after iterating through all reads in the
                file, some indices were not found. Reads whose indices were
                found are still written.
            ValueError: If an index is not a non-negative integer
        """
        wanted = collect_indices(reads_to_keep)
        if not wanted:
            return None

        with self.open() as handle:
            filter_records(RecordReader(handle, self.filetype), wanted, write_to)
        return None


def filter_reads(
    input_path: PathLike,
    output_path: PathLike,
    reads_to_keep: Iterable[int],
    config: Optional[FormatConfig] = None
) -> None:
    """
    Copy the reads at the given indices from one file to another

    Input and output formats and compression are each taken from their own
    path. The input is opened before the output is created, so a missing
    input leaves an existing output file untouched. The output is closed
    even when not all indices were found.

    Args:
        input_path: File to read from
        output_path: File to create
        reads_to_keep: Zero-based record indices to copy
        config: Extension rules, defaults to DEFAULT_FORMAT_CONFIG
    """
    source = Fastx.from_path(input_path, config)
    destination = Fastx.from_path(output_path, config)
    wanted = collect_indices(reads_to_keep)
    if not wanted:
        with destination.create():
            return None

    with source.open() as in_fh, destination.create() as out_fh:
        filter_records(RecordReader(in_fh, source.filetype), wanted, out_fh)
