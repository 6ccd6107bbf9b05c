#!/usr/bin/env python3
"""
Error types

All errors raised by fastx derive from FastxError. Errors wrapping an
underlying I/O or parser failure keep it as ``__cause__``.
"""

from typing import Iterable, List


class FastxError(Exception):
    """Base class for errors relating to working with fasta/fastq files"""


class UnknownFileTypeError(FastxError):
    """
    The path does not carry a fasta or fastq extension

    ``path`` is the caller's string unchanged, or ``os.fspath`` of a
    path object.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File type of {path} is not fasta or fastq")


class ReadError(FastxError):
    """The input file could not be opened for reading"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Read error: could not open {path}")


class CreateError(FastxError):
    """The output file could not be created"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Output file {path} could not be created")


class FilterError(FastxError):
    """Base class for errors raised while scanning records"""


class ParseError(FilterError):
    """A sequence record could not be parsed"""

    def __init__(self, message: str = "Failed to parse record"):
        super().__init__(message)


class WriteError(FilterError):
    """Writing a record to the output failed"""

    def __init__(self, message: str = "Could not write to output file"):
        super().__init__(message)


class IndicesNotFoundError(FilterError):
    """
    Some expected indices were not in the input file

    Records matched before the scan ended have already been written.
    """

    def __init__(self, missing: Iterable[int]):
        self.missing: List[int] = sorted(missing)
        super().__init__(
            f"Some expected indices were not in the input file: {self.missing}"
        )
