"""
fastx - transparent access to fasta/fastq files

Main features:
- Format and compression detection from file extensions
- Reading sequence lengths
- Copying records selected by their index in the file
- gzip (de)compression on read and write

Author: fastxpy developers
"""

__version__ = "0.1.0"
__author__ = "fastxpy developers"

# Export main API interfaces
from .api import Fastx, filter_reads
from .config.formats import FileType, FormatConfig, classify, is_compressed
from .errors import (
    FastxError,
    UnknownFileTypeError,
    ReadError,
    CreateError,
    FilterError,
    ParseError,
    WriteError,
    IndicesNotFoundError,
)

__all__ = [
    '__version__',
    '__author__',
    # Main API
    'Fastx',
    'filter_reads',
    'FileType',
    'FormatConfig',
    'classify',
    'is_compressed',
    # Errors
    'FastxError',
    'UnknownFileTypeError',
    'ReadError',
    'CreateError',
    'FilterError',
    'ParseError',
    'WriteError',
    'IndicesNotFoundError',
]
