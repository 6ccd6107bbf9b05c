"""
Sequence record module - record types and format-polymorphic reader
"""

from .record import FastaRecord, FastqRecord, Record
from .reader import RecordReader, read_records

__all__ = [
    'FastaRecord',
    'FastqRecord',
    'Record',
    'RecordReader',
    'read_records',
]
