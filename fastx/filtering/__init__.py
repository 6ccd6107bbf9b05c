"""
Record filtering module
"""

from .engine import collect_indices, filter_records
from .lengths import read_lengths

__all__ = [
    'collect_indices',
    'filter_records',
    'read_lengths',
]
