"""
Configuration module - file format rules and path classification
"""

from .formats import (
    FileType,
    FormatConfig,
    DEFAULT_FORMAT_CONFIG,
    classify,
    is_compressed,
)

__all__ = [
    'FileType',
    'FormatConfig',
    'DEFAULT_FORMAT_CONFIG',
    'classify',
    'is_compressed',
]
