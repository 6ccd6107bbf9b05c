"""
Utility modules
"""

from .streams import open_for_read, open_for_write
from .misc import setup_logging
__all__ = [
    'open_for_read',
    'open_for_write',
    'setup_logging'
]
