"""
Utility modules
"""

from .ascii import is_newline, is_whitespace, normalize, count_non_whitespace
from .misc import open_mapped_file, as_buffer, setup_logging
__all__ = [
    'is_newline',
    'is_whitespace',
    'normalize',
    'count_non_whitespace',
    'open_mapped_file',
    'as_buffer',
    'setup_logging'
]
