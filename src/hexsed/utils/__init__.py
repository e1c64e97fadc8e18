"""
Utility package for hex conversion and source loading support functions.
"""

from .hex_utils import (
    is_hex_string,
    decode_hex_pair,
    parse_hex_string,
    format_offset,
    get_byte_range,
    find_pattern
)
from .source import load_source, source_exists

__all__ = [
    'is_hex_string',
    'decode_hex_pair',
    'parse_hex_string',
    'format_offset',
    'get_byte_range',
    'find_pattern',
    'load_source',
    'source_exists'
]
