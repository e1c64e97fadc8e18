"""
hexsed - a stream editor for hex values.

Deletes or substitutes exact byte sequences in a file, writing the edited
bytes to standard output.
"""

from .errors import (
    HexsedError,
    MalformedExpression,
    InvalidHexDigit,
    SourceUnavailable,
    ConversionError
)
from .core import EditSpec, Operation, parse_expression, apply_edits, edit_bytes

__version__ = "0.1.0"

__all__ = [
    'HexsedError',
    'MalformedExpression',
    'InvalidHexDigit',
    'SourceUnavailable',
    'ConversionError',
    'EditSpec',
    'Operation',
    'parse_expression',
    'apply_edits',
    'edit_bytes'
]
