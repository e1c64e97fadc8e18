"""
Core package for parsing edit expressions and applying them to bytes.

This package implements the expression parser, which turns /find/d and
/find/replace/s expressions into a validated EditSpec, and the edit engine,
which applies an EditSpec to a byte buffer in a single forward pass.
"""

from .expression import EditSpec, Operation, parse_expression, UNLIMITED_BUDGET
from .engine import ScanState, iter_edits, apply_edits, edit_bytes

__all__ = [
    'EditSpec',
    'Operation',
    'parse_expression',
    'UNLIMITED_BUDGET',
    'ScanState',
    'iter_edits',
    'apply_edits',
    'edit_bytes'
]
