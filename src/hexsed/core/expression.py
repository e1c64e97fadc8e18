"""
Expression module for parsing /find/d and /find/replace/s edit expressions.

An expression describes one edit applied to a byte stream:

    [=N]/<hex pairs>/d                  delete every match
    [=N]/<hex pairs>/<hex pairs>/s      substitute every match

The optional ``=N`` prefix limits the edit to the first N matches.
"""

import sys
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Final, Tuple

from ..errors import MalformedExpression
from ..utils.hex_utils import parse_hex_string

logger = logging.getLogger(__name__)

UNLIMITED_BUDGET: Final[int] = sys.maxsize
SEPARATOR: Final[str] = '/'
COUNT_PREFIX: Final[str] = '='


class Operation(Enum):
    """Edit applied to every match, keyed by its command letter."""
    DELETE = 'd'
    SUBSTITUTE = 's'


SEPARATOR_COUNTS: Final[Dict[Operation, int]] = {
    Operation.DELETE: 2,
    Operation.SUBSTITUTE: 3,
}


@dataclass(frozen=True)
class EditSpec:
    """Validated description of a single edit."""
    operation: Operation
    find_bytes: bytes
    replace_bytes: bytes = b''
    match_budget: int = UNLIMITED_BUDGET
    expression: str = ''

    def __post_init__(self) -> None:
        if not self.find_bytes:
            raise MalformedExpression(self.expression, "Zero length search string input")

        if self.operation is Operation.SUBSTITUTE and not self.replace_bytes:
            raise MalformedExpression(self.expression, "Zero length replacement string input")

        if self.operation is Operation.DELETE and self.replace_bytes:
            raise MalformedExpression(self.expression, "Delete expression takes no replacement")

        if self.match_budget < 0:
            raise MalformedExpression(self.expression, "Negative match count")

    @property
    def noun(self) -> str:
        """Plural noun describing the edits, as used in reports."""

        if self.operation is Operation.DELETE:
            return "deletions"

        return "substitutions"

    @property
    def is_limited(self) -> bool:
        return self.match_budget != UNLIMITED_BUDGET


def split_count_prefix(expression: str) -> Tuple[int, str]:
    """
    Strip an optional =N prefix from an expression.

    Args:
        expression (str): Raw expression text

    Returns:
        Tuple[int, str]: The match budget and the rest of the expression

    Raises:
        MalformedExpression: If '=' is not followed by decimal digits
    """

    if not expression.startswith(COUNT_PREFIX):
        return UNLIMITED_BUDGET, expression

    end = 1
    while end < len(expression) and expression[end] in '0123456789':
        end += 1

    if end == 1:
        raise MalformedExpression(expression, "Missing count after '='")

    return int(expression[1:end]), expression[end:]


def _check_structure(body: str, expression: str) -> Operation:
    """Validate separators and the command letter, returning the operation."""

    if len(body) < 2 or body[0] != SEPARATOR or body[-2] != SEPARATOR:
        raise MalformedExpression(expression)

    separators = body.count(SEPARATOR)
    if separators not in SEPARATOR_COUNTS.values():
        raise MalformedExpression(expression)

    try:
        operation = Operation(body[-1])
    except ValueError:
        raise MalformedExpression(expression) from None

    if SEPARATOR_COUNTS[operation] != separators:
        raise MalformedExpression(expression)

    return operation


def _check_segment(segment: str, expression: str, what: str) -> None:
    if not segment:
        raise MalformedExpression(expression, f"Zero length {what} string input")

    if len(segment) % 2:
        raise MalformedExpression(
            expression, "Each hex value must be input as a pair, eg 00..0F etc"
        )


def parse_expression(expression: str) -> EditSpec:
    """
    Parse an edit expression into a validated EditSpec.

    Args:
        expression (str): Expression text, e.g. "/0d0a/0a/s" or "=1/00/d"

    Returns:
        EditSpec: The validated edit

    Raises:
        MalformedExpression: On any structural problem, quoting the expression
        InvalidHexDigit: If a segment holds a non-hex character
    """

    match_budget, body = split_count_prefix(expression)
    operation = _check_structure(body, expression)

    segments = body[1:-2].split(SEPARATOR)
    find_segment = segments[0]
    replace_segment = segments[1] if operation is Operation.SUBSTITUTE else ''

    _check_segment(find_segment, expression, "search")
    if operation is Operation.SUBSTITUTE:
        _check_segment(replace_segment, expression, "replacement")

    spec = EditSpec(
        operation=operation,
        find_bytes=parse_hex_string(find_segment),
        replace_bytes=parse_hex_string(replace_segment),
        match_budget=match_budget,
        expression=expression,
    )

    logger.debug(
        "Parsed %r: %s %d byte(s), budget %s",
        expression,
        operation.name.lower(),
        len(spec.find_bytes),
        match_budget if spec.is_limited else "unlimited",
    )

    return spec
