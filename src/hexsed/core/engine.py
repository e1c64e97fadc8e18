"""
Edit engine applying an EditSpec to a byte buffer in a single forward pass.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Tuple

from .expression import EditSpec, Operation
from ..utils.hex_utils import find_pattern

logger = logging.getLogger(__name__)


@dataclass
class ScanState:
    """Read cursor and number of edits applied during one pass."""
    cursor: int = 0
    applied: int = 0


def iter_edits(spec: EditSpec, source: bytes, state: Optional[ScanState] = None) -> Iterator[bytes]:
    """
    Yield the edited output of ``source`` chunk by chunk.

    Matches never overlap: after each match the search resumes past its last
    byte, so bytes that were just emitted are never searched again.

    Args:
        spec (EditSpec): The edit to apply
        source (bytes): Buffer to read from, bytes, bytearray or mmap
        state (ScanState): Optional state to update, letting the caller read the
            final count once the generator is exhausted

    Yields:
        bytes: Consecutive pieces of output, never empty
    """

    if state is None:
        state = ScanState()

    end = len(source)
    pattern = spec.find_bytes

    while state.cursor < end:
        found = None
        if state.applied < spec.match_budget:
            found = find_pattern(source, pattern, state.cursor)

        if found is None:
            yield bytes(source[state.cursor:end])
            state.cursor = end
            break

        if found > state.cursor:
            yield bytes(source[state.cursor:found])

        state.applied += 1
        state.cursor = found + len(pattern)
        logger.debug("Match %d at offset %d", state.applied, found)

        if spec.operation is Operation.SUBSTITUTE:
            yield spec.replace_bytes


def apply_edits(spec: EditSpec, source: bytes, out: BinaryIO) -> int:
    """
    Write the edited output of ``source`` to a binary stream.

    Each piece is written as soon as it is known, so the edited result is
    never held in memory as a whole.

    Args:
        spec (EditSpec): The edit to apply
        source (bytes): Buffer to read from
        out (BinaryIO): Writable binary stream

    Returns:
        int: Number of matches deleted or substituted
    """

    state = ScanState()
    for chunk in iter_edits(spec, source, state):
        out.write(chunk)

    logger.debug("Did %d %s over %d byte(s)", state.applied, spec.noun, len(source))

    return state.applied


def edit_bytes(spec: EditSpec, source: bytes) -> Tuple[bytes, int]:
    """Apply an edit in memory, returning the edited bytes and the match count."""

    state = ScanState()
    result = b''.join(iter_edits(spec, source, state))

    return result, state.applied
