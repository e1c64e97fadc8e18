"""
Hexdump rendering of edited output, colorized using Pygments.
"""

from typing import Final, Iterator, List

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import HexdumpLexer

from ..utils.hex_utils import format_offset, get_byte_range

BYTES_PER_LINE: Final[int] = 16
GROUP_SIZE: Final[int] = 8


def ascii_column(data: bytes) -> str:
    """Printable ASCII representation of bytes, other bytes shown as '.'."""

    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)


def format_line(offset: int, data: bytes, bytes_per_line: int = BYTES_PER_LINE) -> str:
    """
    Format one line of a canonical hexdump.

    Args:
        offset (int): Offset of the first byte of the line
        data (bytes): Bytes of the line, at most bytes_per_line of them
        bytes_per_line (int): Number of byte columns in a full line

    Returns:
        str: Offset, two groups of hex columns and the ASCII column
    """

    groups: List[str] = []
    for start in range(0, bytes_per_line, GROUP_SIZE):
        cells = [
            f"{data[i]:02x}" if i < len(data) else "  "
            for i in range(start, min(start + GROUP_SIZE, bytes_per_line))
        ]
        groups.append(' '.join(cells))

    return f"{format_offset(offset)}  {'  '.join(groups)}  |{ascii_column(data)}|"


def iter_hexdump(data: bytes, bytes_per_line: int = BYTES_PER_LINE) -> Iterator[str]:
    """Yield the lines of a hexdump of ``data``, ending with the total length."""

    offset = 0
    while offset < len(data):
        line_data, length = get_byte_range(data, offset, bytes_per_line)
        yield format_line(offset, line_data, bytes_per_line)
        offset += length

    yield format_offset(len(data))


def render_hexdump(data: bytes, color: bool = False) -> str:
    """
    Render bytes as a hexdump, optionally with terminal colors.

    Args:
        data (bytes): Bytes to dump
        color (bool): Whether to add ANSI colors using the Pygments hexdump lexer

    Returns:
        str: The hexdump text, newline terminated
    """

    text = '\n'.join(iter_hexdump(data)) + '\n'

    if not color:
        return text

    return highlight(text, HexdumpLexer(), TerminalFormatter())
