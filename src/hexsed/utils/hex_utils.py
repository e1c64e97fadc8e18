"""
Utility functions for hex string and byte pattern operations.
"""

from typing import Final, Optional, Tuple

from ..errors import InvalidHexDigit

HEX_DIGITS: Final[str] = '0123456789ABCDEFabcdef'


def is_hex_string(hex_str: str) -> bool:
    """
    Check that every character of a string is a hex digit.

    Args:
        hex_str (str): String to check

    Returns:
        bool: True if the string only holds hex digits
    """

    return all(c in HEX_DIGITS for c in hex_str)


def decode_hex_pair(pair: str) -> int:
    """
    Decode two hex digits into a byte value, most significant nibble first.

    Args:
        pair (str): Exactly two hex digits, e.g. "4f"

    Returns:
        int: Byte value in the range 0-255

    Raises:
        InvalidHexDigit: If either character is not a hex digit
    """

    if len(pair) != 2 or not is_hex_string(pair):
        raise InvalidHexDigit(pair)

    return (int(pair[0], 16) << 4) | int(pair[1], 16)


def parse_hex_string(hex_str: str) -> bytes:
    """
    Parse a string of hex pairs into bytes.

    Args:
        hex_str (str): String of hex pairs without separators (e.g. "FF00A5")

    Returns:
        bytes: The decoded bytes

    Raises:
        InvalidHexDigit: If the string holds a non-hex character or an unpaired digit
    """

    if not is_hex_string(hex_str) or len(hex_str) % 2:
        raise InvalidHexDigit(hex_str)

    return bytes(decode_hex_pair(hex_str[i:i + 2]) for i in range(0, len(hex_str), 2))


def format_offset(offset: int, width: int = 8) -> str:
    """Format a byte offset as a zero padded hex string."""

    return f"{offset:0{width}x}"


def get_byte_range(data: bytes, start: int, length: int) -> Tuple[bytes, int]:
    """
    Slice one hexdump line out of the edited output.

    The last line of a dump is usually short, so the slice is clamped to the
    end of the data and its real length is returned alongside it.

    Args:
        data (bytes): Edited output being dumped
        start (int): Offset of the line
        length (int): Bytes per full line

    Returns:
        Tuple[bytes, int]: The line bytes and how many there are, 0 past the end
    """

    end = min(start + length, len(data))
    return bytes(data[start:end]), max(0, end - start)


def find_pattern(data: bytes, pattern: bytes, start: int = 0) -> Optional[int]:
    """
    Locate the next find-pattern match at or after the scan cursor.

    The source is whatever load_source yielded, bytes for small files and a
    read-only mmap for large ones. Both search raw bytes, so NUL bytes in the
    pattern or the source need no special handling.

    Args:
        data (bytes): Loaded source, bytes or mmap
        pattern (bytes): Decoded find-pattern of an EditSpec
        start (int): Scan cursor, the end of the previous match

    Returns:
        int: Offset where the match starts, or None once no match remains
    """

    pos = data.find(pattern, start)
    if pos < 0:
        return None

    return pos
