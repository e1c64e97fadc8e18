"""
Single value converters printing the hex form of characters, numbers and strings.
"""

from typing import Dict, Final

from ..errors import ConversionError

ESCAPE_SEQUENCES: Final[Dict[str, str]] = {
    'a': '07',
    'b': '08',
    'f': '0C',
    'n': '0A',
    'r': '0D',
    't': '09',
    'v': '0B',
    '\\': '5C',
    "'": '27',
    '"': '22',
    '?': '3F',
}

MAX_BYTE: Final[int] = 0xFF

BASE_DIGITS: Final[Dict[int, str]] = {
    8: "01234567",
    10: "0123456789",
}


def char_to_hex(char: str) -> str:
    """
    Get the hex value of the first byte of a character.

    Args:
        char (str): Character to convert, only its first UTF-8 byte is used

    Returns:
        str: Uppercase hex value, e.g. "41" for "A"
    """

    if not char:
        raise ConversionError("Empty character")

    return f"{char.encode('utf-8')[0]:X}"


def escape_to_hex(sequence: str) -> str:
    """
    Get the two digit hex value of a C escape sequence such as \\n.

    Raises:
        ConversionError: If the sequence is not a backslash and one known character
    """

    if len(sequence) != 2 or sequence[0] != '\\':
        raise ConversionError(f"Badly formed parameter: {sequence}")

    try:
        return ESCAPE_SEQUENCES[sequence[1]]
    except KeyError:
        raise ConversionError(f"Unknown escape sequence: {sequence}") from None


def _number_to_hex(digits: str, base: int, name: str, limit: str) -> str:
    # ASCII digits only: no sign, underscore, base prefix or whitespace
    if not digits or not all(c in BASE_DIGITS[base] for c in digits):
        raise ConversionError(f"Not {name} number: {digits}")

    value = int(digits, base)

    if not 0 <= value <= MAX_BYTE:
        raise ConversionError(f"Out of range 0-{limit}: {digits}")

    return f"{value:X}"


def int_to_hex(digits: str) -> str:
    """Convert decimal digits in the range 0-255 to hex."""

    return _number_to_hex(digits, 10, "a decimal", "255")


def octal_to_hex(digits: str) -> str:
    """Convert octal digits in the range 0-377 to hex."""

    return _number_to_hex(digits, 8, "an octal", "377")


def string_to_hex(text: str) -> str:
    """
    Convert every byte of a string to its two digit hex representation.

    Backslash escape sequences embedded in the string are converted as the
    single byte they stand for. Multibyte characters give one pair per byte.

    Args:
        text (str): String to convert, e.g. "ab\\n"

    Returns:
        str: Concatenated hex pairs, e.g. "61620A"

    Raises:
        ConversionError: On an unknown or unterminated escape sequence
    """

    pairs = []
    i = 0

    while i < len(text):
        if text[i] == '\\':
            pairs.append(escape_to_hex(text[i:i + 2]))
            i += 2
            continue

        pairs.extend(f"{b:02X}" for b in text[i].encode('utf-8'))
        i += 1

    return ''.join(pairs)
