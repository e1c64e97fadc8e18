"""Tests for hexsed.utils.convert — single value converters."""

import pytest

from hexsed.errors import ConversionError
from hexsed.utils.convert import (
    char_to_hex,
    escape_to_hex,
    int_to_hex,
    octal_to_hex,
    string_to_hex,
)


class TestCharToHex:
    def test_ascii(self):
        assert char_to_hex("A") == "41"

    def test_first_character_only(self):
        assert char_to_hex("abc") == "61"

    def test_multibyte_first_byte(self):
        assert char_to_hex("é") == "C3"

    def test_empty(self):
        with pytest.raises(ConversionError):
            char_to_hex("")


class TestEscapeToHex:
    @pytest.mark.parametrize("sequence, expected", [
        ("\\n", "0A"),
        ("\\t", "09"),
        ("\\r", "0D"),
        ("\\a", "07"),
        ("\\\\", "5C"),
        ("\\?", "3F"),
    ])
    def test_known(self, sequence, expected):
        assert escape_to_hex(sequence) == expected

    @pytest.mark.parametrize("sequence", ["n", "\\", "\\nn", "xn"])
    def test_badly_formed(self, sequence):
        with pytest.raises(ConversionError, match="Badly formed"):
            escape_to_hex(sequence)

    def test_unknown(self):
        with pytest.raises(ConversionError, match="Unknown escape"):
            escape_to_hex("\\z")


class TestNumbers:
    @pytest.mark.parametrize("digits, expected", [
        ("0", "0"),
        ("10", "A"),
        ("65", "41"),
        ("255", "FF"),
    ])
    def test_decimal(self, digits, expected):
        assert int_to_hex(digits) == expected

    @pytest.mark.parametrize("digits, expected", [
        ("0", "0"),
        ("12", "A"),
        ("101", "41"),
        ("377", "FF"),
    ])
    def test_octal(self, digits, expected):
        assert octal_to_hex(digits) == expected

    @pytest.mark.parametrize("digits", ["256", "1000", "999999"])
    def test_decimal_out_of_range(self, digits):
        with pytest.raises(ConversionError, match="0-255"):
            int_to_hex(digits)

    def test_octal_out_of_range(self):
        with pytest.raises(ConversionError, match="0-377"):
            octal_to_hex("400")

    @pytest.mark.parametrize("digits", ["ten", "", "1_0", "0x1f", " 5", "5 ", "-1", "+5", "\u0663", "\uff11"])
    def test_not_a_decimal_number(self, digits):
        with pytest.raises(ConversionError, match="Not a decimal number"):
            int_to_hex(digits)

    @pytest.mark.parametrize("digits", ["8", "", "0o17", "1_7", " 7", "\u0663"])
    def test_not_an_octal_number(self, digits):
        with pytest.raises(ConversionError, match="Not an octal number"):
            octal_to_hex(digits)


class TestStringToHex:
    def test_ascii(self):
        assert string_to_hex("Hello") == "48656C6C6F"

    def test_low_bytes_keep_two_digits(self):
        assert string_to_hex("\x01") == "01"

    def test_embedded_escape(self):
        assert string_to_hex("a\\tb\\n") == "6109620A"

    def test_multibyte(self):
        assert string_to_hex("é") == "C3A9"

    def test_empty(self):
        assert string_to_hex("") == ""

    def test_trailing_backslash(self):
        with pytest.raises(ConversionError):
            string_to_hex("abc\\")
