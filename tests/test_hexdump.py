"""Tests for hexsed.ui.hexdump — layout and colorized rendering."""

from hexsed.ui.hexdump import ascii_column, format_line, iter_hexdump, render_hexdump


class TestFormatLine:
    def test_full_line(self):
        line = format_line(0, b"ABCDEFGHIJKLMNOP")
        assert line == (
            "00000000  41 42 43 44 45 46 47 48  49 4a 4b 4c 4d 4e 4f 50  |ABCDEFGHIJKLMNOP|"
        )

    def test_short_line_is_padded(self):
        full = format_line(0x10, bytes(16))
        short = format_line(0x10, b"\x00\n")
        assert short.startswith("00000010  00 0a ")
        assert short.endswith("  |..|")
        assert short.index("|") == full.index("|")

    def test_ascii_column(self):
        assert ascii_column(b"a\x00~\x7f ") == "a.~. "


class TestIterHexdump:
    def test_empty(self):
        assert list(iter_hexdump(b"")) == ["00000000"]

    def test_ends_with_length(self):
        lines = list(iter_hexdump(bytes(20)))
        assert len(lines) == 3
        assert lines[1].startswith("00000010  00 00 00 00 ")
        assert lines[-1] == "00000014"


class TestRenderHexdump:
    def test_plain(self):
        text = render_hexdump(b"hi")
        assert text.endswith("00000002\n")
        assert "\x1b[" not in text

    def test_color_keeps_content(self):
        text = render_hexdump(b"hi", color=True)
        assert "\x1b[" in text
        assert "68" in text
        assert "hi" in text
