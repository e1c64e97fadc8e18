"""
Exceptions raised by the expression parser, the source loader and the converters.
"""


class HexsedError(Exception):
    """Base class for every error reported to the user."""


class MalformedExpression(HexsedError):
    """The expression does not follow the /find/d or /find/replace/s grammar."""

    def __init__(self, expression: str, reason: str = "Badly formed expression") -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"{reason}: {expression}")


class InvalidHexDigit(HexsedError):
    """A hex segment contains a character outside 0-9, A-F and a-f."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"Invalid hex chars: {segment}")


class SourceUnavailable(HexsedError):
    """The target file is missing or cannot be read."""

    def __init__(self, path: str, reason: str = "No such file") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ConversionError(HexsedError):
    """A single-value converter received input it cannot convert."""
