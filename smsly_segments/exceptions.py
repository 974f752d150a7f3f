"""
Segmentation Exceptions
=======================
Exception classes raised while analyzing a message.
"""

from typing import Optional, Sequence


class SegmentationError(Exception):
    """Base class for all segmentation errors."""
    pass


class InvalidInputEncoding(SegmentationError, ValueError):
    """Raised when the input is not a well-formed Unicode string."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnsupportedEncodingError(SegmentationError, ValueError):
    """Raised when a requested encoding cannot represent the message."""

    def __init__(self, encoding: str, characters: Sequence[str] = ()):
        self.encoding = encoding
        self.characters = tuple(characters)
        if self.characters:
            message = (
                f"Message is incompatible with {encoding} encoding: "
                f"{len(self.characters)} unsupported character(s) {list(self.characters)!r}"
            )
        else:
            message = f"Unknown encoding '{encoding}'. Use 'auto', 'GSM-7' or 'UCS-2'"
        super().__init__(message)


class InvalidLineBreakStyle(SegmentationError, ValueError):
    """Raised for an unknown line break style hint."""

    def __init__(self, style: str):
        self.style = style
        super().__init__(f"Unknown line break style '{style}'. Use 'auto', 'LF' or 'CRLF'")


class ConfigurationError(SegmentationError):
    """Raised when configuration values cannot be parsed."""
    pass
