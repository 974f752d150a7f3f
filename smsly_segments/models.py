"""
Segmentation Models
===================
Data models, alphabets and capacity constants for message segmentation.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"

    @property
    def bits_per_unit(self) -> int:
        return 7 if self is EncodingType.GSM7 else 16


class LineBreakStyle(str, Enum):
    """Line break styles found in a message."""
    LF = "LF"
    CRLF = "CRLF"
    MIXED = "LF+CRLF"


# GSM-7 character set (basic)
GSM7_BASIC = frozenset(
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ ÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

# GSM-7 extended characters (escape + char, count as 2)
GSM7_EXTENDED = frozenset("\f€^{}\\[~]|")

# Segment capacities in encoding units
SINGLE_SEGMENT_CAPACITY = {
    EncodingType.GSM7: 160,
    EncodingType.UCS2: 70,
}
MULTI_SEGMENT_CAPACITY = {
    EncodingType.GSM7: 153,
    EncodingType.UCS2: 67,
}

# Concatenation user data header: 6 octets per segment
HEADER_SIZE_BITS = 48


@dataclass(frozen=True)
class EncodedChar:
    """A single grapheme and its cost under both encodings."""
    raw: str
    in_gsm7_basic: bool
    in_gsm7_extended: bool
    gsm7_units: int
    ucs2_units: int

    @property
    def scalars(self) -> Tuple[int, ...]:
        return tuple(ord(char) for char in self.raw)

    @property
    def code_units(self) -> int:
        """UTF-16 code units (2 for every astral scalar)."""
        return self.ucs2_units

    @property
    def is_gsm7(self) -> bool:
        return all(char in GSM7_BASIC or char in GSM7_EXTENDED for char in self.raw)

    def units(self, encoding: EncodingType) -> int:
        if encoding is EncodingType.GSM7:
            return self.gsm7_units
        return self.ucs2_units

    def size_in_bits(self, encoding: EncodingType) -> int:
        return self.units(encoding) * encoding.bits_per_unit


@dataclass(frozen=True)
class Segment:
    """One transport segment of a message."""
    chars: Tuple[EncodedChar, ...]
    encoding: EncodingType
    capacity_units: int
    has_header: bool = False

    @property
    def used_units(self) -> int:
        return sum(char.units(self.encoding) for char in self.chars)

    @property
    def free_units(self) -> int:
        return self.capacity_units - self.used_units

    @property
    def message_size(self) -> int:
        """Payload size in bits, header excluded."""
        return self.used_units * self.encoding.bits_per_unit

    @property
    def header_size(self) -> int:
        return HEADER_SIZE_BITS if self.has_header else 0

    @property
    def size_in_bits(self) -> int:
        return self.message_size + self.header_size

    @property
    def size_in_bytes(self) -> int:
        return math.ceil(self.size_in_bits / 8)

    @property
    def text(self) -> str:
        return "".join(char.raw for char in self.chars)

    def __len__(self) -> int:
        return len(self.chars)


@dataclass(frozen=True)
class SegmentedMessage:
    """
    Result of analyzing a message.

    Every field is derived from the input text; two analyses of the same
    arguments compare equal.
    """
    encoding: EncodingType
    segments: Tuple[Segment, ...]
    encoded_chars: Tuple[EncodedChar, ...]
    line_break_style: Optional[LineBreakStyle] = None
    warnings: Tuple[str, ...] = ()

    @property
    def encoding_name(self) -> str:
        return self.encoding.value

    @property
    def segments_count(self) -> int:
        return len(self.segments)

    @property
    def message_size(self) -> int:
        """Payload size in bits across all segments."""
        return sum(segment.message_size for segment in self.segments)

    @property
    def total_size(self) -> int:
        """Payload plus per-segment header size in bits."""
        return sum(segment.size_in_bits for segment in self.segments)

    @property
    def graphemes(self) -> Tuple[str, ...]:
        return tuple(char.raw for char in self.encoded_chars)

    @property
    def number_of_characters(self) -> int:
        return len(self.encoded_chars)

    @property
    def number_of_unicode_scalars(self) -> int:
        return sum(len(char.raw) for char in self.encoded_chars)

    @property
    def non_gsm_characters(self) -> Tuple[str, ...]:
        return tuple(char.raw for char in self.encoded_chars if not char.is_gsm7)

    def to_schema(self):
        from .schemas import SegmentedMessageSchema
        return SegmentedMessageSchema.from_message(self)

    def to_dict(self) -> dict:
        return self.to_schema().model_dump(mode="json")
