"""
Report Schemas
==============
Pydantic models for returning segmentation results from an API.
"""

from typing import List, Optional

from pydantic import BaseModel

from .models import EncodedChar, EncodingType, Segment, SegmentedMessage


class EncodedCharSchema(BaseModel):
    raw: str
    is_gsm7: bool
    code_units: int
    units: int
    size_in_bits: int

    @classmethod
    def from_char(cls, char: EncodedChar, encoding: EncodingType) -> "EncodedCharSchema":
        return cls(
            raw=char.raw,
            is_gsm7=char.is_gsm7,
            code_units=char.code_units,
            units=char.units(encoding),
            size_in_bits=char.size_in_bits(encoding),
        )


class SegmentSchema(BaseModel):
    text: str
    graphemes: List[str]
    used_units: int
    free_units: int
    message_size: int
    size_in_bits: int
    size_in_bytes: int

    @classmethod
    def from_segment(cls, segment: Segment) -> "SegmentSchema":
        return cls(
            text=segment.text,
            graphemes=[char.raw for char in segment.chars],
            used_units=segment.used_units,
            free_units=segment.free_units,
            message_size=segment.message_size,
            size_in_bits=segment.size_in_bits,
            size_in_bytes=segment.size_in_bytes,
        )


class SegmentedMessageSchema(BaseModel):
    encoding: EncodingType
    segments_count: int
    message_size: int
    total_size: int
    number_of_characters: int
    number_of_unicode_scalars: int
    line_break_style: Optional[str] = None
    warnings: List[str] = []
    non_gsm_characters: List[str] = []
    segments: List[SegmentSchema] = []
    characters: List[EncodedCharSchema] = []

    @classmethod
    def from_message(cls, message: SegmentedMessage) -> "SegmentedMessageSchema":
        return cls(
            encoding=message.encoding,
            segments_count=message.segments_count,
            message_size=message.message_size,
            total_size=message.total_size,
            number_of_characters=message.number_of_characters,
            number_of_unicode_scalars=message.number_of_unicode_scalars,
            line_break_style=message.line_break_style.value if message.line_break_style else None,
            warnings=list(message.warnings),
            non_gsm_characters=list(message.non_gsm_characters),
            segments=[SegmentSchema.from_segment(segment) for segment in message.segments],
            characters=[
                EncodedCharSchema.from_char(char, message.encoding)
                for char in message.encoded_chars
            ],
        )
