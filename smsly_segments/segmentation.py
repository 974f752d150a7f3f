"""
Message Segmentation
====================
Packing of classified graphemes into SMS segments.

Segment limits:
- GSM-7: 160 units (single), 153 units (concatenated)
- UCS-2: 70 units (single), 67 units (concatenated)
"""

from typing import List, Sequence, Tuple

from .models import (
    EncodedChar,
    EncodingType,
    MULTI_SEGMENT_CAPACITY,
    SINGLE_SEGMENT_CAPACITY,
    Segment,
)


def total_units(chars: Sequence[EncodedChar], encoding: EncodingType) -> int:
    return sum(char.units(encoding) for char in chars)


def build_segments(
    chars: Sequence[EncodedChar],
    encoding: EncodingType,
) -> Tuple[Segment, ...]:
    """
    Pack graphemes into segments.

    A grapheme is never split: when it does not fit the space left in the
    current segment it starts the next one, so the segment count can be
    higher than plain division of the total size suggests. A grapheme larger
    than a whole segment gets a segment of its own, whose used units then
    exceed ``capacity_units``.

    Args:
        chars: Classified graphemes in message order
        encoding: Encoding chosen for the message

    Returns:
        Tuple of segments; an empty message yields one empty segment
    """
    single_capacity = SINGLE_SEGMENT_CAPACITY[encoding]
    if total_units(chars, encoding) <= single_capacity:
        return (Segment(tuple(chars), encoding, single_capacity),)

    segment_size = MULTI_SEGMENT_CAPACITY[encoding]
    result: List[Segment] = []
    segment: List[EncodedChar] = []
    segment_units = 0
    for char in chars:
        char_cost = char.units(encoding)
        if segment and segment_units + char_cost > segment_size:
            result.append(Segment(tuple(segment), encoding, segment_size, has_header=True))
            segment = []
            segment_units = 0
        segment.append(char)
        segment_units += char_cost
    if segment:
        result.append(Segment(tuple(segment), encoding, segment_size, has_header=True))
    return tuple(result)
