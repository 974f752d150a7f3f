"""
Encoding Detection
==================
Per-grapheme classification and message encoding selection.
"""

from typing import Iterable, List, Sequence, Tuple, Union

import structlog

from .exceptions import UnsupportedEncodingError
from .models import EncodedChar, EncodingType, GSM7_BASIC, GSM7_EXTENDED

logger = structlog.get_logger(__name__)

ENCODING_CHOICES = ("auto", EncodingType.GSM7.value, EncodingType.UCS2.value)


def count_code_units(text: str) -> int:
    """Number of UTF-16 code units needed for a string."""
    return len(text.encode("utf-16-le")) // 2


def count_gsm7_units(text: str) -> int:
    """
    Count the number of GSM-7 character units (extended chars count as 2).

    Characters outside both alphabets count as 1; callers only use this
    for text that has already been classified as GSM-7.
    """
    count = 0
    for char in text:
        if char in GSM7_EXTENDED:
            count += 2
        else:
            count += 1
    return count


def encode_char(grapheme: str) -> EncodedChar:
    """Classify a grapheme and compute its cost under both encodings."""
    return EncodedChar(
        raw=grapheme,
        in_gsm7_basic=all(char in GSM7_BASIC for char in grapheme),
        in_gsm7_extended=all(char in GSM7_EXTENDED for char in grapheme),
        gsm7_units=count_gsm7_units(grapheme),
        ucs2_units=count_code_units(grapheme),
    )


def encode_chars(graphemes: Iterable[str]) -> Tuple[EncodedChar, ...]:
    return tuple(encode_char(grapheme) for grapheme in graphemes)


def non_gsm_characters(chars: Iterable[EncodedChar]) -> List[str]:
    """Graphemes that cannot be represented in GSM-7, in message order."""
    return [char.raw for char in chars if not char.is_gsm7]


def select_encoding(chars: Iterable[EncodedChar]) -> EncodingType:
    """
    Detect the required encoding for a message.

    Args:
        chars: Classified graphemes of the message

    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    for char in chars:
        if not char.is_gsm7:
            return EncodingType.UCS2
    return EncodingType.GSM7


def resolve_encoding(
    chars: Sequence[EncodedChar],
    requested: Union[str, EncodingType] = "auto",
) -> EncodingType:
    """
    Pick the encoding for a message, honoring an explicit request.

    Raises:
        UnsupportedEncodingError: If the name is unknown, or GSM-7 is
            requested for text that needs UCS-2
    """
    requested = getattr(requested, "value", requested)
    if requested not in ENCODING_CHOICES:
        logger.warning("Unknown encoding requested", encoding=requested)
        raise UnsupportedEncodingError(str(requested))

    if requested == "auto":
        return select_encoding(chars)

    encoding = EncodingType(requested)
    if encoding is EncodingType.GSM7:
        unsupported = non_gsm_characters(chars)
        if unsupported:
            logger.warning(
                "GSM-7 requested for incompatible message",
                unsupported_count=len(unsupported),
            )
            raise UnsupportedEncodingError(encoding.value, unsupported)
    return encoding
