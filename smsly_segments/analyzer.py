"""
Message Analyzer
================
Entry point: predicts encoding, segments and sizes of an SMS message.
"""

from typing import Mapping, Optional, Union

import structlog

from .config import DEFAULT_CONFIG, SegmenterConfig
from .encoding import encode_chars, resolve_encoding
from .graphemes import ensure_text, iter_graphemes
from .line_breaks import apply_line_break_style
from .models import EncodingType, SegmentedMessage
from .segmentation import build_segments
from .smart_encoding import apply_smart_encoding

logger = structlog.get_logger(__name__)


def analyze(
    text: Union[str, bytes],
    line_break_style: Optional[str] = None,
    smart_encoding: Optional[bool] = None,
    *,
    encoding: Optional[Union[str, EncodingType]] = None,
    smart_encoding_map: Optional[Mapping[str, str]] = None,
    config: Optional[SegmenterConfig] = None,
) -> SegmentedMessage:
    """
    Analyze how a message will be encoded and segmented.

    Args:
        text: Message content (str, or UTF-8 encoded bytes)
        line_break_style: "auto" to detect, or "LF" / "CRLF" to count every
            line break in that style
        smart_encoding: Replace typographic characters with GSM-7
            equivalents before analysis
        encoding: "auto", "GSM-7" or "UCS-2"
        smart_encoding_map: Replacement table used when smart encoding is on
        config: Defaults for options left as None

    Returns:
        SegmentedMessage with encoding, segments, sizes and warnings

    Raises:
        InvalidInputEncoding: If the text is not well-formed Unicode
        InvalidLineBreakStyle: If the line break style is unknown
        UnsupportedEncodingError: If the requested encoding cannot be used
    """
    config = config or DEFAULT_CONFIG
    if line_break_style is None:
        line_break_style = config.line_break_style
    if smart_encoding is None:
        smart_encoding = config.smart_encoding
    if encoding is None:
        encoding = config.encoding

    text = ensure_text(text)
    text = apply_smart_encoding(text, smart_encoding, smart_encoding_map)
    text, style, warnings = apply_line_break_style(text, line_break_style)

    chars = encode_chars(iter_graphemes(text))
    chosen = resolve_encoding(chars, encoding)
    segments = build_segments(chars, chosen)

    message = SegmentedMessage(
        encoding=chosen,
        segments=segments,
        encoded_chars=chars,
        line_break_style=style,
        warnings=tuple(warnings),
    )

    logger.debug(
        "Message segmented",
        encoding=chosen.value,
        segments=len(segments),
        characters=len(chars),
        message_size=message.message_size,
        total_size=message.total_size,
        warnings=len(warnings),
    )
    return message
