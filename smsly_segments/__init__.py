"""
SMSLY Segments
==============
Predicts how an SMS gateway encodes and segments a message: GSM-7 or
UCS-2, number of concatenated parts, and sizes in bits.
"""

__version__ = "0.1.0"

# Re-export all public APIs
from .models import (
    EncodingType,
    LineBreakStyle,
    EncodedChar,
    Segment,
    SegmentedMessage,
    GSM7_BASIC,
    GSM7_EXTENDED,
    HEADER_SIZE_BITS,
)
from .exceptions import (
    SegmentationError,
    InvalidInputEncoding,
    UnsupportedEncodingError,
    InvalidLineBreakStyle,
    ConfigurationError,
)
from .graphemes import iter_graphemes, split_graphemes
from .smart_encoding import SMART_ENCODING_MAP, apply_smart_encoding
from .line_breaks import detect_line_break_style, apply_line_break_style
from .encoding import encode_char, select_encoding, non_gsm_characters
from .segmentation import build_segments
from .config import SegmenterConfig
from .log_setup import setup_logging, setup_logging_from_config
from .analyzer import analyze

__all__ = [
    # Models
    "EncodingType",
    "LineBreakStyle",
    "EncodedChar",
    "Segment",
    "SegmentedMessage",
    "GSM7_BASIC",
    "GSM7_EXTENDED",
    "HEADER_SIZE_BITS",
    # Errors
    "SegmentationError",
    "InvalidInputEncoding",
    "UnsupportedEncodingError",
    "InvalidLineBreakStyle",
    "ConfigurationError",
    # Pipeline stages
    "iter_graphemes",
    "split_graphemes",
    "SMART_ENCODING_MAP",
    "apply_smart_encoding",
    "detect_line_break_style",
    "apply_line_break_style",
    "encode_char",
    "select_encoding",
    "non_gsm_characters",
    "build_segments",
    # Config
    "SegmenterConfig",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
    # Entry point
    "analyze",
]
