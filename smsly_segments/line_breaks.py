"""
Line Break Handling
===================
Detection of LF / CRLF line breaks and the warnings they produce.

A lone CR (not followed by LF) is an ordinary character, not a line break.
"""

from typing import List, Optional, Tuple

import regex

from .exceptions import InvalidLineBreakStyle
from .models import LineBreakStyle

LINE_BREAK_PATTERN = regex.compile(r"\r\n|\n")

LINE_BREAK_HINTS = ("auto", "LF", "CRLF")


def count_line_breaks(text: str) -> Tuple[int, int]:
    """
    Count line breaks in a message.

    Returns:
        Tuple of (bare LF count, CRLF count)
    """
    crlf = text.count("\r\n")
    lf = text.count("\n") - crlf
    return lf, crlf


def detect_line_break_style(text: str) -> Optional[LineBreakStyle]:
    """Return the line break style used by a message, or None."""
    lf, crlf = count_line_breaks(text)
    if lf and crlf:
        return LineBreakStyle.MIXED
    if crlf:
        return LineBreakStyle.CRLF
    if lf:
        return LineBreakStyle.LF
    return None


def line_break_warnings(text: str, style: Optional[LineBreakStyle]) -> List[str]:
    """Build the warnings for a message's line break style."""
    _, crlf = count_line_breaks(text)
    if style is LineBreakStyle.MIXED:
        return [
            f"Message contains mixed line break styles (LF and CRLF); "
            f"each of the {crlf} CRLF line break(s) is counted as 2 characters"
        ]
    if style is LineBreakStyle.CRLF and crlf:
        return [f"Message contains {crlf} CRLF line break(s), each counted as 2 characters"]
    return []


def apply_line_break_style(
    text: str,
    hint: str = "auto",
) -> Tuple[str, Optional[LineBreakStyle], List[str]]:
    """
    Resolve the line break style of a message.

    With "auto" the style is detected and the text is left untouched.
    An explicit "LF" or "CRLF" hint rewrites every line break to that
    style and skips detection, so no mixed-style warning is produced.

    Args:
        text: Message content
        hint: "auto", "LF" or "CRLF"

    Returns:
        Tuple of (text to count, style, warnings)

    Raises:
        InvalidLineBreakStyle: If the hint is not recognized
    """
    hint = getattr(hint, "value", hint)
    if hint not in LINE_BREAK_HINTS:
        raise InvalidLineBreakStyle(str(hint))

    if hint == "auto":
        style = detect_line_break_style(text)
        return text, style, line_break_warnings(text, style)

    style = LineBreakStyle(hint)
    replacement = "\n" if style is LineBreakStyle.LF else "\r\n"
    counted, breaks = LINE_BREAK_PATTERN.subn(replacement, text)
    if not breaks:
        return text, None, []
    return counted, style, line_break_warnings(counted, style)
