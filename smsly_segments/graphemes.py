"""
Grapheme Splitting
==================
Input validation and grapheme cluster splitting.
"""

from typing import Iterator, List, Union

import regex
import structlog

from .exceptions import InvalidInputEncoding

logger = structlog.get_logger(__name__)

GRAPHEME_PATTERN = regex.compile(r"\X")


def ensure_text(text: Union[str, bytes]) -> str:
    """
    Validate message input and return it as a string.

    Args:
        text: Message content, as str or UTF-8 encoded bytes

    Returns:
        The message as a well-formed str

    Raises:
        InvalidInputEncoding: If bytes are not valid UTF-8, the string
            contains lone surrogates, or the input is not text at all
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Message bytes are not valid UTF-8", position=e.start)
            raise InvalidInputEncoding(
                f"Message is not valid UTF-8 at byte {e.start}", position=e.start
            ) from e

    if not isinstance(text, str):
        raise InvalidInputEncoding(f"Message must be str or bytes, not {type(text).__name__}")

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.warning("Message contains a lone surrogate", position=e.start)
        raise InvalidInputEncoding(
            f"Message contains an unpaired surrogate at index {e.start}", position=e.start
        ) from e
    return text


def iter_graphemes(text: str) -> Iterator[str]:
    """
    Yield the user-perceived characters of a message.

    Clusters follow the Unicode extended grapheme rules, except that a
    CR LF pair is yielded as two characters: carriers bill both.
    """
    for match in GRAPHEME_PATTERN.finditer(text):
        cluster = match.group()
        if cluster == "\r\n":
            yield "\r"
            yield "\n"
        else:
            yield cluster


def split_graphemes(text: str) -> List[str]:
    """Split a message into a list of grapheme clusters."""
    return list(iter_graphemes(text))
