"""
Smart Encoding
==============
Replaces typographic characters with GSM-7 friendly equivalents so a
message pasted from a word processor does not fall back to UCS-2.
"""

from types import MappingProxyType
from typing import Mapping, Optional

SMART_ENCODING_MAP: Mapping[str, str] = MappingProxyType({
    # Double quotes
    "«": '"',
    "»": '"',
    "“": '"',
    "”": '"',
    "ʺ": '"',
    "ˮ": '"',
    "‟": '"',
    "❝": '"',
    "❞": '"',
    "〝": '"',
    "〞": '"',
    "＂": '"',
    # Single quotes and apostrophes
    "‘": "'",
    "’": "'",
    "ʻ": "'",
    "ˈ": "'",
    "ʼ": "'",
    "ʽ": "'",
    "ʹ": "'",
    "‛": "'",
    "＇": "'",
    "´": "'",
    "ˊ": "'",
    "`": "'",
    "❛": "'",
    "❜": "'",
    "\u0313": "'",
    "\u0314": "'",
    "︐": "'",
    "︑": "'",
    "′": "'",
    "‵": "'",
    "‚": ",",
    # Slashes and fractions
    "÷": "/",
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⧸": "/",
    "\u0337": "/",
    "\u0338": "/",
    "⁄": "/",
    "∕": "/",
    "／": "/",
    "⧹": "\\",
    "⧵": "\\",
    "\u20e5": "\\",
    "﹨": "\\",
    "＼": "\\",
    # Dashes and bars
    "\u0332": "_",
    "＿": "_",
    "\u20d2": "|",
    "\u20d3": "|",
    "∣": "|",
    "｜": "|",
    "⎸": "|",
    "⎹": "|",
    "⏐": "|",
    "⎜": "|",
    "⎟": "|",
    "⎼": "-",
    "⎽": "-",
    "‐": "-",
    "‑": "-",
    "‒": "-",
    "–": "-",
    "—": "--",
    "―": "--",
    "⁃": "-",
    "−": "-",
    "﹣": "-",
    "－": "-",
    "•": "-",
    # Punctuation
    "…": "...",
    "ǃ": "!",
    "︕": "!",
    "﹗": "!",
    "！": "!",
    "﹟": "#",
    "＃": "#",
    "﹪": "%",
    "％": "%",
    "﹠": "&",
    "＆": "&",
    "﹫": "@",
    "＠": "@",
    "﹩": "$",
    "＄": "$",
    "\u0326": ",",
    "﹐": ",",
    "﹑": ",",
    "，": ",",
    "､": ",",
    "、": ",",
    "❨": "(",
    "❪": "(",
    "﹙": "(",
    "（": "(",
    "⟮": "(",
    "⦅": "(",
    "❩": ")",
    "❫": ")",
    "﹚": ")",
    "）": ")",
    "⟯": ")",
    "⦆": ")",
    "⁎": "*",
    "∗": "*",
    "⊛": "*",
    "✢": "*",
    "✣": "*",
    "✤": "*",
    "✥": "*",
    "✱": "*",
    "✲": "*",
    "✳": "*",
    "✺": "*",
    "✻": "*",
    "✼": "*",
    "✽": "*",
    "❃": "*",
    "❉": "*",
    "❊": "*",
    "❋": "*",
    "⧆": "*",
    "﹡": "*",
    "＊": "*",
    "˖": "+",
    "﹢": "+",
    "＋": "+",
    "。": ".",
    "﹒": ".",
    "．": ".",
    "｡": ".",
    "ː": ":",
    "˸": ":",
    "⦂": ":",
    "꞉": ":",
    "︓": ":",
    "：": ":",
    "⁏": ";",
    "︔": ";",
    "﹔": ";",
    "；": ";",
    "﹤": "<",
    "＜": "<",
    "‹": "<",
    "\u0347": "=",
    "꞊": "=",
    "﹦": "=",
    "＝": "=",
    "﹥": ">",
    "＞": ">",
    "›": ">",
    "︖": "?",
    "﹖": "?",
    "？": "?",
    "❴": "{",
    "﹛": "{",
    "｛": "{",
    "❵": "}",
    "﹜": "}",
    "｝": "}",
    "［": "[",
    "］": "]",
    "˄": "^",
    "ˆ": "^",
    "‸": "^",
    "⌃": "^",
    "˜": "~",
    "˷": "~",
    "\u0303": "~",
    "\u0330": "~",
    "\u0334": "~",
    "∼": "~",
    "～": "~",
    # Digits
    "０": "0",
    "１": "1",
    "２": "2",
    "３": "3",
    "４": "4",
    "５": "5",
    "６": "6",
    "７": "7",
    "８": "8",
    "９": "9",
    # Symbols
    "©": "(C)",
    "®": "(R)",
    "™": "(TM)",
    # Spaces
    "\u00a0": " ",
    "\u2000": " ",
    "\u2001": " ",
    "\u2002": " ",
    "\u2003": " ",
    "\u2004": " ",
    "\u2005": " ",
    "\u2006": " ",
    "\u2007": " ",
    "\u2008": " ",
    "\u2009": " ",
    "\u200a": " ",
    "\u202f": " ",
    "\u205f": " ",
    "\u3000": " ",
    "\t": " ",
    # Invisible
    "\u00ad": "",
    "\u200b": "",
    "\u2060": "",
    "\ufeff": "",
})


def apply_smart_encoding(
    text: str,
    enabled: bool = True,
    table: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Replace characters that have a GSM-7 friendly equivalent.

    Args:
        text: Message content
        enabled: When False, the text is returned unchanged
        table: Replacement table, defaults to SMART_ENCODING_MAP

    Returns:
        Message with replacements applied
    """
    if not enabled:
        return text
    replacements = SMART_ENCODING_MAP if table is None else table
    return "".join(replacements.get(char, char) for char in text)
