"""
Encoding Tests
==============
Character classification and encoding selection.
"""

import pytest

from smsly_segments import (
    EncodingType,
    UnsupportedEncodingError,
    analyze,
    encode_char,
    select_encoding,
)


class TestCharacterClassification:
    """Tests for per-grapheme classification."""

    def test_basic_character(self):
        char = encode_char("a")

        assert char.in_gsm7_basic is True
        assert char.in_gsm7_extended is False
        assert char.is_gsm7 is True
        assert char.units(EncodingType.GSM7) == 1
        assert char.units(EncodingType.UCS2) == 1
        assert char.size_in_bits(EncodingType.GSM7) == 7
        assert char.scalars == (0x61,)

    @pytest.mark.parametrize("raw", ["|", "^", "€", "{", "}", "[", "]", "~", "\\", "\f"])
    def test_extended_character(self, raw):
        """Extended characters need an escape and cost two GSM-7 units."""
        char = encode_char(raw)

        assert char.in_gsm7_basic is False
        assert char.in_gsm7_extended is True
        assert char.is_gsm7 is True
        assert char.units(EncodingType.GSM7) == 2
        assert char.units(EncodingType.UCS2) == 1

    def test_astral_character(self):
        """Characters outside the BMP need a surrogate pair."""
        char = encode_char("\U0001F61C")

        assert char.is_gsm7 is False
        assert char.code_units == 2
        assert char.size_in_bits(EncodingType.UCS2) == 32

    def test_multi_scalar_grapheme(self):
        char = encode_char("\U0001F1EE\U0001F1F9")

        assert char.scalars == (0x1F1EE, 0x1F1F9)
        assert char.code_units == 4

    def test_combining_mark_is_not_gsm7(self):
        char = encode_char("e\u0301")

        assert char.is_gsm7 is False
        assert char.code_units == 2

    @pytest.mark.parametrize("raw", ["ç", "á", "`", "’", "\u00a0"])
    def test_non_gsm7_characters(self, raw):
        assert encode_char(raw).is_gsm7 is False

    @pytest.mark.parametrize("raw", ["Ç", "é", "£", "Δ", "§", "@", "\r", "\n"])
    def test_gsm7_basic_characters(self, raw):
        assert encode_char(raw).in_gsm7_basic is True

    def test_count_code_units(self):
        from smsly_segments.encoding import count_code_units

        assert count_code_units("") == 0
        assert count_code_units("abc") == 3
        assert count_code_units("\U0001F3F3\ufe0f\u200d\U0001F308") == 6


class TestEncodingSelection:
    """Tests for choosing the message encoding."""

    def test_gsm7_for_basic_text(self):
        chars = [encode_char(c) for c in "Hello World!"]
        assert select_encoding(chars) is EncodingType.GSM7

    def test_gsm7_with_extended_characters(self):
        assert analyze("Price: 5€ [promo]").encoding is EncodingType.GSM7

    def test_ucs2_for_unicode(self):
        assert analyze("Hello 你好").encoding is EncodingType.UCS2

    def test_non_gsm_characters_in_order(self):
        message = analyze("ça va? \U0001F600 ok ç")
        assert message.non_gsm_characters == ("ç", "\U0001F600", "ç")

    def test_no_non_gsm_characters(self):
        assert analyze("Hello").non_gsm_characters == ()


class TestForcedEncoding:
    """Tests for the explicit encoding option."""

    def test_force_ucs2(self):
        """GSM-7 compatible text can be sent as UCS-2."""
        message = analyze("Hello", encoding="UCS-2")

        assert message.encoding_name == "UCS-2"
        assert message.message_size == 80

    def test_force_ucs2_with_enum(self):
        message = analyze("[x]", encoding=EncodingType.UCS2)
        assert message.message_size == 48

    def test_force_gsm7_on_compatible_text(self):
        message = analyze("Hello", encoding="GSM-7")
        assert message.encoding is EncodingType.GSM7

    def test_force_gsm7_on_incompatible_text(self):
        """Forcing GSM-7 should fail when characters cannot be encoded."""
        with pytest.raises(UnsupportedEncodingError) as exc_info:
            analyze("Hello \U0001F61C", encoding="GSM-7")

        assert exc_info.value.encoding == "GSM-7"
        assert exc_info.value.characters == ("\U0001F61C",)

    def test_unknown_encoding(self):
        with pytest.raises(UnsupportedEncodingError) as exc_info:
            analyze("Hello", encoding="UTF-8")

        assert exc_info.value.characters == ()
        assert "UTF-8" in str(exc_info.value)
