"""
Smart Encoding Tests
====================
Replacement of typographic characters before analysis.
"""

import pytest

from smsly_segments import SMART_ENCODING_MAP, analyze, apply_smart_encoding


class TestSmartEncodingMap:
    """Tests for the default replacement table."""

    @pytest.mark.parametrize("key,value", sorted(SMART_ENCODING_MAP.items()))
    def test_enabled_maps_character(self, key, value):
        """With smart encoding enabled every key maps to its replacement."""
        message = analyze(key, "auto", True)
        assert "".join(message.graphemes) == value

    @pytest.mark.parametrize("key", sorted(SMART_ENCODING_MAP))
    def test_disabled_keeps_character(self, key):
        """With smart encoding disabled the text is untouched."""
        message = analyze(key, "auto", False)
        assert "".join(message.graphemes) == key

    def test_replace_all_at_once(self):
        text = "".join(SMART_ENCODING_MAP.keys())
        expected = "".join(SMART_ENCODING_MAP.values())

        message = analyze(text, "auto", True)
        assert "".join(message.graphemes) == expected

    def test_replacements_are_gsm7(self):
        """Every replacement should be encodable as GSM-7."""
        expected = "".join(SMART_ENCODING_MAP.values())
        assert analyze(expected).encoding_name == "GSM-7"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SMART_ENCODING_MAP["x"] = "y"


class TestSmartEncodingAnalysis:
    """Tests for smart encoding's effect on segment counts."""

    def test_word_processor_text_becomes_gsm7(self):
        text = "“Hello” — it’s done…"

        assert analyze(text).encoding_name == "UCS-2"

        message = analyze(text, smart_encoding=True)
        assert message.encoding_name == "GSM-7"
        assert "".join(message.graphemes) == '"Hello" -- it\'s done...'

    def test_smart_encoding_reduces_segments(self):
        text = "’" * 100

        assert analyze(text).segments_count == 2
        assert analyze(text, smart_encoding=True).segments_count == 1

    def test_custom_table(self):
        """A caller supplied table replaces the default one."""
        message = analyze(
            "a→b “c”",
            smart_encoding=True,
            smart_encoding_map={"→": "->"},
        )

        assert "".join(message.graphemes) == "a->b “c”"
        assert message.encoding_name == "UCS-2"

    def test_apply_disabled(self):
        assert apply_smart_encoding("“x”", enabled=False) == "“x”"

    def test_apply_with_multi_character_replacement(self):
        assert apply_smart_encoding("½ — ©") == "1/2 -- (C)"
