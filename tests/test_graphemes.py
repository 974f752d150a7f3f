"""
Grapheme and Input Tests
========================
Grapheme clustering and input validation.
"""

import pytest

from smsly_segments import InvalidInputEncoding, analyze, iter_graphemes, split_graphemes


class TestGraphemeSplitting:
    """Tests for grapheme cluster splitting."""

    def test_empty_text(self):
        assert split_graphemes("") == []

    def test_ascii(self):
        assert split_graphemes("abc") == ["a", "b", "c"]

    def test_combining_marks_attach_to_base(self):
        """Combining accents should stay with their base letter."""
        assert split_graphemes("e\u0301a") == ["e\u0301", "a"]

    def test_flag_pairs(self):
        """Regional indicator pairs should form one flag each."""
        assert split_graphemes("\U0001F1EE\U0001F1F9\U0001F1EB\U0001F1F7") == [
            "\U0001F1EE\U0001F1F9",
            "\U0001F1EB\U0001F1F7",
        ]

    def test_zwj_sequence(self):
        """Zero width joiner emoji sequences should be one character."""
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert split_graphemes(family + "!") == [family, "!"]

    def test_variation_selector(self):
        assert split_graphemes("❤\ufe0fx") == ["❤\ufe0f", "x"]

    def test_crlf_is_two_characters(self):
        """CR LF should be split into two characters."""
        assert split_graphemes("a\r\nb") == ["a", "\r", "\n", "b"]

    def test_lone_cr(self):
        assert split_graphemes("a\rb") == ["a", "\r", "b"]

    def test_generator_is_restartable(self):
        """Calling iter_graphemes again should start from the beginning."""
        text = "Hi \U0001F600"
        first = iter_graphemes(text)

        assert next(first) == "H"
        assert list(iter_graphemes(text)) == ["H", "i", " ", "\U0001F600"]

    def test_every_scalar_kept(self):
        text = "Grüße e\u0301 \U0001F3F3\ufe0f\u200d\U0001F308 \r\n"
        assert "".join(split_graphemes(text)) == text


class TestInputValidation:
    """Tests for malformed input handling."""

    def test_lone_surrogate_rejected(self):
        """Strings with unpaired surrogates should fail fast."""
        with pytest.raises(InvalidInputEncoding) as exc_info:
            analyze("abc\ud83d")

        assert exc_info.value.position == 3

    def test_invalid_utf8_bytes_rejected(self):
        with pytest.raises(InvalidInputEncoding) as exc_info:
            analyze(b"ok\xff\xfe")

        assert exc_info.value.position == 2
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_valid_utf8_bytes_accepted(self):
        message = analyze("Café \U0001F600".encode("utf-8"))

        assert message.encoding_name == "UCS-2"
        assert message.number_of_characters == 6

    def test_non_text_rejected(self):
        with pytest.raises(InvalidInputEncoding):
            analyze(12345)

    def test_invalid_input_is_value_error(self):
        """InvalidInputEncoding should be catchable as ValueError."""
        with pytest.raises(ValueError):
            analyze("\udc00")

    def test_unassigned_code_point_is_ucs2(self):
        """Unassigned code points should force UCS-2, not fail."""
        message = analyze("abc\u0378")

        assert message.encoding_name == "UCS-2"
        assert message.non_gsm_characters == ("\u0378",)
