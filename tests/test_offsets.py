"""Tests for UTF-8 byte offset translation."""

import pytest

from revision_diff.interpreter.exceptions import OffsetOutOfRangeError
from revision_diff.interpreter.offsets import OffsetMapper, utf8_length


class TestUtf8Length:
    """Tests for the UTF-8 length classes."""

    @pytest.mark.parametrize(
        "char, expected",
        [
            ("a", 1),
            ("\x7f", 1),
            ("\x80", 2),
            ("é", 2),
            ("\u07ff", 2),
            ("\u0800", 3),
            ("€", 3),
            ("\uffff", 3),
            ("\U00010000", 4),
            ("😀", 4),
        ],
    )
    def test_length_matches_encoder(self, char, expected):
        assert utf8_length(ord(char)) == expected
        assert len(char.encode("utf-8")) == expected


class TestOffsetMapper:
    """Tests for OffsetMapper."""

    def test_ascii_maps_one_to_one(self):
        mapper = OffsetMapper("abc")
        assert mapper.byte_length == 3
        assert [mapper.translate(b) for b in range(3)] == [0, 1, 2]

    def test_two_byte_char_shares_position(self):
        """Both bytes of 'é' map to its code point position."""
        mapper = OffsetMapper("héllo")
        assert mapper.byte_length == 6
        assert [mapper.translate(b) for b in range(6)] == [0, 1, 1, 2, 3, 4]

    def test_supplementary_plane_char_is_one_position(self):
        """A 4-byte emoji occupies a single str position."""
        mapper = OffsetMapper("a😀b")
        assert mapper.byte_length == 6
        assert [mapper.translate(b) for b in range(6)] == [0, 1, 1, 1, 1, 2]

    def test_byte_length_matches_encoding(self):
        text = "Ünïcödé ✓ text 😀 end"
        assert OffsetMapper(text).byte_length == len(text.encode("utf-8"))

    def test_offset_at_end_maps_to_text_length(self):
        mapper = OffsetMapper("a€b")
        assert mapper.translate(mapper.byte_length) == 3

    def test_offset_past_end_clamps_to_text_length(self):
        mapper = OffsetMapper("a€b")
        assert mapper.translate(100) == 3

    def test_empty_text_has_empty_table(self):
        mapper = OffsetMapper("")
        assert mapper.byte_length == 0

    def test_negative_offset_raises(self):
        mapper = OffsetMapper("abc")
        with pytest.raises(OffsetOutOfRangeError):
            mapper.translate(-1)

    def test_slice_of_translated_range_extracts_whole_char(self):
        """Translating a range around one multi-byte char slices exactly that char."""
        text = "x€y"
        mapper = OffsetMapper(text)
        start, end = mapper.translate(1), mapper.translate(4)
        assert text[start:end] == "€"
