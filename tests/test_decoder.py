"""Tests for decoding a single glyph entry."""

import pytest

from policyocr.engines.decoder import decode_entry
from policyocr.engines.glyph_table import BLANK_ROW, render_entry
from policyocr.errors import MalformedEntry

ENTRY_123456789 = [
    "    _  _     _  _  _  _  _ ",
    "  | _| _||_||_ |_   ||_||_|",
    "  ||_  _|  | _||_|  ||_| _|",
    "                           ",
]


class TestDecodeEntry:
    def test_decode_all_digits(self):
        assert decode_entry(ENTRY_123456789) == "123456789"

    @pytest.mark.parametrize("digit", "0123456789")
    def test_round_trip_each_digit(self, digit):
        number = digit * 9
        assert decode_entry(render_entry(number)) == number

    def test_round_trip_mixed(self):
        assert decode_entry(render_entry("457508000")) == "457508000"

    def test_unknown_cell_becomes_question_mark(self):
        rows = list(ENTRY_123456789)
        # Turn the '4' in position 3 into an unknown pattern.
        rows[1] = rows[1][:9] + " _|" + rows[1][12:]
        assert decode_entry(rows) == "123?56789"

    def test_blank_cells_are_unrecognized(self):
        assert decode_entry(render_entry("86110??36")) == "86110??36"

    def test_fourth_row_is_ignored(self):
        rows = list(ENTRY_123456789)
        rows[3] = "|_|" * 9
        assert decode_entry(rows) == "123456789"

    def test_decode_is_idempotent(self):
        assert decode_entry(ENTRY_123456789) == decode_entry(ENTRY_123456789)

    def test_output_always_nine_characters(self):
        assert decode_entry(["|" * 27, "_" * 27, " " * 27, BLANK_ROW]) == "?" * 9


class TestMalformedEntry:
    def test_too_few_rows(self):
        with pytest.raises(MalformedEntry) as exc_info:
            decode_entry(ENTRY_123456789[:3])
        assert exc_info.value.reason == "row count"
        assert exc_info.value.row is None

    def test_too_many_rows(self):
        with pytest.raises(MalformedEntry):
            decode_entry(ENTRY_123456789 + [BLANK_ROW])

    def test_short_row(self):
        rows = list(ENTRY_123456789)
        rows[1] = rows[1][:-1]
        with pytest.raises(MalformedEntry) as exc_info:
            decode_entry(rows)
        assert exc_info.value.row == 2
        assert exc_info.value.reason == "line length"
        assert str(exc_info.value) == "Line 2: Invalid entry format (line length)"

    def test_invalid_character(self):
        rows = list(ENTRY_123456789)
        rows[3] = " " * 25 + "a "
        with pytest.raises(MalformedEntry) as exc_info:
            decode_entry(rows)
        assert exc_info.value.row == 4
        assert exc_info.value.reason == "invalid character"

    def test_row_numbers_offset_by_first_row(self):
        rows = list(ENTRY_123456789)
        rows[0] = rows[0] + " "
        with pytest.raises(MalformedEntry) as exc_info:
            decode_entry(rows, first_row=9)
        assert exc_info.value.row == 9

    def test_malformed_entry_is_value_error(self):
        with pytest.raises(ValueError):
            decode_entry([])
