"""Tests for board_parser module."""

import pytest

from board_parser import parse_board
from hex_types import HexCoord


class TestParseBoard:
    """Tests for the board definition parser."""

    def test_single_entry(self) -> None:
        assert parse_board("0,0:a") == {HexCoord(0, 0): "a"}

    def test_multiple_entries(self) -> None:
        """Parse several entries separated by spaces."""
        values = parse_board("0,0:a 1,0:b 0,1:c -1,-1:d")

        assert len(values) == 4
        assert values[HexCoord(1, 0)] == "b"
        assert values[HexCoord(0, 1)] == "c"
        assert values[HexCoord(-1, -1)] == "d"

    def test_pipe_and_newline_separators(self) -> None:
        definition = """
        0,0:a | 1,0:b
        2,0:c|3,0:d
        """
        values = parse_board(definition)
        assert list(values.values()) == ["a", "b", "c", "d"]

    def test_duplicate_last_wins(self) -> None:
        values = parse_board("0,0:a 0,0:z")
        assert values == {HexCoord(0, 0): "z"}

    def test_negative_and_large_coordinates(self) -> None:
        values = parse_board("-12,340:#")
        assert values == {HexCoord(-12, 340): "#"}

    def test_punctuation_payload(self) -> None:
        """Any single non-space character is a valid payload."""
        values = parse_board("0,0:: 1,1:, 2,2:⬢")
        assert values[HexCoord(0, 0)] == ":"
        assert values[HexCoord(1, 1)] == ","
        assert values[HexCoord(2, 2)] == "⬢"

    def test_empty_definition(self) -> None:
        assert parse_board("") == {}
        assert parse_board("  |  ") == {}


class TestParseBoardErrors:
    """Tests for rejected definitions."""

    def test_missing_payload(self) -> None:
        with pytest.raises(ValueError, match="Invalid board entry: '0,0:'"):
            parse_board("0,0:")

    def test_multi_character_payload(self) -> None:
        with pytest.raises(ValueError, match="Invalid board entry: '0,0:ab'"):
            parse_board("0,0:ab")

    def test_missing_coordinate(self) -> None:
        with pytest.raises(ValueError, match="Invalid board entry"):
            parse_board("0:a")

    def test_non_integer_coordinate(self) -> None:
        with pytest.raises(ValueError, match="Invalid board entry"):
            parse_board("x,1:a")

    def test_error_reports_entry_index(self) -> None:
        with pytest.raises(ValueError) as excinfo:
            parse_board("0,0:a 1,0:b oops")
        assert "entry 2" in str(excinfo.value)
