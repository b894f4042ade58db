"""
Tests for the coordinate notation system.
"""

import pytest
from reversi_agent.engine.notation import (
    PASS_NOTATION,
    moves_to_string,
    notation_to_square,
    rowcol_to_square,
    square_to_notation,
    square_to_rowcol,
    string_to_moves,
)


class TestCoordinateNotation:
    """Test coordinate notation conversion functions."""

    def test_square_to_notation(self):
        assert square_to_notation(0) == "a1"   # Top-left
        assert square_to_notation(7) == "h1"   # Top-right
        assert square_to_notation(56) == "a8"  # Bottom-left
        assert square_to_notation(63) == "h8"  # Bottom-right
        assert square_to_notation(19) == "d3"
        assert square_to_notation(44) == "e6"

    def test_notation_to_square(self):
        assert notation_to_square("a1") == 0
        assert notation_to_square("h8") == 63
        assert notation_to_square("D3") == 19

    @pytest.mark.parametrize("bad", ["", "a", "a9", "i1", "a0", "11", "a1b"])
    def test_invalid_notation(self, bad):
        with pytest.raises(ValueError):
            notation_to_square(bad)

    def test_row_col(self):
        assert square_to_rowcol(19) == (2, 3)
        assert rowcol_to_square(2, 3) == 19
        with pytest.raises(ValueError):
            square_to_rowcol(64)
        with pytest.raises(ValueError):
            rowcol_to_square(0, 8)


class TestMoveStrings:
    def test_roundtrip_with_passes(self):
        moves = [19, 18, None, 44]
        s = moves_to_string(moves)
        assert s == "d3c3" + PASS_NOTATION + "e6"
        assert string_to_moves(s) == moves

    def test_empty(self):
        assert moves_to_string([]) == ""
        assert string_to_moves("") == []

    def test_odd_length_rejected(self):
        with pytest.raises(ValueError):
            string_to_moves("d3c")
