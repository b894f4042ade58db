"""
Coordinate notation for Reversi moves.

Squares are 0..63 row-major from the top-left. Names use the column as the
file letter and the row as the rank, so square 0 is 'a1' and square 63 is 'h8'.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

# Pass marker inside move strings
PASS_NOTATION = '--'


def square_to_rowcol(sq: int) -> Tuple[int, int]:
    if not 0 <= sq < 64:
        raise ValueError(f"Invalid square: {sq}")
    return divmod(sq, 8)


def rowcol_to_square(row: int, col: int) -> int:
    if not (0 <= row < 8 and 0 <= col < 8):
        raise ValueError(f"Invalid coordinates: ({row}, {col})")
    return row * 8 + col


def square_to_notation(sq: int) -> str:
    row, col = square_to_rowcol(sq)
    return f"{chr(ord('a') + col)}{row + 1}"


def notation_to_square(notation: str) -> int:
    if len(notation) != 2:
        raise ValueError(f"Invalid notation format: {notation}")
    col = ord(notation[0].lower()) - ord('a')
    if not notation[1].isdigit():
        raise ValueError(f"Invalid notation format: {notation}")
    row = int(notation[1]) - 1
    if not (0 <= col < 8 and 0 <= row < 8):
        raise ValueError(f"Invalid notation: {notation}")
    return row * 8 + col


def moves_to_string(moves: List[Optional[int]]) -> str:
    """Join moves as 'd3c5--f6...', None standing for a pass."""
    return ''.join(PASS_NOTATION if m is None else square_to_notation(m) for m in moves)


def string_to_moves(moves_str: str) -> List[Optional[int]]:
    if len(moves_str) % 2:
        raise ValueError(f"Odd-length move string: {moves_str}")
    moves: List[Optional[int]] = []
    for i in range(0, len(moves_str), 2):
        token = moves_str[i:i + 2]
        moves.append(None if token == PASS_NOTATION else notation_to_square(token))
    return moves
