from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple

from .bitboard import popcount
from .movegen import IllegalMoveError, generate_moves, resolve_move

# Starting discs: first side on e4/d5, second side on d4/e5
START_FIRST = (1 << 28) | (1 << 35)
START_SECOND = (1 << 27) | (1 << 36)

MARKERS = (".", "#", "O")


class Player(IntEnum):
    BLACK = 0  # moves first
    WHITE = 1

    @property
    def enemy(self) -> "Player":
        return Player(1 - self)


@dataclass
class Board:
    disks: List[int] = field(default_factory=lambda: [0, 0])

    def own_opp(self, player: Player) -> Tuple[int, int]:
        return self.disks[player], self.disks[1 - player]

    def count(self, player: Player) -> int:
        return popcount(self.disks[player])

    def stones(self) -> int:
        return popcount(self.disks[0] | self.disks[1])

    def copy(self) -> "Board":
        return Board(list(self.disks))

    def __str__(self) -> str:
        return "\n".join(
            "".join(self._marker(row * 8 + col) for col in range(8)) for row in range(8)
        )

    def _marker(self, sq: int) -> str:
        bit = 1 << sq
        if self.disks[0] & bit:
            return MARKERS[1]
        if self.disks[1] & bit:
            return MARKERS[2]
        return MARKERS[0]


def start_board() -> Board:
    return Board([START_FIRST, START_SECOND])


def board_from_string(text: str) -> Board:
    """Parse the 8x8 rendering produced by ``str(board)``.

    Whitespace between rows is ignored; '*' (move markers) counts as empty.
    """
    cells = [c for c in text if not c.isspace()]
    if len(cells) != 64:
        raise ValueError(f"expected 64 cells, got {len(cells)}")
    first = second = 0
    for sq, c in enumerate(cells):
        if c == MARKERS[1]:
            first |= 1 << sq
        elif c == MARKERS[2]:
            second |= 1 << sq
        elif c not in (MARKERS[0], "*"):
            raise ValueError(f"bad cell {c!r} at square {sq}")
    return Board([first, second])


def legal_moves(board: Board, player: Player) -> int:
    own, opp = board.own_opp(player)
    return generate_moves(own, opp)


def has_valid_move(board: Board, player: Player) -> bool:
    return legal_moves(board, player) != 0


def is_game_over(board: Board) -> bool:
    return not has_valid_move(board, Player.BLACK) and not has_valid_move(board, Player.WHITE)


def make_move(board: Board, player: Player, row: int, col: int) -> None:
    """Play (row, col) for `player`, updating `board` in place."""
    if not (0 <= row < 8 and 0 <= col < 8):
        raise IllegalMoveError(f"off-board move ({row}, {col})")
    sq = row * 8 + col
    if not legal_moves(board, player) & (1 << sq):
        raise IllegalMoveError(f"illegal move ({row}, {col}) for {player.name}\n{board}")
    own, opp = board.own_opp(player)
    own2, opp2 = resolve_move(own, opp, sq)
    board.disks[player] = own2
    board.disks[1 - player] = opp2


def show_possible_moves(board: Board, player: Player) -> str:
    moves = legal_moves(board, player)
    rows = str(board).split("\n")
    out = []
    for row, line in enumerate(rows):
        out.append(
            "".join("*" if moves & (1 << (row * 8 + col)) else c for col, c in enumerate(line))
        )
    return "\n".join(out)
