from __future__ import annotations

from typing import Iterable, Optional

from .bitboard import iter_squares
from .board import Board, Player, has_valid_move, make_move, start_board
from .movegen import generate_moves, resolve_move


def perft(own: int, opp: int, depth: int) -> int:
    """Count leaf positions `depth` plies ahead; a forced pass counts as a ply."""
    if depth == 0:
        return 1
    mask = generate_moves(own, opp)
    if mask == 0:
        if generate_moves(opp, own) == 0:
            return 1
        return perft(opp, own, depth - 1)
    total = 0
    for sq in iter_squares(mask):
        own2, opp2 = resolve_move(own, opp, sq)
        total += perft(opp2, own2, depth - 1)
    return total


def play_moves(moves: Iterable[Optional[int]], board: Optional[Board] = None) -> tuple[Board, Player]:
    """Replay squares (None = pass) from `board` or the start position."""
    b = start_board() if board is None else board
    player = Player.BLACK
    for sq in moves:
        if sq is None:
            if has_valid_move(b, player):
                raise ValueError(f"{player.name} cannot pass with legal moves")
        else:
            make_move(b, player, *divmod(sq, 8))
        player = player.enemy
    return b, player


def perft_board(board: Board, player: Player, depth: int) -> int:
    own, opp = board.own_opp(player)
    return perft(own, opp, depth)
