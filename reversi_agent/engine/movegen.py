from __future__ import annotations

from typing import Tuple

from .bitboard import DIRECTIONS, FULL, shift


class IllegalMoveError(ValueError):
    """A move was requested that is not legal for the given position."""


def generate_moves(own: int, opp: int) -> int:
    """Return bitmask of legal moves for side with discs `own` against `opp`."""
    empty = ~(own | opp) & FULL
    moves = 0
    for d in DIRECTIONS:
        x = shift(own, d) & opp
        # At most 6 opponent discs fit between two squares on one line
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        moves |= shift(x, d) & empty
    return moves


def flip_mask(own: int, opp: int, sq: int) -> int:
    """Return bitboard of discs flipped if `own` plays on `sq`."""
    new_disk = 1 << sq
    bounds = own | new_disk
    flips = 0
    for d in DIRECTIONS:
        x = shift(new_disk, d) & opp
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        x |= shift(x, d) & opp
        if shift(x, d) & bounds:
            flips |= x
    return flips


def resolve_move(own: int, opp: int, sq: int) -> Tuple[int, int]:
    """Play `sq` for `own` and return the new (own, opp) pair."""
    if not 0 <= sq < 64:
        raise IllegalMoveError(f"square out of range: {sq}")
    new_disk = 1 << sq
    if (own | opp) & new_disk:
        raise IllegalMoveError(f"square {sq} is occupied")
    flips = flip_mask(own, opp, sq)
    if flips == 0:
        raise IllegalMoveError(f"square {sq} captures nothing")
    own2 = own | new_disk | flips
    opp2 = opp ^ flips
    assert own2 & opp2 == 0, "disc sets overlap"
    return own2, opp2
