from __future__ import annotations

from typing import Iterator, NamedTuple

# Board is 8x8, squares numbered 0..63 row-major, bit 0 = top-left (a1),
# bit 63 = bottom-right (h8). Shifting right moves towards bit 0.

FULL = 0xFFFFFFFFFFFFFFFF

FILE_A = 0x0101010101010101
FILE_H = 0x8080808080808080
NOT_FILE_A = ~FILE_A & FULL
NOT_FILE_H = ~FILE_H & FULL

CORNER_MASK = 0x8100000000000081
# X-squares: diagonal neighbours of the corners (b2, g2, b7, g7)
BAD_CORNER_MASK = 0x0042000000004200


class Direction(NamedTuple):
    name: str
    mask: int
    lshift: int
    rshift: int


# Masks clear the squares a shift would wrap into.
DIRECTIONS = (
    Direction("W", 0x7F7F7F7F7F7F7F7F, 0, 1),
    Direction("NW", 0x007F7F7F7F7F7F7F, 0, 9),
    Direction("N", 0xFFFFFFFFFFFFFFFF, 0, 8),
    Direction("NE", 0x00FEFEFEFEFEFEFE, 0, 7),
    Direction("E", 0xFEFEFEFEFEFEFEFE, 1, 0),
    Direction("SE", 0xFEFEFEFEFEFEFE00, 9, 0),
    Direction("S", 0xFFFFFFFFFFFFFFFF, 8, 0),
    Direction("SW", 0x7F7F7F7F7F7F7F00, 7, 0),
)


def shift(bb: int, d: Direction) -> int:
    if d.rshift:
        return (bb >> d.rshift) & d.mask
    return (bb << d.lshift) & d.mask


def popcount(x: int) -> int:
    return x.bit_count()


def iter_squares(bb: int) -> Iterator[int]:
    """Yield the set bits of `bb` in ascending square order."""
    while bb:
        lsb = bb & -bb
        yield lsb.bit_length() - 1
        bb ^= lsb


def square_bit(sq: int) -> int:
    return 1 << sq
