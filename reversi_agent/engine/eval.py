from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .bitboard import BAD_CORNER_MASK, CORNER_MASK, FULL, popcount

# Phase-aware linear evaluation: corners, X-squares, mobility, discs, parity.

TERMINAL_SHIFT = 20
# A decided game by even one disc scores at least this much
WIN_THRESHOLD = 1 << TERMINAL_SHIFT

OPENING_MAX_STONES = 20
MIDGAME_MAX_STONES = 55


class Phase(IntEnum):
    OPENING = 0
    MIDGAME = 1
    ENDGAME = 2


def phase_for_stones(stones: int) -> Phase:
    if stones <= OPENING_MAX_STONES:
        return Phase.OPENING
    if stones <= MIDGAME_MAX_STONES:
        return Phase.MIDGAME
    return Phase.ENDGAME


@dataclass(frozen=True)
class PhaseWeights:
    mobility: int
    disks: int
    parity: int


@dataclass(frozen=True)
class EvalWeights:
    corners: int = 1 << 8
    bad_corners: int = 1 << 10
    opening: PhaseWeights = PhaseWeights(mobility=50, disks=0, parity=0)
    midgame: PhaseWeights = PhaseWeights(mobility=20, disks=10, parity=100)
    endgame: PhaseWeights = PhaseWeights(mobility=100, disks=500, parity=500)

    def for_phase(self, phase: Phase) -> PhaseWeights:
        return (self.opening, self.midgame, self.endgame)[phase]


DEFAULT_WEIGHTS = EvalWeights()


def parity(own: int, opp: int) -> int:
    """+1 when an odd number of squares is empty, -1 when even."""
    empties = popcount(~(own | opp) & FULL)
    return 1 if empties % 2 else -1


def terminal_score(own: int, opp: int) -> int:
    return (popcount(own) - popcount(opp)) << TERMINAL_SHIFT


def evaluate(
    own: int,
    opp: int,
    own_moves: int,
    opp_moves: int,
    weights: EvalWeights = DEFAULT_WEIGHTS,
) -> int:
    # Score from the point of view of `own`; positive is good for own
    if own_moves == 0 and opp_moves == 0:
        return terminal_score(own, opp)

    phase = weights.for_phase(phase_for_stones(popcount(own | opp)))
    corners = popcount(own & CORNER_MASK) - popcount(opp & CORNER_MASK)
    bad_corners = popcount(own & BAD_CORNER_MASK) - popcount(opp & BAD_CORNER_MASK)
    mobility = popcount(own_moves) - popcount(opp_moves)
    disks = popcount(own) - popcount(opp)

    score = 0
    score += weights.corners * corners
    score -= weights.bad_corners * bad_corners
    score += phase.mobility * mobility
    score += phase.disks * disks
    score += phase.parity * parity(own, opp)
    return score
