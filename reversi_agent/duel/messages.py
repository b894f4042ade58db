"""
Line messages exchanged with the duel referee.

Incoming: ``UGO t g``, ``HEDID t g x y``, ``ONEMORE``, ``BYE``.
Outgoing: ``RDY`` and ``IDO x y``. Coordinates on the wire are (column, row),
with ``-1 -1`` meaning a pass; inside the agent they are (row, col).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

RowCol = Tuple[int, int]

READY = "RDY"

_FLOAT = r"([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
_INT = r"(-?\d+)"
_UGO_RE = re.compile(r"UGO\s*" + _FLOAT + r"\s+" + _FLOAT)
_HEDID_RE = re.compile(r"HEDID\s*" + _FLOAT + r"\s+" + _FLOAT + r"\s+" + _INT + r"\s+" + _INT)


class ProtocolError(ValueError):
    """Referee sent a line that is not a known message."""


@dataclass(frozen=True)
class Ugo:
    turn_time: float
    game_time: float


@dataclass(frozen=True)
class HeDid:
    turn_time: float
    game_time: float
    move: Optional[RowCol]


@dataclass(frozen=True)
class OneMore:
    pass


@dataclass(frozen=True)
class Bye:
    pass


Message = Union[Ugo, HeDid, OneMore, Bye]


def parse_message(line: str) -> Message:
    # Trailing text after a complete message is ignored
    if line.startswith("ONEMORE"):
        return OneMore()
    if line.startswith("BYE"):
        return Bye()
    m = _UGO_RE.match(line)
    if m:
        return Ugo(float(m.group(1)), float(m.group(2)))
    m = _HEDID_RE.match(line)
    if m:
        x, y = int(m.group(3)), int(m.group(4))
        move = (y, x) if x >= 0 and y >= 0 else None
        return HeDid(float(m.group(1)), float(m.group(2)), move)
    raise ProtocolError(f"unrecognised message: {line!r}")


def format_move(move: Optional[RowCol]) -> str:
    if move is None:
        return "IDO -1 -1"
    row, col = move
    return f"IDO {col} {row}"
