from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .agent import EngineConfig, RowCol, choose_move, pick_random_move
from .board import Board, Player
from .search import DEFAULT_BUDGETS, BudgetTable

# Map agent modes to search config knobs.

DEFAULT_MINIMAX_DEPTH = 4


class AgentMode(Enum):
    RANDOM = "random"
    MINIMAX = "minimax"
    MINIMAX_SORTED = "minimax-sorted"
    TOURNAMENT = "tournament"


def config_for_mode(
    mode: AgentMode,
    depth: Optional[int] = None,
    budgets: BudgetTable = DEFAULT_BUDGETS,
) -> Optional[EngineConfig]:
    """Search config for `mode`; None for modes that do not search."""
    if mode is AgentMode.RANDOM:
        return None
    if mode is AgentMode.MINIMAX:
        return EngineConfig(start_depth=depth or DEFAULT_MINIMAX_DEPTH, use_ordering=False, budgets=budgets)
    if mode is AgentMode.MINIMAX_SORTED:
        return EngineConfig(start_depth=depth or DEFAULT_MINIMAX_DEPTH, use_ordering=True, budgets=budgets)
    # Tournament: depth and budget follow the stone count
    return EngineConfig(start_depth=depth, use_ordering=True, budgets=budgets)


@dataclass
class Agent:
    mode: AgentMode
    config: Optional[EngineConfig] = None
    rng: Optional[random.Random] = None

    @classmethod
    def for_mode(
        cls,
        mode: AgentMode,
        depth: Optional[int] = None,
        budgets: BudgetTable = DEFAULT_BUDGETS,
        rng: Optional[random.Random] = None,
    ) -> "Agent":
        return cls(mode, config_for_mode(mode, depth, budgets), rng)

    def move(self, board: Board, player: Player) -> Optional[RowCol]:
        if self.mode is AgentMode.RANDOM or self.config is None:
            return pick_random_move(board, player, self.rng)
        return choose_move(board, player, self.config)
