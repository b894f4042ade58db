from .agent import EngineConfig, RootResult, choose_move, pick_random_move, search_root
from .board import Board, Player, make_move, start_board
from .movegen import IllegalMoveError, generate_moves, resolve_move
from .search import SearchResult, search

__all__ = [
    "Board",
    "EngineConfig",
    "IllegalMoveError",
    "Player",
    "RootResult",
    "SearchResult",
    "choose_move",
    "generate_moves",
    "make_move",
    "pick_random_move",
    "resolve_move",
    "search",
    "search_root",
    "start_board",
]
