"""Bitboard Reversi agent with alpha-beta negamax search."""

__version__ = "0.3.0"
