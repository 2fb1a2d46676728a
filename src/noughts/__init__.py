"""noughts package.

Tic-tac-toe against a computer that searches the whole game tree with minimax.

Convenience imports are exposed for the board, detection and search functions.
"""

from .board import Board, Cell, apply_move, available_moves, new_board
from .game import Game, GameResult, GameState, play_game
from .rules import WINNING_PATTERNS, has_won, is_full
from .solver import minimax

__all__ = [
    "Board",
    "Cell",
    "new_board",
    "apply_move",
    "available_moves",
    "WINNING_PATTERNS",
    "has_won",
    "is_full",
    "minimax",
    "Game",
    "GameResult",
    "GameState",
    "play_game",
]
