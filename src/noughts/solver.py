"""
Exhaustive minimax over the full tic-tac-toe game tree.

Scores are from Nought's (the human's) perspective:
- +1: Nought has won, 0: draw, -1: Cross (the computer) has won.
``maximizing=True`` always means Nought to move, ``False`` always Cross to move.
There is no pruning and no memoization; the tree is small enough.
"""
import math
from typing import Tuple

from .board import Board, Cell, apply_move, available_moves
from .rules import has_won, is_full

NO_MOVE = -1


def minimax(board: Board, maximizing: bool) -> Tuple[int, int]:
    """Return ``(score, best_index)`` for the side to move.

    ``best_index`` is ``NO_MOVE`` on terminal boards. Among equally scored
    moves the lowest index wins. Trial moves are made on ``board`` itself and
    undone before returning, so the caller sees it unchanged.
    """
    cross_won = has_won(board, Cell.CROSS)
    nought_won = has_won(board, Cell.NOUGHT)
    if is_full(board) or cross_won or nought_won:
        if cross_won:
            return -1, NO_MOVE
        if nought_won:
            return 1, NO_MOVE
        return 0, NO_MOVE

    mark = Cell.NOUGHT if maximizing else Cell.CROSS
    best = -math.inf if maximizing else math.inf
    best_index = NO_MOVE
    for mv in available_moves(board):
        apply_move(board, mv, mark)
        score, _ = minimax(board, not maximizing)
        apply_move(board, mv, Cell.EMPTY)
        if (maximizing and score > best) or (not maximizing and score < best):
            best = score
            best_index = mv
    return int(best), best_index


def side_to_move(board: Board) -> bool:
    """True (Nought, maximizing) when mark counts are equal; Nought moves first."""
    return board.count(Cell.NOUGHT) == board.count(Cell.CROSS)
