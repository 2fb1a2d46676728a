"""
Win and terminal detection.
Notes:
- Each winning line is a 9-bit mask; bit (8 - i) stands for cell i.
- A mark has won when one mask is fully contained in that mark's occupancy mask.
- has_won and is_full do not classify outcomes by themselves; callers combine them.
"""
from typing import Optional

from .board import Board, Cell

WINNING_PATTERNS = (
    0b111000000, 0b000111000, 0b000000111,  # rows
    0b100100100, 0b010010010, 0b001001001,  # columns
    0b100010001, 0b001010100,               # diagonals
)


def board_mask(board: Board, mark: Cell) -> int:
    mask = 0
    for i, v in enumerate(board):
        if v == mark:
            mask |= 1 << (8 - i)
    return mask


def has_won(board: Board, mark: Cell) -> bool:
    mask = board_mask(board, mark)
    return any(mask & pattern == pattern for pattern in WINNING_PATTERNS)


def is_full(board: Board) -> bool:
    return Cell.EMPTY not in board


def is_terminal(board: Board) -> bool:
    return is_full(board) or has_won(board, Cell.CROSS) or has_won(board, Cell.NOUGHT)


def winner(board: Board) -> Optional[Cell]:
    # Cross is checked first, matching the search engine's leaf scoring.
    if has_won(board, Cell.CROSS):
        return Cell.CROSS
    if has_won(board, Cell.NOUGHT):
        return Cell.NOUGHT
    return None

